"""
Pytest configuration and shared fixtures.
"""

from types import SimpleNamespace
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from a11y_audit.audit.browser import BrowserLauncher, BrowserOptions, BrowserSession
from a11y_audit.audit.runner import AuditOptions, AuditRunner
from a11y_audit.config import Settings
from a11y_audit.main import app, get_scan_service
from a11y_audit.models import Finding
from a11y_audit.monitoring import get_metrics
from a11y_audit.scan_service import ScanService


# ============================================================================
# Test Doubles
# ============================================================================


class FakeBrowserLauncher(BrowserLauncher):
    """Records acquire/release calls instead of launching Chromium."""

    def __init__(self, fail_acquire: bool = False):
        self.fail_acquire = fail_acquire
        self.acquire_calls: List[BrowserOptions] = []
        self.released: List[BrowserSession] = []

    @property
    def release_count(self) -> int:
        return len(self.released)

    async def acquire(self, options: BrowserOptions) -> BrowserSession:
        self.acquire_calls.append(options)
        if self.fail_acquire:
            raise RuntimeError("Executable doesn't exist")
        return BrowserSession(browser=object())

    async def release(self, session: BrowserSession) -> None:
        self.released.append(session)


class FakeAuditRunner(AuditRunner):
    """Returns canned findings or raises a canned error."""

    def __init__(self, findings: Optional[List[Finding]] = None, error: Optional[Exception] = None):
        self.findings = findings or []
        self.error = error
        self.calls = []

    async def audit(self, url: str, session: BrowserSession, options: AuditOptions) -> List[Finding]:
        self.calls.append((url, session, options))
        if self.error is not None:
            raise self.error
        return list(self.findings)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_metrics():
    """Start every test with empty metrics."""
    get_metrics().clear()
    yield
    get_metrics().clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings independent of the environment running the tests."""
    return Settings(
        _env_file=None,
        llm_provider="none",
        audit_timeout_ms=20000,
        include_warnings=True,
        include_notices=True,
    )


@pytest.fixture
def sample_findings() -> List[Finding]:
    """Findings covering all three kinds."""
    return [
        Finding(
            kind="error",
            message="Images must have alternate text",
            code="image-alt",
            selector="img.hero",
            context='<img class="hero" src="hero.png">',
        ),
        Finding(
            kind="warning",
            message="Elements must meet minimum color contrast ratio thresholds",
            code="color-contrast",
            selector="p.muted",
            context='<p class="muted">Terms apply</p>',
        ),
        Finding(
            kind="notice",
            message="Page should contain a level-one heading",
            code="page-has-heading-one",
        ),
    ]


@pytest.fixture
def browser_launcher() -> FakeBrowserLauncher:
    return FakeBrowserLauncher()


@pytest.fixture
def client():
    """
    Provide a test client for FastAPI.

    Returns:
        TestClient: Test client for making requests to the app
    """
    return TestClient(app)


@pytest.fixture
def override_scan_service():
    """Install a ScanService built from fakes as the app dependency."""

    def _install(service: ScanService) -> ScanService:
        app.dependency_overrides[get_scan_service] = lambda: service
        return service

    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def fakes():
    """Test double classes for browser launch and audit."""
    return SimpleNamespace(
        BrowserLauncher=FakeBrowserLauncher,
        AuditRunner=FakeAuditRunner,
    )
