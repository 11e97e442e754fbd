"""
Tests for the axe-core audit runner.

Covers result mapping, filtering, and page handling with a mocked browser.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import Error as PlaywrightError

from a11y_audit.audit.browser import BrowserSession
from a11y_audit.audit.runner import (
    AuditOptions,
    AuditRunnerError,
    AxeAuditRunner,
    findings_from_axe,
)
from a11y_audit.models import Finding


# ============================================================================
# Test Data & Fixtures
# ============================================================================

@pytest.fixture
def axe_results():
    """Trimmed axe-core results object."""
    return {
        "violations": [
            {
                "id": "image-alt",
                "impact": "critical",
                "help": "Images must have alternate text",
                "description": "Ensures <img> elements have alternate text",
                "nodes": [
                    {"target": ["img.hero"], "html": '<img class="hero" src="a.png">'},
                    {"target": ["#logo"], "html": '<img id="logo" src="b.png">'},
                ],
            },
            {
                "id": "region",
                "impact": "moderate",
                "help": "All page content should be contained by landmarks",
                "nodes": [{"target": ["footer > p"], "html": "<p>Copyright</p>"}],
            },
        ],
        "incomplete": [
            {
                "id": "color-contrast",
                "impact": "serious",
                "help": "Elements must meet minimum color contrast ratio thresholds",
                "nodes": [{"target": ["#widget", ["button.close"]], "html": "<button>x</button>"}],
            }
        ],
    }


def _page(results=None):
    page = MagicMock()
    page.set_default_timeout = MagicMock()
    page.goto = AsyncMock()
    page.add_script_tag = AsyncMock()
    page.evaluate = AsyncMock(return_value=results if results is not None else {"violations": []})
    page.close = AsyncMock()
    return page


def _session(page):
    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=page)
    return BrowserSession(browser=browser)


# ============================================================================
# Result Mapping
# ============================================================================

class TestFindingsFromAxe:
    """Tests for findings_from_axe()."""

    def test_one_finding_per_node(self, axe_results):
        findings = findings_from_axe(axe_results)

        assert len(findings) == 4
        assert findings[0] == Finding(
            kind="error",
            message="Images must have alternate text",
            code="image-alt",
            selector="img.hero",
            context='<img class="hero" src="a.png">',
        )
        assert findings[1].selector == "#logo"

    def test_impact_to_kind(self, axe_results):
        kinds = [f.kind for f in findings_from_axe(axe_results)]
        assert kinds == ["error", "error", "warning", "notice"]

    def test_missing_impact_is_error(self):
        results = {"violations": [{"id": "x", "help": "h", "nodes": [{"target": ["a"]}]}]}
        assert findings_from_axe(results)[0].kind == "error"

    def test_nested_targets_joined(self, axe_results):
        findings = findings_from_axe(axe_results)
        assert findings[-1].selector == "#widget button.close"

    def test_message_falls_back_to_description(self):
        results = {
            "violations": [
                {"id": "rule", "impact": "serious", "description": "desc", "nodes": [{"target": []}]}
            ]
        }
        finding = findings_from_axe(results)[0]
        assert finding.message == "desc"
        assert finding.selector is None
        assert finding.context is None

    def test_exclude_warnings(self, axe_results):
        findings = findings_from_axe(axe_results, include_warnings=False)
        assert [f.kind for f in findings] == ["error", "error", "notice"]

    def test_exclude_notices(self, axe_results):
        findings = findings_from_axe(axe_results, include_notices=False)
        assert [f.kind for f in findings] == ["error", "error", "warning"]

    def test_clean_page(self):
        assert findings_from_axe({"violations": [], "incomplete": []}) == []

    def test_axe_not_loaded(self):
        with pytest.raises(AuditRunnerError, match="axe not loaded"):
            findings_from_axe({"error": "axe not loaded"})

    def test_unexpected_result(self):
        with pytest.raises(AuditRunnerError):
            findings_from_axe("oops")


# ============================================================================
# Runner
# ============================================================================

class TestAxeAuditRunner:
    """Tests for AxeAuditRunner.audit()."""

    @pytest.mark.asyncio
    async def test_audit_success(self, axe_results):
        page = _page(axe_results)
        runner = AxeAuditRunner("https://cdn.example.com/axe.min.js")

        findings = await runner.audit("https://example.com", _session(page), AuditOptions())

        assert len(findings) == 4
        page.set_default_timeout.assert_called_once_with(20000)
        page.goto.assert_awaited_once_with("https://example.com", wait_until="load", timeout=20000)
        page.add_script_tag.assert_awaited_once_with(url="https://cdn.example.com/axe.min.js")
        page.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_local_axe_script(self):
        page = _page()
        runner = AxeAuditRunner("/opt/axe/axe.min.js")

        await runner.audit("https://example.com", _session(page), AuditOptions())

        page.add_script_tag.assert_awaited_once_with(path="/opt/axe/axe.min.js")

    @pytest.mark.asyncio
    async def test_options_applied(self, axe_results):
        page = _page(axe_results)
        runner = AxeAuditRunner("https://cdn.example.com/axe.min.js")
        options = AuditOptions(timeout_ms=5000, include_warnings=False, include_notices=False)

        findings = await runner.audit("https://example.com", _session(page), options)

        assert [f.kind for f in findings] == ["error", "error"]
        page.set_default_timeout.assert_called_once_with(5000)

    @pytest.mark.asyncio
    async def test_navigation_failure(self):
        page = _page()
        page.goto.side_effect = PlaywrightError("net::ERR_NAME_NOT_RESOLVED")
        runner = AxeAuditRunner("https://cdn.example.com/axe.min.js")

        with pytest.raises(AuditRunnerError, match="ERR_NAME_NOT_RESOLVED"):
            await runner.audit("https://nope.invalid", _session(page), AuditOptions())

        page.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_timeout(self):
        page = _page()

        async def slow_goto(*args, **kwargs):
            await asyncio.sleep(1)

        page.goto.side_effect = slow_goto
        runner = AxeAuditRunner("https://cdn.example.com/axe.min.js")

        with pytest.raises(AuditRunnerError, match="timed out"):
            await runner.audit("https://example.com", _session(page), AuditOptions(timeout_ms=50))

        page.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_page_close_error_ignored(self):
        page = _page()
        page.close.side_effect = PlaywrightError("Target closed")
        runner = AxeAuditRunner("https://cdn.example.com/axe.min.js")

        findings = await runner.audit("https://example.com", _session(page), AuditOptions())

        assert findings == []
