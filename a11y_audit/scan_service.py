"""
Scan Service - End-to-End Pipeline Orchestration

Coordinates one accessibility scan:
1. URL validation
2. Browser launch
3. Accessibility audit
4. Severity classification and suggestion enrichment
5. Browser teardown (always)
"""

import logging
import time
from typing import List, Optional
from urllib.parse import urlparse

from a11y_audit.audit.browser import BrowserLauncher, BrowserOptions, PlaywrightBrowserLauncher
from a11y_audit.audit.runner import AuditOptions, AuditRunner, AxeAuditRunner
from a11y_audit.config import Settings, settings as default_settings
from a11y_audit.llm.provider import LLMProvider, get_llm_provider
from a11y_audit.models import EnrichedFinding
from a11y_audit.monitoring import get_metrics
from a11y_audit.suggestions.enrichment import enrich_findings

logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exceptions
# ============================================================================

class ScanServiceError(Exception):
    """Base exception for scan service errors."""

    pass


class InvalidURLError(ScanServiceError):
    """Raised when the target URL is missing or malformed."""

    pass


class BrowserLaunchError(ScanServiceError):
    """Raised when a browser session cannot be acquired."""

    pass


class AuditError(ScanServiceError):
    """Raised when the audit times out or fails."""

    pass


# ============================================================================
# URL Validation
# ============================================================================

# Characters a browser refuses in a domain name
FORBIDDEN_HOST_CHARS = set('<>^|%\\#/?@[]')


def _is_forbidden_host_char(char: str) -> bool:
    return char.isspace() or ord(char) < 0x20 or ord(char) == 0x7F or char in FORBIDDEN_HOST_CHARS


def validate_url(url: Optional[str]) -> str:
    """
    Check that url is present and an absolute URL.

    Args:
        url: Candidate target URL

    Returns:
        The URL, stripped of surrounding whitespace

    Raises:
        InvalidURLError: If url is empty or not absolute
    """
    if url is None or not url.strip():
        raise InvalidURLError("URL is required")

    url = url.strip()
    try:
        parsed = urlparse(url)
        # Accessing port validates it
        parsed.port
    except ValueError:
        raise InvalidURLError("Invalid URL format")

    if not parsed.scheme or not parsed.netloc:
        raise InvalidURLError("Invalid URL format")

    host = parsed.hostname
    if not host or any(_is_forbidden_host_char(c) for c in host):
        raise InvalidURLError("Invalid URL format")

    return url


# ============================================================================
# Scan Service
# ============================================================================

class ScanService:
    """
    Orchestrates the scan-and-enrich pipeline.

    Responsibilities:
    - Validate input
    - Own the browser session for the duration of one scan
    - Run the audit
    - Enrich findings
    - Map failures to ScanServiceError subclasses
    """

    def __init__(
        self,
        browser_launcher: Optional[BrowserLauncher] = None,
        audit_runner: Optional[AuditRunner] = None,
        llm_provider: Optional[LLMProvider] = None,
        config: Optional[Settings] = None,
    ):
        """
        Initialize ScanService.

        Args:
            browser_launcher: Browser launcher (Playwright if not provided)
            audit_runner: Audit runner (axe-core if not provided)
            llm_provider: Provider for AI suggestions (None means fallback only)
            config: Settings (global settings if not provided)
        """
        self.config = config or default_settings
        self.browser_launcher = browser_launcher or PlaywrightBrowserLauncher()
        self.audit_runner = audit_runner or AxeAuditRunner(self.config.axe_script_url)
        self.llm_provider = llm_provider
        self.browser_options = BrowserOptions(
            headless=self.config.browser_headless,
            args=list(self.config.browser_args),
        )
        self.audit_options = AuditOptions(
            timeout_ms=self.config.audit_timeout_ms,
            include_warnings=self.config.include_warnings,
            include_notices=self.config.include_notices,
        )

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "ScanService":
        """Build a service with the providers selected by configuration."""
        config = config or default_settings
        return cls(llm_provider=get_llm_provider(config), config=config)

    async def scan(self, url: Optional[str]) -> List[EnrichedFinding]:
        """
        Scan a URL for accessibility issues.

        Args:
            url: Target page URL

        Returns:
            Enriched findings in audit order (empty if the page is clean)

        Raises:
            InvalidURLError: If url is missing or malformed
            BrowserLaunchError: If the browser cannot be launched
            AuditError: If the audit fails or times out
        """
        metrics = get_metrics()
        started = time.monotonic()

        try:
            url = validate_url(url)
        except InvalidURLError:
            metrics.increment("scans_total", outcome="invalid_url")
            raise

        logger.info(f"Scanning {url}")

        try:
            session = await self.browser_launcher.acquire(self.browser_options)
        except Exception as e:
            logger.error(f"Failed to launch browser: {str(e)}", exc_info=True)
            metrics.increment("scans_total", outcome="browser_error")
            raise BrowserLaunchError("Failed to launch browser") from e

        try:
            try:
                findings = await self.audit_runner.audit(url, session, self.audit_options)
            except Exception as e:
                logger.error(f"Audit of {url} failed: {str(e)}", exc_info=True)
                metrics.increment("scans_total", outcome="audit_error")
                raise AuditError(str(e)) from e

            metrics.increment("findings_total", len(findings))

            enriched = await enrich_findings(
                findings,
                self.llm_provider,
                max_tokens=self.config.llm_max_tokens,
                temperature=self.config.llm_temperature,
            )
        finally:
            try:
                await self.browser_launcher.release(session)
            except Exception as e:
                logger.warning(f"Failed to close browser: {str(e)}")

        duration = time.monotonic() - started
        metrics.increment("scans_total", outcome="success")
        metrics.observe("scan_duration_seconds", duration)
        logger.info(f"Scan of {url} completed: {len(enriched)} issues in {duration:.2f}s")

        return enriched

    async def aclose(self) -> None:
        """Release provider clients."""
        if self.llm_provider is not None:
            await self.llm_provider.aclose()
