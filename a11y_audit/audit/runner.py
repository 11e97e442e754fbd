"""
Audit Runner Module

Runs the axe-core accessibility engine against a page loaded in a browser
session and converts its results into Findings.

Result mapping:
- violations with critical/serious impact -> "error"
- violations with moderate/minor impact -> "warning"
- incomplete (needs manual review) -> "notice"
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from playwright.async_api import Error as PlaywrightError

from a11y_audit.audit.browser import BrowserSession
from a11y_audit.models import Finding, FindingKind

logger = logging.getLogger(__name__)


# ============================================================================
# Exceptions
# ============================================================================


class AuditRunnerError(Exception):
    """Raised when the audit engine cannot produce results."""
    pass


# ============================================================================
# Options & Result Mapping
# ============================================================================


@dataclass
class AuditOptions:
    """Options for a single audit run."""

    timeout_ms: int = 20000
    include_warnings: bool = True
    include_notices: bool = True


AXE_RUN_SCRIPT = """
async () => {
    if (!window.axe || !window.axe.run) {
        return { error: 'axe not loaded' };
    }
    return await window.axe.run(document, {
        resultTypes: ['violations', 'incomplete']
    });
}
"""

ERROR_IMPACTS = {"critical", "serious"}


def _node_selector(node: Dict[str, Any]) -> Optional[str]:
    target = node.get("target") or []
    parts = []
    for part in target:
        # Shadow DOM targets are nested lists of selectors
        if isinstance(part, list):
            parts.append(" ".join(str(p) for p in part))
        else:
            parts.append(str(part))
    return " ".join(parts) or None


def _violation_kind(impact: Any) -> str:
    if impact is None or str(impact).lower() in ERROR_IMPACTS:
        return FindingKind.ERROR.value
    return FindingKind.WARNING.value


def findings_from_axe(
    results: Dict[str, Any],
    include_warnings: bool = True,
    include_notices: bool = True,
) -> List[Finding]:
    """
    Convert an axe-core results object into Findings.

    One Finding is produced per offending node, in engine order.

    Args:
        results: Object returned by `axe.run`
        include_warnings: Keep warning-level findings
        include_notices: Keep notice-level findings

    Returns:
        List of Findings

    Raises:
        AuditRunnerError: If results are not an axe results object
    """
    if not isinstance(results, dict):
        raise AuditRunnerError("Unexpected axe result")
    if results.get("error"):
        raise AuditRunnerError(f"axe failed: {results['error']}")

    findings: List[Finding] = []

    sources = [
        (rule, _violation_kind(rule.get("impact")))
        for rule in results.get("violations") or []
    ] + [
        (rule, FindingKind.NOTICE.value)
        for rule in results.get("incomplete") or []
    ]

    for rule, kind in sources:
        if kind == FindingKind.WARNING.value and not include_warnings:
            continue
        if kind == FindingKind.NOTICE.value and not include_notices:
            continue

        message = rule.get("help") or rule.get("description") or rule.get("id", "")
        for node in rule.get("nodes") or []:
            findings.append(
                Finding(
                    kind=kind,
                    message=message,
                    code=rule.get("id", ""),
                    selector=_node_selector(node),
                    context=node.get("html"),
                )
            )

    return findings


# ============================================================================
# Audit Runners
# ============================================================================


class AuditRunner(ABC):
    """Runs an accessibility audit of a URL using a browser session."""

    @abstractmethod
    async def audit(
        self, url: str, session: BrowserSession, options: AuditOptions
    ) -> List[Finding]:
        """
        Audit a page.

        Raises:
            AuditRunnerError: On timeout, navigation failure or engine error
        """
        pass


class AxeAuditRunner(AuditRunner):
    """
    Audits pages with axe-core injected into a Playwright page.
    """

    def __init__(self, axe_script_url: str):
        """
        Initialize runner.

        Args:
            axe_script_url: http(s) URL or local file path of axe.min.js
        """
        self.axe_script_url = axe_script_url

    async def audit(
        self, url: str, session: BrowserSession, options: AuditOptions
    ) -> List[Finding]:
        timeout_s = options.timeout_ms / 1000.0
        try:
            results = await asyncio.wait_for(
                self._run_axe(url, session, options.timeout_ms), timeout=timeout_s
            )
        except asyncio.TimeoutError:
            raise AuditRunnerError(f"Audit of {url} timed out after {options.timeout_ms}ms")
        except PlaywrightError as e:
            raise AuditRunnerError(f"Audit of {url} failed: {e.message}") from e

        findings = findings_from_axe(
            results,
            include_warnings=options.include_warnings,
            include_notices=options.include_notices,
        )
        logger.info(f"Audit of {url} reported {len(findings)} findings")
        return findings

    async def _run_axe(
        self, url: str, session: BrowserSession, timeout_ms: int
    ) -> Dict[str, Any]:
        page = await session.browser.new_page()
        try:
            page.set_default_timeout(timeout_ms)
            await page.goto(url, wait_until="load", timeout=timeout_ms)

            if self.axe_script_url.startswith(("http://", "https://")):
                await page.add_script_tag(url=self.axe_script_url)
            else:
                await page.add_script_tag(path=self.axe_script_url)

            return await page.evaluate(AXE_RUN_SCRIPT)
        finally:
            try:
                await page.close()
            except PlaywrightError as e:
                logger.debug(f"Error closing page: {e.message}")
