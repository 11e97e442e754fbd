"""
Audit Package

Browser session management and the axe-core audit runner.
"""

from a11y_audit.audit.browser import (
    BrowserLauncher,
    BrowserOptions,
    BrowserSession,
    PlaywrightBrowserLauncher,
)
from a11y_audit.audit.runner import (
    AuditOptions,
    AuditRunner,
    AuditRunnerError,
    AxeAuditRunner,
    findings_from_axe,
)

__all__ = [
    "BrowserLauncher",
    "BrowserOptions",
    "BrowserSession",
    "PlaywrightBrowserLauncher",
    "AuditOptions",
    "AuditRunner",
    "AuditRunnerError",
    "AxeAuditRunner",
    "findings_from_axe",
]
