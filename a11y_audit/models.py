"""
Core data models for accessibility scans.

Provides:
- FindingKind / Severity enums
- Finding: one raw violation reported by the audit engine
- EnrichedFinding: a Finding with severity tier and remediation suggestion
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# ============================================================================
# Enums
# ============================================================================


class FindingKind(str, Enum):
    """Kind of finding as reported by the audit engine."""

    ERROR = "error"  # Definite violation
    WARNING = "warning"  # Likely violation
    NOTICE = "notice"  # Needs manual review


class Severity(str, Enum):
    """User-facing severity tier of a finding."""

    CRITICAL = "Critical"
    MODERATE = "Moderate"
    MINOR = "Minor"


# ============================================================================
# Findings
# ============================================================================


@dataclass(frozen=True)
class Finding:
    """
    One raw accessibility violation reported by the audit engine.

    Attributes:
        kind: Reported kind ("error", "warning", "notice"); kept as the raw
            string so unknown kinds survive classification
        message: Human-readable description of the problem
        code: Rule identifier (e.g. "image-alt")
        selector: CSS path of the offending element, if known
        context: Markup snippet around the offending element, if known
    """

    kind: str
    message: str
    code: str
    selector: Optional[str] = None
    context: Optional[str] = None


@dataclass(frozen=True)
class EnrichedFinding:
    """
    Finding with an assigned severity tier and a remediation suggestion.

    Provides transparent access to the underlying finding's properties.
    """

    finding: Finding
    severity: Severity
    suggestion: str

    @property
    def kind(self) -> str:
        return self.finding.kind

    @property
    def message(self) -> str:
        return self.finding.message

    @property
    def code(self) -> str:
        return self.finding.code

    @property
    def selector(self) -> Optional[str]:
        return self.finding.selector

    @property
    def context(self) -> Optional[str]:
        return self.finding.context

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape returned by the API."""
        return {
            "type": self.finding.kind,
            "code": self.finding.code,
            "message": self.finding.message,
            "selector": self.finding.selector,
            "context": self.finding.context,
            "severity": self.severity.value,
            "aiSuggestion": self.suggestion,
        }
