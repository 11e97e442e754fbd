"""
Severity classification for raw audit findings.
"""

from typing import Optional

from a11y_audit.models import Severity


SEVERITY_BY_KIND = {
    "error": Severity.CRITICAL,
    "warning": Severity.MODERATE,
}


def classify(kind: Optional[str]) -> Severity:
    """
    Map a finding's reported kind to a severity tier.

    "error" is Critical, "warning" is Moderate. Everything else, including
    "notice" and kinds the engine may add later, is Minor.

    Args:
        kind: Raw kind string (case-insensitive, may be None)

    Returns:
        Severity tier
    """
    return SEVERITY_BY_KIND.get((kind or "").lower(), Severity.MINOR)
