"""
Report summary for a scan: accessibility score and per-severity counts.
"""

from typing import Any, Dict, List, Sequence

from a11y_audit.models import EnrichedFinding, Severity


# Score penalty per finding kind
KIND_PENALTIES = {
    "error": 6.0,
    "warning": 2.0,
    "notice": 0.2,
}

SEVERITY_ORDER = {
    Severity.CRITICAL: 0,
    Severity.MODERATE: 1,
    Severity.MINOR: 2,
}


def calculate_score(findings: Sequence[EnrichedFinding]) -> int:
    """
    Compute a 0-100 accessibility score.

    Each error costs 6 points, each warning 2 and each notice 0.2. Kinds
    outside those three cost nothing.

    Args:
        findings: Enriched findings of one scan

    Returns:
        Score clamped to 0..100 (100 when there are no findings)
    """
    if not findings:
        return 100

    penalty = sum(KIND_PENALTIES.get((f.kind or "").lower(), 0.0) for f in findings)
    # round half up, matching the browser client's Math.round
    score = int(100 - penalty + 0.5) if penalty <= 100 else 0
    return max(0, min(100, score))


def sort_by_severity(findings: Sequence[EnrichedFinding]) -> List[EnrichedFinding]:
    """Order findings Critical -> Moderate -> Minor, keeping audit order within a tier."""
    return sorted(findings, key=lambda f: SEVERITY_ORDER.get(f.severity, len(SEVERITY_ORDER)))


def summarize(findings: Sequence[EnrichedFinding]) -> Dict[str, Any]:
    """
    Summarize a scan result.

    Returns:
        Dictionary with total, score and counts per severity tier
    """
    counts = {severity.value: 0 for severity in Severity}
    for finding in findings:
        counts[finding.severity.value] += 1

    return {
        "total": len(findings),
        "score": calculate_score(findings),
        "counts": counts,
    }
