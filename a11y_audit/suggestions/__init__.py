"""
Remediation Suggestions Module

Enriches accessibility findings with:
- Severity tier (Critical, Moderate, Minor)
- A short fix suggestion, AI-generated when an LLM is configured

Graceful degradation:
- Every finding gets a suggestion even if the LLM is down
- Errors are logged but don't break the scan
"""

from a11y_audit.suggestions.enrichment import build_prompt, enrich_findings
from a11y_audit.suggestions.fallback import fallback_suggestion

__all__ = [
    "build_prompt",
    "enrich_findings",
    "fallback_suggestion",
]
