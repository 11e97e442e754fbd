"""
Suggestion Enrichment Module

Enriches audit findings with a severity tier and a short remediation
suggestion.

Architecture:
- Severity comes from the classifier (deterministic)
- Suggestion comes from the LLM provider when one is configured
- Graceful degradation: any LLM failure falls back to keyword-based text
- Concurrent: one inference call per finding, joined before returning,
  output order matches input order
"""

import asyncio
import logging
from typing import List, Optional, Sequence

from a11y_audit.classifier import classify
from a11y_audit.llm.provider import LLMProvider
from a11y_audit.models import EnrichedFinding, Finding
from a11y_audit.monitoring import get_metrics
from a11y_audit.suggestions.fallback import fallback_suggestion

logger = logging.getLogger(__name__)


REMEDIATION_PROMPT = """You are an accessibility expert.
Provide a short actionable fix:

Issue: {message}
Element: {selector}
Code: {code}

Give only the fix in 1-2 sentences."""


def build_prompt(finding: Finding) -> str:
    """
    Build the remediation prompt for a finding.

    Args:
        finding: Finding to describe

    Returns:
        Prompt text (selector shown as "N/A" when unknown)
    """
    return REMEDIATION_PROMPT.format(
        message=finding.message,
        selector=finding.selector or "N/A",
        code=finding.code,
    )


async def enrich_findings(
    findings: Sequence[Finding],
    llm_provider: Optional[LLMProvider],
    max_tokens: int = 100,
    temperature: float = 0.3,
) -> List[EnrichedFinding]:
    """
    Enrich findings with severity and remediation suggestions.

    All findings are enriched concurrently. A failure for one finding only
    switches that finding to its fallback suggestion.

    Args:
        findings: Raw findings from the audit engine
        llm_provider: Provider for AI suggestions, or None to use fallbacks only
        max_tokens: Token limit per suggestion
        temperature: Sampling temperature per suggestion

    Returns:
        One EnrichedFinding per input finding, in input order
    """
    if not findings:
        return []

    logger.debug(
        f"Enriching {len(findings)} findings "
        f"({llm_provider.name if llm_provider else 'fallback only'})"
    )

    return list(
        await asyncio.gather(
            *(
                _enrich_finding(finding, llm_provider, max_tokens, temperature)
                for finding in findings
            )
        )
    )


async def _enrich_finding(
    finding: Finding,
    llm_provider: Optional[LLMProvider],
    max_tokens: int,
    temperature: float,
) -> EnrichedFinding:
    """Enrich a single finding. Never raises for provider failures."""
    severity = classify(finding.kind)

    suggestion = await _generate_suggestion(finding, llm_provider, max_tokens, temperature)
    source = "ai"
    if suggestion is None:
        suggestion = fallback_suggestion(finding)
        source = "fallback"

    get_metrics().increment("enrichments_total", source=source)
    return EnrichedFinding(finding=finding, severity=severity, suggestion=suggestion)


async def _generate_suggestion(
    finding: Finding,
    llm_provider: Optional[LLMProvider],
    max_tokens: int,
    temperature: float,
) -> Optional[str]:
    """
    Ask the LLM provider for a remediation suggestion.

    Args:
        finding: Finding to generate a suggestion for
        llm_provider: LLM provider instance, or None
        max_tokens: Token limit
        temperature: Sampling temperature

    Returns:
        Trimmed suggestion text, or None if unavailable
    """
    if llm_provider is None:
        return None

    try:
        response = await llm_provider.complete(
            build_prompt(finding),
            max_tokens=max_tokens,
            temperature=temperature,
        )
    except TimeoutError as e:
        logger.warning(f"Timeout generating suggestion for '{finding.code}': {str(e)}")
        return None
    except Exception as e:
        logger.warning(f"Error generating suggestion for '{finding.code}': {str(e)}")
        return None

    if not response or not isinstance(response, str):
        logger.warning(f"Invalid suggestion response from LLM for '{finding.code}'")
        return None

    response = response.strip()
    if not response:
        return None

    return response
