"""
Deterministic remediation text used when AI suggestions are unavailable.
"""

from typing import List, Tuple

from a11y_audit.models import Finding


# Evaluated in order; the first rule with a keyword in the message wins.
FALLBACK_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("alt", "image"), "Add descriptive alt text."),
    (("contrast",), "Increase color contrast to meet WCAG."),
    (("heading",), "Use logical heading hierarchy."),
    (("label", "form"), "Add proper label for form input."),
    (("link",), "Provide descriptive link text."),
    (("aria",), "Ensure ARIA attributes are valid."),
    (("landmark",), "Use semantic HTML5 landmarks."),
]

DEFAULT_SUGGESTION = "Review WCAG guidelines."


def fallback_suggestion(finding: Finding) -> str:
    """
    Pick a canned remediation sentence from keywords in the finding message.

    Args:
        finding: Finding to generate a suggestion for

    Returns:
        Non-empty remediation sentence
    """
    message = (finding.message or "").lower()

    for keywords, suggestion in FALLBACK_RULES:
        if any(keyword in message for keyword in keywords):
            return suggestion

    return DEFAULT_SUGGESTION
