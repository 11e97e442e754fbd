"""
Accessibility Audit

Scans web pages for accessibility issues and enriches each issue with a
severity tier and a remediation suggestion.
"""

__version__ = "0.1.0"
