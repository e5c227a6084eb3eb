"""Remediation advice derived from scan findings."""

from collections.abc import Sequence

from codereview.review.models import Issue, Severity

CRITICAL_ADVICE = "Address all critical security vulnerabilities as a top priority"
HIGH_ADVICE = "Fix high-severity issues to improve code security and stability"
EQUALITY_ADVICE = "Replace all instances of == with === for more predictable comparisons"
INNER_HTML_ADVICE = "Replace innerHTML assignments with safer DOM manipulation methods"
EXCEPT_ADVICE = "Specify exception types in all except clauses for better error handling"
TODO_ADVICE = "Address or create tickets for all TODO comments in the code"
DEBUG_ADVICE = "Remove all debug statements (console.log, print) before production deployment"
FALLBACK_ADVICE = (
    "Consider adding comprehensive error handling",
    "Add comments to explain complex logic or business rules",
)


def _mentions(issues: Sequence[Issue], text: str) -> bool:
    # Case-sensitive substring match against catalog labels.
    return any(text in issue.description for issue in issues)


def generate_improvements(issues: Sequence[Issue], language: str) -> list[str]:
    """Build the ordered improvement list for a set of findings.

    Each check contributes at most one fixed string. When no check fires the two
    generic fallbacks are returned, so the result is never empty.

    Args:
        issues: Findings from the scanner
        language: Declared language, compared exactly

    Returns:
        Improvement strings in check order
    """
    improvements: list[str] = []

    if any(i.severity == Severity.CRITICAL for i in issues):
        improvements.append(CRITICAL_ADVICE)

    if any(i.severity == Severity.HIGH for i in issues):
        improvements.append(HIGH_ADVICE)

    if language in ("javascript", "typescript"):
        if _mentions(issues, "loose equality"):
            improvements.append(EQUALITY_ADVICE)
        if _mentions(issues, "innerHTML"):
            improvements.append(INNER_HTML_ADVICE)

    if language == "python" and _mentions(issues, "bare except"):
        improvements.append(EXCEPT_ADVICE)

    if _mentions(issues, "TODO"):
        improvements.append(TODO_ADVICE)

    if _mentions(issues, "debug statement"):
        improvements.append(DEBUG_ADVICE)

    if not improvements:
        improvements.extend(FALLBACK_ADVICE)

    return improvements
