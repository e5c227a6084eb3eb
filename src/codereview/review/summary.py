"""One-paragraph review summary."""

from collections.abc import Sequence

from codereview.review.models import Issue, Severity


def generate_summary(issues: Sequence[Issue], language: str) -> str:
    """Compose the summary sentence set from per-severity counts.

    Info issues are not counted. The critical clause only appears when there is
    at least one critical issue.
    """
    critical = len([i for i in issues if i.severity == Severity.CRITICAL])
    high = len([i for i in issues if i.severity == Severity.HIGH])
    medium = len([i for i in issues if i.severity == Severity.MEDIUM])
    low = len([i for i in issues if i.severity == Severity.LOW])

    summary = f"Code review for {language} code: "
    if critical > 0:
        summary += f"Found {critical} critical, "
    summary += f"{high} high, {medium} medium, and {low} low severity issues. "

    if critical > 0 or high > 0:
        summary += "Immediate attention recommended."
    elif medium > 0:
        summary += "Some improvements needed."
    else:
        summary += "Code quality is good with only minor issues."

    return summary
