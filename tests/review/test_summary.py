"""Tests for the summary composer."""

from codereview.review.models import Issue, Severity
from codereview.review.scanner import scan
from codereview.review.summary import generate_summary


def _issues(*severities: Severity) -> list[Issue]:
    return [Issue(severity=s, line=n, description="x") for n, s in enumerate(severities, 1)]


class TestGenerateSummary:
    """Test generate_summary()."""

    def test_no_issues(self) -> None:
        assert generate_summary([], "python") == (
            "Code review for python code: 0 high, 0 medium, and 0 low severity issues. "
            "Code quality is good with only minor issues."
        )

    def test_critical_clause_and_immediate_attention(self) -> None:
        issues = scan("a;\nb;\nx = eval(y);", "javascript")
        summary = generate_summary(issues, "javascript")
        assert "Found 1 critical, 0 high, 0 medium, and 0 low severity issues." in summary
        assert summary.endswith("Immediate attention recommended.")

    def test_high_only(self) -> None:
        summary = generate_summary(_issues(Severity.HIGH, Severity.LOW), "go")
        assert summary == (
            "Code review for go code: 1 high, 0 medium, and 1 low severity issues. "
            "Immediate attention recommended."
        )

    def test_medium_only(self) -> None:
        summary = generate_summary(_issues(Severity.MEDIUM, Severity.MEDIUM), "typescript")
        assert summary == (
            "Code review for typescript code: 0 high, 2 medium, and 0 low severity issues. "
            "Some improvements needed."
        )

    def test_low_only(self) -> None:
        summary = generate_summary(_issues(Severity.LOW), "python")
        assert summary.endswith(
            "0 high, 0 medium, and 1 low severity issues. "
            "Code quality is good with only minor issues."
        )

    def test_info_not_counted(self) -> None:
        summary = generate_summary(_issues(Severity.INFO, Severity.INFO), "python")
        assert summary == generate_summary([], "python")

    def test_all_severities(self) -> None:
        summary = generate_summary(
            _issues(
                Severity.CRITICAL,
                Severity.CRITICAL,
                Severity.HIGH,
                Severity.MEDIUM,
                Severity.LOW,
                Severity.LOW,
                Severity.LOW,
            ),
            "javascript",
        )
        assert summary == (
            "Code review for javascript code: Found 2 critical, 1 high, 1 medium, "
            "and 3 low severity issues. Immediate attention recommended."
        )

    def test_language_as_given(self) -> None:
        assert generate_summary([], "JavaScript").startswith("Code review for JavaScript code: ")
