"""Tests for the improvement synthesizer."""

from codereview.review.improvements import (
    CRITICAL_ADVICE,
    DEBUG_ADVICE,
    EQUALITY_ADVICE,
    EXCEPT_ADVICE,
    FALLBACK_ADVICE,
    HIGH_ADVICE,
    INNER_HTML_ADVICE,
    TODO_ADVICE,
    generate_improvements,
)
from codereview.review.models import Issue, Severity
from codereview.review.scanner import scan


def _issue(severity: Severity, description: str = "x") -> Issue:
    return Issue(severity=severity, line=1, description=description)


class TestSeverityAdvice:
    """Critical and high advisories."""

    def test_critical(self) -> None:
        assert generate_improvements([_issue(Severity.CRITICAL)], "go") == [CRITICAL_ADVICE]

    def test_high(self) -> None:
        assert generate_improvements([_issue(Severity.HIGH)], "go") == [HIGH_ADVICE]

    def test_critical_before_high(self) -> None:
        issues = [_issue(Severity.HIGH), _issue(Severity.CRITICAL)]
        assert generate_improvements(issues, "go") == [CRITICAL_ADVICE, HIGH_ADVICE]

    def test_exact_text(self) -> None:
        assert CRITICAL_ADVICE == "Address all critical security vulnerabilities as a top priority"
        assert HIGH_ADVICE == "Fix high-severity issues to improve code security and stability"


class TestCategoryAdvice:
    """Advisories keyed on issue descriptions."""

    def test_loose_equality_for_js_and_ts(self) -> None:
        issue = _issue(
            Severity.MEDIUM, "Using loose equality (==) instead of strict equality (===)"
        )
        assert generate_improvements([issue], "javascript") == [EQUALITY_ADVICE]
        assert generate_improvements([issue], "typescript") == [EQUALITY_ADVICE]

    def test_loose_equality_not_for_other_languages(self) -> None:
        issue = _issue(
            Severity.MEDIUM, "Using loose equality (==) instead of strict equality (===)"
        )
        assert generate_improvements([issue], "python") == list(FALLBACK_ADVICE)

    def test_inner_html(self) -> None:
        issues = scan("el.innerHTML = html", "javascript")
        assert generate_improvements(issues, "javascript") == [HIGH_ADVICE, INNER_HTML_ADVICE]

    def test_language_compared_exactly(self) -> None:
        issues = scan("el.innerHTML = html", "JavaScript")
        assert generate_improvements(issues, "JavaScript") == [HIGH_ADVICE]

    def test_todo(self) -> None:
        issues = scan("// TODO: tidy", "javascript")
        assert generate_improvements(issues, "javascript") == [TODO_ADVICE]

    def test_bare_except_matched_case_sensitively(self) -> None:
        assert generate_improvements([_issue(Severity.MEDIUM, "bare except")], "python") == [
            EXCEPT_ADVICE
        ]
        # The catalog label starts with an upper-case "B".
        issues = scan("except:", "python")
        assert generate_improvements(issues, "python") == list(FALLBACK_ADVICE)

    def test_debug_statement_matched_case_sensitively(self) -> None:
        assert generate_improvements([_issue(Severity.LOW, "a debug statement")], "go") == [
            DEBUG_ADVICE
        ]
        issues = scan("console.log(x)", "javascript")
        assert generate_improvements(issues, "javascript") == list(FALLBACK_ADVICE)

    def test_full_order(self) -> None:
        issues = [
            _issue(Severity.LOW, "a debug statement"),
            _issue(Severity.LOW, "TODO"),
            _issue(Severity.MEDIUM, "innerHTML"),
            _issue(Severity.MEDIUM, "loose equality"),
            _issue(Severity.HIGH),
            _issue(Severity.CRITICAL),
        ]
        assert generate_improvements(issues, "javascript") == [
            CRITICAL_ADVICE,
            HIGH_ADVICE,
            EQUALITY_ADVICE,
            INNER_HTML_ADVICE,
            TODO_ADVICE,
            DEBUG_ADVICE,
        ]

    def test_each_advisory_at_most_once(self) -> None:
        issues = scan("eval(a)\neval(b)\n// TODO\n// FIXME", "javascript")
        improvements = generate_improvements(issues, "javascript")
        assert improvements == [CRITICAL_ADVICE, TODO_ADVICE]


class TestFallback:
    """Fallback pair when nothing fired."""

    def test_no_issues(self) -> None:
        assert generate_improvements([], "python") == [
            "Consider adding comprehensive error handling",
            "Add comments to explain complex logic or business rules",
        ]

    def test_medium_without_category(self) -> None:
        issues = [_issue(Severity.MEDIUM, "Use of 'any' type")]
        assert generate_improvements(issues, "typescript") == list(FALLBACK_ADVICE)

    def test_password_line_gets_high_advice(self) -> None:
        issues = scan('password = "x"', "python")
        assert HIGH_ADVICE in generate_improvements(issues, "python")
