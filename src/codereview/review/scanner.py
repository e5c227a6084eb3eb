"""Line-by-line pattern scanner."""

from collections.abc import Sequence

from codereview.review.models import Issue
from codereview.review.rules import rules_for


def split_lines(code: str) -> list[str]:
    """Split source on newline only; empty input has no lines."""
    if not code:
        return []
    return code.split("\n")


def scan(code: str, language: str, focus_areas: Sequence[str] = ()) -> list[Issue]:
    """Apply every applicable rule to every line of ``code``.

    Language rules run before common rules. Output is rule-major: all matches of
    one rule (in line order) precede any match of the next rule. A rule emits at
    most one issue per line.

    Args:
        code: Source text
        language: Declared language, matched case-insensitively against the catalog
        focus_areas: Accepted for the tool contract; does not change which rules run

    Returns:
        Issues in rule-major, then line order
    """
    lines = split_lines(code)
    issues: list[Issue] = []
    for rule in rules_for(language):
        for number, line in enumerate(lines, start=1):
            if rule.matches(line):
                issues.append(rule.to_issue(number))
    return issues
