"""Review data models.

- Severity: ordinal urgency of a finding
- Issue: one finding emitted by applying a rule to one line
- PatternRule: declarative detector (pattern + severity/description/suggestion)
- ReviewRequest / ReviewReport: the tool's input and output records

Wire names (JSON) are camelCase to match the tool schema an agent runtime sees;
Python attributes are snake_case. Both are accepted on input.
"""

import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Severity(StrEnum):
    """Severity levels, most urgent first."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Urgency rank: 0 for critical up to 4 for info."""
        return list(Severity).index(self)

    def at_least(self, threshold: "Severity") -> bool:
        """Check whether this severity is as urgent as ``threshold`` or more."""
        return self.rank <= threshold.rank


class Issue(BaseModel):
    """A single finding.

    ``description`` always comes from the rule catalog; nothing is generated per match.
    """

    severity: Severity = Field(description="Issue severity")
    line: int | None = Field(default=None, description="1-based line number of the match")
    description: str = Field(description="Fixed label of the rule that matched")
    suggestion: str | None = Field(default=None, description="Fixed remediation hint")

    model_config = ConfigDict(frozen=True)


class PatternRule(BaseModel):
    """A declarative detector applied line by line."""

    pattern: re.Pattern[str]
    severity: Severity
    description: str
    suggestion: str | None = None

    model_config = ConfigDict(frozen=True)

    def matches(self, line: str) -> bool:
        """True if the pattern occurs anywhere in ``line``."""
        return self.pattern.search(line) is not None

    def to_issue(self, line: int) -> Issue:
        """Build the Issue this rule emits for a matching line."""
        return Issue(
            severity=self.severity,
            line=line,
            description=self.description,
            suggestion=self.suggestion,
        )


class ReviewRequest(BaseModel):
    """Tool input: source text, its declared language and optional focus areas."""

    code: str = Field(description="The source code to analyze")
    language: str = Field(
        description="Programming language of the code (e.g., javascript, typescript, python)"
    )
    focus_areas: list[str] = Field(
        default_factory=list,
        description="Specific areas to focus on (e.g., security, performance, maintainability)",
    )

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ReviewReport(BaseModel):
    """Tool output: issues, narrative summary, positive aspects, improvements."""

    issues: list[Issue] = Field(description="Findings in rule-major, then line order")
    summary: str = Field(description="Severity counts and overall verdict")
    positive_aspects: list[str] = Field(description="Good practices noticed (never empty)")
    suggested_improvements: list[str] = Field(
        description="Prioritized remediation advice (never empty)"
    )

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    def count(self, severity: Severity) -> int:
        """Number of issues with the given severity."""
        return len([i for i in self.issues if i.severity == severity])

    @property
    def critical_count(self) -> int:
        """Count of critical issues."""
        return self.count(Severity.CRITICAL)

    @property
    def high_count(self) -> int:
        """Count of high-severity issues."""
        return self.count(Severity.HIGH)

    @property
    def medium_count(self) -> int:
        """Count of medium-severity issues."""
        return self.count(Severity.MEDIUM)

    @property
    def low_count(self) -> int:
        """Count of low-severity issues."""
        return self.count(Severity.LOW)

    @property
    def total_issues(self) -> int:
        """Total number of issues found."""
        return len(self.issues)

    @property
    def by_severity(self) -> dict[Severity, list[Issue]]:
        """Group issues by severity, keeping scan order within each group."""
        result: dict[Severity, list[Issue]] = {s: [] for s in Severity}
        for issue in self.issues:
            result[issue.severity].append(issue)
        return result

    def has_issues_at_least(self, threshold: Severity) -> bool:
        """True if any issue is at least as urgent as ``threshold``."""
        return any(i.severity.at_least(threshold) for i in self.issues)
