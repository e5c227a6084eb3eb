"""Built-in rule catalog.

Language rules are keyed by lower-case language id. Common rules apply to every
language and always run after the language rules. Declaration order is
evaluation order.
"""

import re
from types import MappingProxyType

from codereview.review.models import PatternRule, Severity

# Whitespace as JavaScript's \s defines it; Python's \s differs.
_JS_WHITESPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"

LANGUAGE_RULES: MappingProxyType[str, tuple[PatternRule, ...]] = MappingProxyType(
    {
        "javascript": (
            PatternRule(
                pattern=re.compile(r"eval\("),
                severity=Severity.CRITICAL,
                description="Use of eval() function",
                suggestion=(
                    "Avoid using eval() as it poses security risks. "
                    "Consider using safer alternatives."
                ),
            ),
            PatternRule(
                pattern=re.compile(r"==(?!=)"),
                severity=Severity.MEDIUM,
                description="Using loose equality (==) instead of strict equality (===)",
                suggestion="Use === for strict type comparison to avoid unexpected type coercion",
            ),
            PatternRule(
                pattern=re.compile(r"\.innerHTML" + _JS_WHITESPACE + "*="),
                severity=Severity.HIGH,
                description="Direct manipulation of innerHTML",
                suggestion=(
                    "Consider using safer alternatives like textContent "
                    "or DOM methods to prevent XSS"
                ),
            ),
        ),
        "typescript": (
            PatternRule(
                pattern=re.compile(r": any"),
                severity=Severity.MEDIUM,
                description="Use of 'any' type",
                suggestion="Use more specific types to improve type safety",
            ),
            PatternRule(
                pattern=re.compile(r"!=(?!=)"),
                severity=Severity.MEDIUM,
                description="Using loose inequality (!=) instead of strict inequality (!==)",
                suggestion="Use !== for strict type comparison",
            ),
        ),
        "python": (
            PatternRule(
                pattern=re.compile(r"except:"),
                severity=Severity.MEDIUM,
                description="Bare except clause",
                suggestion="Specify exception types to catch instead of using bare except",
            ),
            PatternRule(
                pattern=re.compile(r"exec\("),
                severity=Severity.CRITICAL,
                description="Use of exec() function",
                suggestion="Avoid using exec() as it poses security risks",
            ),
        ),
    }
)

COMMON_RULES: tuple[PatternRule, ...] = (
    PatternRule(
        pattern=re.compile(r"TODO|FIXME", re.IGNORECASE),
        severity=Severity.LOW,
        description="Found TODO/FIXME comment",
        suggestion="Consider addressing this TODO or creating a specific issue to track it",
    ),
    PatternRule(
        pattern=re.compile(r"console\.log|print|System\.out\.println", re.IGNORECASE),
        severity=Severity.LOW,
        description="Debug statement found",
        suggestion="Remove debug statements before production deployment",
    ),
    PatternRule(
        pattern=re.compile(r"password|secret|apikey|token", re.IGNORECASE),
        severity=Severity.HIGH,
        description="Possible hardcoded credential",
        suggestion="Store sensitive values in environment variables or secure storage",
    ),
)


def language_rules(language: str) -> tuple[PatternRule, ...]:
    """Rules scoped to ``language`` (case-insensitive); empty for unknown languages."""
    return LANGUAGE_RULES.get(language.lower(), ())


def rules_for(language: str) -> tuple[PatternRule, ...]:
    """All rules that apply to ``language``, in evaluation order."""
    return language_rules(language) + COMMON_RULES


def supported_languages() -> list[str]:
    """Languages that have their own rules."""
    return list(LANGUAGE_RULES)
