"""Review layer — pattern scan plus derived summary, positives and improvements.

Public API exports for the review module.
"""

from codereview.review.improvements import generate_improvements
from codereview.review.models import Issue, PatternRule, ReviewReport, ReviewRequest, Severity
from codereview.review.positives import find_positive_aspects
from codereview.review.rules import COMMON_RULES, LANGUAGE_RULES, rules_for
from codereview.review.scanner import scan
from codereview.review.summary import generate_summary
from codereview.review.tool import build_review_tool, code_review, review_code

__all__ = [
    "COMMON_RULES",
    "LANGUAGE_RULES",
    "Issue",
    "PatternRule",
    "ReviewReport",
    "ReviewRequest",
    "Severity",
    "build_review_tool",
    "code_review",
    "find_positive_aspects",
    "generate_improvements",
    "generate_summary",
    "review_code",
    "rules_for",
    "scan",
]
