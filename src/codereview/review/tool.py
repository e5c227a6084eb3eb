"""Tool boundary: assemble a ReviewReport from source text.

``review_code`` is the pure entry point. ``build_review_tool`` wraps it (via
``code_review``) as a pydantic-ai Tool so an agent runtime can register it;
building the tool does not contact any model.
"""

from pydantic_ai import Tool

from codereview.log import get_logger
from codereview.review.improvements import generate_improvements
from codereview.review.models import ReviewReport, ReviewRequest, Severity
from codereview.review.positives import find_positive_aspects
from codereview.review.scanner import scan, split_lines
from codereview.review.summary import generate_summary

TOOL_ID = "code-review"
TOOL_DESCRIPTION = "Analyzes code for issues, bugs, and improvement opportunities"

logger = get_logger(__name__)


def review_code(request: ReviewRequest) -> ReviewReport:
    """Run the scanner and derive the full report.

    Args:
        request: Validated tool input

    Returns:
        ReviewReport with issues, summary, positive aspects and improvements
    """
    issues = scan(request.code, request.language, request.focus_areas)
    report = ReviewReport(
        issues=issues,
        summary=generate_summary(issues, request.language),
        positive_aspects=find_positive_aspects(request.code, request.language),
        suggested_improvements=generate_improvements(issues, request.language),
    )

    logger.debug(
        "review.completed",
        language=request.language,
        lines=len(split_lines(request.code)),
        issues=report.total_issues,
        **{s.value: report.count(s) for s in Severity},
    )
    return report


def code_review(request: ReviewRequest) -> ReviewReport:
    """Analyze code for issues, bugs, and improvement opportunities.

    Takes the whole request as one model so the registered tool exposes the
    request's own wire schema (``code``, ``language``, ``focusAreas``).

    Args:
        request: Source code, its language and optional focus areas
    """
    return review_code(request)


def build_review_tool() -> Tool[None]:
    """Wrap ``code_review`` as a pydantic-ai Tool."""
    return Tool(code_review, takes_ctx=False, name=TOOL_ID, description=TOOL_DESCRIPTION)
