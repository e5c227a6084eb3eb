"""Error types raised at the outer surfaces (CLI, configuration, tool input).

The review core itself is total: every well-typed input produces a report.
"""

from __future__ import annotations


class CodeReviewError(Exception):
    """Base error for codereview."""

    def __init__(self, message: str) -> None:
        """Initialize CodeReviewError with a message."""
        self.message = message
        super().__init__(message)


class ConfigError(CodeReviewError):
    """Invalid configuration value."""


class InputError(CodeReviewError):
    """Review input could not be read or its language could not be determined."""
