"""CLI commands for code review."""

import json
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from codereview.errors import CodeReviewError, InputError
from codereview.review.language import detect_language
from codereview.review.models import PatternRule, ReviewReport, ReviewRequest, Severity
from codereview.review.rules import (
    COMMON_RULES,
    LANGUAGE_RULES,
    language_rules,
    supported_languages,
)
from codereview.review.tool import review_code

console = Console()

STDIN_PATH = "-"

_SEVERITY_STYLES = {
    Severity.CRITICAL: "red bold",
    Severity.HIGH: "red",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "dim",
    Severity.INFO: "dim",
}


def review_command(
    path: str,
    language: str | None = None,
    focus_areas: list[str] | None = None,
    format: str = "human",
    fail_on: Severity | None = Severity.HIGH,
    default_language: str | None = None,
) -> int:
    """Review one source file (or stdin).

    Args:
        path: File to review, or "-" to read stdin
        language: Declared language (detected from the file suffix if None)
        focus_areas: Focus areas passed through to the tool
        format: Output format: "human", "json", or "jsonl"
        fail_on: Lowest severity that makes the review fail (None never fails)
        default_language: Used when language is None and detection fails

    Returns:
        Exit code (0 = passed, 1 = failing issues or error)
    """
    try:
        code = _read_source(path)
        resolved = language or _detect(path) or default_language
        if not resolved:
            raise InputError(
                f"Cannot determine language for {path}; pass --language explicitly"
            )

        request = ReviewRequest(code=code, language=resolved, focus_areas=focus_areas or [])
        report = review_code(request)

        if format == "json":
            print(report.model_dump_json(indent=2, by_alias=True, exclude_none=True))
        elif format == "jsonl":
            print(report.model_dump_json(by_alias=True, exclude_none=True))
        else:
            _output_human(report, path, fail_on)

        if fail_on is not None and report.has_issues_at_least(fail_on):
            return 1
        return 0

    except KeyboardInterrupt:
        if format == "human":
            console.print("\n[yellow]Review cancelled by user[/yellow]")
        return 130  # Standard exit code for SIGINT
    except CodeReviewError as e:
        _output_error(e.message, format)
        return 1
    except Exception as e:
        _output_error(str(e), format)
        return 1


def rules_command(language: str | None = None, format: str = "human") -> int:
    """List the rule catalog.

    Args:
        language: Only show rules that apply to this language (all if None)
        format: Output format: "human", "json", or "jsonl"

    Returns:
        Exit code (always 0)
    """
    if language is None:
        scoped = [(lang, rule) for lang, rules in LANGUAGE_RULES.items() for rule in rules]
    else:
        scoped = [(language.lower(), rule) for rule in language_rules(language)]
    entries = scoped + [("*", rule) for rule in COMMON_RULES]

    if format == "json":
        print(json.dumps([_rule_to_dict(scope, rule) for scope, rule in entries], indent=2))
    elif format == "jsonl":
        for scope, rule in entries:
            print(json.dumps(_rule_to_dict(scope, rule)))
    else:
        table = Table(show_header=True, header_style="bold", title="Review rules")
        table.add_column("Scope", style="cyan")
        table.add_column("Severity", justify="center", no_wrap=True)
        table.add_column("Description")
        table.add_column("Pattern", style="magenta")
        for scope, rule in entries:
            style = _SEVERITY_STYLES[rule.severity]
            table.add_row(
                scope,
                f"[{style}]{rule.severity.value}[/{style}]",
                escape(rule.description),
                escape(rule.pattern.pattern),
            )
        console.print(table)
        if language is not None and not scoped:
            console.print(
                f"[yellow]No {escape(language)}-specific rules; languages with their own "
                f"rules: {', '.join(supported_languages())}[/yellow]",
                soft_wrap=True,
            )
    return 0


def _read_source(path: str) -> str:
    if path == STDIN_PATH:
        return sys.stdin.read()
    file_path = Path(path)
    if not file_path.is_file():
        raise InputError(f"File does not exist: {path}")
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {path}: {e}") from e


def _detect(path: str) -> str | None:
    if path == STDIN_PATH:
        return None
    return detect_language(Path(path))


def _rule_to_dict(scope: str, rule: PatternRule) -> dict[str, str | None]:
    return {
        "scope": scope,
        "severity": rule.severity.value,
        "description": rule.description,
        "suggestion": rule.suggestion,
        "pattern": rule.pattern.pattern,
    }


def _output_error(message: str, format: str) -> None:
    if format == "human":
        console.print(f"[red]Error:[/red] {escape(message)}")
    else:
        print(json.dumps({"error": message}))


def _output_human(report: ReviewReport, path: str, fail_on: Severity | None) -> None:
    """Output report in human-readable format."""
    failed = fail_on is not None and report.has_issues_at_least(fail_on)
    console.print(
        Panel(
            escape(report.summary),
            title="Code Review",
            subtitle=escape(path),
            border_style="red" if failed else "green",
        )
    )

    if report.total_issues > 0:
        console.print(f"\n[bold]Found {report.total_issues} issue(s):[/bold]")

        table = Table(show_header=True, header_style="bold")
        table.add_column("Line", justify="right", style="magenta", no_wrap=True)
        table.add_column("Severity", justify="center", no_wrap=True)
        table.add_column("Description")
        table.add_column("Suggestion", style="green")

        for issue in report.issues:
            style = _SEVERITY_STYLES[issue.severity]
            table.add_row(
                str(issue.line) if issue.line is not None else "-",
                f"[{style}]{issue.severity.value}[/{style}]",
                escape(issue.description),
                escape(issue.suggestion or ""),
            )

        console.print(table)
    else:
        console.print("\n[green]No issues found.[/green]")

    console.print("\n[bold]Positive aspects:[/bold]")
    for aspect in report.positive_aspects:
        console.print(f"  [green]✓[/green] {escape(aspect)}")

    console.print("\n[bold]Suggested improvements:[/bold]")
    for improvement in report.suggested_improvements:
        console.print(f"  • {escape(improvement)}")
