"""codereview CLI application."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, NoReturn

import typer
from rich import print as rprint
from rich.markup import escape

import codereview as codereview_pkg
from codereview.config import ReviewSettings, apply_overrides, load_settings
from codereview.errors import ConfigError
from codereview.log import configure_logging


class OutputFormat(StrEnum):
    """Output format for CLI commands."""

    human = "human"
    json = "json"
    jsonl = "jsonl"


app = typer.Typer(
    name="codereview",
    help="Pattern-based code review for source files.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        rprint(f"codereview {codereview_pkg.__version__}")
        raise typer.Exit()


def _fail(message: str) -> NoReturn:
    rprint(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """codereview — flag risky constructs and summarize code quality."""
    from dotenv import load_dotenv

    load_dotenv()

    try:
        settings = load_settings()
    except ConfigError as e:
        _fail(e.message)

    configure_logging(settings.log_level, settings.log_json)
    ctx.obj = settings


def _settings(ctx: typer.Context) -> ReviewSettings:
    if isinstance(ctx.obj, ReviewSettings):
        return ctx.obj
    return load_settings()


@app.command("review")
def review(
    ctx: typer.Context,
    path: Annotated[
        str,
        typer.Argument(help="Source file to review, or '-' to read stdin"),
    ],
    language: Annotated[
        str | None,
        typer.Option("--language", "-l", help="Language of the code (detected if omitted)"),
    ] = None,
    focus: Annotated[
        list[str] | None,
        typer.Option("--focus", "-F", help="Focus area (repeatable, e.g. security)"),
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format"),
    ] = None,
    fail_on: Annotated[
        str | None,
        typer.Option(
            "--fail-on",
            help="Exit 1 if any issue is at least this severe ('none' to never fail)",
        ),
    ] = None,
) -> None:
    """Review a source file for risky constructs."""
    from codereview.review.cli import review_command

    try:
        settings = apply_overrides(
            _settings(ctx),
            output_format=format.value if format else None,
            fail_on=fail_on,
        )
    except ConfigError as e:
        _fail(e.message)

    exit_code = review_command(
        path=path,
        language=language,
        focus_areas=focus,
        format=settings.output_format,
        fail_on=settings.fail_on_severity,
        default_language=settings.default_language,
    )
    raise typer.Exit(exit_code)


@app.command("rules")
def rules(
    ctx: typer.Context,
    language: Annotated[
        str | None,
        typer.Option("--language", "-l", help="Only rules that apply to this language"),
    ] = None,
    format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format"),
    ] = None,
) -> None:
    """List the built-in review rules."""
    from codereview.review.cli import rules_command

    output_format = format.value if format else _settings(ctx).output_format
    exit_code = rules_command(language=language, format=output_format)
    raise typer.Exit(exit_code)
