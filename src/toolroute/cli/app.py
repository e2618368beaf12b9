# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring formatter and validator commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from ..logging import fail
from ..results import FormatResult, ValidationResult
from .shared import FILE_PATH_ENV, CLIError, CLIOptions, build_options, resolve_target

app = typer.Typer(
    name="toolroute",
    help="Route files to their language's formatter and validator.",
    no_args_is_help=True,
    add_completion=False,
)

PathArgument = Annotated[Path, typer.Argument(help="File to operate on.", show_default=False)]
ExtOption = Annotated[
    str | None,
    typer.Option("--ext", help="Extension to route by (leading dot). Defaults to the file's suffix."),
]
StrictOption = Annotated[bool, typer.Option("--strict", help="Exit with status 1 when validation fails.")]


@app.callback()
def root(
    ctx: typer.Context,
    config_dir: Annotated[
        Path | None,
        typer.Option(
            "--config-dir",
            help="Directory holding formatters.jsonc and validators.jsonc.",
            envvar="TOOLROUTE_CONFIG_DIR",
        ),
    ] = None,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Prefix messages with emoji.")] = True,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log resolution and execution details.")] = False,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Seconds to wait for each external tool before giving up."),
    ] = None,
) -> None:
    """Collect global options shared by every command."""

    ctx.obj = build_options(
        config_dir=config_dir,
        emoji=emoji,
        color=False if no_color else None,
        debug=debug,
        timeout=timeout,
    )


def _options(ctx: typer.Context) -> CLIOptions:
    options = ctx.obj
    if not isinstance(options, CLIOptions):  # pragma: no cover - callback always runs first
        raise typer.Exit(code=2)
    return options


def _target_or_exit(path: Path, options: CLIOptions) -> Path:
    try:
        return resolve_target(path)
    except CLIError as exc:
        fail(str(exc), use_emoji=options.emoji, use_color=options.color)
        raise typer.Exit(code=exc.exit_code) from exc


def _run_format(options: CLIOptions, target: Path, extension: str | None) -> int:
    dispatcher = options.formatter()
    result: FormatResult = dispatcher.format_file(target, extension)
    result.report(use_emoji=options.emoji, use_color=options.color)
    if result.error is None:
        return 0
    if options.debug or dispatcher.settings.fail_on_error:
        fail(f"{result.formatter}: {result.error}", use_emoji=options.emoji, use_color=options.color)
    return 1 if dispatcher.settings.fail_on_error else 0


def _run_validate(options: CLIOptions, target: Path, extension: str | None, *, strict: bool) -> int:
    result: ValidationResult = options.validator().validate_file(target, extension)
    result.report(use_emoji=options.emoji, use_color=options.color)
    return 1 if strict and not result.valid else 0


@app.command("format")
def format_command(ctx: typer.Context, path: PathArgument, ext: ExtOption = None) -> None:
    """Format PATH in place with its language's primary formatter."""

    options = _options(ctx)
    target = _target_or_exit(path, options)
    raise typer.Exit(code=_run_format(options, target, ext))


@app.command("validate")
def validate_command(
    ctx: typer.Context,
    path: PathArgument,
    ext: ExtOption = None,
    strict: StrictOption = False,
) -> None:
    """Check PATH with its language's primary validator."""

    options = _options(ctx)
    target = _target_or_exit(path, options)
    raise typer.Exit(code=_run_validate(options, target, ext, strict=strict))


@app.command("check")
def check_command(
    ctx: typer.Context,
    path: PathArgument,
    ext: ExtOption = None,
    strict: StrictOption = False,
) -> None:
    """Format PATH, then validate the formatted file."""

    options = _options(ctx)
    target = _target_or_exit(path, options)
    format_code = _run_format(options, target, ext)
    validate_code = _run_validate(options, target, ext, strict=strict)
    raise typer.Exit(code=max(format_code, validate_code))


@app.command("which")
def which_command(
    ctx: typer.Context,
    extension: Annotated[str, typer.Argument(help="Extension such as .go or go.", show_default=False)],
) -> None:
    """Show the language and primary tools selected for EXTENSION."""

    options = _options(ctx)
    ext = extension if extension.startswith(".") else f".{extension}"
    formatter = options.formatter()
    validator = options.validator()
    format_language = formatter.language_for(ext)
    validate_language = validator.language_for(ext)
    typer.echo(f"extension: {ext}")
    typer.echo(f"formatter: {_describe(format_language, formatter.primary_tool(format_language))}")
    typer.echo(f"validator: {_describe(validate_language, validator.primary_tool(validate_language))}")


def _describe(language: str, tool: str) -> str:
    if not language:
        return "<no language>"
    return f"{language} -> {tool or '<none>'}"


@app.command("hook")
def hook_command(ctx: typer.Context) -> None:
    """Format and validate the file named by $FILE_PATH, never failing the caller."""

    options = _options(ctx)
    raw = os.environ.get(FILE_PATH_ENV, "")
    if not raw:
        raise typer.Exit(code=0)
    target = Path(raw).expanduser().absolute()
    if target.is_dir():
        raise typer.Exit(code=0)
    options.formatter().format_file(target).report(use_emoji=options.emoji, use_color=options.color)
    options.validator().validate_file(target).report(use_emoji=options.emoji, use_color=options.color)
    raise typer.Exit(code=0)


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "main"]
