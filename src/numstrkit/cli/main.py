from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer

from .._version import __version__
from ..config import ParseProfile, get_settings
from ..exceptions import NumStrError
from ..parsing import (
    dirty_to_native_num_str,
    extract_numeric_rune_sequence,
    parse_pure_num_str,
)
from ..utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event
from .common import emit, fail
from .config import app as config_app
from .native import app as native_app


__all__ = ["app", "run"]

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Extract numeric values from formatted number strings", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show numstrkit version and exit", is_eager=True),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        dir_okay=False,
        help="Write JSONL debug events (one per parse) to this file",
    ),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"numstrkit {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    logger = configure_json_logger(log_file, level=logging.DEBUG if log_file else logging.INFO)
    ctx.obj = {"trace_id": generate_trace_id("cli")}
    ctx.call_on_close(lambda: flush_handlers(logger))


app.add_typer(native_app, name="native")
app.add_typer(config_app, name="config")


def _resolve_profile(
    profile_name: Optional[str],
    config_file: Optional[Path],
    overrides: Dict[str, Any],
) -> ParseProfile:
    if profile_name:
        base = ParseProfile.named(profile_name)
    else:
        base = get_settings(config_file=config_file)
    if not overrides:
        return base
    return ParseProfile.model_validate({**base.model_dump(), **overrides})


@app.command("parse")
def parse_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text containing the number to extract"),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help="Built-in profile to start from: us, france or germany (default: configured profile)",
    ),
    decimal_separator: Optional[str] = typer.Option(None, "--decimal-separator", help="Decimal separator literal"),
    terminators: Optional[List[str]] = typer.Option(
        None,
        "--terminator",
        help="Literal that ends the scan once a digit was found (repeatable)",
    ),
    start: int = typer.Option(0, "--start", min=0, help="Index of the first character to scan"),
    search_length: Optional[int] = typer.Option(
        None,
        "--search-length",
        help="Maximum number of characters to scan (default: to the end of the text)",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="TOML/YAML profile to use instead of the environment configuration",
    ),
) -> None:
    """Scan TEXT once and print the structured result as JSON."""

    overrides: Dict[str, Any] = {}
    if decimal_separator is not None:
        overrides["decimal_separator"] = decimal_separator
    if terminators:
        overrides["terminators"] = list(terminators)
    if search_length is not None:
        overrides["max_search_length"] = search_length

    try:
        resolved = _resolve_profile(profile, config_file, overrides)
        result, kernel = extract_numeric_rune_sequence(
            text,
            start_index=start,
            search_length=resolved.max_search_length,
            negative_signs=resolved.negative_signs(),
            decimal_separator=resolved.decimal_separator_spec(),
            terminators=resolved.terminator_set(),
            request_remainder=resolved.request_remainder,
            context="cli.parse",
        )
    except (ValueError, FileNotFoundError) as exc:
        fail(exc)

    log_event(
        LOGGER,
        "cli.parse",
        trace_id=(ctx.obj or {}).get("trace_id"),
        termination=result.termination.value,
        value=kernel.to_native_str(),
    )
    emit({"value": kernel.as_dict(), "result": result.as_dict()})


@app.command("pure")
def pure_command(
    text: str = typer.Argument(..., help="Pure number string, e.g. '-1234.5' or '1234,5-'"),
    decimal_separator: str = typer.Option(".", "--decimal-separator", help="Decimal separator literal"),
    trailing_minus: bool = typer.Option(
        False,
        "--trailing-minus",
        help="Expect the minus sign after the digits instead of before them",
    ),
) -> None:
    """Parse a pure number string and print its value as JSON."""

    try:
        kernel = parse_pure_num_str(
            text,
            decimal_separator,
            leading_minus_sign=not trailing_minus,
            context="cli.pure",
        )
    except NumStrError as exc:
        fail(exc)

    emit(kernel.as_dict())


@app.command("dirty")
def dirty_command(
    text: str = typer.Argument(..., help="Formatted number, e.g. '($1,234.50)'"),
    decimal_separator: str = typer.Option(".", "--decimal-separator", help="Decimal separator literal"),
) -> None:
    """Reduce a formatted number to a native number string."""

    try:
        native = dirty_to_native_num_str(text, decimal_separator, context="cli.dirty")
    except NumStrError as exc:
        fail(exc)

    emit({"input": text, "native": native})


def run() -> None:
    """Entry point compatible with ``python -m numstrkit.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
