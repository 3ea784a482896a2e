"""Commands working on native number strings such as ``-1234.5``."""
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

import typer

from ..exceptions import NativeNumStrError, NumStrError
from ..parsing import NativeNumStrStats, native_num_str_stats, rationalize_native_num_str
from .common import emit, fail

__all__ = ["app"]

app = typer.Typer(help="Validate and rationalize native number strings.", add_completion=False)


def _stats_payload(stats: NativeNumStrStats) -> Dict[str, Any]:
    payload = asdict(stats)
    payload["value_type"] = stats.value_type.value
    payload["number_sign"] = stats.number_sign.value
    return payload


@app.command("validate")
def validate_command(
    text: str = typer.Argument(..., help="Native number string, e.g. '-0012.50'"),
) -> None:
    """Check TEXT and print its digit statistics."""

    try:
        stats = native_num_str_stats(text, context="cli.native.validate")
    except NativeNumStrError as exc:
        typer.echo(
            f"error: {exc} (index={exc.index}, char={exc.char!r})",
            err=True,
        )
        raise typer.Exit(code=1)
    except NumStrError as exc:
        fail(exc)

    emit({"input": text, "valid": True, "stats": _stats_payload(stats)})


@app.command("rationalize")
def rationalize_command(
    text: str = typer.Argument(..., help="Native number string, e.g. '-0012.50'"),
) -> None:
    """Strip leading integer zeros and trailing fractional zeros from TEXT."""

    try:
        rationalized, stats = rationalize_native_num_str(text, context="cli.native.rationalize")
    except NumStrError as exc:
        fail(exc)

    emit({"input": text, "rationalized": rationalized, "stats": _stats_payload(stats)})
