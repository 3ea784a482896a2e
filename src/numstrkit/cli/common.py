"""Output helpers shared by the numstrkit commands."""
from __future__ import annotations

import json
from typing import Any, Mapping, NoReturn

import typer

__all__ = ["emit", "fail"]


def emit(payload: Mapping[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def fail(exc: Exception) -> NoReturn:
    """Report ``exc`` on stderr and exit with status 1."""

    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1)
