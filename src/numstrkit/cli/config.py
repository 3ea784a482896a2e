"""Inspect the parse profile resolved from files and environment variables."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer

from ..config import CONFIG_FILE_ENV, PROFILE_NAMES, ParseProfile, get_settings
from .common import emit, fail

__all__ = ["app"]

app = typer.Typer(
    help="Diagnostics for the numstrkit parse profile configuration.",
    add_completion=False,
)


@app.command("show")
def show_profile(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="TOML/YAML configuration to use instead of the environment.",
    ),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        help=f"Show a built-in profile instead: {', '.join(PROFILE_NAMES)}",
    ),
    refresh: bool = typer.Option(
        False,
        "--refresh",
        help="Ignore the cache and rebuild the profile from environment and files.",
    ),
) -> None:
    """Print the resolved parse profile as JSON."""

    try:
        if profile:
            settings = ParseProfile.named(profile)
            source = f"profile:{profile}"
        else:
            settings = get_settings(refresh=refresh, config_file=config_file)
            env_path = os.getenv(CONFIG_FILE_ENV)
            source = str(config_file) if config_file else (env_path or "defaults")
    except (ValueError, FileNotFoundError) as exc:
        fail(exc)

    emit({"config_source": source, "profile": settings.model_dump(mode="json")})
