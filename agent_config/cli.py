"""cli.py - Command-line interface for **agent-config**
==================================================

A small **Typer** application for checking agent configuration from the
shell before the agent itself is started.

Usage examples
--------------
::

    # Validate the configuration assembled from ./.env and the environment
    agent-config check

    # Use another dotenv file
    agent-config check --env-file ~/.agentkai/config

    # Print the assembled configuration (API key masked)
    agent-config show --json

Notes
-----
* Values already present in the process environment win over the dotenv
  file, matching ``python-dotenv`` defaults.
* Exit status is ``1`` when validation fails.
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from dotenv import find_dotenv, load_dotenv
from rich import print as rprint
from rich.table import Table
from rich.traceback import install as rich_tb_install

from agent_config.config.loader import load_config
from agent_config.config.models import AppConfig
from agent_config.config.settings import configure_logging
from agent_config.config.validation import validate_config
from agent_config.utils.exceptions import ConfigValidationError, log_exception, wrap_error

# pretty tracebacks for CLI users
rich_tb_install(show_locals=False)

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Typer application
# ---------------------------------------------------------------------------
app = typer.Typer(add_completion=False, rich_markup_mode="rich", no_args_is_help=True)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def mask_secret(value: str) -> str:
    """Hide all but the last four characters of *value*."""
    if not value:
        return ""
    if len(value) <= 8:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def _load(env_file: Optional[Path]) -> AppConfig:
    if env_file is not None:
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=False)
    return load_config()


def _redacted(config: AppConfig) -> Dict[str, Any]:
    data = config.model_dump(mode="json", by_alias=True)
    data["modelConfig"]["apiKey"] = mask_secret(config.model.api_key.get_secret_value())
    return data


@app.callback()
def _setup() -> None:
    configure_logging()


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command(help="Validate the configuration assembled from the environment.")
def check(
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        "-e",
        exists=True,
        dir_okay=False,
        readable=True,
        help="dotenv file to load before reading the environment.",
    ),
) -> None:
    config = _load(env_file)
    try:
        validate_config(config)
    except ConfigValidationError as exc:
        log_exception(exc, level=logging.DEBUG, logger=log)
        rprint(f"[red]✗ {exc.code}[/] {exc.message} [dim]({exc.field})[/]")
        raise typer.Exit(code=1)

    rprint(f"[green]✓ Configuration valid[/] for model [bold]{config.model.model}[/]")


@app.command(help="Print the assembled configuration with the API key masked.")
def show(
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        "-e",
        exists=True,
        dir_okay=False,
        readable=True,
        help="dotenv file to load before reading the environment.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    data = _redacted(_load(env_file))
    if as_json:
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    table = Table("key", "value")
    for section, values in data.items():
        if values is None:
            continue
        for key, value in values.items():
            table.add_row(f"{section}.{key}", str(value))
    rprint(table)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:  # pragma: no cover
    """CLI entry-point used by `python -m agent_config.cli`."""

    try:
        app()
    except Exception as exc:
        error = wrap_error(exc)
        log_exception(error, logger=log)
        rprint(f"[red]Error:[/] {error.message}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
