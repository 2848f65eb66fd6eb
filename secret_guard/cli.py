# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Command line interface module."""

# flake8: noqa: E501
import logging
import logging.config
from typing import Optional

import typer

from secret_guard._logging import LogLevel, get_log_level, get_logging_config
from secret_guard._version import __version__
from secret_guard.config import SettingsManager
from secret_guard.detector import is_hash
from secret_guard.hashing import password_hasher

APP_NAME = "secret-guard"
APP_HELP = "Hash, verify and inspect guarded secrets"

LOG = logging.getLogger(__name__)

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_short=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Secret guard command line interface."""
    logging.config.dictConfig(get_logging_config(log_level.value))


@app.command(name="hash")
def hash_secret(
    secret: str = typer.Argument(..., help="The secret to hash"),
    cost: Optional[int] = typer.Option(
        None,
        help="The cost factor (defaults to SECRET_GUARD_COST or 12)",
        show_default=False,
    ),
) -> None:
    """Print the hash of a secret."""
    if cost is None:
        cost = SettingsManager.get_settings().cost
    LOG.debug("Hashing with cost %d", cost)
    try:
        hashed = password_hasher.hash(secret, cost)
    except ValueError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=2) from error
    typer.echo(hashed)


@app.command()
def verify(
    secret: str = typer.Argument(..., help="The secret to check"),
    hashed: str = typer.Argument(..., help="The stored hash"),
) -> None:
    """Check a secret against a hash (exit code 1 if they do not match)."""
    try:
        matches = password_hasher.compare(secret, hashed)
    except ValueError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=2) from error
    typer.echo("match" if matches else "mismatch")
    if not matches:
        raise typer.Exit(code=1)


@app.command()
def detect(
    candidate: str = typer.Argument(..., help="The value to inspect"),
) -> None:
    """Tell if a value already looks like a hash (exit code 1 if not)."""
    if is_hash(candidate):
        typer.echo("hash")
        return
    typer.echo("plaintext")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
