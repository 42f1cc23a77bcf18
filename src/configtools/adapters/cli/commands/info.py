"""Metadata CLI commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_version` - Display the version from the default configuration.
"""

from __future__ import annotations

import logging

import rich_click as click

from configtools import __init__conf__
from configtools.adapters.logging.setup import command_scope
from configtools.domain.errors import RequiredKeyMissingError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with command_scope("cli-info", {"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("version", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_version(ctx: click.Context) -> None:
    """Print the ``version`` entry of the default configuration.

    The value never comes from the configuration file, the environment or
    ``--set``; only the bundled default is consulted.
    """
    cli_ctx = get_cli_context(ctx)
    with command_scope("cli-version", {"command": "version"}):
        try:
            click.echo(cli_ctx.config.get_version())
        except RequiredKeyMissingError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc


__all__ = ["cli_info", "cli_version"]
