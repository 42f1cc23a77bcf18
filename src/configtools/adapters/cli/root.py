"""Root CLI command group and global option handling.

Defines the top-level Click command group that serves as the entry point for
all subcommands. Handles global flags like --config, --default-resource,
--set and --traceback.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import rich_click as click

from configtools import __init__conf__
from configtools.adapters.config.file_service import StaticConfigurationFileService
from configtools.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from configtools.application.ports import OverridableConfigurationService
    from configtools.composition import AppServices


def _apply_cli_overrides(config: OverridableConfigurationService, set_overrides: tuple[str, ...]) -> None:
    """Apply ``--set`` overrides, raising UsageError on failure.

    Raises:
        click.UsageError: If any override string is malformed or targets
            ``version``, or if a logging key receives an invalid value.
    """
    try:
        apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (key=value). Without it, environment variables are used.",
)
@click.option(
    "--default-resource",
    type=str,
    default=__init__conf__.DEFAULT_RESOURCE_NAME,
    show_default=True,
    help="Dotted name of the bundled default configuration (package.name)",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="KEY=VALUE",
    help="Override a configuration parameter (repeatable).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    config_file: Path | None,
    default_resource: str,
    set_overrides: tuple[str, ...],
) -> None:
    """Root command resolving configuration once for all subcommands.

    Builds the configuration service, applies any ``--set`` overrides and
    stores it in the Click context. Mirrors the traceback flag into
    ``lib_cli_exit_tools.config`` so downstream helpers observe the preference.
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    apply_traceback_preferences(traceback)
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    file_service = StaticConfigurationFileService(config_file=config_file, default_resource_name=default_resource)
    config = services.create_configuration_service(file_service)
    _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import required to break a circular dependency: this module defines
# the ``cli`` group, commands register themselves onto it, and those command
# modules import from package ancestors. This is the standard Click pattern.
def _register_commands() -> None:
    from .commands import cli_config, cli_get, cli_info, cli_source, cli_version

    for cmd in (cli_info, cli_version, cli_get, cli_source, cli_config):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
