"""Configuration inspection CLI commands.

Contents:
    * :func:`cli_get` - Print a single typed configuration value.
    * :func:`cli_source` - Print which source answers lookups.
    * :func:`cli_config` - Display the enumerable configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import rich_click as click

from configtools.adapters.logging.setup import command_scope
from configtools.application.ports import ConfigurationService
from configtools.domain.enums import OutputFormat, ValueType
from configtools.domain.errors import ConfigurationError
from configtools.domain.sources import describe

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_Getter = Callable[[ConfigurationService, str], object]

_REQUIRED_GETTERS: dict[ValueType, _Getter] = {
    ValueType.STRING: lambda config, key: config.get_string(key),
    ValueType.LONG: lambda config, key: config.get_long(key),
    ValueType.INT: lambda config, key: config.get_int(key),
    ValueType.DOUBLE: lambda config, key: config.get_double(key),
    ValueType.BOOLEAN: lambda config, key: config.get_boolean(key),
}

_OPTIONAL_GETTERS: dict[ValueType, _Getter] = {
    ValueType.STRING: lambda config, key: config.get_optional_string(key),
    ValueType.LONG: lambda config, key: config.get_optional_long(key),
    ValueType.INT: lambda config, key: config.get_optional_int(key),
    ValueType.DOUBLE: lambda config, key: config.get_optional_double(key),
    ValueType.BOOLEAN: lambda config, key: config.get_optional_boolean(key),
}


def format_value(value: object) -> str:
    """Render a typed value for terminal output.

    Example:
        >>> format_value(True)
        'true'
        >>> format_value(None)
        ''
        >>> format_value(1.5)
        '1.5'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@click.command("get", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("key")
@click.option(
    "--type",
    "value_type",
    type=click.Choice([t.value for t in ValueType], case_sensitive=False),
    default=ValueType.STRING.value,
    show_default=True,
    help="Interpret the value as this type",
)
@click.option(
    "--optional",
    is_flag=True,
    default=False,
    help="Print nothing instead of failing when the key is absent",
)
@click.pass_context
def cli_get(ctx: click.Context, key: str, value_type: str, optional: bool) -> None:
    """Print the resolved value of KEY.

    Overrides given with ``--set`` win over the configuration file, the
    environment and the default configuration.
    """
    cli_ctx = get_cli_context(ctx)
    kind = ValueType(value_type.lower())
    getters = _OPTIONAL_GETTERS if optional else _REQUIRED_GETTERS

    extra: dict[str, object] = {"command": "get", "key": key, "type": kind.value, "optional": optional}
    with command_scope("cli-get", extra):
        logger.debug("Reading configuration parameter %s as %s", key, kind.value)
        try:
            value = getters[kind](cli_ctx.config, key)
        except ConfigurationError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        if value is not None:
            click.echo(format_value(value))


@click.command("source", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_source(ctx: click.Context) -> None:
    """Print the source chosen at start-up: file, environment or default."""
    cli_ctx = get_cli_context(ctx)
    active = cli_ctx.config.active_source
    with command_scope("cli-source", {"command": "source", "source": active.kind.value}):
        click.echo(f"{active.kind.value}: {describe(active)}")


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str) -> None:
    """Display the resolved configuration with the layer of every value.

    Shows the entries of the configuration file or default configuration,
    followed by ``--set`` overrides. Environment variables are not listed.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())

    with command_scope("cli-config", {"command": "config", "format": fmt.value}):
        logger.info("Displaying configuration", extra={"format": fmt.value})
        cli_ctx.services.display_config(cli_ctx.config, output_format=fmt)


__all__ = ["cli_config", "cli_get", "cli_source", "format_value"]
