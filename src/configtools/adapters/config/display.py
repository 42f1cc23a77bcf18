"""Display resolved configuration in human-readable or JSON form.

Flushes pending lib_log_rich output first so log lines do not interleave
with the configuration dump.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
import rich_click as click

from configtools.application.ports import OverridableConfigurationService
from configtools.domain.enums import OutputFormat


def render_config(config: OverridableConfigurationService, *, output_format: OutputFormat = OutputFormat.HUMAN) -> str:
    """Render ``config.snapshot()`` as text.

    Human output is one ``key = value  # layer`` line per entry; JSON output
    maps each key to ``{"value": ..., "layer": ...}``.
    """
    entries = config.snapshot()
    if output_format is OutputFormat.JSON:
        payload = {key: {"value": value, "layer": layer} for key, (value, layer) in entries.items()}
        return orjson.dumps(payload, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS).decode("utf-8")
    return "\n".join(f"{key} = {value}  # {layer}" for key, (value, layer) in entries.items())


def display_config(config: OverridableConfigurationService, *, output_format: OutputFormat = OutputFormat.HUMAN) -> None:
    """Write the rendered configuration to stdout.

    Side Effects:
        Flushes pending log messages before display.
        Writes formatted configuration to stdout.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    rendered = render_config(config, output_format=output_format)
    if rendered:
        click.echo(rendered)


__all__ = ["display_config", "render_config"]
