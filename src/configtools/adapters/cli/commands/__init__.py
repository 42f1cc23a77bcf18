"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info commands from :mod:`.info`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config, cli_get, cli_source
from .info import cli_info, cli_version

__all__ = [
    "cli_config",
    "cli_get",
    "cli_info",
    "cli_source",
    "cli_version",
]
