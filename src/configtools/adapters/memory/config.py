"""In-memory configuration adapters for testing.

Provide functions satisfying the same Protocols as the production adapters
but isolated from the process: the engine sees an empty environment and a
:class:`LogSinkSpy` instead of the root logger.
"""

from __future__ import annotations

from collections.abc import Mapping

from configtools.adapters.config.service import DefaultConfigurationService
from configtools.application.ports import ConfigurationFileService, OverridableConfigurationService
from configtools.domain.enums import OutputFormat

from .logging import LogSinkSpy


def create_configuration_service_in_memory(
    file_service: ConfigurationFileService,
    *,
    spy: LogSinkSpy | None = None,
    environ: Mapping[str, str] | None = None,
) -> DefaultConfigurationService:
    """Build an engine wired to a spy sink and an explicit (default empty) environment."""
    return DefaultConfigurationService(
        file_service,
        log_sink=spy if spy is not None else LogSinkSpy(),
        environ=environ if environ is not None else {},
    )


def display_config_in_memory(
    config: OverridableConfigurationService,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


__all__ = [
    "create_configuration_service_in_memory",
    "display_config_in_memory",
]
