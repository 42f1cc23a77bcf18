"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.service import DefaultConfigurationService

# Logging services
from ..adapters.logging.setup import init_logging
from ..adapters.logging.sink import StdlibLogSinkController

if TYPE_CHECKING:
    from ..adapters.memory.logging import LogSinkSpy
    from ..application.ports import (
        ConfigurationFileService,
        CreateConfigurationService,
        DisplayConfig,
        InitLogging,
    )


def create_configuration_service(file_service: ConfigurationFileService) -> DefaultConfigurationService:
    """Build the production engine: process environment and the root logger."""
    return DefaultConfigurationService(file_service, log_sink=StdlibLogSinkController())


# Static conformance assertions: pyright checks that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    _assert_create_configuration_service: CreateConfigurationService = create_configuration_service
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    create_configuration_service: CreateConfigurationService
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        create_configuration_service=create_configuration_service,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing(*, spy: LogSinkSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional LogSinkSpy capturing the engine's logging side effects.
            When None, a fresh LogSinkSpy is created. Pass your own spy to
            assert on the captured calls in tests.

    Returns:
        AppServices container with in-memory adapters. The engine sees an
        empty environment, and rendering goes through the real display so
        CLI output can still be asserted on.
    """
    from ..adapters.memory import (
        LogSinkSpy,
        create_configuration_service_in_memory,
        init_logging_in_memory,
    )

    sink_spy = spy if spy is not None else LogSinkSpy()

    def _create(file_service: ConfigurationFileService) -> DefaultConfigurationService:
        return create_configuration_service_in_memory(file_service, spy=sink_spy)

    return AppServices(
        create_configuration_service=_create,
        display_config=display_config,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "create_configuration_service",
    "display_config",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
