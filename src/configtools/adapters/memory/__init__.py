"""In-memory adapter implementations for testing.

Provides lightweight implementations of the application ports that never
touch the root logger, the process environment or the console.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - LogSinkSpy and the no-op logging initializer
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import create_configuration_service_in_memory, display_config_in_memory
from .logging import LogSinkSpy, init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from configtools.application.ports import CreateConfigurationService, DisplayConfig, InitLogging, LogSinkController

    _assert_create_configuration_service: CreateConfigurationService = create_configuration_service_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_log_sink: LogSinkController = LogSinkSpy()

__all__ = [
    "LogSinkSpy",
    "create_configuration_service_in_memory",
    "display_config_in_memory",
    "init_logging_in_memory",
]
