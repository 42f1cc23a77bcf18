"""Application layer - port definitions.

Contains the protocols that the resolution engine depends on and that
adapter implementations satisfy.

Contents:
    * :mod:`.ports` - Protocol definitions for collaborators and adapter functions
"""

from __future__ import annotations

from .ports import (
    ConfigurationFileService,
    ConfigurationService,
    CreateConfigurationService,
    DisplayConfig,
    InitLogging,
    LogSinkController,
    OverridableConfigurationService,
)

__all__ = [
    "ConfigurationFileService",
    "ConfigurationService",
    "CreateConfigurationService",
    "DisplayConfig",
    "InitLogging",
    "LogSinkController",
    "OverridableConfigurationService",
]
