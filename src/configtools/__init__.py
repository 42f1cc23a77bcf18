"""Public package surface exposing the resolution engine and metadata.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: errors and log levels
- Adapter exports: the resolution engine and its file service
- Composition exports: the production factory
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.config.file_service import StaticConfigurationFileService
from .adapters.config.service import DefaultConfigurationService

# Composition exports (wired adapters)
from .composition import create_configuration_service

# Domain exports
from .domain.enums import LogLevel, SourceKind
from .domain.errors import (
    ConfigurationError,
    FileLoadError,
    InvalidLogLevelError,
    InvalidOverrideError,
    LogConfigurationError,
    MissingDefaultConfigurationError,
    ParseError,
    RequiredKeyMissingError,
)

__all__ = [
    "ConfigurationError",
    "DefaultConfigurationService",
    "FileLoadError",
    "InvalidLogLevelError",
    "InvalidOverrideError",
    "LogConfigurationError",
    "LogLevel",
    "MissingDefaultConfigurationError",
    "ParseError",
    "RequiredKeyMissingError",
    "SourceKind",
    "StaticConfigurationFileService",
    "create_configuration_service",
    "print_info",
]
