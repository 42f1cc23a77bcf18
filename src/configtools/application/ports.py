"""Application ports - Protocol definitions for adapters and collaborators.

Callable ports (``CreateConfigurationService``, ``InitLogging``,
``DisplayConfig``) define a ``__call__`` whose signature matches the adapter
function, so module-level functions satisfy them via structural subtyping
(PEP 544). Object ports (``ConfigurationFileService``, ``LogSinkController``,
``ConfigurationService``) describe the collaborators of the resolution engine.

System Role:
    Sits between domain and adapters. Adapter types are imported under
    ``TYPE_CHECKING`` only so the layer contracts hold at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.enums import LogLevel, OutputFormat
from ..domain.sources import ActiveSource


@runtime_checkable
class ConfigurationFileService(Protocol):
    """Supplies the configuration file and the default resource name."""

    def get_config_file(self) -> Path | None:
        """Return the configuration file to use, or None when there is none."""
        ...

    def get_default_resource_name(self) -> str:
        """Return the dotted resource name of the default bundle (``package.name``)."""
        ...


@runtime_checkable
class LogSinkController(Protocol):
    """Process-wide logging capability driven by the reserved log keys."""

    def set_level(self, level: LogLevel) -> None:
        """Set the global root log level."""
        ...

    def replace_file_destination(self, path: Path, pattern: str) -> None:
        """Replace every root destination with a daily rotating file."""
        ...


class ConfigurationService(Protocol):
    """Typed read access to resolved configuration values."""

    def get_version(self) -> str: ...

    def get_string(self, key: str) -> str: ...

    def get_long(self, key: str) -> int: ...

    def get_int(self, key: str) -> int: ...

    def get_double(self, key: str) -> float: ...

    def get_boolean(self, key: str) -> bool: ...

    def get_optional_string(self, key: str) -> str | None: ...

    def get_optional_long(self, key: str) -> int | None: ...

    def get_optional_int(self, key: str) -> int | None: ...

    def get_optional_double(self, key: str) -> float | None: ...

    def get_optional_boolean(self, key: str) -> bool | None: ...


class OverridableConfigurationService(ConfigurationService, Protocol):
    """Configuration service that also accepts runtime overrides."""

    @property
    def active_source(self) -> ActiveSource: ...

    def override_parameter(self, key: str, value: str | None) -> None: ...

    def snapshot(self) -> Mapping[str, tuple[str, str]]: ...


class CreateConfigurationService(Protocol):
    """Build a resolution engine for the given file service."""

    def __call__(self, file_service: ConfigurationFileService) -> OverridableConfigurationService: ...


class InitLogging(Protocol):
    """Initialize console logging from resolved configuration."""

    def __call__(self, config: ConfigurationService) -> None: ...


class DisplayConfig(Protocol):
    """Display resolved configuration in the requested format."""

    def __call__(self, config: OverridableConfigurationService, *, output_format: OutputFormat = ...) -> None: ...


__all__ = [
    "ConfigurationFileService",
    "ConfigurationService",
    "CreateConfigurationService",
    "DisplayConfig",
    "InitLogging",
    "LogSinkController",
    "OverridableConfigurationService",
]
