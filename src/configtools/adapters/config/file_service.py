"""Plain value implementation of the ConfigurationFileService port."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from configtools import __init__conf__


@dataclass(frozen=True, slots=True)
class StaticConfigurationFileService:
    """Configuration file and default resource fixed at construction.

    Attributes:
        config_file: Property file to load, or None to fall back to the
            environment (or the default bundle with ``CONFIG_USE_DEFAULT``).
        default_resource_name: Dotted ``package.name`` of the default bundle.

    Example:
        >>> service = StaticConfigurationFileService(Path("/etc/myapp/app.properties"), "myapp.defaultconfig")
        >>> service.get_config_file().name
        'app.properties'
        >>> service.get_default_resource_name()
        'myapp.defaultconfig'
    """

    config_file: Path | None = None
    default_resource_name: str = __init__conf__.DEFAULT_RESOURCE_NAME

    def get_config_file(self) -> Path | None:
        return self.config_file

    def get_default_resource_name(self) -> str:
        return self.default_resource_name


__all__ = ["StaticConfigurationFileService"]
