"""Configuration adapter - source loading, resolution engine, display, overrides.

Contents:
    * :mod:`.properties` - Property bundle loading (javaproperties + lib_layered_config)
    * :mod:`.resolver` - One-shot active source resolution
    * :mod:`.service` - The resolution engine (DefaultConfigurationService)
    * :mod:`.file_service` - Static ConfigurationFileService implementation
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config
from .file_service import StaticConfigurationFileService
from .overrides import apply_overrides
from .service import DefaultConfigurationService

__all__ = [
    "DefaultConfigurationService",
    "StaticConfigurationFileService",
    "apply_overrides",
    "display_config",
]
