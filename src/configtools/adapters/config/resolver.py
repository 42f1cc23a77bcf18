"""Source resolution run once when a configuration service is built.

Loads the mandatory default bundle, then picks the single active source:
the configuration file when one exists, otherwise the default bundle when
``CONFIG_USE_DEFAULT`` is set, otherwise the process environment.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from lib_layered_config import Config

from configtools.application.ports import ConfigurationFileService
from configtools.domain.keys import ENV_USE_DEFAULT, KEY_VERSION
from configtools.domain.sources import ActiveSource, FileBundle, describe, select_source, shadows_version

from .properties import load_default_bundle, materialize_properties_copy, read_file_bundle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedSources:
    """Outcome of source resolution: the default bundle and the active source."""

    default_bundle: Config
    active: ActiveSource


def _load_file_source(config_file: Path | None) -> FileBundle | None:
    if config_file is None:
        logger.warning("No configuration file available")
        return None
    if not config_file.exists():
        logger.warning("Configuration file %s not found", config_file.absolute())
        return None
    readable = materialize_properties_copy(config_file)
    logger.debug("Loading configuration from %s", config_file)
    return FileBundle(read_file_bundle(readable, origin=config_file), config_file)


def _use_default_requested(environ: Mapping[str, str]) -> bool:
    return bool(environ.get(ENV_USE_DEFAULT))


def resolve_sources(file_service: ConfigurationFileService, environ: Mapping[str, str]) -> ResolvedSources:
    """Load the default bundle and select the active source.

    Args:
        file_service: Supplies the configuration file and default resource name.
        environ: Environment mapping consulted for ``CONFIG_USE_DEFAULT`` and,
            when no file is available, for ordinary lookups.

    Returns:
        The default bundle together with the chosen active source.

    Raises:
        MissingDefaultConfigurationError: If the default resource cannot be loaded.
        FileLoadError: If the configuration file exists but cannot be copied or read.
    """
    default_bundle = load_default_bundle(file_service.get_default_resource_name())
    file_source = _load_file_source(file_service.get_config_file())
    active = select_source(
        file_bundle=file_source,
        default_bundle=default_bundle,
        environ=environ,
        use_default=_use_default_requested(environ),
    )
    if file_source is None:
        logger.warning("Using %s", describe(active))

    if shadows_version(active):
        logger.warning("'%s' is defined in %s; its value will be ignored", KEY_VERSION, describe(active))

    return ResolvedSources(default_bundle=default_bundle, active=active)


__all__ = ["ResolvedSources", "resolve_sources"]
