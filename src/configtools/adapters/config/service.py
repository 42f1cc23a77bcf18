"""Configuration resolution engine.

:class:`DefaultConfigurationService` resolves its sources once at
construction and then answers typed lookups. The override layer is checked
first, then the active source. ``version`` is read from the default bundle
only and can never be overridden.

Reserved keys:
    loglevel
        Root log level: all, trace, debug, info, warn, error or off.
    logfile
        Log to this file with daily rotation (``<logfile>.YYYY-MM-DD``).
    logpattern
        ``%``-style pattern for the log file, required with ``logfile``.
        For example ``%(asctime)s %(levelname)-5s %(name)s - %(message)s``.
    version
        Reported by :meth:`DefaultConfigurationService.get_version`. Always
        fetched from the default bundle; a value in the file or environment
        is ignored.

Overrides must be used with care: they can cause counterintuitive behaviour
for code that already read a value.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping
from pathlib import Path

from lib_layered_config import Config

from configtools.application.ports import ConfigurationFileService, LogSinkController
from configtools.domain.coercion import parse_boolean, parse_double, parse_int, parse_long
from configtools.domain.enums import LogLevel, SourceKind
from configtools.domain.errors import ConfigurationError, InvalidOverrideError, RequiredKeyMissingError
from configtools.domain.keys import (
    KEY_LOGFILE,
    KEY_LOGLEVEL,
    KEY_LOGPATTERN,
    KEY_VERSION,
    LOG_FILE_KEYS,
    is_version_key,
    normalize_value,
)
from configtools.domain.sources import ActiveSource, EnvironmentBacked, FileBundle, bundle_value, lookup

from ..logging.sink import StdlibLogSinkController
from .resolver import resolve_sources

logger = logging.getLogger(__name__)

LAYER_OVERRIDE = "override"


class DefaultConfigurationService:
    """Resolve configuration values from overrides, file, environment or defaults.

    Args:
        file_service: Supplies the configuration file and default resource name.
        log_sink: Receives the log level and log file side effects. Defaults to
            the stdlib root-logger controller.
        environ: Environment mapping; defaults to ``os.environ``.

    Raises:
        MissingDefaultConfigurationError: The default resource is unavailable.
        FileLoadError: The configuration file exists but cannot be loaded.
        InvalidLogLevelError: ``loglevel`` holds an unknown level.
        LogConfigurationError: The log file destination cannot be built.

    Example:
        >>> from configtools.adapters.config.file_service import StaticConfigurationFileService
        >>> from configtools.adapters.memory import LogSinkSpy
        >>> service = DefaultConfigurationService(
        ...     StaticConfigurationFileService(None, "configtools.defaultconfig"),
        ...     log_sink=LogSinkSpy(),
        ...     environ={"DATABASE_URL": "postgres://db"},
        ... )  # doctest: +SKIP
        >>> service.get_string("database.url")  # doctest: +SKIP
        'postgres://db'
    """

    def __init__(
        self,
        file_service: ConfigurationFileService,
        *,
        log_sink: LogSinkController | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._log_sink: LogSinkController = log_sink if log_sink is not None else StdlibLogSinkController()
        self._overrides: dict[str, str] = {}
        self._lock = threading.RLock()

        try:
            resolved = resolve_sources(file_service, environ if environ is not None else os.environ)
            self._default_bundle: Config = resolved.default_bundle
            self._active: ActiveSource = resolved.active
            self._configure_log_level()
            self._configure_log_file()
        except ConfigurationError as exc:
            logger.error("Configuration initialisation failed: %s", exc)
            raise

    # ------------------------------------------------------------------ state

    @property
    def active_source(self) -> ActiveSource:
        """The source chosen at construction; never changes afterwards."""
        return self._active

    @property
    def source_kind(self) -> SourceKind:
        return self._active.kind

    @property
    def default_bundle(self) -> Config:
        return self._default_bundle

    @property
    def overrides(self) -> Mapping[str, str]:
        """Read-only copy of the current overrides."""
        return dict(self._overrides)

    def snapshot(self) -> dict[str, tuple[str, str]]:
        """Return ``key -> (value, layer)`` for every enumerable value.

        Bundle-backed sources list all their keys; the environment cannot be
        enumerated meaningfully, so only overrides appear for it. Blank values
        are left out, matching lookup semantics.
        """
        entries: dict[str, tuple[str, str]] = {}
        active = self._active
        if not isinstance(active, EnvironmentBacked):
            layer = active.kind.value
            for key in active.bundle:
                value = bundle_value(active.bundle, key)
                if value is not None:
                    entries[key] = (value, layer)
        for key, raw in self._overrides.items():
            value = normalize_value(raw)
            if value is not None:
                entries[key] = (value, LAYER_OVERRIDE)
        return dict(sorted(entries.items()))

    # ---------------------------------------------------------------- lookups

    def _lookup(self, key: str) -> str | None:
        override = self._overrides.get(key)
        if override is not None:
            return override
        return lookup(self._active, key)

    def get_optional_string(self, key: str) -> str | None:
        """Return the trimmed value of *key*, or None when absent or blank.

        Any failure while looking the key up counts as "no value".
        """
        try:
            raw = self._lookup(key)
        except Exception:  # noqa: BLE001
            logger.debug("Lookup of %s failed; treating as absent", key, exc_info=True)
            return None
        return normalize_value(raw)

    def get_string(self, key: str) -> str:
        """Return the value of *key*.

        Raises:
            RequiredKeyMissingError: If *key* has no value.
        """
        value = self.get_optional_string(key)
        if value is None:
            error = RequiredKeyMissingError.for_key(key)
            logger.error(str(error))
            raise error
        return value

    def get_version(self) -> str:
        """Return ``version`` from the default bundle, ignoring every other source.

        Raises:
            RequiredKeyMissingError: If the default bundle has no version.
        """
        value = bundle_value(self._default_bundle, KEY_VERSION)
        if value is None:
            error = RequiredKeyMissingError.for_key(KEY_VERSION)
            logger.error(str(error))
            raise error
        return value

    def get_long(self, key: str) -> int:
        return parse_long(self.get_string(key), key)

    def get_int(self, key: str) -> int:
        return parse_int(self.get_string(key), key)

    def get_double(self, key: str) -> float:
        return parse_double(self.get_string(key), key)

    def get_boolean(self, key: str) -> bool:
        return parse_boolean(self.get_string(key))

    def get_optional_long(self, key: str) -> int | None:
        value = self.get_optional_string(key)
        return None if value is None else parse_long(value, key)

    def get_optional_int(self, key: str) -> int | None:
        value = self.get_optional_string(key)
        return None if value is None else parse_int(value, key)

    def get_optional_double(self, key: str) -> float | None:
        value = self.get_optional_string(key)
        return None if value is None else parse_double(value, key)

    def get_optional_boolean(self, key: str) -> bool | None:
        value = self.get_optional_string(key)
        return None if value is None else parse_boolean(value)

    # -------------------------------------------------------------- overrides

    def override_parameter(self, key: str, value: str | None) -> None:
        """Set (or, with ``None``, remove) an override for *key*.

        Overriding ``loglevel`` re-applies the log level; overriding ``logfile``
        or ``logpattern`` re-applies the log file destination. Calls are
        serialised so destination swaps never interleave. When the logging
        side effect fails, the previous override is restored before the error
        propagates.

        Raises:
            InvalidOverrideError: If *key* is ``version`` in any letter case.
            InvalidLogLevelError: If the new ``loglevel`` is unknown.
            LogConfigurationError: If the new log file destination is invalid.
        """
        if is_version_key(key):
            raise InvalidOverrideError(f"Cannot override {KEY_VERSION} parameter")
        with self._lock:
            previous = self._overrides.get(key)
            self._store_override(key, value)
            logger.debug("Overrode configuration parameter %s", key)
            try:
                if key == KEY_LOGLEVEL:
                    self._configure_log_level()
                elif key in LOG_FILE_KEYS:
                    self._configure_log_file()
            except ConfigurationError:
                self._store_override(key, previous)
                raise

    def _store_override(self, key: str, value: str | None) -> None:
        if value is None:
            self._overrides.pop(key, None)
        else:
            self._overrides[key] = value

    # ---------------------------------------------------------------- logging

    def _configure_log_level(self) -> None:
        raw = self.get_optional_string(KEY_LOGLEVEL)
        if raw is None:
            return
        self._log_sink.set_level(LogLevel.parse(raw))

    def _configure_log_file(self) -> None:
        logfile = self.get_optional_string(KEY_LOGFILE)
        pattern = self.get_optional_string(KEY_LOGPATTERN)
        if logfile is None or pattern is None:
            return
        self._log_sink.replace_file_destination(Path(logfile), pattern)

    def __repr__(self) -> str:
        active = self._active
        where = f" {active.path}" if isinstance(active, FileBundle) else ""
        return f"<{type(self).__name__} source={active.kind.value}{where} overrides={len(self._overrides)}>"


__all__ = ["LAYER_OVERRIDE", "DefaultConfigurationService"]
