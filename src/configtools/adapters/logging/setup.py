"""Console logging initialization for CLI entry points.

Provides a single source of truth for lib_log_rich runtime configuration,
shared by module execution (``python -m configtools``) and the console script,
while ensuring initialization happens exactly once.

Contents:
    * :class:`LoggingConfigModel` - Pydantic model for the ``lib_log_rich.*`` keys.
    * :func:`init_logging` - Idempotent logging initialization.

System Role:
    Lives in the adapters layer. When the configuration routes logging to a
    file (``logfile`` + ``logpattern``) the root logger belongs to that file
    destination and the console bridge is not attached.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext

import lib_log_rich.config
import lib_log_rich.runtime
from pydantic import BaseModel, ConfigDict

from configtools import __init__conf__
from configtools.application.ports import ConfigurationService
from configtools.domain.keys import KEY_LOGFILE, KEY_LOGPATTERN

#: Flat keys read into :class:`LoggingConfigModel` (``lib_log_rich.<field>``).
LOGGING_KEY_PREFIX = "lib_log_rich."


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``lib_log_rich.*`` configuration keys.

    Example:
        >>> model = LoggingConfigModel(service="myapp", environment="staging")
        >>> model.service
        'myapp'

        >>> LoggingConfigModel().environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"
    console_level: str | None = None

    model_config = ConfigDict(extra="forbid")


def _read_logging_model(config: ConfigurationService) -> LoggingConfigModel:
    raw: dict[str, str] = {}
    for field in LoggingConfigModel.model_fields:
        value = config.get_optional_string(LOGGING_KEY_PREFIX + field)
        if value is not None:
            raw[field] = value
    return LoggingConfigModel.model_validate(raw)


def _build_runtime_config(config: ConfigurationService) -> lib_log_rich.runtime.RuntimeConfig:
    """Build RuntimeConfig from resolved configuration values.

    The service name defaults to the package name when not configured.
    """
    parsed = _read_logging_model(config)
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def file_logging_configured(config: ConfigurationService) -> bool:
    """Return True when ``logfile`` and ``logpattern`` are both set."""
    return config.get_optional_string(KEY_LOGFILE) is not None and config.get_optional_string(KEY_LOGPATTERN) is not None


def init_logging(config: ConfigurationService) -> None:
    """Initialize lib_log_rich console logging from resolved configuration.

    Safe to call multiple times: later calls return immediately once the
    runtime is initialised. Does nothing when a log file destination owns the
    root logger.

    Args:
        config: Resolved configuration carrying optional ``lib_log_rich.*`` keys.

    Side Effects:
        Loads .env files into the process environment on first invocation.
        Initializes the global lib_log_rich runtime and bridges stdlib logging.
        The root logger level stays whatever ``loglevel`` made it.
    """
    if lib_log_rich.runtime.is_initialised() or file_logging_configured(config):
        return
    lib_log_rich.config.enable_dotenv()
    runtime_config = _build_runtime_config(config)
    lib_log_rich.runtime.init(runtime_config)
    lib_log_rich.runtime.attach_std_logging(logger_level=None)


def command_scope(job_id: str, extra: dict[str, object]) -> AbstractContextManager[object]:
    """Return ``lib_log_rich.runtime.bind(...)`` when the runtime is up.

    The runtime is not initialised when a log file owns the root logger or
    when tests wire the no-op initializer; commands then run unbound.
    """
    if lib_log_rich.runtime.is_initialised():
        return lib_log_rich.runtime.bind(job_id=job_id, extra=extra)
    return nullcontext()


__all__ = [
    "LOGGING_KEY_PREFIX",
    "LoggingConfigModel",
    "command_scope",
    "file_logging_configured",
    "init_logging",
]
