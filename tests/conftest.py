"""Shared pytest fixtures for engine, logging and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import importlib
import logging
import re
import sys
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from configtools.adapters.config.file_service import StaticConfigurationFileService
from configtools.adapters.config.service import DefaultConfigurationService
from configtools.adapters.memory import LogSinkSpy

if TYPE_CHECKING:
    from configtools.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

DEFAULTS_PACKAGE = "configtools_testdefaults"
DEFAULT_VERSION = "1.0.0-test"

#: Content of ``<DEFAULTS_PACKAGE>/defaultconfig.properties``.
DEFAULT_BUNDLE_TEXT = f"""\
# test default bundle
version={DEFAULT_VERSION}
value.string=default string
value.long=42
value.boolean=false
default.only=from the default bundle
"""

#: Content of the scenario configuration file (deliberately not ``.properties``).
SCENARIO_CFG_TEXT = """\
value.string=This is a test
value.long=123456
value.int=123
value.double=1.235894
value.boolean=true
value.blank=
version=ignored
"""


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@dataclass(frozen=True)
class DefaultsPackage:
    """Importable package holding the test default bundles.

    Attributes:
        resource: ``package.name`` of the bundle carrying ``version``.
        versionless_resource: ``package.name`` of a bundle without ``version``.
        missing_resource: ``package.name`` whose file does not exist.
        version: Value of ``version`` in :attr:`resource`.
    """

    resource: str
    versionless_resource: str
    missing_resource: str
    version: str


@pytest.fixture(scope="session")
def defaults_package(tmp_path_factory: pytest.TempPathFactory) -> Iterator[DefaultsPackage]:
    """Create an importable package with default bundles for the whole session.

    Example:
        def test_version(defaults_package: DefaultsPackage) -> None:
            assert defaults_package.version == "1.0.0-test"
    """
    root = tmp_path_factory.mktemp("defaults")
    package_dir = root / DEFAULTS_PACKAGE
    package_dir.mkdir()
    (package_dir / "__init__.py").write_text('"""Default bundles for the configtools tests."""\n', encoding="utf-8")
    (package_dir / "defaultconfig.properties").write_text(DEFAULT_BUNDLE_TEXT, encoding="utf-8")
    (package_dir / "versionless.properties").write_text("value.string=no version here\n", encoding="utf-8")

    sys.path.insert(0, str(root))
    importlib.invalidate_caches()
    try:
        yield DefaultsPackage(
            resource=f"{DEFAULTS_PACKAGE}.defaultconfig",
            versionless_resource=f"{DEFAULTS_PACKAGE}.versionless",
            missing_resource=f"{DEFAULTS_PACKAGE}.absent",
            version=DEFAULT_VERSION,
        )
    finally:
        sys.path.remove(str(root))
        sys.modules.pop(DEFAULTS_PACKAGE, None)


@pytest.fixture
def scenario_cfg(tmp_path: Path) -> Path:
    """Write the scenario configuration file and return its path.

    The ``.cfg`` extension forces the engine through its temporary
    ``.properties`` copy.
    """
    path = tmp_path / "settings.cfg"
    path.write_text(SCENARIO_CFG_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def write_properties(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing *text* into ``tmp_path / name``."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_sink_spy() -> LogSinkSpy:
    """Provide a fresh LogSinkSpy per test."""
    return LogSinkSpy()


@pytest.fixture
def engine_factory(
    defaults_package: DefaultsPackage,
    log_sink_spy: LogSinkSpy,
) -> Callable[..., DefaultConfigurationService]:
    """Return a builder for engines wired to the spy and an explicit environment.

    Keyword arguments:
        config_file: Configuration file or None.
        environ: Environment mapping (defaults to empty).
        resource: Default resource name (defaults to the test bundle).

    Example:
        def test_lookup(engine_factory, scenario_cfg) -> None:
            engine = engine_factory(config_file=scenario_cfg)
            assert engine.get_int("value.int") == 123
    """

    def _build(
        *,
        config_file: Path | None = None,
        environ: Mapping[str, str] | None = None,
        resource: str | None = None,
    ) -> DefaultConfigurationService:
        file_service = StaticConfigurationFileService(
            config_file=config_file,
            default_resource_name=resource if resource is not None else defaults_package.resource,
        )
        return DefaultConfigurationService(
            file_service,
            log_sink=log_sink_spy,
            environ=environ if environ is not None else {},
        )

    return _build


@pytest.fixture
def isolated_root_logger() -> Iterator[logging.Logger]:
    """Restore the root logger level and close handlers added by the test.

    Handlers that were present before the test and removed by the engine are
    owned by pytest's logging plugin, which detaches them itself.
    """
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        yield root
    finally:
        for handler in list(root.handlers):
            if handler not in previous_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(previous_level)


@pytest.fixture
def without_use_default(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure ``CONFIG_USE_DEFAULT`` is absent from the process environment."""
    monkeypatch.delenv("CONFIG_USE_DEFAULT", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output (e.g., JSON parsing) so messages
    on stderr do not contaminate it.
    """
    return CliRunner()


@dataclass
class CliHarness:
    """Services factory plus the log sink spy it is wired to."""

    factory: Callable[[], AppServices]
    spy: LogSinkSpy


@pytest.fixture
def cli_harness() -> CliHarness:
    """Provide in-memory services for CLI invocation and their spy.

    The engine sees an empty environment and records log side effects on
    the spy instead of the root logger.

    Example:
        def test_get(cli_runner, cli_harness, defaults_package) -> None:
            result = cli_runner.invoke(
                cli, ["--default-resource", defaults_package.resource, "version"], obj=cli_harness.factory
            )
            assert result.exit_code == 0
    """
    from configtools.composition import build_testing

    spy = LogSinkSpy()
    services = build_testing(spy=spy)
    return CliHarness(factory=lambda: services, spy=spy)


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from configtools.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)
