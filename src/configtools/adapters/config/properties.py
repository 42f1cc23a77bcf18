"""Property bundle loading from files and packaged resources.

Property files use the ``.properties`` format: ``=``, ``:`` or whitespace
separators, ``#`` and ``!`` comment lines, backslash line continuations and
``\\uXXXX`` escapes. They are parsed with ``javaproperties`` and wrapped in an
immutable ``lib_layered_config.Config`` whose metadata records the layer and
path each key came from.

Contents:
    * :func:`parse_properties` - Parse property text into a Config.
    * :func:`load_default_bundle` - Load ``package.name`` via importlib.resources.
    * :func:`read_file_bundle` - Load a property file from disk.
    * :func:`materialize_properties_copy` - Ensure a ``.properties`` file name.
"""

from __future__ import annotations

import atexit
import contextlib
import importlib.resources
import logging
import os
import shutil
import tempfile
from pathlib import Path

import javaproperties
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from configtools.domain.errors import FileLoadError, MissingDefaultConfigurationError
from configtools.domain.keys import PROPERTIES_SUFFIX

logger = logging.getLogger(__name__)

LAYER_DEFAULT = "default"
LAYER_FILE = "file"

_TEMP_PREFIX = "configtools"


def parse_properties(text: str, *, layer: str, path: str | None = None) -> Config:
    """Parse property text into an immutable Config with provenance.

    A key without a value maps to ``""``, which the accessors treat as absent.
    ``#`` only starts a comment at the beginning of a line; values keep quotes
    and inline ``#`` characters verbatim.

    Raises:
        ValueError: If the text holds a malformed ``\\u`` escape.

    Example:
        >>> cfg = parse_properties("a.b=1\\n# note\\nc : two # words\\n", layer="file")
        >>> cfg["a.b"], cfg["c"]
        ('1', 'two # words')
        >>> cfg.origin("a.b")["layer"]
        'file'
    """
    data: dict[str, str] = javaproperties.loads(text)
    meta: dict[str, SourceInfo] = {key: {"layer": layer, "path": path, "key": key} for key in data}
    return Config(data, meta)


def _split_resource_name(resource_name: str) -> tuple[str, str]:
    name = resource_name.strip()
    if name.endswith(PROPERTIES_SUFFIX):
        name = name[: -len(PROPERTIES_SUFFIX)]
    package, _, base = name.rpartition(".")
    if not package or not base:
        raise MissingDefaultConfigurationError(
            f"default configuration resource {resource_name!r} must be of the form 'package.name'"
        )
    return package, base


def load_default_bundle(resource_name: str | None) -> Config:
    """Load the default bundle ``<package>/<name>.properties``.

    Args:
        resource_name: Dotted resource name, e.g. ``"myapp.defaultconfig"``.

    Returns:
        Immutable Config tagged with the ``default`` layer.

    Raises:
        MissingDefaultConfigurationError: If the name is malformed, the package
            cannot be imported, or the resource is missing or unreadable.

    Example:
        >>> load_default_bundle("configtools.defaultconfig")["version"]  # doctest: +SKIP
        '1.2.0'
    """
    if not resource_name:
        raise MissingDefaultConfigurationError("no default configuration resource name supplied")
    package, base = _split_resource_name(resource_name)
    try:
        resource = importlib.resources.files(package).joinpath(base + PROPERTIES_SUFFIX)
        text = resource.read_text(encoding="utf-8")
    except (ImportError, TypeError, OSError, UnicodeDecodeError) as exc:
        raise MissingDefaultConfigurationError(
            f"default configuration resource {resource_name!r} not available: {exc}"
        ) from exc
    try:
        bundle = parse_properties(text, layer=LAYER_DEFAULT, path=str(resource))
    except ValueError as exc:
        raise MissingDefaultConfigurationError(
            f"default configuration resource {resource_name!r} is malformed: {exc}"
        ) from exc
    logger.debug("Loaded default configuration resource %s", resource_name)
    return bundle


def read_file_bundle(path: Path, *, origin: Path | None = None) -> Config:
    """Parse the property file at *path*.

    Args:
        path: File to read (possibly a renamed temporary copy).
        origin: Path reported as provenance; defaults to *path*.

    Raises:
        FileLoadError: If the file cannot be read, decoded or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8")
        return parse_properties(text, layer=LAYER_FILE, path=str(origin or path))
    except (OSError, ValueError) as exc:
        raise FileLoadError(f"cannot load configuration file {origin or path}: {exc}") from exc


def _discard(path: Path) -> None:
    with contextlib.suppress(OSError):
        path.unlink()


def materialize_properties_copy(path: Path) -> Path:
    """Return *path*, or a temporary ``.properties`` copy of it.

    Files that already carry the canonical extension are used as-is. Any
    other file is copied byte for byte; the copy is removed at interpreter
    exit and the original is never touched.

    Raises:
        FileLoadError: If the temporary copy cannot be created.
    """
    if path.name.endswith(PROPERTIES_SUFFIX):
        return path
    try:
        fd, name = tempfile.mkstemp(prefix=_TEMP_PREFIX, suffix=PROPERTIES_SUFFIX)
        os.close(fd)
        copy = Path(name)
        atexit.register(_discard, copy)
        shutil.copyfile(path, copy)
    except OSError as exc:
        raise FileLoadError(f"cannot copy configuration file {path}: {exc}") from exc
    logger.debug("Copied %s to %s", path, copy)
    return copy


__all__ = [
    "LAYER_DEFAULT",
    "LAYER_FILE",
    "load_default_bundle",
    "materialize_properties_copy",
    "parse_properties",
    "read_file_bundle",
]
