"""Static package metadata surfaced to CLI commands and documentation.

The values mirror ``pyproject.toml``; the version line is kept in sync on
every release bump.
"""

from __future__ import annotations

name = "configtools"
title = "Prioritized configuration resolution with typed accessors and logging hooks"
version = "1.2.0"
homepage = "https://github.com/vito-rma/configtools"
author = "VITO RMA"
author_email = "rma@vito.be"
shell_command = "configtools"

#: Resource name of the default bundle shipped inside this package.
DEFAULT_RESOURCE_NAME = "configtools.defaultconfig"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for configtools:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "DEFAULT_RESOURCE_NAME",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
