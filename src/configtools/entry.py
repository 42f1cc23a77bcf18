"""Console script entry point with production wiring.

Sits at package level (outside adapters) so composition can be wired into
the CLI without the adapters layer importing it.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``configtools`` with production services and return the exit code."""
    return cli_main(argv, services_factory=build_production)


__all__ = ["main"]
