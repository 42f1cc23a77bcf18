"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Property bundles, source resolution, the engine and display
    * :mod:`.logging` - Root-logger sink and lib_log_rich setup
    * :mod:`.memory` - In-memory spies for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
