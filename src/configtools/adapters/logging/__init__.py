"""Logging adapter - root logger control and lib_log_rich setup.

Contents:
    * :class:`.sink.StdlibLogSinkController` - Applies loglevel/logfile/logpattern
    * :func:`.setup.init_logging` - Idempotent console logging initialization
"""

from __future__ import annotations

from .setup import init_logging
from .sink import StdlibLogSinkController

__all__ = ["StdlibLogSinkController", "init_logging"]
