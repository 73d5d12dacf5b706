"""
debug_trace.py

Category-tagged trace lines for the import/save/load flow and crashes.

Tracing is off until configure() is called with the ``[debug]`` settings.
Lines go to stderr and, when a log file is configured, are appended there
too. ``CRASH`` lines are written even while tracing is off so the
excepthook in main.py always leaves a record.
"""

from __future__ import annotations

import sys
import traceback
from datetime import datetime
from functools import wraps
from typing import Callable, Optional, TextIO

ALWAYS_ON = {"CRASH"}


class _TraceSink:
    """Where trace lines go: stderr plus an optional append-mode log file."""

    def __init__(self):
        self.enabled = False
        self.log_path: Optional[str] = None
        self._handle: Optional[TextIO] = None

    def wants(self, category: str) -> bool:
        return self.enabled or category in ALWAYS_ON

    def write(self, line: str) -> None:
        print(line, file=sys.stderr, flush=True)
        handle = self._open()
        if handle is not None:
            handle.write(line + "\n")
            handle.flush()

    def _open(self) -> Optional[TextIO]:
        if self._handle is None and self.log_path:
            try:
                self._handle = open(self.log_path, "a", encoding="utf-8")
            except OSError as e:
                # Fall back to stderr only and stop retrying
                print(f"debug_trace: cannot open {self.log_path}: {e}", file=sys.stderr)
                self.log_path = None
        return self._handle

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None


_sink = _TraceSink()


def configure(enabled: bool, log_file: str = "") -> None:
    """Apply the ``[debug]`` settings (trace flag and optional log file)."""
    _sink.close()
    _sink.enabled = bool(enabled)
    _sink.log_path = log_file or None


def is_enabled() -> bool:
    return _sink.enabled


def trace(msg: str, category: str = "INFO") -> None:
    if not _sink.wants(category):
        return
    stamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
    _sink.write(f"[{stamp}] [{category}] {msg}")


def trace_exception(msg: str = "Exception") -> None:
    """Trace the exception currently being handled, with its traceback."""
    trace(f"{msg}: {traceback.format_exc()}", "ERROR")


def trace_call(category: str = "CALL") -> Callable:
    """Decorator tracing entry, exit and exceptions of a handler."""
    def decorator(func):
        name = func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            if not _sink.enabled:
                return func(*args, **kwargs)
            trace(f">>> {name}", category)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                trace(f"!!! {name} raised {type(e).__name__}: {e}", "ERROR")
                raise
            trace(f"<<< {name}", category)
            return result
        return wrapper
    return decorator


def close_log() -> None:
    _sink.close()
