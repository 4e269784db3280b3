# uiauto_electron/timinglogger.py
"""
@file timinglogger.py
@brief Poll events (wait start, success, timeout, settle changes).
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

from .logsink import OptInLog

_LEVELS = {
    "info": logging.INFO,
    "success": logging.DEBUG,
    "error": logging.WARNING,
}


class TimingLogger(OptInLog):
    """
    Opt-in record of every poll a page object runs, e.g.

        [error] [timing] time=12:00:01 event=wait_timeout description=element '.monaco-list' to exist attempts=51

    Useful to size the ``TimeConfig`` budgets for a slow CI host.
    """

    def __init__(self) -> None:
        super().__init__("uiauto_electron.timing")

    def configure(self, *, file_path: Optional[str] = None) -> None:
        with self._lock:
            self._file_path = file_path

    def log(
        self,
        *,
        event: str,
        description: Optional[str] = None,
        status: str = "info",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not self._enabled:
            return
        status = status.lower()
        fields = {"time": time.strftime("%H:%M:%S"), "event": event}
        if description:
            fields["description"] = description
        fields.update(metadata or {})
        line = f"[{status}] [timing] " + " ".join(f"{k}={v}" for k, v in fields.items())
        self._emit(_LEVELS.get(status, logging.INFO), line)


TIMING_LOGGER = TimingLogger()
