# uiauto_electron/logsink.py
"""
@file logsink.py
@brief Shared plumbing of the opt-in action and timing logs.
"""

from __future__ import annotations

import logging
import os
import threading
from typing import Optional


class OptInLog:
    """
    A log that is silent until ``enable()`` is called.

    Records go to a named ``logging`` logger and, when ``file_path`` is set,
    are appended to that file as one line each.
    """

    def __init__(self, logger_name: str) -> None:
        self._logger = logging.getLogger(logger_name)
        self._lock = threading.Lock()
        self._enabled = False
        self._file_path: Optional[str] = None

    def enable(self) -> None:
        with self._lock:
            self._enabled = True

    def disable(self) -> None:
        with self._lock:
            self._enabled = False

    def is_enabled(self) -> bool:
        return self._enabled

    def _emit(self, level: int, line: str) -> None:
        self._logger.log(level, line)
        if not self._file_path:
            return
        try:
            folder = os.path.dirname(os.path.abspath(self._file_path))
            os.makedirs(folder, exist_ok=True)
            with self._lock, open(self._file_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            self._logger.debug("Cannot append to %s: %s", self._file_path, e)
