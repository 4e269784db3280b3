# uiauto_electron/actionlogger.py
"""
@file actionlogger.py
@brief Opt-in log of page-object actions (select, close, expand, frame switches).

Two renderings are available:
  line   ``2024-05-01T10:00:00.123+00:00 select status=ok duration_ms=512 element='.action-item'``
  jsonl  one JSON object per action, for machine post-processing
"""

from __future__ import annotations

import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .logsink import OptInLog

FORMATS = ("line", "jsonl")
SENSITIVE_KEYS = frozenset({"password", "passwd", "secret", "token"})


class ActionLogger(OptInLog):
    """Action events, with secrets masked and retry noise sampled."""

    def __init__(self) -> None:
        super().__init__("uiauto_electron.actions")
        self._run_id = "default"
        self._format = "line"
        self._max_traceback_chars = 4000
        self._sample_retry_events = 1

    def configure(
        self,
        *,
        file_path: Optional[str] = None,
        run_id: Optional[str] = None,
        format: str = "line",
        max_traceback_chars: int = 4000,
        sample_retry_events: int = 1,
    ) -> None:
        """
        @param file_path  also append records to this file
        @param run_id     tag carried by every record (kept if None)
        @param format     "line" or "jsonl"
        @param sample_retry_events  log only every n-th retry attempt after the first
        @throws ValueError for an unknown format
        """
        fmt = (format or "line").lower()
        if fmt not in FORMATS:
            raise ValueError(f"ActionLogger format must be one of {FORMATS}, got {format!r}")
        with self._lock:
            self._file_path = file_path
            self._format = fmt
            self._max_traceback_chars = max(256, int(max_traceback_chars))
            self._sample_retry_events = max(1, int(sample_retry_events))
            if run_id:
                self._run_id = run_id

    def should_log_retry_attempt(self, attempt: int) -> bool:
        return attempt <= 1 or attempt % self._sample_retry_events == 0

    def log(
        self,
        *,
        action: str,
        element: Optional[str] = None,
        status: str = "ok",
        duration_ms: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
        exception: Optional[BaseException] = None,
        action_id: Optional[str] = None,
        phase: Optional[str] = None,
        attempt: Optional[int] = None,
        event: Optional[str] = None,
    ) -> None:
        if not self._enabled:
            return
        record: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "event": event or "action",
            "action": action,
            "status": status,
            "run_id": self._run_id,
        }
        optional = {
            "action_id": action_id,
            "element": element,
            "phase": phase,
            "attempt": attempt,
            "duration_ms": duration_ms,
        }
        record.update({k: v for k, v in optional.items() if v is not None})
        record["metadata"] = {
            k: ("***" if k.lower() in SENSITIVE_KEYS else v) for k, v in (metadata or {}).items()
        }
        if exception is not None:
            record["exception"] = self._describe(exception)

        if self._format == "jsonl":
            text = json.dumps(record, ensure_ascii=False, separators=(",", ":"), default=str)
        else:
            text = self._render_line(record)
        self._emit(logging.ERROR if status == "error" else logging.INFO, text)

    @staticmethod
    def _render_line(record: Dict[str, Any]) -> str:
        words = [record["ts"], record["action"]]
        for key in ("event", "action_id", "phase", "attempt", "status", "duration_ms", "run_id"):
            if key in record:
                words.append(f"{key}={record[key]}")
        if "element" in record:
            words.append(f"element='{record['element']}'")
        words.extend(f"{k}={v}" for k, v in record["metadata"].items())
        exc = record.get("exception")
        if exc:
            words.append(f"exc={exc['type']}: {exc['message']}")
        return " ".join(words)

    def _describe(self, exception: BaseException) -> Dict[str, Any]:
        tb = "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))
        if len(tb) > self._max_traceback_chars:
            tb = tb[: self._max_traceback_chars] + "...<truncated>"
        cause = exception.__cause__
        return {
            "type": type(exception).__name__,
            "message": str(exception),
            "traceback": tb.strip(),
            "cause_type": type(cause).__name__ if cause is not None else None,
        }


ACTION_LOGGER = ActionLogger()
