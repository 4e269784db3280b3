# uiauto_electron/waits.py
"""
@file waits.py
@brief Polling primitives: wait-until, wait-until-not, retry-until-passes and
count convergence.

Every loop evaluates first and checks the clock only after an evaluation,
so a condition that holds on the (k+1)-th call is seen after exactly k+1
calls, and no TimeoutError is raised before ``timeout`` seconds have passed.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Tuple, TypeVar

from .exceptions import TimeoutError
from .timinglogger import TIMING_LOGGER

T = TypeVar("T")


def _now() -> float:
    return time.monotonic()


class _Poll:
    """Clock, attempt counter and timing events of one polling loop."""

    def __init__(self, description: str, timeout: float, interval: float, stage: Optional[str]):
        self.description = description
        self.timeout = timeout
        self.interval = interval
        self.stage = stage
        self.started = _now()
        self.attempts = 0

    @property
    def elapsed(self) -> float:
        return _now() - self.started

    def expired(self) -> bool:
        return self.elapsed >= self.timeout

    def sleep(self) -> None:
        remaining = self.timeout - self.elapsed
        if remaining > 0:
            time.sleep(min(self.interval, remaining))

    def event(self, name: str, status: str = "info", **extra: Any) -> None:
        if TIMING_LOGGER.is_enabled():
            TIMING_LOGGER.log(
                event=name,
                description=self.description,
                status=status,
                metadata={
                    "attempts": self.attempts,
                    "elapsed_s": round(self.elapsed, 3),
                    "stage": self.stage,
                    **extra,
                },
            )

    def failure(
        self,
        message: str,
        last_value: Any = None,
        cause: Optional[BaseException] = None,
        event: str = "wait_timeout",
    ) -> TimeoutError:
        """Build the TimeoutError that ends this loop."""
        elapsed = self.elapsed
        self.event(event, status="error", timeout_s=self.timeout)
        error = TimeoutError(message)
        error.original_exception = cause
        error.last_value = last_value
        error.description = self.description
        error.timeout = self.timeout
        error.attempt_count = self.attempts
        error.elapsed_time = elapsed
        error.stage = self.stage
        return error


def _log_retry_attempt(description: str, attempt: int, stage: Optional[str]) -> None:
    from .actionlogger import ACTION_LOGGER

    if ACTION_LOGGER.is_enabled() and ACTION_LOGGER.should_log_retry_attempt(attempt):
        ACTION_LOGGER.log(
            action="retry_attempt",
            status="info",
            metadata={"description": description},
            attempt=attempt,
            phase=stage or "execute",
            event="retry_attempt",
        )


def wait_until(
    predicate: Callable[[], T],
    timeout: float,
    interval: float = 0.1,
    description: str = "condition",
    stage: Optional[str] = None,
) -> T:
    """
    Evaluate predicate immediately, then every ``interval`` seconds, until it
    returns a truthy value (which is returned) or ``timeout`` elapses.

    An exception from the predicate counts as a falsy evaluation; the last
    one is attached to the TimeoutError as ``original_exception``, the last
    falsy value as ``last_value``.
    """
    poll = _Poll(description, timeout, interval, stage)
    poll.event("wait_start", timeout_s=timeout, interval_s=interval)
    last_value: Any = None
    last_exception: Optional[Exception] = None

    while True:
        poll.attempts += 1
        try:
            value = predicate()
        except Exception as e:
            last_exception = e
        else:
            if value:
                poll.event("wait_success", status="success")
                return value
            last_value, last_exception = value, None
        if poll.expired():
            break
        poll.sleep()

    message = f"Timed out waiting for {description} after {timeout}s"
    if last_exception is not None:
        message += f": {type(last_exception).__name__}: {last_exception}"
    else:
        message += f" (last value: {last_value!r})"
    raise poll.failure(message, last_value=last_value, cause=last_exception)


def wait_until_not(
    predicate: Callable[[], Any],
    timeout: float,
    interval: float = 0.1,
    description: str = "condition to become false",
    stage: Optional[str] = None,
) -> None:
    """Wait until predicate returns a falsy value. Predicate errors propagate."""
    poll = _Poll(description, timeout, interval, stage)
    while True:
        poll.attempts += 1
        value = predicate()
        if not value:
            poll.event("wait_success", status="success")
            return
        if poll.expired():
            raise poll.failure(
                f"Timed out waiting for {description} after {timeout}s (still {value!r})",
                last_value=value,
            )
        poll.sleep()


def wait_until_passes(
    func: Callable[..., T],
    timeout: float,
    interval: float = 0.1,
    exceptions: Tuple[type, ...] = (Exception,),
    description: str = "operation",
    *args: Any,
    stage: Optional[str] = None,
    **kwargs: Any,
) -> T:
    """
    Call func(*args, **kwargs) until it returns without raising one of
    ``exceptions``. Other exceptions propagate immediately.
    """
    poll = _Poll(description, timeout, interval, stage)
    while True:
        poll.attempts += 1
        _log_retry_attempt(description, poll.attempts, stage)
        try:
            return func(*args, **kwargs)
        except exceptions as e:
            if poll.expired():
                raise poll.failure(
                    f"Timed out waiting for {description} after {timeout}s "
                    f"({poll.attempts} attempts). Last error: {type(e).__name__}: {e}",
                    cause=e,
                    event="retry_timeout",
                ) from e
            poll.sleep()


def wait_for_count_to_settle(
    read_count: Callable[[], int],
    timeout: float,
    interval: float = 0.1,
    description: str = "collection size to settle",
) -> int:
    """
    Count-convergence wait for lists that grow asynchronously.

    Reads the collection once as a baseline, then polls: a read equal to the
    baseline means the collection settled and that count is returned;
    otherwise the new size becomes the baseline.

    @throws TimeoutError if the size is still changing when ``timeout`` elapses
    """
    state = {"baseline": read_count()}

    def _settled() -> bool:
        current = read_count()
        if current == state["baseline"]:
            return True
        if TIMING_LOGGER.is_enabled():
            TIMING_LOGGER.log(
                event="settle_changed",
                description=description,
                metadata={"previous": state["baseline"], "current": current},
            )
        state["baseline"] = current
        return False

    wait_until(_settled, timeout=timeout, interval=interval, description=description)
    return state["baseline"]
