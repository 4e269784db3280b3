# uiauto_electron/exceptions.py
"""
@file exceptions.py
@brief Exception hierarchy for the page-object layer.
"""

from __future__ import annotations
import traceback
from typing import Any, Optional


class UIAutoError(Exception):
    """Base exception for the framework."""


class ConfigError(UIAutoError):
    """A locator table or timings file is missing or invalid."""


class TimeoutError(UIAutoError):
    """
    A poll ran out of budget.

    Carries what the poll saw last, so a caller can tell a condition that
    never held (``last_value``) from a predicate that kept raising
    (``original_exception``). ``attempt_count`` and ``elapsed_time`` are
    filled in by the wait primitives; ``stage`` names the phase of a larger
    operation (e.g. ``submenu`` or ``frame_poll``) when the caller sets one.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.original_exception: Optional[BaseException] = None
        self.last_value: Any = None
        self.description: Optional[str] = None
        self.timeout: Optional[float] = None
        self.attempt_count: Optional[int] = None
        self.elapsed_time: Optional[float] = None
        self.stage: Optional[str] = None

    def __str__(self) -> str:
        facts = []
        if self.original_exception is not None:
            facts.append(f"cause={type(self.original_exception).__name__}")
        if self.attempt_count is not None:
            facts.append(f"attempts={self.attempt_count}")
        if self.elapsed_time is not None:
            facts.append(f"elapsed={self.elapsed_time:.2f}s")
        if self.stage is not None:
            facts.append(f"stage={self.stage}")
        message = super().__str__()
        return f"{message} [{' '.join(facts)}]" if facts else message

    def get_root_cause(self) -> Optional[BaseException]:
        """Follow nested ``original_exception`` links to the innermost one."""
        cause = self.original_exception
        while getattr(cause, "original_exception", None) is not None:
            cause = cause.original_exception
        return cause

    def get_traceback_str(self) -> str:
        cause = self.original_exception
        if cause is None:
            return ""
        return "".join(traceback.format_exception(type(cause), cause, cause.__traceback__))


class ElementNotFoundError(UIAutoError):
    """
    A lazy handle was dereferenced and its locator matched nothing, or fewer
    nodes than its index, inside its scope.
    """

    def __init__(self, locator: str, scope: Optional[str] = None, index: int = 0, matched: int = 0):
        self.locator = locator
        self.scope = scope
        self.index = index
        self.matched = matched
        where = scope or "<document>"
        if index:
            super().__init__(f"No match #{index} for '{locator}' in '{where}' ({matched} matched)")
        else:
            super().__init__(f"No match for '{locator}' in '{where}'")


class StaleElementError(UIAutoError):
    """A node went away between lookup and use."""

    def __init__(self, element_name: str, message: Optional[str] = None):
        self.element_name = element_name
        text = f"Element '{element_name}' is no longer attached"
        super().__init__(f"{text}: {message}" if message else text)


class ActionError(UIAutoError):
    """A mutator (select, expand, open...) could not be carried out."""

    def __init__(
        self,
        action: str,
        element_name: Optional[str] = None,
        details: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.action = action
        self.element_name = element_name
        self.details = details
        self.cause = cause
        parts = [f"{action} failed"]
        if element_name:
            parts.append(f"on '{element_name}'")
        if details:
            parts.append(f"- {details}")
        if cause is not None:
            parts.append(f"({type(cause).__name__}: {cause})")
        super().__init__(" ".join(parts))
