# uiauto_electron/context.py
"""
@file context.py
@brief Stack of the page-object actions in progress, for traces and action logs.
"""

from __future__ import annotations
import functools
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, Iterator, List, Optional
from uuid import uuid4


@dataclass
class ActionContext:
    """One page-object action: ``select`` on a ContextMenuItem, ``expand`` on a TreeItem..."""
    action: str
    page: Optional[str] = None
    locator: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    action_id: str = field(default_factory=lambda: uuid4().hex[:8])
    started: float = field(default_factory=time.monotonic)
    outer: Optional[ActionContext] = None

    @property
    def description(self) -> str:
        text = self.action
        if self.locator:
            text += f" on '{self.locator}'"
        if self.page:
            text += f" in {self.page}"
        return text

    def chain(self) -> Iterator[ActionContext]:
        """This action, then the actions it runs inside of."""
        context: Optional[ActionContext] = self
        while context is not None:
            yield context
            context = context.outer

    def format_trace(self) -> str:
        now = time.monotonic()
        lines = ["Action trace (most recent first):"]
        for depth, context in enumerate(self.chain()):
            marker = "  X " if depth == 0 else "  -> "
            lines.append(f"{marker}{context.description} [{now - context.started:.2f}s]")
        return "\n".join(lines)


class ActionContextManager:
    """Per-thread stack of running actions."""

    _local = threading.local()

    @classmethod
    def _stack(cls) -> List[ActionContext]:
        stack = getattr(cls._local, "stack", None)
        if stack is None:
            stack = cls._local.stack = []
        return stack

    @classmethod
    def current(cls) -> Optional[ActionContext]:
        stack = cls._stack()
        return stack[-1] if stack else None

    @classmethod
    @contextmanager
    def action(
        cls,
        action: str,
        page: Optional[str] = None,
        locator: Optional[str] = None,
        **metadata: Any,
    ) -> Generator[ActionContext, None, None]:
        context = ActionContext(action, page, locator, metadata, outer=cls.current())
        stack = cls._stack()
        stack.append(context)
        try:
            yield context
        finally:
            stack.pop()

    @classmethod
    def clear(cls) -> None:
        cls._local.stack = []


def tracked_action(action_name: Optional[str] = None):
    """
    Decorator for page-object mutators.

    Runs the method inside an ActionContext named after the page class and
    its root locator, and reports the outcome to ACTION_LOGGER as an
    ``action_finish`` event. Exceptions are logged, then re-raised.
    """
    def decorator(func):
        name = action_name or func.__name__

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            from .actionlogger import ACTION_LOGGER

            locator = getattr(getattr(self, "elem", None), "locator", None)
            with ActionContextManager.action(name, type(self).__name__, locator) as context:
                report = dict(
                    action=name,
                    element=locator,
                    action_id=context.action_id,
                    phase="execute",
                    event="action_finish",
                )
                try:
                    result = func(self, *args, **kwargs)
                except Exception as exc:
                    ACTION_LOGGER.log(
                        status="error",
                        duration_ms=int((time.monotonic() - context.started) * 1000),
                        metadata={"trace": context.format_trace()},
                        exception=exc,
                        **report,
                    )
                    raise
                ACTION_LOGGER.log(
                    status="ok",
                    duration_ms=int((time.monotonic() - context.started) * 1000),
                    **report,
                )
                return result

        return wrapper

    return decorator
