# uiauto_electron/element.py
"""
@file element.py
@brief Lazily-resolved element handle.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional, TypeVar

from .config import TimeConfig
from .exceptions import ElementNotFoundError, StaleElementError
from .interfaces import IDriver
from .waits import wait_until, wait_until_not

T = TypeVar("T")


@dataclass(frozen=True)
class Element:
    """
    A (locator, scope, index) value that is resolved on every access.

    No remote node is stored: each dereference re-runs the lookup relative to
    the scope (itself re-resolved), so a handle taken before the UI re-renders
    still points at the re-rendered node. Construction never fails; a locator
    matching nothing raises ElementNotFoundError when first dereferenced.

    ``scope=None`` means the root of the current document (or frame).
    ``index`` selects the n-th match, which is how rows handed out by
    ``find_all`` are addressed.
    """
    driver: IDriver = field(repr=False, compare=False)
    locator: str
    scope: Optional[Element] = None
    index: int = 0

    # --- Resolution ---

    def resolve_all(self) -> List[Any]:
        """Run the lookup now and return every matching node."""
        scope_node = self.scope.resolve() if self.scope is not None else None
        return self.driver.find_elements(self.locator, scope_node)

    def resolve(self) -> Any:
        """
        Run the lookup now and return the node this handle addresses.

        @throws ElementNotFoundError if fewer than index + 1 nodes match
        """
        nodes = self.resolve_all()
        if len(nodes) <= self.index:
            raise ElementNotFoundError(
                self.locator,
                scope=self.scope.path if self.scope is not None else None,
                index=self.index,
                matched=len(nodes),
            )
        return nodes[self.index]

    @property
    def path(self) -> str:
        """Scope chain as text, outermost first, for error messages."""
        own = self.locator if not self.index else f"{self.locator}[{self.index}]"
        if self.scope is None:
            return own
        return f"{self.scope.path} >> {own}"

    # --- Scoping ---

    def within(self, parent: Optional[Element]) -> Element:
        """Same locator and index, evaluated under another scope."""
        return replace(self, scope=parent)

    def find(self, locator: str) -> Element:
        """Handle for the first match of ``locator`` under this element."""
        return Element(self.driver, locator, scope=self)

    def find_all(self, locator: str) -> List[Element]:
        """
        One indexed handle per node currently matching ``locator`` under this
        element, in document order. The list length is a snapshot; each handle
        still re-resolves on use.
        """
        try:
            count = len(self.driver.find_elements(locator, self.resolve()))
        except ElementNotFoundError:
            return []
        return [Element(self.driver, locator, scope=self, index=i) for i in range(count)]

    # --- State Queries ---

    def exists(self) -> bool:
        """Check if the handle currently resolves."""
        try:
            self.resolve()
            return True
        except (ElementNotFoundError,) + tuple(self.driver.transient_errors):
            return False

    def is_displayed(self) -> bool:
        """Check if the handle resolves to a visible node."""
        try:
            return bool(self.driver.is_displayed(self.resolve()))
        except (ElementNotFoundError,) + tuple(self.driver.transient_errors):
            return False

    def _on_node(self, operation: Callable[[Any], T]) -> T:
        """
        Resolve, then run ``operation`` on the node.

        @throws StaleElementError if the backend reports the node gone in between
        """
        try:
            return operation(self.resolve())
        except tuple(self.driver.transient_errors) as e:
            raise StaleElementError(self.path, str(e)) from e

    def get_text(self) -> str:
        return self._on_node(self.driver.get_text) or ""

    def get_attribute(self, name: str) -> Optional[str]:
        return self._on_node(lambda node: self.driver.get_attribute(node, name))

    # --- Actions ---

    def click(self) -> Element:
        self._on_node(self.driver.click)
        return self

    def send_keys(self, *keys: str) -> Element:
        self._on_node(lambda node: self.driver.send_keys(node, *keys))
        return self

    # --- Wait Operations ---

    def wait_for_exists(self, timeout: Optional[float] = None, reverse: bool = False) -> Element:
        """
        Wait until the handle resolves (or, with reverse, stops resolving).

        @throws TimeoutError when the state is not reached in time
        """
        config = TimeConfig.current().exists_wait
        effective_timeout = timeout if timeout is not None else config.timeout
        if reverse:
            wait_until_not(
                self.exists,
                timeout=effective_timeout,
                interval=config.interval,
                description=f"element '{self.path}' to stop existing",
            )
        else:
            wait_until(
                self.exists,
                timeout=effective_timeout,
                interval=config.interval,
                description=f"element '{self.path}' to exist",
            )
        return self

    def wait_for_displayed(self, timeout: Optional[float] = None, reverse: bool = False) -> Element:
        """
        Wait until the handle resolves to a visible node (or, with reverse,
        until it is hidden or gone).

        @throws TimeoutError when the state is not reached in time
        """
        config = TimeConfig.current().disappear_wait if reverse else TimeConfig.current().visibility_wait
        effective_timeout = timeout if timeout is not None else config.timeout
        if reverse:
            wait_until_not(
                self.is_displayed,
                timeout=effective_timeout,
                interval=config.interval,
                description=f"element '{self.path}' to be hidden",
            )
        else:
            wait_until(
                self.is_displayed,
                timeout=effective_timeout,
                interval=config.interval,
                description=f"element '{self.path}' to be displayed",
            )
        return self
