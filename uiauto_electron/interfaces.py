"""
@file interfaces.py
@brief Abstract remote-UI driver consumed by element handles and page objects.

The page-object layer never talks to a wire protocol directly. It consumes
the capability set below; ``SeleniumDriver`` implements it over a Selenium
WebDriver, and tests implement it over an in-memory DOM.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple, Union


class Keys:
    """Symbolic key names understood by every IDriver implementation."""
    PAGE_UP = "Page Up"
    PAGE_DOWN = "PageDown"
    HOME = "Home"
    END = "End"
    ESCAPE = "Escape"
    ENTER = "Enter"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"


class IDriver(ABC):
    """
    Abstract remote UI driver.

    ``node`` arguments are opaque backend references obtained from
    ``find_elements``; callers never keep them beyond a single operation.
    """

    transient_errors: Tuple[type, ...] = ()
    """Backend exceptions meaning a node vanished or went stale mid-read."""

    @abstractmethod
    def find_elements(self, locator: str, scope: Optional[Any] = None) -> List[Any]:
        """
        Run a locator query.

        Args:
            locator: CSS selector or XPath expression
            scope: Node to search under; None searches the current document

        Returns:
            Matching nodes in document order (possibly empty)
        """
        pass

    @abstractmethod
    def get_text(self, node: Any) -> str:
        """Visible text of a node."""
        pass

    @abstractmethod
    def get_attribute(self, node: Any, name: str) -> Optional[str]:
        """Attribute value, or None when the attribute is absent."""
        pass

    @abstractmethod
    def is_displayed(self, node: Any) -> bool:
        """Whether the node is rendered and visible."""
        pass

    @abstractmethod
    def click(self, node: Any) -> None:
        """Click the node."""
        pass

    @abstractmethod
    def send_keys(self, node: Optional[Any], *keys: str) -> None:
        """
        Send key presses.

        Args:
            node: Target node; None sends to the focused element
            *keys: Text fragments or ``Keys`` names
        """
        pass

    @abstractmethod
    def window_handles(self) -> List[str]:
        """All open top-level window handles."""
        pass

    @abstractmethod
    def current_window_handle(self) -> str:
        """Handle of the window that currently has automation focus."""
        pass

    @abstractmethod
    def switch_to_window(self, handle: str) -> None:
        """Move automation focus to a top-level window (top frame)."""
        pass

    @abstractmethod
    def switch_to_frame(self, frame: Union[int, Any]) -> None:
        """Move automation focus into a frame by index or frame node."""
        pass

    @abstractmethod
    def title(self) -> str:
        """Title of the current window."""
        pass
