"""
@file menu.py
@brief Menu base classes and the context menu page objects.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional

from ..collection import exclude_disabled, read_items
from ..config import TimeConfig
from ..context import tracked_action
from ..element import Element
from ..exceptions import ActionError, TimeoutError, UIAutoError
from ..interfaces import Keys
from ..page import BasePage
from ..waits import wait_for_count_to_settle

if TYPE_CHECKING:
    from ..session import Session

_LOGGER = logging.getLogger(__name__)


class Menu(BasePage, ABC):
    """
    A container of selectable items. Subclasses supply ``get_items``.
    """

    @abstractmethod
    def get_items(self) -> List[MenuItem]:
        """Items currently shown, top to bottom."""

    def get_item(self, name: str) -> Optional[MenuItem]:
        """
        First item whose label equals ``name``, or None.

        Lookup failures and timeouts while reading the menu are reported as
        None rather than raised.
        """
        try:
            for item in self.get_items():
                if item.get_label() == name:
                    return item
        except (UIAutoError,) + tuple(self.driver.transient_errors) as e:
            _LOGGER.debug("Lookup of '%s' in %s failed: %s", name, type(self).__name__, e)
        return None

    def has_item(self, name: str) -> bool:
        return self.get_item(name) is not None

    def select(self, *path: str) -> Optional[Menu]:
        """
        Walk nested menus: select ``path[0]`` here, ``path[1]`` in the submenu
        it opened, and so on.

        @return the last submenu opened, or None if the last item had none
        @throws ActionError if an item on the path is missing or opens nothing
        """
        menu: Optional[Menu] = self
        for depth, name in enumerate(path):
            if menu is None:
                raise ActionError("select", element_name=name,
                                  details=f"'{path[depth - 1]}' did not open a submenu")
            item = menu.get_item(name)
            if item is None:
                raise ActionError("select", element_name=name,
                                  details=f"no such item in {type(menu).__name__}")
            menu = item.select()
        return menu


class MenuItem(BasePage, ABC):
    """One row of a menu. ``label`` holds the text from the last read."""

    def __init__(self, session: Session, base: Element, parent_menu: Menu):
        super().__init__(session, base, parent=parent_menu)
        self.parent_menu = parent_menu
        self.label = ""

    @abstractmethod
    def get_label(self) -> str:
        """Read the label from the UI and remember it in ``label``."""

    def get_parent(self) -> Menu:
        return self.parent_menu

    @tracked_action("select")
    def select(self) -> Optional[Menu]:
        self.elem.click()
        return None


class ContextMenu(Menu):
    """Right-click context menu, also used for the submenus it opens."""

    locator_key = "ContextMenu"

    def get_items(self) -> List[ContextMenuItem]:
        """Enabled items in display order."""
        return read_items(
            self.elem,
            self.locator("itemElement"),
            lambda row: self.load(ContextMenuItem, row, self),
            include=exclude_disabled,
        )

    @tracked_action("close")
    def close(self) -> None:
        """Press Escape and wait for the menu to disappear."""
        self.driver.send_keys(None, Keys.ESCAPE)
        self.elem.wait_for_displayed(reverse=True)

    def wait(self, timeout: Optional[float] = None) -> ContextMenu:
        """
        Wait for the menu to appear, then for its item count to stop changing
        (items can be added one by one while the menu animates in).

        @throws TimeoutError if the menu never shows or never settles
        """
        config = TimeConfig.current()
        self.elem.wait_for_displayed(timeout if timeout is not None else config.menu_open.timeout)
        wait_for_count_to_settle(
            lambda: len(self.get_items()),
            timeout=config.menu_settle.timeout,
            interval=config.menu_settle.interval,
            description=f"items of '{self.elem.path}' to settle",
        )
        return self


class ContextMenuItem(MenuItem):
    """Context menu entry; selecting it may open a nested context menu."""

    locator_key = "ContextMenu"

    def get_label(self) -> str:
        self.label = self.find("itemLabel").get_attribute(self.locator("itemText")) or ""
        return self.label

    @tracked_action("select")
    def select(self) -> Optional[ContextMenu]:
        """
        Click the item and let a submenu animate in.

        @return the nested menu, fully loaded, or None when the item has none
        """
        self.elem.click()
        time.sleep(TimeConfig.current().after_select_pause)
        if self._is_nesting():
            return self.load(ContextMenu, self.elem, self).wait()
        return None

    def _is_nesting(self) -> bool:
        try:
            self.find("itemNesting").wait_for_displayed(TimeConfig.current().submenu_probe.timeout)
            return True
        except TimeoutError:
            return False
