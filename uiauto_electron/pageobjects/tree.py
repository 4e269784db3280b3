"""
@file tree.py
@brief Sidebar view sections and the tree rows they contain.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, List, Optional

from ..collection import read_items
from ..config import TimeConfig
from ..context import tracked_action
from ..element import Element
from ..exceptions import UIAutoError
from ..interfaces import Keys
from ..page import BasePage
from ..waits import wait_until

if TYPE_CHECKING:
    from ..session import Session

_LOGGER = logging.getLogger(__name__)


def parse_level(value: Optional[str]) -> int:
    """Tree depth from an ``aria-level`` value; missing or malformed means top level."""
    try:
        return max(1, int(value or 1))
    except ValueError:
        _LOGGER.debug("Unreadable tree level %r, treating as 1", value)
        return 1


class ViewSection(BasePage):
    """Collapsible section of a sidebar view (header plus body)."""

    locator_key = "ViewSection"

    def _header(self) -> Element:
        return self.elem.find(self.locator("header", "ViewSection"))

    def get_title(self) -> str:
        return self.elem.find(self.locator("title", "ViewSection")).get_text()

    def is_expanded(self) -> bool:
        attr = self.locator("expandedAttr", "ViewSection")
        return self._header().get_attribute(attr) == "true"

    @tracked_action("expand")
    def expand(self) -> None:
        if not self.is_expanded():
            self._toggle(True)

    @tracked_action("collapse")
    def collapse(self) -> None:
        if self.is_expanded():
            self._toggle(False)

    def _toggle(self, expanded: bool) -> None:
        self._header().click()
        config = TimeConfig.current().exists_wait
        wait_until(
            lambda: self.is_expanded() == expanded,
            timeout=config.timeout,
            interval=config.interval,
            description=f"section '{self.elem.path}' expanded={expanded}",
        )


class CustomTreeSection(ViewSection):
    """Tree view section, e.g. contributed by an extension."""

    locator_key = "CustomTreeSection"

    def get_visible_items(self) -> List[TreeItem]:
        """Rendered rows, top to bottom."""
        return read_items(
            self.elem,
            self.locator("itemRow"),
            lambda row: self.load(TreeItem, row, self),
        )

    def find_item(self, label: str, max_level: int = 0) -> Optional[TreeItem]:
        """
        Row whose label equals ``label``, limited to tree depth ``max_level``
        (0 means any depth). Scrolls the tree to the top first. When several
        rendered rows match, the lowest one wins.

        @return the item, or None when no rendered row matches
        """
        try:
            self.expand()
            container = self.find("rowContainer")
            container.wait_for_exists(TimeConfig.current().tree_container.timeout)
            container.send_keys(Keys.HOME)

            level_attr = self.locator("levelAttr")
            label_attr = self.locator("labelAttr")
            labelled = self.locator("labelledNode")
            item: Optional[TreeItem] = None
            for row in container.find_all(self.locator("itemRow")):
                if not any(node.get_attribute(label_attr) == label for node in row.find_all(labelled)):
                    continue
                level = parse_level(row.get_attribute(level_attr))
                if max_level < 1 or level <= max_level:
                    item = self.load(TreeItem, row, self).wait()
            return item
        except (UIAutoError,) + tuple(self.driver.transient_errors) as e:
            _LOGGER.debug("Tree lookup of '%s' failed: %s", label, e)
            return None


class TreeItem(BasePage):
    """One row of a tree section."""

    locator_key = "TreeItem"

    def __init__(self, session: Session, base: Element, section: CustomTreeSection):
        super().__init__(session, base, parent=section)
        self.section = section
        self.label = ""

    def get_label(self) -> str:
        self.label = self.find("itemLabel").get_text()
        return self.label

    def get_level(self) -> int:
        return parse_level(self.elem.get_attribute(self.locator("levelAttr")))

    def is_expandable(self) -> bool:
        return self.elem.get_attribute(self.locator("expandedAttr")) is not None

    def is_expanded(self) -> bool:
        return self.elem.get_attribute(self.locator("expandedAttr")) == "true"

    @tracked_action("select")
    def select(self) -> None:
        self.elem.click()

    @tracked_action("expand")
    def expand(self) -> None:
        if self.is_expandable() and not self.is_expanded():
            self.find("twistie").click()
            time.sleep(TimeConfig.current().after_expand_pause)

    @tracked_action("collapse")
    def collapse(self) -> None:
        if self.is_expanded():
            self.find("twistie").click()
            time.sleep(TimeConfig.current().after_expand_pause)

    def get_children(self) -> List[TreeItem]:
        """
        Direct children as rendered below this row after expanding it.
        """
        if not self.is_expandable():
            return []
        self.expand()
        index_attr = self.locator("indexAttr")
        own_index = self.elem.get_attribute(index_attr)
        own_level = self.get_level()

        children: List[TreeItem] = []
        below = False
        for item in self.section.get_visible_items():
            if not below:
                below = item.elem.get_attribute(index_attr) == own_index
                continue
            level = item.get_level()
            if level <= own_level:
                break
            if level == own_level + 1:
                children.append(item)
        return children
