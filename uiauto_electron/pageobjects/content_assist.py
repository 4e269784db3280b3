"""
@file content_assist.py
@brief Content assist (suggestion) popup of a text editor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from ..collection import read_items
from ..config import TimeConfig
from ..element import Element
from ..exceptions import UIAutoError
from ..page import BasePage
from ..seek import scroll_seek
from ..waits import wait_until
from .menu import Menu, MenuItem

if TYPE_CHECKING:
    from ..session import Session

_LOGGER = logging.getLogger(__name__)

NO_SUGGESTIONS = "No suggestions"


class ContentAssist(Menu):
    """
    Suggestion list opened inside an editor. The list is virtualized: only
    the rows in view are rendered.
    """

    locator_key = "ContentAssist"

    def __init__(self, session: Session, parent: BasePage):
        super().__init__(session, parent=parent)

    def get_item(self, name: str) -> Optional[ContentAssistItem]:
        """
        Scroll through the suggestions until one labelled ``name`` renders.

        @return the item, or None when the list is exhausted without a match
        """
        last_attr = self.locator("lastElementAttribute")
        index_attr = self.locator("indexAttribute")
        try:
            return scroll_seek(
                self.find("itemList"),
                name,
                first_row=self.find("firstItem"),
                read_page=self.get_items,
                get_label=lambda item: item.get_label(),
                is_last=lambda item: item.elem.get_attribute(last_attr) == "true",
                get_key=lambda item: item.elem.get_attribute(index_attr),
            )
        except (UIAutoError,) + tuple(self.driver.transient_errors) as e:
            _LOGGER.debug("Content assist lookup of '%s' failed: %s", name, e)
            return None

    def get_items(self) -> List[ContentAssistItem]:
        """
        Currently rendered suggestions, top to bottom.

        @throws TimeoutError if suggestions are still loading after ``suggest_loaded``
        """
        config = TimeConfig.current().suggest_loaded
        wait_until(
            self.is_loaded,
            timeout=config.timeout,
            interval=config.interval,
            description="content assist suggestions to load",
        )
        return read_items(
            self.find("itemRows"),
            self.locator("itemRow"),
            lambda row: self.load(ContentAssistItem, row, self),
        )

    def is_loaded(self) -> bool:
        """
        True once suggestions are done loading. A visible status message
        means loading, except the "No suggestions" message.
        """
        message = self.find("message")
        if message.is_displayed():
            return message.get_text().startswith(NO_SUGGESTIONS)
        return True


class ContentAssistItem(MenuItem):
    """A single suggestion row."""

    locator_key = "ContentAssist"

    def __init__(self, session: Session, base: Element, content_assist: ContentAssist):
        super().__init__(session, base, content_assist)

    def get_label(self) -> str:
        self.label = self.find("itemLabel").get_text()
        return self.label
