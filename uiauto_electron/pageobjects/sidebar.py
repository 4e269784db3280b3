"""
@file sidebar.py
@brief Side bar view: title part and content sections.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..collection import read_items
from ..exceptions import UIAutoError
from ..page import BasePage
from .tree import CustomTreeSection

_LOGGER = logging.getLogger(__name__)


class SideBarView(BasePage):
    """Page object for the side bar view."""

    locator_key = "SideBarView"

    def get_title_part(self) -> ViewTitlePart:
        """Top part of the open view (title and buttons)."""
        return self.load(ViewTitlePart, parent=self)

    def get_content(self) -> ViewContent:
        """Content part of the open view."""
        return self.load(ViewContent, parent=self)


class ViewTitlePart(BasePage):
    locator_key = "ViewTitlePart"

    def get_title(self) -> str:
        return self.find("title").get_text()


class ViewContent(BasePage):
    """Stack of collapsible sections under the view title."""

    locator_key = "ViewContent"

    def has_progress(self) -> bool:
        """Whether the view shows a progress bar."""
        return self.find("progress").is_displayed()

    def get_sections(self) -> List[CustomTreeSection]:
        return read_items(
            self.elem,
            self.locator("section"),
            lambda row: self.load(CustomTreeSection, row, self),
        )

    def get_section(self, title: str) -> Optional[CustomTreeSection]:
        """Section whose title matches ``title`` ignoring case, or None."""
        try:
            for section in self.get_sections():
                if section.get_title().lower() == title.lower():
                    return section
        except (UIAutoError,) + tuple(self.driver.transient_errors) as e:
            _LOGGER.debug("Section lookup of '%s' failed: %s", title, e)
        return None
