"""
@file webview.py
@brief Editor tab hosting a webview.
"""

from __future__ import annotations

from typing import List

from ..context import tracked_action
from ..element import Element
from ..frames import FrameSwitcher
from ..page import BasePage


class WebView(BasePage):
    """
    Page object for an open editor containing a webview.

    Elements inside the webview are only reachable after ``switch_to_frame``;
    call ``switch_back`` to return to the workbench.
    """

    locator_key = "WebView"

    def find_web_element(self, locator: str) -> Element:
        """
        Handle for ``locator`` in the current document. After switch_to_frame
        this is the webview content; before, the workbench root.
        """
        return self.session.element(locator)

    def find_web_elements(self, locator: str) -> List[Element]:
        return self.session.elements(locator)

    @tracked_action("switch_to_frame")
    def switch_to_frame(self) -> None:
        """@throws TimeoutError if the webview frames do not appear in time"""
        FrameSwitcher(self.session).switch_to_frame(self)

    @tracked_action("switch_back")
    def switch_back(self) -> None:
        FrameSwitcher(self.session).switch_back()
