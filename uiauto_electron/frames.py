"""
@file frames.py
@brief Enter and leave the double-embedded frame of an editor webview.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List

from .config import TimeConfig
from .waits import wait_until

if TYPE_CHECKING:
    from .page import BasePage
    from .session import Session

_LOGGER = logging.getLogger(__name__)

VIRTUAL_DOCUMENT_TITLE = "Virtual Document"


class FrameSwitcher:
    """
    Moves the session's automation focus into a webview and back.

    States: outside -> ``switch_to_frame`` -> inside -> ``switch_back`` -> outside.
    The anchor window is kept on the session (``Session.anchor_handle``) and is
    captured only once, so repeated round trips behave like the first one.
    """

    def __init__(self, session: Session):
        self.session = session

    @property
    def driver(self):
        return self.session.driver

    def switch_to_frame(self, webview: BasePage) -> None:
        """
        Switch into the webview's content document.

        A detached window titled ``Virtual Document`` is entered directly
        through its first frame. Otherwise the webview is located through its
        ``aria-flowto`` reference from the anchor window, and two nested
        frames are crossed: the webview iframe, then the active frame inside.

        @throws TimeoutError if the container, the iframe or the active frame
                does not appear in time
        """
        anchor = self.session.remember_anchor()

        for handle in self.driver.window_handles():
            self.driver.switch_to_window(handle)
            if VIRTUAL_DOCUMENT_TITLE in (self.driver.title() or ""):
                _LOGGER.debug("Entering virtual document window %s", handle)
                self.driver.switch_to_frame(0)
                return
        self.driver.switch_to_window(anchor)

        locators = self.session.locators
        reference = webview.elem.find(locators.get("EditorView", "webView"))
        flow_to = reference.get_attribute(locators.get("EditorView", "flowToAttribute"))
        container = self.session.element(f"#{flow_to}")
        container.wait_for_exists(timeout=TimeConfig.current().frame_container.timeout)

        iframe_locator = webview.locator("iframe")
        found: List[Any] = []

        def _iframe_present() -> bool:
            found[:] = container.find_all(iframe_locator)
            return len(found) > 0

        poll = TimeConfig.current().frame_poll
        wait_until(
            _iframe_present,
            timeout=poll.timeout,
            interval=poll.interval,
            description=f"webview iframe inside '#{flow_to}'",
        )
        self.driver.switch_to_frame(found[0].resolve())

        active = self.session.element(webview.locator("activeFrame"))
        active.wait_for_exists(timeout=TimeConfig.current().active_frame.timeout)
        self.driver.switch_to_frame(active.resolve())
        _LOGGER.debug("Entered webview frame via container #%s", flow_to)

    def switch_back(self) -> None:
        """Return to the anchor window (recording the current one if none yet)."""
        anchor = self.session.remember_anchor()
        self.driver.switch_to_window(anchor)
