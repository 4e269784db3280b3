# uiauto_electron/session.py
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, List, Optional

from .element import Element
from .interfaces import IDriver
from .repository import LocatorMap, LocatorRepository

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver


class Session:
    """
    One automation session: the remote driver, the locator table selected for
    the target application version, and the session-scoped anchor window.

    ``anchor_handle`` is the window to return to after leaving an embedded
    frame. It is written at most once per session by the frame switcher and
    is never shared between sessions.
    """

    def __init__(
        self,
        driver: IDriver,
        locators: LocatorMap,
        logger: Optional[logging.Logger] = None,
    ):
        self.driver = driver
        self.locators = locators
        self.log = logger or logging.getLogger("uiauto_electron")
        self.anchor_handle: Optional[str] = None

    @classmethod
    def from_webdriver(
        cls,
        webdriver: WebDriver,
        version: str,
        locators_dir: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ) -> Session:
        """
        Wrap a live Selenium WebDriver, picking the locator table for
        ``version`` from ``locators_dir`` (bundled tables by default).
        """
        from .selenium_driver import SeleniumDriver

        table = LocatorRepository(locators_dir).for_version(version)
        session = cls(SeleniumDriver(webdriver), table, logger=logger)
        session.log.info("Session for app version %s using locator table %s", version, table.version)
        return session

    def element(self, locator: str, scope: Optional[Element] = None) -> Element:
        """Lazy handle bound to this session's driver."""
        return Element(self.driver, locator, scope=scope)

    def elements(self, locator: str) -> List[Element]:
        """One indexed handle per node currently matching at document level."""
        count = len(self.driver.find_elements(locator, None))
        return [Element(self.driver, locator, index=i) for i in range(count)]

    def remember_anchor(self) -> str:
        """Record the current window as anchor unless one is already set."""
        if self.anchor_handle is None:
            self.anchor_handle = self.driver.current_window_handle()
            self.log.debug("Anchor window recorded: %s", self.anchor_handle)
        return self.anchor_handle
