"""
@file selenium_driver.py
@brief IDriver implementation over a Selenium WebDriver session.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional, Union

from selenium.common.exceptions import NoSuchElementException, StaleElementReferenceException
from selenium.webdriver.common.by import By
from selenium.webdriver.common.keys import Keys as SeleniumKeys

from .interfaces import IDriver, Keys

if TYPE_CHECKING:
    from selenium.webdriver.remote.webdriver import WebDriver
    from selenium.webdriver.remote.webelement import WebElement

_LOGGER = logging.getLogger(__name__)

KEY_MAPPING = {
    Keys.PAGE_UP: SeleniumKeys.PAGE_UP,
    "PageUp": SeleniumKeys.PAGE_UP,
    Keys.PAGE_DOWN: SeleniumKeys.PAGE_DOWN,
    "Page Down": SeleniumKeys.PAGE_DOWN,
    Keys.HOME: SeleniumKeys.HOME,
    Keys.END: SeleniumKeys.END,
    Keys.ESCAPE: SeleniumKeys.ESCAPE,
    Keys.ENTER: SeleniumKeys.ENTER,
    Keys.ARROW_UP: SeleniumKeys.ARROW_UP,
    Keys.ARROW_DOWN: SeleniumKeys.ARROW_DOWN,
}

XPATH_PREFIXES = ("/", "./", "(")


def locator_strategy(locator: str) -> tuple:
    """Split a locator string into a Selenium (By, value) pair."""
    if locator.startswith(XPATH_PREFIXES):
        return By.XPATH, locator
    return By.CSS_SELECTOR, locator


class SeleniumDriver(IDriver):
    """
    Thin adapter from the page-object capability set to Selenium.

    Selenium exceptions are not translated; they propagate to the caller.
    """

    transient_errors = (StaleElementReferenceException, NoSuchElementException)

    def __init__(self, webdriver: WebDriver):
        self.webdriver = webdriver

    def find_elements(self, locator: str, scope: Optional[WebElement] = None) -> List[WebElement]:
        by, value = locator_strategy(locator)
        root = scope if scope is not None else self.webdriver
        return root.find_elements(by, value)

    def get_text(self, node: WebElement) -> str:
        return node.text

    def get_attribute(self, node: WebElement, name: str) -> Optional[str]:
        return node.get_attribute(name)

    def is_displayed(self, node: WebElement) -> bool:
        return node.is_displayed()

    def click(self, node: WebElement) -> None:
        node.click()

    def send_keys(self, node: Optional[WebElement], *keys: str) -> None:
        translated = [KEY_MAPPING.get(k, k) for k in keys]
        if node is None:
            node = self.webdriver.switch_to.active_element
        _LOGGER.debug("send_keys %s", keys)
        node.send_keys(*translated)

    def window_handles(self) -> List[str]:
        return list(self.webdriver.window_handles)

    def current_window_handle(self) -> str:
        return self.webdriver.current_window_handle

    def switch_to_window(self, handle: str) -> None:
        self.webdriver.switch_to.window(handle)

    def switch_to_frame(self, frame: Union[int, Any]) -> None:
        self.webdriver.switch_to.frame(frame)

    def title(self) -> str:
        return self.webdriver.title
