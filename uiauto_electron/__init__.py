"""
UIAuto Electron - page objects for Electron workbench UIs driven over WebDriver.

This package provides:
- Element: lazily-resolved element handles
- BasePage: scoped page objects with a locator table and a load() factory
- Waits: polling and count-convergence utilities
- Collection reading and scroll-seek over virtualized lists
- FrameSwitcher: entering and leaving webview frames
- LocatorRepository: versioned YAML locator tables
- Page objects: context menu, content assist, webview, sidebar, tree
"""

from uiauto_electron.config import TimeConfig, TimeoutSettings
from uiauto_electron.element import Element
from uiauto_electron.exceptions import (
    UIAutoError,
    ConfigError,
    TimeoutError,
    ElementNotFoundError,
    StaleElementError,
    ActionError,
)
from uiauto_electron.frames import FrameSwitcher
from uiauto_electron.interfaces import IDriver, Keys
from uiauto_electron.page import BasePage
from uiauto_electron.repository import LocatorMap, LocatorRepository
from uiauto_electron.session import Session
from uiauto_electron.waits import wait_until, wait_until_not, wait_for_count_to_settle
from uiauto_electron.pageobjects import (
    ContextMenu,
    ContextMenuItem,
    ContentAssist,
    ContentAssistItem,
    WebView,
    SideBarView,
    CustomTreeSection,
    TreeItem,
)

__all__ = [
    "TimeConfig",
    "TimeoutSettings",
    "Element",
    "UIAutoError",
    "ConfigError",
    "TimeoutError",
    "ElementNotFoundError",
    "StaleElementError",
    "ActionError",
    "FrameSwitcher",
    "IDriver",
    "Keys",
    "BasePage",
    "LocatorMap",
    "LocatorRepository",
    "Session",
    "wait_until",
    "wait_until_not",
    "wait_for_count_to_settle",
    "ContextMenu",
    "ContextMenuItem",
    "ContentAssist",
    "ContentAssistItem",
    "WebView",
    "SideBarView",
    "CustomTreeSection",
    "TreeItem",
]

__version__ = "1.0.0"
