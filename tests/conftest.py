# tests/conftest.py
import pytest

from uiauto_electron.config import TimeConfig
from uiauto_electron.context import ActionContextManager
from uiauto_electron.repository import LocatorMap
from uiauto_electron.session import Session

from .fakes import FakeDriver

# Same shape as the bundled tables, restricted to selectors the fake DOM matches.
TEST_LOCATORS = {
    "version": "1.0.0",
    "components": {
        "EditorView": {
            "webView": "div[aria-flowto]",
            "flowToAttribute": "aria-flowto",
        },
        "WebView": {
            "elem": ".editor-instance",
            "iframe": "iframe",
            "activeFrame": "#active-frame",
        },
        "ContextMenu": {
            "elem": ".monaco-menu-container",
            "itemElement": ".action-item",
            "itemLabel": ".action-label",
            "itemText": "aria-label",
            "itemNesting": ".submenu-indicator",
        },
        "ContentAssist": {
            "elem": "div[widgetid='editor.widget.suggestWidget']",
            "message": ".message",
            "itemList": ".monaco-list",
            "itemRows": ".monaco-list-rows",
            "itemRow": ".monaco-list-row",
            "firstItem": ".monaco-list-row[data-index='0']",
            "itemLabel": ".label-name",
            "lastElementAttribute": "data-last-element",
            "indexAttribute": "data-index",
        },
        "SideBarView": {"elem": "#sidebar"},
        "ViewTitlePart": {"elem": ".composite", "title": "h2"},
        "ViewContent": {
            "elem": ".content",
            "progress": ".monaco-progress-container",
            "section": ".split-view-view",
        },
        "ViewSection": {
            "title": "h3.title",
            "header": ".pane-header",
            "expandedAttr": "aria-expanded",
        },
        "CustomTreeSection": {
            "rowContainer": ".monaco-list",
            "itemRow": ".monaco-list-row",
            "labelledNode": "[aria-label]",
            "labelAttr": "aria-label",
            "levelAttr": "aria-level",
        },
        "TreeItem": {
            "itemLabel": ".monaco-icon-label",
            "twistie": ".monaco-tl-twistie",
            "labelAttr": "aria-label",
            "levelAttr": "aria-level",
            "expandedAttr": "aria-expanded",
            "indexAttr": "data-index",
        },
    },
}


@pytest.fixture(autouse=True)
def fast_timings():
    """No settle pauses and short budgets so negative paths stay quick."""
    TimeConfig.reset_to_defaults()
    ActionContextManager.clear()
    with TimeConfig.override(
        after_select_pause=0,
        scroll_page_pause=0,
        after_expand_pause=0,
        exists_wait={"timeout": 1.0, "interval": 0.01},
        visibility_wait={"timeout": 1.0, "interval": 0.01},
        disappear_wait={"timeout": 1.0, "interval": 0.01},
        menu_settle={"timeout": 0.5, "interval": 0.01},
        submenu_probe={"timeout": 0.1, "interval": 0.01},
        suggest_loaded={"timeout": 0.2, "interval": 0.01},
        list_prime={"timeout": 1.0, "interval": 0.0},
        tree_container={"timeout": 0.3, "interval": 0.01},
        frame_container={"timeout": 0.3, "interval": 0.01},
        frame_poll={"timeout": 0.3, "interval": 0.01},
        active_frame={"timeout": 0.3, "interval": 0.01},
    ) as config:
        yield config
    TimeConfig.reset_to_defaults()


@pytest.fixture
def locator_map():
    return LocatorMap.from_dict(TEST_LOCATORS)


@pytest.fixture
def make_session(locator_map):
    """Build a Session over a FakeDriver showing ``doc``."""
    def _make(doc=None, driver=None):
        return Session(driver or FakeDriver(doc), locator_map)
    return _make
