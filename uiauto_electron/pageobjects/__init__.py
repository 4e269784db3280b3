"""Page objects for workbench regions."""

from .menu import Menu, MenuItem, ContextMenu, ContextMenuItem
from .content_assist import ContentAssist, ContentAssistItem
from .webview import WebView
from .tree import ViewSection, CustomTreeSection, TreeItem
from .sidebar import SideBarView, ViewTitlePart, ViewContent

__all__ = [
    "Menu",
    "MenuItem",
    "ContextMenu",
    "ContextMenuItem",
    "ContentAssist",
    "ContentAssistItem",
    "WebView",
    "ViewSection",
    "CustomTreeSection",
    "TreeItem",
    "SideBarView",
    "ViewTitlePart",
    "ViewContent",
]
