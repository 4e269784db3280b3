# uiauto_electron/page.py
"""
@file page.py
@brief Scoped page-object base class.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Type, TypeVar, Union

from .element import Element

if TYPE_CHECKING:
    from .session import Session

P = TypeVar("P", bound="BasePage")


class BasePage:
    """
    Base for every UI region.

    A page object owns one root ``Element`` and reads its locators from the
    session's locator table under ``locator_key``. ``parent`` is the page (or
    bare element) it was loaded from; it is used only to scope the root
    locator and is not owned.

    Root selection:
      * ``base`` is an Element -> used as-is (rows handed out by collections)
      * ``base`` is a str      -> that locator, scoped under the parent
      * ``base`` is None       -> the table's ``elem`` locator, scoped under the parent
    """

    locator_key: str = ""

    def __init__(
        self,
        session: Session,
        base: Union[Element, str, None] = None,
        parent: Union[BasePage, Element, None] = None,
    ):
        self.session = session
        self.parent = parent
        if isinstance(base, Element):
            self.elem = base
        else:
            locator = base if base is not None else self.locator("elem")
            self.elem = Element(session.driver, locator, scope=self._parent_scope())

    def _parent_scope(self) -> Optional[Element]:
        if isinstance(self.parent, BasePage):
            return self.parent.elem
        return self.parent

    @property
    def driver(self):
        return self.session.driver

    @property
    def locators(self) -> Mapping[str, str]:
        """This component's row of the locator table."""
        return self.session.locators.section(self.locator_key)

    def locator(self, name: str, component: Optional[str] = None, /, **params: Any) -> str:
        """Locator string by symbolic name, placeholders filled from params."""
        return self.session.locators.get(component or self.locator_key, name, **params)

    def find(self, name: str, /, **params: Any) -> Element:
        """Lazy handle for a named locator under this page's root."""
        return self.elem.find(self.locator(name, **params))

    def find_all(self, name: str, /, **params: Any) -> List[Element]:
        return self.elem.find_all(self.locator(name, **params))

    def load(self, page_class: Type[P], *args: Any, **kwargs: Any) -> P:
        """Factory for child page objects sharing this page's session."""
        return page_class(self.session, *args, **kwargs)

    def is_displayed(self) -> bool:
        return self.elem.is_displayed()

    def wait(self, timeout: Optional[float] = None):
        """Wait until the root element is displayed; returns self."""
        self.elem.wait_for_displayed(timeout)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.elem.path!r})"
