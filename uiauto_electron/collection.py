"""
@file collection.py
@brief Reads live collections of child rows into item page objects.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, TypeVar

from .element import Element

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

DISABLED_MARKER = "disabled"


def exclude_disabled(row: Element) -> bool:
    """
    Row filter for menus: keep rows whose class attribute does not contain
    the substring ``disabled``.
    """
    classes = row.get_attribute("class") or ""
    return DISABLED_MARKER not in classes


def read_items(
    container: Element,
    row_locator: str,
    factory: Callable[[Element], T],
    include: Optional[Callable[[Element], bool]] = None,
    wait: bool = True,
) -> List[T]:
    """
    Snapshot the rows currently matching ``row_locator`` under ``container``.

    Rows come back in document (paint) order. Each row passing ``include`` is
    wrapped by ``factory`` and, when ``wait`` is set, awaited through the
    item's own ``wait()`` before it is appended, so half-rendered rows never
    reach the caller.
    """
    items: List[T] = []
    rows = container.find_all(row_locator)
    for row in rows:
        if include is not None and not include(row):
            continue
        item = factory(row)
        if wait:
            item.wait()
        items.append(item)
    _LOGGER.debug(
        "Read %d of %d rows '%s' under '%s'", len(items), len(rows), row_locator, container.path
    )
    return items
