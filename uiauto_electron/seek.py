"""
@file seek.py
@brief Find a named row inside a virtualized (scroll-rendered) list.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Tuple, TypeVar

from .config import TimeConfig
from .element import Element
from .exceptions import TimeoutError
from .interfaces import Keys
from .waits import wait_until

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def prime_list(scrollable: Element, first_row: Element) -> None:
    """
    Press Page Up on ``scrollable`` until ``first_row`` is rendered.

    Brings a list that opened mid-scroll (or was left scrolled by an earlier
    search) back to its top.

    @throws TimeoutError if the first row does not render within ``list_prime``
    """
    config = TimeConfig.current().list_prime
    presses = {"count": 0}

    def _first_row_rendered() -> bool:
        if first_row.exists():
            return True
        scrollable.send_keys(Keys.PAGE_UP)
        presses["count"] += 1
        return False

    wait_until(
        _first_row_rendered,
        timeout=config.timeout,
        interval=config.interval,
        description=f"first row '{first_row.path}' to render",
    )
    if presses["count"]:
        _LOGGER.debug("List primed after %d Page Up presses", presses["count"])


def scroll_seek(
    scrollable: Element,
    name: str,
    first_row: Element,
    read_page: Callable[[], List[T]],
    get_label: Callable[[T], str],
    is_last: Callable[[T], bool],
    get_key: Optional[Callable[[T], Optional[str]]] = None,
) -> Optional[T]:
    """
    Page through a virtualized list until a row labelled exactly ``name``
    is rendered.

    Each page is a fresh ``read_page()`` snapshot. Paging stops when a row
    flagged as the list's last element has been seen, or when a Page Down
    leaves the same rows in view. Rows are told apart by ``get_key`` (their
    position in the list), so repeated labels do not end the search early;
    without a key the label is used. Both stops mean the list is exhausted
    and None is returned; so does a list whose first row never renders.
    """
    try:
        prime_list(scrollable, first_row)
    except TimeoutError as e:
        _LOGGER.warning("Giving up search for '%s': %s", name, e)
        return None

    previous_rows: Optional[List[Tuple[Optional[str], str]]] = None
    pages = 0
    while True:
        pages += 1
        last_seen = False
        rows: List[Tuple[Optional[str], str]] = []
        for item in read_page():
            label = get_label(item)
            if label == name:
                _LOGGER.debug("Found '%s' on page %d", name, pages)
                return item
            rows.append((get_key(item) if get_key else None, label))
            last_seen = last_seen or is_last(item)

        if last_seen:
            _LOGGER.debug("'%s' not found; reached last element after %d pages", name, pages)
            return None
        if rows == previous_rows:
            _LOGGER.debug("'%s' not found; list stopped scrolling after %d pages", name, pages)
            return None
        previous_rows = rows

        scrollable.send_keys(Keys.PAGE_DOWN)
        time.sleep(TimeConfig.current().scroll_page_pause)
