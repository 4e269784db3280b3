# tests/test_collection.py
"""
Tests for reading row collections.
"""

import pytest

from uiauto_electron.collection import exclude_disabled, read_items
from uiauto_electron.element import Element
from uiauto_electron.exceptions import TimeoutError
from uiauto_electron.page import BasePage

from .fakes import FakeNode, document


def _list(*rows):
    return document(FakeNode(classes="list", children=rows))


class TestReadItems:
    """Tests for read_items."""

    def test_document_order(self, make_session):
        session = make_session(_list(*(FakeNode(classes="row", text=t) for t in "abc")))
        container = Element(session.driver, ".list")
        items = read_items(container, ".row", lambda row: BasePage(session, row))
        assert [item.elem.get_text() for item in items] == ["a", "b", "c"]

    def test_filter(self, make_session):
        session = make_session(_list(
            FakeNode(classes="row", text="on"),
            FakeNode(classes="row is-disabled", text="off"),
        ))
        container = Element(session.driver, ".list")
        items = read_items(container, ".row", lambda row: BasePage(session, row), include=exclude_disabled)
        assert [item.elem.get_text() for item in items] == ["on"]

    def test_rows_are_awaited(self, make_session):
        """Should not hand out a row that never becomes visible."""
        session = make_session(_list(FakeNode(classes="row", displayed=False)))
        container = Element(session.driver, ".list")
        with pytest.raises(TimeoutError):
            read_items(container, ".row", lambda row: BasePage(session, row))
        assert len(read_items(container, ".row", lambda row: BasePage(session, row), wait=False)) == 1

    def test_missing_container(self, make_session):
        session = make_session(document())
        assert read_items(Element(session.driver, ".list"), ".row", lambda row: row) == []


class TestExcludeDisabled:
    """Tests for the class-substring filter."""

    @pytest.mark.parametrize("classes,expected", [
        ("action-item", True),
        ("action-item disabled", False),
        ("action-item action-disabled", False),
        ("", True),
    ])
    def test_class_substring(self, make_session, classes, expected):
        session = make_session(document(FakeNode(classes=classes, id="target")))
        assert exclude_disabled(Element(session.driver, "#target")) is expected
