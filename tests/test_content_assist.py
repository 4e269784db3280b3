# tests/test_content_assist.py
"""
Tests for the content assist popup and its virtualized suggestion list.
"""

import pytest

from uiauto_electron.exceptions import TimeoutError
from uiauto_electron.interfaces import Keys
from uiauto_electron.page import BasePage
from uiauto_electron.pageobjects import ContentAssist, ContentAssistItem

from .fakes import FakeNode, VirtualList, document


def _labels(count, replace=None):
    labels = [f"item{i}" for i in range(count)]
    for index, label in (replace or {}).items():
        labels[index] = label
    return labels


class _Popup:
    """Suggest widget with a virtual list and an optional status message."""

    def __init__(self, labels, message=None, **list_options):
        self.message = FakeNode(classes="message", text=message or "", displayed=message is not None)
        self.rows = FakeNode(classes="monaco-list-rows")
        self.list_node = FakeNode(classes="monaco-list", children=(self.rows,))
        self.widget = FakeNode(
            attrs={"widgetid": "editor.widget.suggestWidget"},
            children=(self.message, self.list_node),
        )
        self.list = VirtualList(self.rows, labels, **list_options)
        self.list_node.on_keys = self.list.on_keys
        self.doc = document(FakeNode(classes="editor", children=(self.widget,)))


@pytest.fixture
def open_assist(make_session):
    def _open(popup):
        session = make_session(popup.doc)
        return ContentAssist(session, BasePage(session, ".editor"))
    return _open


class TestGetItems:
    """Tests for reading rendered suggestions."""

    def test_reads_rendered_rows(self, open_assist):
        """Should return the rendered page top to bottom."""
        assist = open_assist(_Popup(_labels(8)))
        items = assist.get_items()
        assert [item.get_label() for item in items] == [f"item{i}" for i in range(5)]
        assert all(isinstance(item, ContentAssistItem) for item in items)

    def test_loading_message_times_out(self, open_assist):
        """Should raise TimeoutError while suggestions are still loading."""
        assist = open_assist(_Popup(_labels(3), message="Loading..."))
        assert not assist.is_loaded()
        with pytest.raises(TimeoutError):
            assist.get_items()

    def test_no_suggestions_counts_as_loaded(self, open_assist):
        """Should treat the empty-result message as loaded."""
        assist = open_assist(_Popup([], message="No suggestions."))
        assert assist.is_loaded()
        assert assist.get_items() == []


class TestGetItem:
    """Tests for scroll-seek through suggestions."""

    def test_primes_then_pages_down(self, open_assist):
        """Should press Page Up until the list renders, then page down to the match."""
        popup = _Popup(_labels(15, {12: "foo"}), blank_page_ups=3)
        item = open_assist(popup).get_item("foo")

        assert item is not None
        assert item.get_label() == "foo"
        assert popup.list.page_ups == 3
        assert popup.list.page_downs == 2

    def test_match_on_first_page_needs_no_paging(self, open_assist):
        """Should not page down when the match is already visible."""
        popup = _Popup(_labels(15))
        assert open_assist(popup).get_item("item2").label == "item2"
        assert popup.list.page_ups == 0
        assert popup.list.page_downs == 0

    def test_exact_match_only(self, open_assist):
        """Should not accept prefixes of the wanted label."""
        popup = _Popup(["print", "println", "printf"])
        assert open_assist(popup).get_item("printl") is None

    def test_absent_stops_at_last_element(self, open_assist):
        """Should stop once the last-element row was read."""
        popup = _Popup(_labels(15))
        assert open_assist(popup).get_item("missing") is None
        assert popup.list.page_downs == 2

    def test_absent_stops_when_list_stops_scrolling(self, open_assist):
        """Should stop when a page down leaves the rows unchanged."""
        popup = _Popup(_labels(12), mark_last=False)
        assert open_assist(popup).get_item("missing") is None
        assert popup.list.page_downs == 3

    def test_repeated_labels_before_match(self, open_assist):
        """Should keep paging past a full page of identical labels."""
        popup = _Popup(["dup"] * 10 + ["foo"])
        item = open_assist(popup).get_item("foo")
        assert item is not None
        assert item.get_label() == "foo"
        assert popup.list.page_downs == 2

    def test_repeated_labels_without_last_marker(self, open_assist):
        """Should tell identical labels apart by row index when no row is marked last."""
        popup = _Popup(["dup"] * 15 + ["foo"], mark_last=False)
        assert open_assist(popup).get_item("foo").get_label() == "foo"
        assert popup.list.page_downs == 3

    def test_repeated_searches_are_idempotent(self, open_assist):
        """Should find the same row again after the list was left scrolled."""
        popup = _Popup(_labels(15, {12: "foo"}))
        assist = open_assist(popup)

        assert assist.get_item("item3").get_label() == "item3"
        assert assist.get_item("foo").get_label() == "foo"
        assert popup.list.offset == 10
        again = assist.get_item("item3")
        assert again is not None
        assert again.get_label() == "item3"
        assert popup.list.offset == 0

    def test_first_row_never_renders(self, open_assist, fast_timings):
        """Should give up with None when priming does not bring the list back."""
        popup = _Popup(_labels(5), blank_page_ups=10_000)
        fast_timings.list_prime = fast_timings.list_prime.with_overrides(timeout=0.1, interval=0.01)
        assert open_assist(popup).get_item("item1") is None

    def test_loading_list_returns_none(self, open_assist):
        """Should report a list stuck loading as not found."""
        popup = _Popup(_labels(5), message="Loading...")
        assert open_assist(popup).get_item("item1") is None

    def test_page_keys_go_to_the_list(self, open_assist):
        """Should send paging keys to the list node."""
        popup = _Popup(_labels(15, {12: "foo"}))
        assist = open_assist(popup)
        assist.get_item("foo")
        targets = {
            node for node, keys in assist.session.driver.key_log if Keys.PAGE_DOWN in keys
        }
        assert targets == {popup.list_node}
