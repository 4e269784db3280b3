# tests/test_logging.py
"""
Tests for action and timing logs.
"""

import json
import logging

import pytest

from uiauto_electron.actionlogger import ACTION_LOGGER
from uiauto_electron.context import ActionContextManager
from uiauto_electron.exceptions import TimeoutError
from uiauto_electron.pageobjects import ContextMenu
from uiauto_electron.timinglogger import TIMING_LOGGER
from uiauto_electron.waits import wait_until

from .fakes import FakeNode, document


@pytest.fixture
def action_log(tmp_path):
    path = tmp_path / "actions.jsonl"
    ACTION_LOGGER.configure(file_path=str(path), run_id="t1", format="jsonl")
    ACTION_LOGGER.enable()
    yield path
    ACTION_LOGGER.disable()
    ACTION_LOGGER.configure()


@pytest.fixture
def timing_log():
    TIMING_LOGGER.enable()
    yield
    TIMING_LOGGER.disable()


def _menu_session(make_session):
    item = FakeNode("li", classes="action-item", children=(
        FakeNode("a", classes="action-label", attrs={"aria-label": "Cut"}),
    ))
    return make_session(document(FakeNode(classes="monaco-menu-container", children=(item,))))


class TestActionLogger:
    """Tests for action_finish events."""

    def test_select_is_logged(self, make_session, action_log, caplog):
        caplog.set_level(logging.INFO, logger="uiauto_electron.actions")
        ContextMenu(_menu_session(make_session)).get_item("Cut").select()

        events = [json.loads(line) for line in action_log.read_text(encoding="utf-8").splitlines()]
        assert [e["action"] for e in events] == ["select"]
        assert events[0]["status"] == "ok"
        assert events[0]["run_id"] == "t1"
        assert events[0]["element"] == ".action-item"
        assert any("select" in record.getMessage() for record in caplog.records)

    def test_failure_is_logged_with_trace(self, make_session, action_log):
        session = make_session(document(FakeNode(classes="monaco-menu-container")))
        menu = ContextMenu(session)
        with pytest.raises(TimeoutError):
            menu.close()

        event = json.loads(action_log.read_text(encoding="utf-8").splitlines()[-1])
        assert event["status"] == "error"
        assert event["exception"]["type"] == "TimeoutError"
        assert "close" in event["metadata"]["trace"]
        assert ActionContextManager.current() is None

    def test_secrets_redacted(self, action_log):
        ACTION_LOGGER.log(action="type", metadata={"password": "hunter2", "field": "user"})
        event = json.loads(action_log.read_text(encoding="utf-8"))
        assert event["metadata"] == {"password": "***", "field": "user"}

    def test_disabled_by_default(self, make_session, caplog):
        caplog.set_level(logging.DEBUG, logger="uiauto_electron.actions")
        assert not ACTION_LOGGER.is_enabled()
        ContextMenu(_menu_session(make_session)).get_item("Cut").select()
        assert [r for r in caplog.records if r.name == "uiauto_electron.actions"] == []

    def test_invalid_format(self):
        with pytest.raises(ValueError):
            ACTION_LOGGER.configure(format="xml")


class TestTimingLogger:
    """Tests for poll events."""

    def test_wait_events(self, timing_log, caplog):
        caplog.set_level(logging.DEBUG, logger="uiauto_electron.timing")
        wait_until(lambda: True, timeout=1, description="ready flag")
        with pytest.raises(TimeoutError):
            wait_until(lambda: False, timeout=0.05, interval=0.01, description="never")

        messages = [record.getMessage() for record in caplog.records]
        assert any("event=wait_success" in m and "ready flag" in m for m in messages)
        assert any("event=wait_timeout" in m and "never" in m for m in messages)
        timeouts = [r for r in caplog.records if "wait_timeout" in r.getMessage()]
        assert timeouts[0].levelno == logging.WARNING
