"""Tests for logging utilities."""

import logging

import pytest

from axemacal.utils.logging_utils import LoggerMixin
from axemacal.utils.logging_utils import log_execution


class Worker(LoggerMixin):
    def __init__(self):
        super().__init__()
        self.set_log_context(service="worker")

    @log_execution(level='INFO')
    def run(self, fail=False):
        if fail:
            raise RuntimeError("boom")
        return 42

def test_context_is_appended(caplog):
    worker = Worker()

    with caplog.at_level(logging.DEBUG):
        worker.warning("Skipping duplicate event", uid="x/1")

    assert caplog.messages == ["Skipping duplicate event | Context: service=worker | uid=x/1"]

def test_message_without_context():
    worker = LoggerMixin()
    assert worker._format_message("plain") == "plain"

def test_log_execution_timing(caplog):
    with caplog.at_level(logging.INFO):
        assert Worker().run() == 42

    assert caplog.messages[0] == "Calling run"
    assert caplog.messages[1].startswith("run completed in ")

def test_log_execution_reraises(caplog):
    with caplog.at_level(logging.DEBUG), pytest.raises(RuntimeError, match="boom"):
        Worker().run(fail=True)

    assert any(message.startswith("run failed after ") for message in caplog.messages)
