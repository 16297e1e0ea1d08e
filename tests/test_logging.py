"""
Structured logging tests - operation messages and payload sanitisation.
"""

import logging

import pytest

from remotetasks.core.collection import AppendOnlyCollection
from remotetasks.core.drafts import TimeVaultDraft
from remotetasks.core.errors import RecordValidationError
from remotetasks.core.schema import TimeVaultEntry
from remotetasks.util.logging import StructuredLogger, logger, sanitize_payload


@pytest.fixture
def capture(caplog):
    caplog.set_level(logging.DEBUG, logger="remotetasks")
    return caplog


class TestStructuredLogger:
    """Test the message format of structured operations."""

    def test_log_operation_format(self, capture):
        StructuredLogger().log_operation("favorites.toggle", "success", {"key": "London"})
        assert "Operation: favorites.toggle, Status: success, Details: {'key': 'London'}" in capture.text

    def test_log_selection_cleared(self, capture):
        logger.log_selection("weatherwiz.location")
        assert "Operation: weatherwiz.location.selection, Status: cleared" in capture.text

    def test_log_selection_selected(self, capture):
        logger.log_selection("weatherwiz.location", "abc")
        assert "Status: selected" in capture.text
        assert "'record_id': 'abc'" in capture.text

    def test_log_validation_error(self, capture):
        logger.log_validation_error("studyhive.groups.append", "name", "name cannot be empty")
        assert "studyhive.groups.append.validation" in capture.text
        assert "rejected" in capture.text

    def test_log_pick(self, capture):
        logger.log_pick("timevault.photos", 2)
        assert "Operation: picker.timevault.photos, Status: delivered, Details: {'payload_count': 2}" in capture.text

    def test_handler_not_duplicated(self):
        first = StructuredLogger("remotetasks.test")
        second = StructuredLogger("remotetasks.test")
        assert first.logger is second.logger
        assert len(second.logger.handlers) == 1

    def test_debug_env_forces_debug_level(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        assert StructuredLogger("remotetasks.test.debug").logger.level == logging.DEBUG

    def test_log_level_used_without_debug(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "false")
        monkeypatch.setattr("remotetasks.util.logging.LOG_LEVEL", "WARNING")
        assert StructuredLogger("remotetasks.test.warning").logger.level == logging.WARNING


class TestSanitizePayload:
    """Test payload sanitisation."""

    def test_long_strings_truncated(self):
        result = sanitize_payload({"comment": "x" * 150})
        assert result["comment"] == "x" * 100 + "..."

    def test_photo_lists_summarised(self):
        assert sanitize_payload({"photos": [b"a", b"b"]}) == {"photos": "[2 item(s)]"}

    def test_bytes_summarised(self):
        assert sanitize_payload({"blob": b"abcd"}) == {"blob": "[4 bytes]"}

    def test_nested_values(self):
        assert sanitize_payload({"meta": {"tags": ["a", "b"]}, "count": 3}) == {
            "meta": {"tags": ["a", "b"]},
            "count": 3,
        }


def test_append_logs_without_raw_photo_bytes(capture):
    entries = AppendOnlyCollection(
        "timevault.entries",
        TimeVaultDraft,
        lambda d: TimeVaultEntry(photos=tuple(d.photos), comment=d.comment, open_date=None),
    )
    entries.append(photos=[b"\xff\xd8secret"], comment="hello")

    assert "timevault.entries.append" in capture.text
    assert "[1 item(s)]" in capture.text
    assert "secret" not in capture.text


def test_rejected_append_is_logged(capture):
    entries = AppendOnlyCollection(
        "timevault.entries",
        TimeVaultDraft,
        lambda d: TimeVaultEntry(photos=(), comment=d.comment, open_date=None),
    )
    with pytest.raises(RecordValidationError):
        entries.append(comment="")

    assert "timevault.entries.append.validation" in capture.text
