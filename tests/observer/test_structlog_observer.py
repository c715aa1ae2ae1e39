"""Tests for StructlogObserver."""

import json

from structlog.testing import capture_logs

from g2mock.observer.infrastructure.structlog_observer import StructlogObserver


class TestStructlogObserver:
    """Notifications are logged as structured events."""

    def test_default_observer_id(self) -> None:
        assert StructlogObserver().get_observer_id() == "structlog"

    async def test_logs_notification_fields(self) -> None:
        observer = StructlogObserver(observer_id="audit")
        message = json.dumps(
            {"subjectId": "6024", "messageId": "8001", "recordID": "1"}
        )

        with capture_logs() as logs:
            await observer.update_observer(message)

        assert len(logs) == 1
        assert logs[0]["event"] == "observer.notified"
        assert logs[0]["observer_id"] == "audit"
        assert logs[0]["subject_id"] == "6024"
        assert logs[0]["message_id"] == "8001"
        assert logs[0]["details"]["recordID"] == "1"

    async def test_malformed_message_logs_warning(self) -> None:
        observer = StructlogObserver()

        with capture_logs() as logs:
            await observer.update_observer("not json")

        assert len(logs) == 1
        assert logs[0]["event"] == "observer.malformed_notification"
        assert logs[0]["log_level"] == "warning"
