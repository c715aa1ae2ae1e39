"""Tests for Notifier — message shape and fire-and-forget delivery."""

import asyncio
import json

import pytest
from structlog.testing import capture_logs

from g2mock.observer.infrastructure.notifier import Notifier
from tests.observer.fake_observer import FailingObserver, FakeObserver


class _GatedObserver:
    """Blocks in update_observer until the gate is opened."""

    def __init__(self) -> None:
        self.gate = asyncio.Event()
        self.messages: list[str] = []

    def get_observer_id(self) -> str:
        return "gated"

    async def update_observer(self, message: str) -> None:
        await self.gate.wait()
        self.messages.append(message)


class TestNotifierBuildMessage:
    """Messages are flat JSON objects of strings."""

    def test_includes_details_and_envelope(self) -> None:
        notifier = Notifier(subject_id=6022)

        message = json.loads(
            notifier.build_message(event_id=8001, details={"configComments": "v1"})
        )

        assert message["configComments"] == "v1"
        assert message["subjectId"] == "6022"
        assert message["messageId"] == "8001"
        assert message["messageTime"].isdigit()
        assert "error" not in message

    def test_every_value_is_a_string(self) -> None:
        notifier = Notifier(subject_id=6024)

        message = json.loads(notifier.build_message(event_id=8001, details={}))

        assert all(isinstance(value, str) for value in message.values())

    def test_error_is_included_as_text(self) -> None:
        notifier = Notifier(subject_id=6026)

        message = json.loads(
            notifier.build_message(
                event_id=8008, details={}, error=RuntimeError("rejected")
            )
        )

        assert message["error"] == "rejected"

    def test_unserialisable_detail_raises_type_error(self) -> None:
        notifier = Notifier(subject_id=6026)

        with pytest.raises(TypeError):
            bad: dict[str, object] = {"bad": object()}
            notifier.build_message(event_id=1, details=bad)  # type: ignore[arg-type]

    def test_subject_id_property(self) -> None:
        assert Notifier(subject_id=6024).subject_id == 6024


class TestNotifierDelivery:
    """Delivery is scheduled, not awaited, and every observer is reached."""

    async def test_every_observer_receives_message(self) -> None:
        notifier = Notifier(subject_id=6024)
        first = FakeObserver(observer_id="a")
        second = FakeObserver(observer_id="b")

        notifier.notify([first, second], event_id=8001, details={"recordID": "1"})
        await notifier.drain()

        assert len(first.messages) == 1
        assert first.messages == second.messages

    async def test_notify_returns_before_delivery_completes(self) -> None:
        notifier = Notifier(subject_id=6024)
        observer = _GatedObserver()

        notifier.notify([observer], event_id=8001, details={})

        assert notifier.pending_count() == 1
        await asyncio.sleep(0)
        assert observer.messages == []

        observer.gate.set()
        await notifier.drain()

        assert len(observer.messages) == 1
        assert notifier.pending_count() == 0

    async def test_no_observers_schedules_nothing(self) -> None:
        notifier = Notifier(subject_id=6024)

        notifier.notify([], event_id=8001, details={})

        assert notifier.pending_count() == 0

    async def test_failing_observer_does_not_block_others(self) -> None:
        notifier = Notifier(subject_id=6022)
        failing = FailingObserver()
        healthy = FakeObserver(observer_id="healthy")

        with capture_logs() as logs:
            notifier.notify([failing, healthy], event_id=8003, details={})
            await notifier.drain()

        assert failing.calls == 1
        assert len(healthy.messages) == 1
        failures = [e for e in logs if e["event"] == "observer.delivery_failed"]
        assert len(failures) == 1
        assert failures[0]["observer_id"] == "failing"
        assert failures[0]["subject_id"] == 6022

    async def test_unserialisable_details_are_dropped(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        notifier = Notifier(subject_id=6022)
        observer = FakeObserver()

        bad: dict[str, object] = {"bad": object()}
        notifier.notify([observer], event_id=1, details=bad)  # type: ignore[arg-type]
        await notifier.drain()

        assert observer.messages == []
        assert "Error:" in capsys.readouterr().err
