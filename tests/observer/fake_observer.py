"""FakeObserver — records every notification it receives for assertion in tests."""

import json
from typing import Any


class FakeObserver:
    """Records raw notification messages in arrival order.

    Satisfies the Observer protocol structurally. Delivery is asynchronous,
    so tests drain the client's notifications before asserting.
    """

    def __init__(self, observer_id: str = "fake") -> None:
        self._observer_id = observer_id
        self.messages: list[str] = []

    def get_observer_id(self) -> str:
        return self._observer_id

    async def update_observer(self, message: str) -> None:
        self.messages.append(message)

    def notifications(self) -> list[dict[str, Any]]:
        return [json.loads(message) for message in self.messages]

    def notifications_for(self, event_id: int) -> list[dict[str, Any]]:
        return [n for n in self.notifications() if n["messageId"] == str(event_id)]


class FailingObserver:
    """Raises from every update_observer call."""

    def __init__(self, observer_id: str = "failing") -> None:
        self._observer_id = observer_id
        self.calls = 0

    def get_observer_id(self) -> str:
        return self._observer_id

    async def update_observer(self, message: str) -> None:
        self.calls += 1
        raise RuntimeError("observer is broken")
