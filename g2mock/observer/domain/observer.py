"""Observer port — listeners notified about every mock client call."""

from typing import Protocol


class Observer(Protocol):
    """Observer port for client call notifications.

    Identity is the observer id: two objects reporting the same id are the
    same observer as far as a registry is concerned. Implementations may log
    to structlog, record for tests, or forward elsewhere.
    """

    def get_observer_id(self) -> str: ...

    async def update_observer(self, message: str) -> None: ...
