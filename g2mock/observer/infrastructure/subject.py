"""ObserverSubject — registry of observers attached to one client instance."""

from g2mock.core.errors import ObserverRegistrationError
from g2mock.observer.domain.observer import Observer


class ObserverSubject:
    """Holds the observers of one client, keyed by observer id.

    Registration is idempotent per id: registering a second object with an
    id that is already present keeps the first one. Iteration order is not
    part of the contract.
    """

    def __init__(self) -> None:
        self._observers: dict[str, Observer] = {}

    def register_observer(self, observer: Observer) -> None:
        """Add observer unless an observer with the same id is registered.

        Raises:
            ObserverRegistrationError: if the observer reports an empty id.
        """
        observer_id = observer.get_observer_id()
        if not observer_id:
            raise ObserverRegistrationError(reason="observer id must not be empty")
        self._observers.setdefault(observer_id, observer)

    def unregister_observer(self, observer: Observer) -> None:
        """Remove the observer with observer's id; unknown ids are ignored."""
        self._observers.pop(observer.get_observer_id(), None)

    def has_observers(self) -> bool:
        return bool(self._observers)

    def observers(self) -> tuple[Observer, ...]:
        """Return a snapshot of the registered observers."""
        return tuple(self._observers.values())

    def __len__(self) -> int:
        return len(self._observers)
