from loguru import logger
from typing import Callable, List


class Subscription:
    """
    Handle returned by Signal.connect().
    Disposing it disconnects the callback; disposing twice is a no-op.
    """
    def __init__(self, signal: "Signal", callback: Callable):
        self._signal = signal
        self._callback = callback
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active and self._signal.is_connected(self._callback)

    def dispose(self):
        """Disconnect the callback from its signal."""
        if not self._active:
            return
        self._active = False
        self._signal.disconnect(self._callback)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()


class Signal:
    """
    A simple observer pattern implementation (Synchronous).
    Allows subscribers to connect to this signal and receive notifications.
    Equivalent to Qt's Signal or C#'s event.
    """
    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable) -> Subscription:
        """Connect a callback function to this signal."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)
        return Subscription(self, callback)

    def disconnect(self, callback: Callable):
        """Disconnect a callback function from this signal."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def is_connected(self, callback: Callable) -> bool:
        return callback in self._subscribers

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def clear(self):
        """Drop every subscriber."""
        self._subscribers.clear()

    def emit(self, *args, **kwargs):
        """Broadcast arguments to all subscribers synchronously."""
        # Snapshot: a subscriber may disconnect itself while being notified
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' error in subscriber '{sub}': {e}")
