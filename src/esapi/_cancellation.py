import threading
from typing import Callable, Optional


class CancellationToken:
    """A cooperative, thread-safe cancellation signal.

    The bindings never cancel anything themselves; the token is handed to the
    transport, which fails fast when it is already cancelled and aborts the
    exchange when it fires mid-flight (where the transport can).
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: list[Callable[[], None]] = []

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []

        for callback in callbacks:
            callback()

    def add_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Run ``callback`` once the token is cancelled.

        The callback runs immediately when the token is already cancelled.

        Returns:
            A function that unregisters the callback.
        """
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return lambda: self._remove(callback)

        callback()
        return lambda: None

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self._event.wait(timeout)

    def _remove(self, callback: Callable[[], None]) -> None:
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                pass

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"
