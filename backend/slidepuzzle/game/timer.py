import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class CountdownTimer:
    """Calls ``callback`` every ``interval`` seconds on a daemon thread until cancelled."""

    def __init__(self, callback: Callable[[], None], interval: float = 1.0):
        self.callback = callback
        self.interval = interval
        self._stop = threading.Event()
        self._thread = None

    @property
    def active(self) -> bool:
        return self._thread is not None and not self._stop.is_set()

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="countdown", daemon=True)
        self._thread.start()

    def cancel(self) -> None:
        self._stop.set()

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            try:
                self.callback()
            except Exception:
                logger.exception("countdown callback failed; stopping timer")
                self._stop.set()


class DelayedCall:
    """One-shot call after ``delay`` seconds; cancellable until it fires."""

    def __init__(self, delay: float, fn: Callable[[], None]):
        self._timer = threading.Timer(delay, fn)
        self._timer.daemon = True

    def start(self) -> "DelayedCall":
        self._timer.start()
        return self

    def cancel(self) -> None:
        self._timer.cancel()


def schedule(delay: float, fn: Callable[[], None]) -> DelayedCall:
    return DelayedCall(delay, fn).start()
