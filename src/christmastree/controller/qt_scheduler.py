from __future__ import annotations

from functools import partial
from itertools import count
from typing import Callable, Hashable

from PySide6.QtCore import QObject, QTimer


class QtTimerHandle:
    """A single-shot QTimer identified by an integer token."""

    def __init__(self, timer: QTimer, token: int) -> None:
        self._timer = timer
        self._token = token
        self._done = False

    @property
    def token(self) -> int:
        return self._token

    @property
    def done(self) -> bool:
        """True once the timer has fired or was cancelled."""
        return self._done

    def cancel(self) -> None:
        if self._done:
            return
        self._timer.stop()
        self._release()

    def _release(self) -> None:
        self._done = True
        self._timer.deleteLater()


class QtScheduler(QObject):
    """
    Scheduler backed by the Qt event loop.

    Each `schedule` call creates its own single-shot QTimer, so a late firing
    of an older timer still reports its own token and can be told apart.
    """

    def __init__(self, request_redraw: Callable[[], None], parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._request_redraw = request_redraw
        self._tokens = count(1)

    def schedule(self, interval_ms: int, callback: Callable[[Hashable], None]) -> QtTimerHandle:
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(interval_ms)

        handle = QtTimerHandle(timer, next(self._tokens))
        timer.timeout.connect(partial(self._fire, handle, callback))
        timer.start()
        return handle

    def request_redraw(self) -> None:
        self._request_redraw()

    @staticmethod
    def _fire(handle: QtTimerHandle, callback: Callable[[Hashable], None]) -> None:
        handle._release()
        callback(handle.token)
