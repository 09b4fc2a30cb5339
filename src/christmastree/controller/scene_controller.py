"""
Scene Controller
================
The animation state machine, independent of any GUI toolkit.

Why is this file needed?
------------------------
1. Scheduling: the host only supplies one-shot timers. The controller arms the
   first one when the surface connects and re-arms after every accepted firing,
   so the animation keeps running until teardown.
2. Stale timers: every firing carries the token of the timer that produced it;
   only the token of the currently armed timer is accepted.
3. Testability: the host is reached through the Scheduler protocol, so tests
   drive ticks by hand.

Classes:
    TimerHandle: A pending one-shot timer that can be cancelled.
    Scheduler: What the controller needs from the host.
    SceneController: Connect / timer / shutdown handling.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Hashable, Optional, Protocol

from christmastree import config
from christmastree.model.animation import SceneAnimator, TickStats
from christmastree.model.scene import SceneState

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    @property
    def token(self) -> Hashable: ...
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, interval_ms: int, callback: Callable[[Hashable], None]) -> TimerHandle:
        """Arm a one-shot timer; `callback` receives the handle's token when it fires."""
        ...

    def request_redraw(self) -> None: ...


class SceneController:
    """Owns the SceneState and advances it on every accepted timer firing."""

    def __init__(
        self,
        scene: SceneState,
        animator: SceneAnimator,
        scheduler: Scheduler,
        interval_ms: int = config.TICK_INTERVAL_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.scene = scene
        self.animator = animator
        self.scheduler = scheduler
        self.interval_ms = interval_ms
        self._clock = clock

        self._pending: Optional[TimerHandle] = None
        self._connected = False
        self.tick_count = 0

    @property
    def connected(self) -> bool:
        return self._connected

    @property
    def pending_token(self) -> Optional[Hashable]:
        return None if self._pending is None else self._pending.token

    def on_connect(self) -> None:
        """The drawing surface became available: start the animation unless it is already running."""
        if self._connected:
            return
        self._connected = True
        self.scene.mark_updated(self._clock())
        self._arm()
        logger.info(f"Animation started ({self.interval_ms} ms tick).")

    def on_timer(self, token: Hashable) -> Optional[TickStats]:
        """
        Handle a timer firing.

        Returns the tick statistics, or None when the token is stale and the
        firing was ignored.
        """
        if self._pending is None or token != self._pending.token:
            logger.debug(f"Ignoring stale timer {token!r}.")
            return None

        self._pending = None
        stats = self.animator.tick(self.scene)
        self.tick_count += 1

        self._arm()
        self.scheduler.request_redraw()
        return stats

    def shutdown(self) -> None:
        """
        Cancel the pending tick. Firings that still arrive are ignored as stale.

        The next connect (the surface shown again) restarts the animation.
        """
        self._connected = False
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
            logger.info(f"Animation stopped after {self.tick_count} ticks.")

    def _arm(self) -> None:
        self._pending = self.scheduler.schedule(self.interval_ms, self.on_timer)
