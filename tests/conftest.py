"""Shared fixtures: seeded random source, fake scheduler, offscreen QApplication."""

from __future__ import annotations

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from typing import Callable, Hashable, Iterator

import numpy as np
import pytest

from christmastree.model.generator import SceneGenerator, make_rng


class FakeHandle:
    def __init__(self, token: int, interval_ms: int, callback: Callable[[Hashable], None]) -> None:
        self.token = token
        self.interval_ms = interval_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.callback(self.token)


class FakeScheduler:
    """Records armed timers; tests fire them by hand."""

    def __init__(self) -> None:
        self.handles: list[FakeHandle] = []
        self.redraws = 0

    def schedule(self, interval_ms: int, callback: Callable[[Hashable], None]) -> FakeHandle:
        handle = FakeHandle(len(self.handles) + 1, interval_ms, callback)
        self.handles.append(handle)
        return handle

    def request_redraw(self) -> None:
        self.redraws += 1

    @property
    def last(self) -> FakeHandle:
        return self.handles[-1]


@pytest.fixture()
def rng() -> np.random.Generator:
    return make_rng(12345)


@pytest.fixture()
def generator(rng: np.random.Generator) -> SceneGenerator:
    return SceneGenerator(rng)


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
