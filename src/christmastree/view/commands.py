"""
Draw Commands
=============
The small drawing vocabulary the renderer needs, as a protocol plus plain
records.

Why is this file needed?
------------------------
1. Decoupling: the renderer can draw onto a QPainter or into a list without
   knowing which.
2. Testing: RecordingSurface captures the exact command sequence, which makes
   z-order and idempotency checkable without pixels.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, Union

from christmastree.model.geometry import Rgb


class DrawSurface(Protocol):
    def fill_rect(self, x: float, y: float, width: float, height: float, color: Rgb) -> None: ...
    def fill_polygon(self, points: Sequence[tuple[float, float]], color: Rgb) -> None: ...
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def translate(self, dx: float, dy: float) -> None: ...
    def scale(self, factor: float) -> None: ...


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Rgb


@dataclass(frozen=True)
class FillPolygon:
    points: tuple[tuple[float, float], ...]
    color: Rgb


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Restore:
    pass


@dataclass(frozen=True)
class Translate:
    dx: float
    dy: float


@dataclass(frozen=True)
class Scale:
    factor: float


DrawCommand = Union[FillRect, FillPolygon, Save, Restore, Translate, Scale]


class RecordingSurface:
    """A DrawSurface that stores every call as a DrawCommand."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Rgb) -> None:
        self.commands.append(FillRect(x, y, width, height, color))

    def fill_polygon(self, points: Sequence[tuple[float, float]], color: Rgb) -> None:
        self.commands.append(FillPolygon(tuple(points), color))

    def save(self) -> None:
        self.commands.append(Save())

    def restore(self) -> None:
        self.commands.append(Restore())

    def translate(self, dx: float, dy: float) -> None:
        self.commands.append(Translate(dx, dy))

    def scale(self, factor: float) -> None:
        self.commands.append(Scale(factor))
