"""
Scene State (Data Model)
========================
This module defines the data structures of the animated scene.

Why is this file needed?
------------------------
1. State Management: It holds the lights and snowflakes in one place. A single
   SceneState instance is owned by the controller; ticks mutate it in place and
   the renderer only reads it.
2. Decoupling: The generator, the animator and the renderer all exchange this
   object instead of knowing about each other.

Classes:
    Light: A single light on the tree.
    Snowflake: A single falling snowflake.
    SceneState: The container for one scene.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import time

from christmastree import config
from christmastree.model.geometry import Point, Rgb, Triangle


TREE_TRIANGLE = Triangle(
    a=Point(*config.TREE_TOP),
    b=Point(*config.TREE_LEFT),
    c=Point(*config.TREE_RIGHT),
)


@dataclass
class Light:
    """A single light on the tree. Its color changes while it twinkles."""
    position: Point
    color: Rgb


@dataclass
class Snowflake:
    """A single snowflake. `fall_speed` is in design units per tick."""
    position: Point
    fall_speed: float


@dataclass
class SceneState:
    """
    All mutable state of one scene.

    The collections are fixed-size for the lifetime of the scene: entities are
    updated in place, never added or removed. List order carries no meaning for
    drawing; the z-order is set by the renderer's draw phases.
    """
    lights: list[Light] = field(default_factory=list)
    snowflakes: list[Snowflake] = field(default_factory=list)

    # Informational only. Snowflakes advance by a fixed speed per tick, not by elapsed time.
    last_update: float = field(default_factory=time.monotonic)

    def mark_updated(self, timestamp: float | None = None) -> None:
        self.last_update = time.monotonic() if timestamp is None else timestamp

    @property
    def population(self) -> tuple[int, int]:
        """(number of lights, number of snowflakes)"""
        return len(self.lights), len(self.snowflakes)
