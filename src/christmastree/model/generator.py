"""
Random scene generation.

All randomness comes from an explicitly owned `numpy.random.Generator`, so a
seeded generator reproduces the same scene.
"""
from __future__ import annotations

import logging

import numpy as np

from christmastree import config
from christmastree.model.geometry import Point, Rgb, Triangle
from christmastree.model.scene import TREE_TRIANGLE, Light, SceneState, Snowflake

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create the random source shared by the generator and the animator."""
    return np.random.default_rng(seed)


class SceneGenerator:
    """Produces the initial lights and snowflakes, and fresh values for respawns."""

    def __init__(self, rng: np.random.Generator, tree: Triangle = TREE_TRIANGLE) -> None:
        self.rng = rng
        self.tree = tree

    # ------------------------------------------------------------------------------
    # Single values
    # ------------------------------------------------------------------------------

    def random_color(self) -> Rgb:
        """Three independent uniform channels in [0, 1)."""
        r, g, b = self.rng.random(3)
        return Rgb(float(r), float(g), float(b))

    def random_tree_point(self) -> Point:
        """
        Uniform point inside the tree triangle.

        Two uniforms (r1, r2) cover the unit square; the half above the diagonal
        r1 + r2 = 1 is folded back onto the lower half, so every draw lands in
        the triangle and no rejection loop is needed.
        """
        r1, r2 = self.rng.random(2)
        if r1 + r2 > 1.0:
            u, v = 1.0 - r1, 1.0 - r2
        else:
            u, v = r1, r2
        return self.tree.point_at(float(u), float(v))

    def random_spawn_point(self) -> Point:
        """A point in the band just above the top edge of the scene."""
        x = self.rng.uniform(*config.SNOW_SPAWN_X_RANGE)
        y = self.rng.uniform(*config.SNOW_SPAWN_Y_RANGE)
        return Point(float(x), float(y))

    def random_fall_speed(self) -> float:
        return float(self.rng.uniform(*config.SNOW_SPEED_RANGE))

    # ------------------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------------------

    def generate_lights(self, count: int = config.LIGHT_COUNT) -> list[Light]:
        """Create `count` randomly colored lights scattered over the tree."""
        return [
            Light(position=self.random_tree_point(), color=self.random_color())
            for _ in range(count)
        ]

    def generate_snowflakes(self, count: int = config.SNOWFLAKE_COUNT) -> list[Snowflake]:
        """Create `count` snowflakes slightly above the top edge."""
        return [
            Snowflake(position=self.random_spawn_point(), fall_speed=self.random_fall_speed())
            for _ in range(count)
        ]

    def generate_scene(self) -> SceneState:
        scene = SceneState(
            lights=self.generate_lights(),
            snowflakes=self.generate_snowflakes(),
        )
        logger.debug(f"Generated scene with {len(scene.lights)} lights and {len(scene.snowflakes)} snowflakes.")
        return scene
