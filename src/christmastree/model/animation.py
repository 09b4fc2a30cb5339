"""
The per-tick update rule of the scene.
"""
from __future__ import annotations

from dataclasses import dataclass

from christmastree import config
from christmastree.model.generator import SceneGenerator
from christmastree.model.scene import SceneState


@dataclass(frozen=True)
class TickStats:
    """What a single tick changed."""
    recolored: int
    respawned: int


class SceneAnimator:
    """
    Advances a SceneState by one tick.

    Each light is recolored with probability `twinkle_probability`. Each
    snowflake falls by its own speed and, once it has passed the bottom of the
    design area, is moved back to a random spot above the top edge. The
    collections are mutated in place and never change size.
    """

    def __init__(
        self,
        generator: SceneGenerator,
        twinkle_probability: float = config.LIGHT_TWINKLE_PROBABILITY,
        floor: float = config.DESIGN_HEIGHT,
    ) -> None:
        if not 0.0 <= twinkle_probability <= 1.0:
            raise ValueError(f"twinkle_probability must be in [0, 1], got {twinkle_probability}")
        self.generator = generator
        self.twinkle_probability = twinkle_probability
        self.floor = floor

    def tick(self, scene: SceneState) -> TickStats:
        rng = self.generator.rng

        # 1. Twinkle
        recolored = 0
        for light in scene.lights:
            if rng.random() < self.twinkle_probability:
                light.color = self.generator.random_color()
                recolored += 1

        # 2. Snowfall
        respawned = 0
        for flake in scene.snowflakes:
            flake.position.y += flake.fall_speed
            if flake.position.y > self.floor:
                spawn = self.generator.random_spawn_point()
                flake.position.x = spawn.x
                flake.position.y = spawn.y
                respawned += 1

        return TickStats(recolored=recolored, respawned=respawned)
