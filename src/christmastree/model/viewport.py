"""
Viewport fitting.

Maps the fixed design area onto a viewport of arbitrary size with a uniform
scale, centered, so the whole scene stays visible with a 1:1 aspect ratio.
Bars of background are left on the sides (pillarbox) or top and bottom
(letterbox) when the viewport aspect differs from the design aspect.
"""
from __future__ import annotations

from dataclasses import dataclass
import math

from christmastree import config


@dataclass(frozen=True)
class Viewport:
    """Size of the actual drawing surface in pixels."""
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0.0:
                raise ValueError(f"Viewport {name} must be finite and non-negative, got {value}")


@dataclass(frozen=True)
class ViewportTransform:
    """Design space -> viewport space: p' = offset + scale * p."""
    scale: float
    offset_x: float
    offset_y: float

    @classmethod
    def fit(
        cls,
        viewport: Viewport,
        design_width: float = config.DESIGN_WIDTH,
        design_height: float = config.DESIGN_HEIGHT,
    ) -> ViewportTransform:
        scale = min(viewport.width / design_width, viewport.height / design_height)
        offset_x = (viewport.width - design_width * scale) / 2.0
        offset_y = (viewport.height - design_height * scale) / 2.0
        return cls(scale=scale, offset_x=offset_x, offset_y=offset_y)

    def map_point(self, x: float, y: float) -> tuple[float, float]:
        return self.offset_x + self.scale * x, self.offset_y + self.scale * y
