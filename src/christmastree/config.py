"""
Configuration & Constants
=========================
This module serves as the central registry for the scene's global constants.

Why is this file needed?
------------------------
1. Single source: the design resolution, entity counts and palette are used by
   the model, the renderer and the window; keeping them here prevents the
   numbers from drifting apart.
2. Environment: it names the environment variables read at startup for
   runtime options (seed, log level).

All geometry is expressed in *design space*: a fixed 600x600 coordinate system
that the renderer maps onto whatever viewport the window currently has.
"""
from __future__ import annotations

# Design resolution
DESIGN_WIDTH: float = 600.0
DESIGN_HEIGHT: float = 600.0

# Population
LIGHT_COUNT: int = 50
SNOWFLAKE_COUNT: int = 100

# Tree silhouette (top, bottom-left, bottom-right)
TREE_TOP: tuple[float, float] = (DESIGN_WIDTH / 2.0, 50.0)
TREE_LEFT: tuple[float, float] = (100.0, DESIGN_HEIGHT - 50.0)
TREE_RIGHT: tuple[float, float] = (DESIGN_WIDTH - 100.0, DESIGN_HEIGHT - 50.0)

# Trunk, centered on (300, 540)
TRUNK_CENTER: tuple[float, float] = (DESIGN_WIDTH / 2.0, DESIGN_HEIGHT - 60.0)
TRUNK_SIZE: tuple[float, float] = (30.0, 60.0)

# Snow
SNOW_SPAWN_X_RANGE: tuple[float, float] = (0.0, DESIGN_WIDTH)
SNOW_SPAWN_Y_RANGE: tuple[float, float] = (-100.0, 0.0)
SNOW_SPEED_RANGE: tuple[float, float] = (1.0, 3.0)

# Sizes of the square markers (design units)
SNOWFLAKE_SIZE: float = 4.0
LIGHT_SIZE: float = 8.0

# Animation
TICK_INTERVAL_MS: int = 100
LIGHT_TWINKLE_PROBABILITY: float = 0.25

# Palette (8-bit RGB)
SKY_BLUE: tuple[int, int, int] = (135, 206, 235)
SNOW_WHITE: tuple[int, int, int] = (255, 255, 255)
TRUNK_BROWN: tuple[int, int, int] = (139, 69, 19)  # saddlebrown
TREE_GREEN: tuple[int, int, int] = (0, 100, 0)  # darkgreen

# Window
WINDOW_TITLE: str = "Christmas Tree"
WINDOW_SIZE: tuple[int, int] = (int(DESIGN_WIDTH), int(DESIGN_HEIGHT))

# Environment variables
ENV_SEED: str = "CHRISTMASTREE_SEED"
ENV_LOG_LEVEL: str = "CHRISTMASTREE_LOG_LEVEL"
