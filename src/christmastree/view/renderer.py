"""
Scene renderer.

Draws a SceneState onto a DrawSurface in viewport space. Everything except the
background is authored in design space and mapped through a scoped
translate + uniform scale.
"""
from __future__ import annotations

from christmastree import config
from christmastree.model.geometry import Point, Rgb
from christmastree.model.scene import TREE_TRIANGLE, SceneState
from christmastree.model.viewport import Viewport, ViewportTransform
from christmastree.view.commands import DrawSurface

SKY_BLUE = Rgb.from_rgb8(*config.SKY_BLUE)
SNOW_WHITE = Rgb.from_rgb8(*config.SNOW_WHITE)
TRUNK_BROWN = Rgb.from_rgb8(*config.TRUNK_BROWN)
TREE_GREEN = Rgb.from_rgb8(*config.TREE_GREEN)


def render_scene(scene: SceneState, viewport: Viewport, surface: DrawSurface) -> ViewportTransform:
    """
    Draw the whole scene and return the transform that was used.

    Z-order (later occludes earlier): background, snowflakes, trunk, tree,
    lights. Lights come last so the tree body never hides them.
    """
    # 1. Background over the whole viewport, including letterbox bars
    surface.fill_rect(0.0, 0.0, viewport.width, viewport.height, SKY_BLUE)

    # 2. Uniform scale + centering
    transform = ViewportTransform.fit(viewport)

    # 3. Design-space drawing inside a saved transform
    surface.save()
    try:
        surface.translate(transform.offset_x, transform.offset_y)
        surface.scale(transform.scale)

        _draw_snowflakes(scene, surface)
        _draw_trunk(surface)
        _draw_tree(surface)
        _draw_lights(scene, surface)
    finally:
        surface.restore()

    return transform


def _fill_centered_square(surface: DrawSurface, center: Point, size: float, color: Rgb) -> None:
    half = size / 2.0
    surface.fill_rect(center.x - half, center.y - half, size, size, color)


def _draw_snowflakes(scene: SceneState, surface: DrawSurface) -> None:
    for flake in scene.snowflakes:
        _fill_centered_square(surface, flake.position, config.SNOWFLAKE_SIZE, SNOW_WHITE)


def _draw_trunk(surface: DrawSurface) -> None:
    cx, cy = config.TRUNK_CENTER
    width, height = config.TRUNK_SIZE
    surface.fill_rect(cx - width / 2.0, cy - height / 2.0, width, height, TRUNK_BROWN)


def _draw_tree(surface: DrawSurface) -> None:
    surface.fill_polygon([p.as_tuple() for p in TREE_TRIANGLE.vertices()], TREE_GREEN)


def _draw_lights(scene: SceneState, surface: DrawSurface) -> None:
    for light in scene.lights:
        _fill_centered_square(surface, light.position, config.LIGHT_SIZE, light.color)
