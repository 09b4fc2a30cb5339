from __future__ import annotations

import pytest

from christmastree.model.generator import SceneGenerator
from christmastree.model.geometry import Point, Rgb
from christmastree.model.scene import Light, SceneState, Snowflake
from christmastree.model.viewport import Viewport
from christmastree.view.commands import FillPolygon, FillRect, RecordingSurface, Restore, Save, Scale, Translate
from christmastree.view.renderer import SKY_BLUE, SNOW_WHITE, TREE_GREEN, TRUNK_BROWN, render_scene


def _render(scene: SceneState, w: float = 600.0, h: float = 600.0) -> list:
    surface = RecordingSurface()
    render_scene(scene, Viewport(w, h), surface)
    return surface.commands


def test_draw_order(generator: SceneGenerator) -> None:
    scene = generator.generate_scene()
    commands = _render(scene, 1200.0, 600.0)

    assert commands[0] == FillRect(0.0, 0.0, 1200.0, 600.0, SKY_BLUE)
    assert commands[1:4] == [Save(), Translate(300.0, 0.0), Scale(1.0)]

    snow = commands[4:104]
    assert all(isinstance(c, FillRect) and c.color == SNOW_WHITE for c in snow)

    assert commands[104] == FillRect(285.0, 510.0, 30.0, 60.0, TRUNK_BROWN)
    assert commands[105] == FillPolygon(((300.0, 50.0), (100.0, 550.0), (500.0, 550.0)), TREE_GREEN)

    lights = commands[106:156]
    assert [c.color for c in lights] == [light.color for light in scene.lights]

    assert commands[156:] == [Restore()]


def test_entities_drawn_as_centered_squares() -> None:
    scene = SceneState(
        lights=[Light(Point(300.0, 300.0), Rgb(1.0, 0.0, 0.0))],
        snowflakes=[Snowflake(Point(50.0, 20.0), 1.5)],
    )
    commands = _render(scene)

    assert commands[4] == FillRect(48.0, 18.0, 4.0, 4.0, SNOW_WHITE)
    assert commands[-2] == FillRect(296.0, 296.0, 8.0, 8.0, Rgb(1.0, 0.0, 0.0))


def test_transform_is_scoped() -> None:
    commands = _render(SceneState(), 300.0, 600.0)
    saves = [i for i, c in enumerate(commands) if isinstance(c, Save)]
    restores = [i for i, c in enumerate(commands) if isinstance(c, Restore)]

    assert saves == [1]
    assert restores == [len(commands) - 1]
    assert commands[2:4] == [Translate(0.0, 150.0), Scale(0.5)]


def test_render_is_idempotent(generator: SceneGenerator) -> None:
    scene = generator.generate_scene()
    assert _render(scene, 800.0, 450.0) == _render(scene, 800.0, 450.0)


def test_render_does_not_mutate_scene(generator: SceneGenerator) -> None:
    scene = generator.generate_scene()
    lights = [(light.position.as_tuple(), light.color) for light in scene.lights]
    flakes = [(flake.position.as_tuple(), flake.fall_speed) for flake in scene.snowflakes]

    _render(scene)

    assert [(light.position.as_tuple(), light.color) for light in scene.lights] == lights
    assert [(flake.position.as_tuple(), flake.fall_speed) for flake in scene.snowflakes] == flakes


def test_render_returns_transform() -> None:
    t = render_scene(SceneState(), Viewport(1200.0, 600.0), RecordingSurface())
    assert (t.scale, t.offset_x, t.offset_y) == pytest.approx((1.0, 300.0, 0.0))
