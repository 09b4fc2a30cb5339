from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QImage, QPainter, QPainterPath

from christmastree.model.geometry import Rgb
from christmastree.model.scene import SceneState
from christmastree.model.viewport import Viewport
from christmastree.view.renderer import render_scene


def to_qcolor(color: Rgb) -> QColor:
    return QColor.fromRgbF(color.r, color.g, color.b)


class QPainterSurface:
    """DrawSurface backed by an active QPainter. Shapes are filled without an outline."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Rgb) -> None:
        self.painter.fillRect(QRectF(x, y, width, height), to_qcolor(color))

    def fill_polygon(self, points: Sequence[tuple[float, float]], color: Rgb) -> None:
        if not points:
            return
        path = QPainterPath()
        path.moveTo(QPointF(*points[0]))
        for p in points[1:]:
            path.lineTo(QPointF(*p))
        path.closeSubpath()
        self.painter.fillPath(path, QBrush(to_qcolor(color)))

    def save(self) -> None:
        self.painter.save()

    def restore(self) -> None:
        self.painter.restore()

    def translate(self, dx: float, dy: float) -> None:
        self.painter.translate(dx, dy)

    def scale(self, factor: float) -> None:
        self.painter.scale(factor, factor)


def paint_scene(painter: QPainter, scene: SceneState, width: float, height: float) -> None:
    """Render `scene` with an already active painter onto a surface of the given size."""
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setPen(Qt.PenStyle.NoPen)
    render_scene(scene, Viewport(width, height), QPainterSurface(painter))


def render_to_image(scene: SceneState, width: int, height: int) -> QImage:
    """Paint the scene into a new offscreen image of `width` x `height` pixels."""
    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.transparent)

    painter = QPainter(image)
    try:
        paint_scene(painter, scene, width, height)
    finally:
        painter.end()
    return image
