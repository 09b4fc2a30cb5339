from __future__ import annotations

import logging

from PySide6.QtCore import QSize
from PySide6.QtGui import QPainter, QPaintEvent, QShowEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from christmastree import config
from christmastree.controller.qt_scheduler import QtScheduler
from christmastree.controller.scene_controller import SceneController
from christmastree.model.animation import SceneAnimator
from christmastree.model.generator import SceneGenerator
from christmastree.model.scene import SceneState
from christmastree.view.painter import paint_scene

logger = logging.getLogger(__name__)


class ChristmasTreeWidget(QWidget):
    """
    Paints the animated tree and drives its timer.

    The widget expands to take all the space its layout offers; the renderer
    keeps the scene centered and undistorted inside it.
    """

    def __init__(self, generator: SceneGenerator, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        # Take all available space
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(1, 1)

        scene = generator.generate_scene()
        self.scheduler = QtScheduler(request_redraw=self.update, parent=self)
        self.controller = SceneController(
            scene=scene,
            animator=SceneAnimator(generator),
            scheduler=self.scheduler,
        )

    @property
    def scene(self) -> SceneState:
        return self.controller.scene

    def sizeHint(self) -> QSize:
        return QSize(*config.WINDOW_SIZE)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        # Showing (again) == surface connected
        if not self.controller.connected:
            logger.debug(f"Surface connected at {self.width()}x{self.height()}.")
        self.controller.on_connect()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            paint_scene(painter, self.controller.scene, self.width(), self.height())
        finally:
            painter.end()
