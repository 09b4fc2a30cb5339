"""
Main Application Window
=======================
The top-level window hosting the tree scene.

Why is this file needed?
------------------------
1. Layout: the scene widget is the central widget with no margins, so it gets
   the whole client area however the user resizes the window.
2. Lifetime: closing the window stops the animation timer.
"""
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow

from christmastree import config
from christmastree.model.generator import SceneGenerator
from christmastree.view.scene_widget import ChristmasTreeWidget


class MainWindow(QMainWindow):
    def __init__(self, generator: SceneGenerator) -> None:
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)

        # Start at the design size; the user can resize freely
        self.resize(*config.WINDOW_SIZE)

        self.tree_widget = ChristmasTreeWidget(generator, self)
        self.setCentralWidget(self.tree_widget)
        self.setContentsMargins(0, 0, 0, 0)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.tree_widget.controller.shutdown()
        super().closeEvent(event)
