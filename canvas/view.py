"""
canvas/view.py

QGraphicsView for the board with drag & drop image import and resize
reporting.
"""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QGraphicsView

from canvas.scene import BoardScene
from models import IMAGE_EXTENSIONS


class BoardView(QGraphicsView):
    """
    Graphics view with an identity transform so scene space is canvas space.

    Zoom scales the background image inside the scene, never the view, so
    annotations stay pinned to their canvas coordinates.
    """

    def __init__(self, scene: BoardScene, on_drop_image_cb: Callable[[str], None], parent=None):
        super().__init__(scene, parent)
        self.setAcceptDrops(True)
        self.on_drop_image_cb = on_drop_image_cb
        self.on_resized: Optional[Callable[[int, int], None]] = None
        self.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)

    def viewport_size(self):
        vp = self.viewport().size()
        return vp.width(), vp.height()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.on_resized:
            w, h = self.viewport_size()
            self.on_resized(w, h)

    @staticmethod
    def _is_image(path: str) -> bool:
        lower = path.lower()
        return any(lower.endswith("." + ext) for ext in IMAGE_EXTENSIONS)

    def dragEnterEvent(self, event):
        """Accept image file drops."""
        if event.mimeData().hasUrls():
            for u in event.mimeData().urls():
                if self._is_image(u.toLocalFile()):
                    event.acceptProposedAction()
                    return
        event.ignore()

    def dragMoveEvent(self, event):
        event.acceptProposedAction()

    def dropEvent(self, event):
        """Handle image file drop."""
        if event.mimeData().hasUrls():
            for u in event.mimeData().urls():
                path = u.toLocalFile()
                if self._is_image(path):
                    self.on_drop_image_cb(path)
                    event.acceptProposedAction()
                    return
        event.ignore()
