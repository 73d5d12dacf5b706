"""
canvas/items.py

Graphics item drawing one annotation on the board.

Items never own annotation state: they render what the store holds and
report clicks and finished drags back through class-level callbacks.
"""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QGraphicsItem,
    QGraphicsSimpleTextItem,
)

from models import Annotation
from settings import CanvasSelectionSettings
from utils import hex_to_qcolor

ANN_ID_KEY = 1  # QGraphicsItem.data key for annotation id


class AnnotationTextItem(QGraphicsSimpleTextItem):
    """Bold, draggable text glyph for one annotation."""

    # Class-level callbacks (set by BoardScene)
    on_clicked: Optional[Callable[[str], None]] = None          # (ann_id)
    on_drag_finished: Optional[Callable[[str, float, float], None]] = None  # (ann_id, x, y)

    def __init__(self, ann: Annotation, selection: CanvasSelectionSettings,
                 bold: bool = True):
        super().__init__(ann.text)
        self.ann_id = ann.id
        self.selection = selection
        self.bold = bold
        self._press_pos: Optional[QPointF] = None
        self._highlighted = False
        self.setData(ANN_ID_KEY, ann.id)
        self.setFlags(QGraphicsItem.GraphicsItemFlag.ItemIsMovable)
        self.setCursor(Qt.CursorShape.SizeAllCursor)
        self.update_from(ann, highlighted=False)

    def update_from(self, ann: Annotation, highlighted: bool) -> None:
        """Sync text, position, font, colour and highlight from *ann*."""
        if self.text() != ann.text:
            self.setText(ann.text)
        if self.pos() != QPointF(ann.x, ann.y) and self._press_pos is None:
            self.setPos(QPointF(ann.x, ann.y))

        font = QFont(self.font())
        font.setPixelSize(int(ann.font_size))
        font.setBold(self.bold)
        self.setFont(font)
        self.setBrush(QBrush(hex_to_qcolor(ann.color, QColor(Qt.GlobalColor.red))))
        self.set_highlighted(highlighted)

    def set_highlighted(self, highlighted: bool) -> None:
        if highlighted == self._highlighted:
            return
        self._highlighted = highlighted
        if highlighted:
            gold = hex_to_qcolor(self.selection.highlight_color, QColor("#FFD700"))
            self.setPen(QPen(gold, self.selection.outline_width))
            glow = QGraphicsDropShadowEffect()
            glow.setColor(gold)
            glow.setBlurRadius(self.selection.highlight_blur)
            glow.setOffset(0, 0)
            self.setGraphicsEffect(glow)
        else:
            self.setPen(QPen(Qt.PenStyle.NoPen))
            self.setGraphicsEffect(None)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._press_pos = QPointF(self.pos())
            if AnnotationTextItem.on_clicked:
                AnnotationTextItem.on_clicked(self.ann_id)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        super().mouseReleaseEvent(event)
        start, self._press_pos = self._press_pos, None
        if start is not None and start != self.pos():
            if AnnotationTextItem.on_drag_finished:
                AnnotationTextItem.on_drag_finished(self.ann_id, self.pos().x(), self.pos().y())
