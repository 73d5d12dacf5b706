"""
canvas/scene.py

QGraphicsScene rendering the background image and the annotation list.

The scene is a passive renderer: it draws whatever it is handed in sync()
and reports canvas clicks, background presses and finished drags through
callbacks configured by the main window.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QPixmap, QTransform
from PyQt6.QtWidgets import QGraphicsPixmapItem, QGraphicsScene

from canvas.items import AnnotationTextItem
from canvas.transform import ImageTransform
from styles import CANVAS_BACKGROUND_COLORS, theme_name
from models import Annotation
from settings import AppSettings


class BoardScene(QGraphicsScene):
    """
    Scene holding one background pixmap and one text item per annotation.

    Canvas space equals scene space: the view keeps an identity transform.
    """

    def __init__(self, settings: AppSettings, parent=None):
        super().__init__(parent)
        self.settings = settings
        self.bg_item: Optional[QGraphicsPixmapItem] = None
        self._items: Dict[str, AnnotationTextItem] = {}
        self._on_canvas_clicked: Optional[Callable[[float, float], bool]] = None
        self._on_background_pressed: Optional[Callable[[], None]] = None

    def configure_linkage(
        self,
        on_canvas_clicked: Callable[[float, float], bool],
        on_background_pressed: Callable[[], None],
        on_annotation_clicked: Callable[[str], None],
        on_annotation_dragged: Callable[[str, float, float], None],
    ):
        """
        Configure callbacks from the renderer back into application state.

        Args:
            on_canvas_clicked: Called with the canvas point of a left click;
                returns True when the click inserted an annotation
            on_background_pressed: Called when empty canvas is pressed
            on_annotation_clicked: Called with the id of a clicked annotation
            on_annotation_dragged: Called with (id, x, y) when a drag ends
        """
        self._on_canvas_clicked = on_canvas_clicked
        self._on_background_pressed = on_background_pressed
        AnnotationTextItem.on_clicked = on_annotation_clicked
        AnnotationTextItem.on_drag_finished = on_annotation_dragged

    # ---- background ----

    def set_background(self, pixmap: Optional[QPixmap]) -> None:
        """Replace (or remove, with None) the background image."""
        if self.bg_item is not None:
            self.removeItem(self.bg_item)
            self.bg_item = None
        if pixmap is None or pixmap.isNull():
            return
        self.bg_item = QGraphicsPixmapItem(pixmap)
        self.bg_item.setTransformationMode(Qt.TransformationMode.SmoothTransformation)
        self.bg_item.setZValue(-1000)
        self.addItem(self.bg_item)

    def apply_transform(self, transform: ImageTransform) -> None:
        """Place the background at the transform's image rect and size the canvas."""
        extent = transform.canvas_extent()
        self.setSceneRect(QRectF(0, 0, extent.width, extent.height))
        rect = transform.image_rect()
        if self.bg_item is None or rect is None:
            return
        x, y, _, _ = rect
        self.bg_item.setPos(x, y)
        self.bg_item.setScale(transform.scale)

    def set_dark_mode(self, dark: bool) -> None:
        self.setBackgroundBrush(QBrush(QColor(CANVAS_BACKGROUND_COLORS[theme_name(dark)])))

    # ---- annotations ----

    def sync(self, annotations: List[Annotation], selected_id: Optional[str]) -> None:
        """Make the scene items mirror *annotations* (insertion order = stacking order)."""
        live = {ann.id for ann in annotations}
        for ann_id in [k for k in self._items if k not in live]:
            self.removeItem(self._items.pop(ann_id))

        bold = self.settings.defaults.bold
        for z, ann in enumerate(annotations):
            item = self._items.get(ann.id)
            if item is None:
                item = AnnotationTextItem(ann, self.settings.canvas.selection, bold=bold)
                self._items[ann.id] = item
                self.addItem(item)
                item.set_highlighted(ann.id == selected_id)
            else:
                item.update_from(ann, highlighted=ann.id == selected_id)
            item.setZValue(z)

    def item_for(self, ann_id: str) -> Optional[AnnotationTextItem]:
        return self._items.get(ann_id)

    # ---- events ----

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.scenePos()
            if self._on_canvas_clicked and self._on_canvas_clicked(pos.x(), pos.y()):
                event.accept()
                return
            hit = self.itemAt(pos, QTransform())
            if not isinstance(hit, AnnotationTextItem) and self._on_background_pressed:
                self._on_background_pressed()
        super().mousePressEvent(event)
