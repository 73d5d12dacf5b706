"""
properties/dock.py

Tool panel: template palette, colour and font size for new annotations,
editor for the selected annotation, and background image info.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QColorDialog,
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from models import COLOR_PALETTE, FONT_SIZE_MAX, FONT_SIZE_MIN, Annotation
from utils import qcolor_to_hex

TEMPLATE_COLUMNS = 3


class ToolPanel(QWidget):
    """
    Left-hand panel driving the annotation state.

    The panel holds no state of its own: it emits signals for user input and
    is refreshed from the application state via the ``show_*`` methods.
    """

    token_clicked = pyqtSignal(str)
    color_chosen = pyqtSignal(str)
    font_size_changed = pyqtSignal(int)
    text_edited = pyqtSignal(str)
    delete_requested = pyqtSignal()

    def __init__(self, templates: List[str], parent=None):
        super().__init__(parent)
        self._token_buttons: Dict[str, QPushButton] = {}
        self._color_buttons: Dict[str, QPushButton] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)

        # === Quick-insert templates ===
        templates_box = QGroupBox("Quick insert")
        grid = QGridLayout(templates_box)
        for i, token in enumerate(templates):
            btn = QPushButton(token)
            btn.setCheckable(True)
            btn.setMinimumHeight(36)
            btn.setStyleSheet("font-size: 16px; font-weight: bold;")
            btn.clicked.connect(lambda _checked, t=token: self.token_clicked.emit(t))
            grid.addWidget(btn, i // TEMPLATE_COLUMNS, i % TEMPLATE_COLUMNS)
            self._token_buttons[token] = btn
        self.pending_hint = QLabel("")
        self.pending_hint.setWordWrap(True)
        grid.addWidget(self.pending_hint, (len(templates) + TEMPLATE_COLUMNS - 1) // TEMPLATE_COLUMNS, 0, 1, TEMPLATE_COLUMNS)
        layout.addWidget(templates_box)

        # === Colour ===
        color_box = QGroupBox("Text colour")
        color_row = QHBoxLayout(color_box)
        for color in COLOR_PALETTE:
            btn = QPushButton()
            btn.setCheckable(True)
            btn.setMinimumHeight(32)
            btn.setToolTip(color)
            btn.setStyleSheet(f"background-color: {color}; border: 2px solid #cbd5e1; border-radius: 6px;")
            btn.clicked.connect(lambda _checked, c=color: self.color_chosen.emit(c))
            color_row.addWidget(btn)
            self._color_buttons[color] = btn
        self.custom_color_btn = QPushButton("…")
        self.custom_color_btn.setToolTip("Custom colour")
        self.custom_color_btn.setMinimumHeight(32)
        self.custom_color_btn.clicked.connect(self.pick_custom_color)
        color_row.addWidget(self.custom_color_btn)
        layout.addWidget(color_box)

        # === Font size ===
        size_box = QGroupBox("Text size")
        size_layout = QVBoxLayout(size_box)
        self.size_label = QLabel("")
        self.size_slider = QSlider(Qt.Orientation.Horizontal)
        self.size_slider.setRange(FONT_SIZE_MIN, FONT_SIZE_MAX)
        self.size_slider.valueChanged.connect(self._on_size_changed)
        size_layout.addWidget(self.size_label)
        size_layout.addWidget(self.size_slider)
        layout.addWidget(size_box)

        # === Selected annotation ===
        self.edit_box = QGroupBox("Edit text")
        edit_layout = QVBoxLayout(self.edit_box)
        self.text_edit = QLineEdit()
        self.text_edit.setPlaceholderText("Type text...")
        self.text_edit.textEdited.connect(self.text_edited)
        self.delete_btn = QPushButton("Delete")
        self.delete_btn.clicked.connect(self.delete_requested)
        edit_layout.addWidget(self.text_edit)
        edit_layout.addWidget(self.delete_btn)
        layout.addWidget(self.edit_box)

        # === Image info ===
        image_box = QGroupBox("Image")
        img_form = QFormLayout(image_box)
        self.img_path = QLabel("-")
        self.img_path.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.img_path.setWordWrap(True)
        self.img_size = QLabel("-")
        self.img_mode = QLabel("-")
        self.img_depth = QLabel("-")
        self.img_filesize = QLabel("-")
        img_form.addRow("Path:", self.img_path)
        img_form.addRow("Size:", self.img_size)
        img_form.addRow("Mode:", self.img_mode)
        img_form.addRow("Color depth:", self.img_depth)
        img_form.addRow("File size:", self.img_filesize)
        layout.addWidget(image_box)

        layout.addStretch(1)
        self.show_selected(None)

    # ---- refresh from state ----

    def show_pending(self, token: Optional[str]) -> None:
        for t, btn in self._token_buttons.items():
            btn.setChecked(t == token)
        self.pending_hint.setText(f'Click the canvas to add "{token}"' if token else "")

    def show_color(self, color: str) -> None:
        for c, btn in self._color_buttons.items():
            btn.setChecked(c == color)
        custom = color not in self._color_buttons
        self.custom_color_btn.setStyleSheet(
            f"background-color: {color}; color: #ffffff;" if custom else ""
        )

    def show_font_size(self, size: int) -> None:
        self.size_slider.blockSignals(True)
        self.size_slider.setValue(size)
        self.size_slider.blockSignals(False)
        self.size_label.setText(f"Text size: {size}px")

    def show_selected(self, ann: Optional[Annotation]) -> None:
        """Show the selected annotation in the editor (hidden when None)."""
        self.edit_box.setVisible(ann is not None)
        if ann is None:
            return
        if self.text_edit.text() != ann.text:
            self.text_edit.blockSignals(True)
            self.text_edit.setText(ann.text)
            self.text_edit.blockSignals(False)

    def set_image_info(self, info: Dict[str, Any]):
        """Update the image info display."""
        info = info or {}
        path = str(info.get("path", "-"))
        self.img_path.setText(path)
        self.img_path.setToolTip(path)
        self.img_size.setText(str(info.get("size", "-")))
        self.img_mode.setText(str(info.get("mode", "-")))
        self.img_depth.setText(str(info.get("depth", "-")))
        self.img_filesize.setText(str(info.get("filesize", "-")))

    # ---- input ----

    def _on_size_changed(self, value: int):
        self.size_label.setText(f"Text size: {value}px")
        self.font_size_changed.emit(value)

    def pick_custom_color(self):
        """Pick an arbitrary RGB colour for new annotations."""
        c = QColorDialog.getColor(QColor("#FF0000"), self, "Pick Text Color")
        if not c.isValid():
            return
        self.color_chosen.emit(qcolor_to_hex(c))
