"""
proof/panel.py

Right-hand dock listing the proof steps as "because / therefore" rows.
"""

from __future__ import annotations

from typing import List

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from models import ProofStep
from proof.steps import ProofStepList


class ProofStepRow(QWidget):
    """One editable step: ∵ because, ∴ therefore, remove button."""

    def __init__(self, index: int, step: ProofStep, parent=None):
        super().__init__(parent)
        self.step_id = step.id

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        header = QHBoxLayout()
        self.title = QLabel(f"Step {index}")
        self.title.setStyleSheet("font-weight: bold;")
        self.remove_btn = QPushButton("✕")
        self.remove_btn.setFixedWidth(28)
        self.remove_btn.setToolTip("Remove step")
        header.addWidget(self.title)
        header.addStretch(1)
        header.addWidget(self.remove_btn)
        layout.addLayout(header)

        because_row = QHBoxLayout()
        because_row.addWidget(QLabel("∵"))
        self.because_edit = QLineEdit(step.because)
        self.because_edit.setPlaceholderText("because...")
        because_row.addWidget(self.because_edit)
        layout.addLayout(because_row)

        therefore_row = QHBoxLayout()
        therefore_row.addWidget(QLabel("∴"))
        self.therefore_edit = QLineEdit(step.therefore)
        self.therefore_edit.setPlaceholderText("therefore...")
        therefore_row.addWidget(self.therefore_edit)
        layout.addLayout(therefore_row)


class ProofPanel(QWidget):
    """
    Editable view over a :class:`ProofStepList`.

    Edits go straight into the list. Adding or removing a step rebuilds the
    rows; typing does not, so focus and cursor position survive.
    """

    def __init__(self, steps: ProofStepList, parent=None):
        super().__init__(parent)
        self.steps = steps
        self._rows: List[ProofStepRow] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)

        title = QLabel("Proof")
        title.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(title)

        self._rows_host = QWidget()
        self._rows_layout = QVBoxLayout(self._rows_host)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        self._rows_layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._rows_host)
        layout.addWidget(scroll, 1)

        self.add_btn = QPushButton("+ Add step")
        self.add_btn.clicked.connect(self.add_step)
        layout.addWidget(self.add_btn)

        self.rebuild()

    def set_steps(self, steps: ProofStepList) -> None:
        """Point the panel at a new step list (after a project load)."""
        self.steps = steps
        self.rebuild()

    def rebuild(self) -> None:
        for row in self._rows:
            self._rows_layout.removeWidget(row)
            row.deleteLater()
        self._rows = []

        for i, step in enumerate(self.steps.steps(), start=1):
            row = ProofStepRow(i, step)
            self._connect_row(row)
            # Keep the stretch last
            self._rows_layout.insertWidget(self._rows_layout.count() - 1, row)
            self._rows.append(row)

    def _connect_row(self, row: ProofStepRow):
        sid = row.step_id
        row.because_edit.textEdited.connect(lambda text, s=sid: self._update(s, because=text))
        row.therefore_edit.textEdited.connect(lambda text, s=sid: self._update(s, therefore=text))
        row.remove_btn.clicked.connect(lambda _checked=False, s=sid: self.remove_step(s))

    def _update(self, step_id: str, because=None, therefore=None):
        self.steps.update(step_id, because=because, therefore=therefore)

    def add_step(self):
        self.steps.add()
        self.rebuild()

    def remove_step(self, step_id: str):
        self.steps.remove(step_id)
        self.rebuild()
