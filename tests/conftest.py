"""Shared fixtures. Qt runs on the offscreen platform so tests work headless."""
from __future__ import annotations

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from models import Annotation, ProjectDocument, ProofStep  # noqa: E402
from settings import AppSettings  # noqa: E402
from state import AppState  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """Provide a single QApplication for the entire test session."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture()
def state():
    """Fresh AppState with built-in settings."""
    return AppState(AppSettings())


@pytest.fixture()
def sample_document():
    return ProjectDocument(
        image_path="triangle.png",
        annotations=[
            Annotation(id="text-1", x=120.0, y=80.0, text="∠A", color="#0000FF", font_size=28),
            Annotation(id="text-2", x=300.5, y=42.0, text="B", color="#FF0000", font_size=36),
        ],
        proof_steps=[
            ProofStep(id="1", because="AB = AC", therefore="△ABC is isosceles"),
            ProofStep(id="2", because="△ABC is isosceles", therefore="∠B = ∠C"),
        ],
        font_size=32,
        dark_mode=True,
    )
