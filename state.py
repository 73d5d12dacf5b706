"""
state.py

Application state for TriProof.

``AppState`` is the one object that owns the annotation store, the image
transform, the template palette, the proof steps and the display
preferences. The main window holds an instance and routes every renderer
event and button press through it; nothing here touches Qt widgets, so the
whole model can be driven from tests.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from canvas.palette import TemplatePalette
from canvas.store import AnnotationStore
from canvas.transform import ImageTransform
from models import ProjectDocument, Size, clamp_font_size, normalize_hex_color
from proof.steps import ProofStepList
from settings import AppSettings

log = logging.getLogger(__name__)


class AppState:
    """
    Owned, process-scoped state of one annotation session.

    Args:
        settings: Application settings (zoom bounds, defaults). Defaults
            to built-in values when omitted.
        on_changed: Optional callback fired after any annotation or
            display change (the renderer's redraw hook).
    """

    def __init__(self, settings: Optional[AppSettings] = None,
                 on_changed: Optional[Callable[[], None]] = None):
        self.settings = settings or AppSettings()
        zoom = self.settings.canvas.zoom
        viewport = self.settings.canvas.viewport

        self.on_changed = on_changed
        self.store = AnnotationStore(on_changed=self._notify_changed)
        self.transform = ImageTransform(
            viewport_size=Size(viewport.default_width, viewport.default_height),
            anchor=viewport.image_anchor,
            step=zoom.step,
            min_scale=zoom.min_scale,
            max_scale=zoom.max_scale,
        )
        self.palette = TemplatePalette()
        self.proof = ProofStepList()
        self.proof.ensure_seeded()

        self.image_path: Optional[str] = None
        self.font_size = clamp_font_size(self.settings.defaults.font_size)
        try:
            self.current_color = normalize_hex_color(self.settings.defaults.color)
        except ValueError:
            log.warning("ignoring invalid default colour %r", self.settings.defaults.color)
            self.current_color = "#FF0000"
        self.dark_mode = False

    def _notify_changed(self):
        if self.on_changed:
            self.on_changed()

    # ---- image ----

    def import_image(self, path: str, natural_size: Size) -> float:
        """Start a fresh canvas on a newly imported image; returns the fit scale."""
        self.image_path = path
        scale = self.transform.set_image(natural_size)
        self.store.clear()
        log.info("imported %s (%gx%g) at scale %.3f", path, natural_size.width, natural_size.height, scale)
        return scale

    def viewport_resized(self, width: float, height: float) -> float:
        scale = self.transform.resize_viewport(Size(width, height))
        self._notify_changed()
        return scale

    def zoom_in(self) -> float:
        scale = self.transform.zoom_in()
        self._notify_changed()
        return scale

    def zoom_out(self) -> float:
        scale = self.transform.zoom_out()
        self._notify_changed()
        return scale

    # ---- renderer events ----

    def canvas_clicked(self, x: float, y: float) -> Optional[str]:
        """Insert the armed token at the clicked point; returns the new id."""
        if not self.palette.is_armed:
            return None
        token = self.palette.consume()
        return self.store.insert(
            self.transform.canvas_point(x, y), token, self.current_color, self.font_size
        )

    def background_pressed(self) -> None:
        self.store.select(None)

    def annotation_clicked(self, ann_id: str) -> None:
        if ann_id in self.store:
            self.store.select(ann_id)

    def annotation_dragged(self, ann_id: str, x: float, y: float) -> None:
        self.store.move(ann_id, (x, y))

    # ---- editing ----

    def edit_selected_text(self, text: str) -> None:
        if self.store.selected_id is not None:
            self.store.update_text(self.store.selected_id, text)

    def delete_selected(self) -> None:
        if self.store.selected_id is not None:
            self.store.delete(self.store.selected_id)

    def clear_annotations(self) -> None:
        self.store.clear()

    def set_font_size(self, size: float) -> int:
        self.font_size = clamp_font_size(size)
        return self.font_size

    def set_color(self, color: str) -> str:
        """Set the colour for new annotations.

        Raises:
            ValueError: If *color* is not an RGB hex colour.
        """
        self.current_color = normalize_hex_color(color)
        return self.current_color

    def toggle_dark_mode(self) -> bool:
        self.dark_mode = not self.dark_mode
        self._notify_changed()
        return self.dark_mode

    # ---- persistence ----

    def to_document(self) -> ProjectDocument:
        return ProjectDocument(
            image_path=self.image_path,
            annotations=[replace(a) for a in self.store.annotations()],
            proof_steps=[replace(s) for s in self.proof.steps()],
            font_size=self.font_size,
            dark_mode=self.dark_mode,
        )

    def apply_document(self, document: ProjectDocument,
                       natural_size: Optional[Size] = None) -> None:
        """Replace the whole session with a loaded document.

        *natural_size* is the size of the re-resolved background image, or
        None when the document has no image or it could not be decoded.

        Raises:
            ValueError: If the document repeats an identity. State is
                untouched in that case.
        """
        # Validate both lists before mutating anything.
        proof = ProofStepList(replace(s) for s in document.proof_steps)
        self.store.replace([replace(a) for a in document.annotations])
        self.proof = proof
        self.proof.ensure_seeded()

        self.image_path = document.image_path
        if natural_size is not None:
            self.transform.set_image(natural_size)
        else:
            self.transform.clear_image()
        self.font_size = clamp_font_size(document.font_size)
        self.dark_mode = document.dark_mode
        self.palette.disarm()
        log.info(
            "applied project: %d annotations, %d proof steps",
            len(self.store), len(self.proof),
        )
        self._notify_changed()
