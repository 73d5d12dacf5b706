"""
canvas package

Annotation canvas state (store, transform, template palette) plus the
PyQt6 scene, view and items that render it. The Qt renderer lives in
canvas.scene / canvas.view / canvas.items and is imported from there.
"""

from canvas.palette import TemplatePalette
from canvas.store import AnnotationStore
from canvas.transform import ImageTransform, compute_fit_scale, zoom_in, zoom_out

__all__ = [
    "AnnotationStore",
    "ImageTransform",
    "TemplatePalette",
    "compute_fit_scale",
    "zoom_in",
    "zoom_out",
]
