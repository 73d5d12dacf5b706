"""
canvas/transform.py

Image fit/zoom transform between an image's natural size and the canvas.

Canvas space is the pixel space of the viewport. The background image is
drawn at ``image_rect()``; annotations live directly in canvas space and are
never rescaled when the scale changes.
"""

from __future__ import annotations

from typing import Optional, Tuple

from models import Size

ZOOM_STEP = 1.2
MIN_SCALE = 0.1
MAX_SCALE = 3.0

ANCHOR_TOP_LEFT = "top_left"
ANCHOR_CENTER = "center"


def compute_fit_scale(natural_size: Size, viewport_size: Size) -> float:
    """Largest scale that fits *natural_size* inside *viewport_size*, capped at 1.0.

    Returns 1.0 when either size has a zero (or negative) dimension.
    """
    if natural_size.is_empty() or viewport_size.is_empty():
        return 1.0
    return min(
        viewport_size.width / natural_size.width,
        viewport_size.height / natural_size.height,
        1.0,
    )


def zoom_in(scale: float, step: float = ZOOM_STEP, max_scale: float = MAX_SCALE) -> float:
    """Multiply *scale* by *step*, clamped to *max_scale*."""
    return min(scale * step, max_scale)


def zoom_out(scale: float, step: float = ZOOM_STEP, min_scale: float = MIN_SCALE) -> float:
    """Divide *scale* by *step*, clamped to *min_scale*."""
    return max(scale / step, min_scale)


class ImageTransform:
    """Tracks the natural image size, the viewport and the current scale.

    The transform is in *fit mode* right after an image is set: viewport
    resizes then re-derive the fit scale. An explicit zoom leaves fit mode
    so the user's zoom survives later resizes.

    Args:
        viewport_size: Initial viewport size before the view is measured.
        anchor: ``"top_left"`` or ``"center"`` placement of the image.
        step: Multiplicative zoom step.
        min_scale: Lower zoom bound.
        max_scale: Upper zoom bound.
    """

    def __init__(
        self,
        viewport_size: Size = Size(800, 600),
        anchor: str = ANCHOR_TOP_LEFT,
        step: float = ZOOM_STEP,
        min_scale: float = MIN_SCALE,
        max_scale: float = MAX_SCALE,
    ):
        self.viewport_size = viewport_size
        self.anchor = anchor
        self.step = step
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.natural_size: Optional[Size] = None
        self.scale = 1.0
        self.fit_mode = False

    @property
    def has_image(self) -> bool:
        return self.natural_size is not None

    def set_image(self, natural_size: Size) -> float:
        """Fit a newly imported image and return the fit scale."""
        self.natural_size = natural_size
        self.scale = compute_fit_scale(natural_size, self.viewport_size)
        self.fit_mode = True
        return self.scale

    def clear_image(self) -> None:
        self.natural_size = None
        self.scale = 1.0
        self.fit_mode = False

    def resize_viewport(self, viewport_size: Size) -> float:
        """Record a new viewport size; refit when still in fit mode."""
        self.viewport_size = viewport_size
        if self.fit_mode and self.natural_size is not None:
            self.scale = compute_fit_scale(self.natural_size, viewport_size)
        return self.scale

    def zoom_in(self) -> float:
        self.scale = zoom_in(self.scale, self.step, self.max_scale)
        self.fit_mode = False
        return self.scale

    def zoom_out(self) -> float:
        self.scale = zoom_out(self.scale, self.step, self.min_scale)
        self.fit_mode = False
        return self.scale

    def displayed_size(self) -> Optional[Size]:
        """Size of the image as drawn, or None without an image."""
        if self.natural_size is None:
            return None
        return Size(self.natural_size.width * self.scale, self.natural_size.height * self.scale)

    def image_rect(self) -> Optional[Tuple[float, float, float, float]]:
        """Displayed image rectangle ``(x, y, w, h)`` in canvas space."""
        shown = self.displayed_size()
        if shown is None:
            return None
        x = y = 0.0
        if self.anchor == ANCHOR_CENTER:
            x = max(0.0, (self.viewport_size.width - shown.width) / 2)
            y = max(0.0, (self.viewport_size.height - shown.height) / 2)
        return (x, y, shown.width, shown.height)

    def canvas_extent(self) -> Size:
        """Canvas size: the viewport grown to contain the displayed image."""
        w, h = self.viewport_size.width, self.viewport_size.height
        rect = self.image_rect()
        if rect is not None:
            x, y, iw, ih = rect
            w = max(w, x + iw)
            h = max(h, y + ih)
        return Size(w, h)

    def canvas_point(self, x: float, y: float) -> Tuple[float, float]:
        """Clamp a pointer position into the canvas extent."""
        extent = self.canvas_extent()
        return (
            min(max(x, 0.0), max(extent.width, 0.0)),
            min(max(y, 0.0), max(extent.height, 0.0)),
        )
