"""
models.py

Data models and constants for the TriProof geometry annotator.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# ----------------------------
# Constants
# ----------------------------

FONT_SIZE_MIN = 16
FONT_SIZE_MAX = 48
DEFAULT_FONT_SIZE = 28  # Default: 28 pixels

# Quick-insert colours offered by the palette; any #RRGGBB is accepted too.
COLOR_PALETTE = ["#FF0000", "#0000FF", "#000000"]
DEFAULT_COLOR = "#FF0000"

# Quick-insert text tokens (letters, segment/angle/triangle markers, symbols)
TEXT_TEMPLATES = [
    "A", "B", "C", "D",
    "AB", "BC", "AC",
    "∠___", "∠A", "∠B",
    "△ABC", "△___",
    "___°", "90°",
    "≅", "⊥", "∥",
]

IMAGE_EXTENSIONS = ["png", "jpg", "jpeg", "gif", "svg"]
PROJECT_EXTENSIONS = ["proof", "json"]


def clamp_font_size(size: float) -> int:
    """Round *size* to an int and clamp it into the supported font range.

    Raises:
        ValueError: If *size* is NaN or infinite.
    """
    if not math.isfinite(size):
        raise ValueError(f"font size must be finite: {size!r}")
    return max(FONT_SIZE_MIN, min(FONT_SIZE_MAX, int(round(size))))


_HEX_COLOR_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")


def normalize_hex_color(s: str) -> str:
    """
    Normalize a colour string to upper-case ``#RRGGBB``.

    Args:
        s: Colour like "#ff0000", "FF0000" or "#0000FF"

    Returns:
        The colour as "#RRGGBB"

    Raises:
        ValueError: If *s* is not a 6-digit hex colour
    """
    match = _HEX_COLOR_RE.match((s or "").strip())
    if not match:
        raise ValueError(f"not an RGB hex colour: {s!r}")
    return "#" + match.group(1).upper()


@dataclass(frozen=True)
class Size:
    """Width/height pair in pixels."""
    width: float
    height: float

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


# ----------------------------
# Annotation
# ----------------------------

@dataclass
class Annotation:
    """A text glyph pinned to a canvas-space position.

    ``x``/``y`` are canvas display-space pixels, not fractions of the image.
    """
    id: str
    x: float
    y: float
    text: str
    color: str = DEFAULT_COLOR
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self):
        self.color = normalize_hex_color(self.color)
        self.font_size = clamp_font_size(self.font_size)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Annotation":
        """Create an Annotation from a persisted record (``fontSize`` key)."""
        x, y = float(d["x"]), float(d["y"])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"position must be finite: ({x!r}, {y!r})")
        return cls(
            id=str(d["id"]),
            x=x,
            y=y,
            text=str(d["text"]),
            color=str(d["color"]),
            font_size=d["fontSize"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the persisted record shape."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "text": self.text,
            "color": self.color,
            "fontSize": self.font_size,
        }


# ----------------------------
# Proof step
# ----------------------------

@dataclass
class ProofStep:
    """One line of the proof scratchpad: because ..., therefore ..."""
    id: str
    because: str = ""
    therefore: str = ""

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ProofStep":
        return cls(
            id=str(d["id"]),
            because=str(d.get("because", "")),
            therefore=str(d.get("therefore", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "because": self.because, "therefore": self.therefore}


# ----------------------------
# Project document
# ----------------------------

@dataclass
class ProjectDocument:
    """Everything persisted for one annotation session.

    ``image_path`` is an unresolved reference; an empty string is treated
    as no image.
    """
    image_path: Optional[str] = None
    annotations: List[Annotation] = field(default_factory=list)
    proof_steps: List[ProofStep] = field(default_factory=list)
    font_size: int = DEFAULT_FONT_SIZE
    dark_mode: bool = False

    def __post_init__(self):
        if not self.image_path:
            self.image_path = None
