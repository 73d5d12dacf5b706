"""
project/io.py

Host file and image primitives for import/save/load.

Every OS or decode failure is converted to the matching
:mod:`project.errors` exception before any application state is touched.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from PIL import Image, UnidentifiedImageError
from PyQt6.QtGui import QImage

from models import IMAGE_EXTENSIONS, PROJECT_EXTENSIONS, Size
from project.errors import ImportFailure, LoadFailure, SaveFailure

log = logging.getLogger(__name__)

IMAGE_FILTER = "Images ({})".format(" ".join(f"*.{e}" for e in IMAGE_EXTENSIONS))
PROJECT_FILTER = "Proof Project ({})".format(" ".join(f"*.{e}" for e in PROJECT_EXTENSIONS))

# Pillow mode -> bits per pixel
_MODE_TO_BPP = {"1": 1, "L": 8, "P": 8, "RGB": 24, "RGBA": 32, "CMYK": 32, "I": 32, "F": 32}


def read_project_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadFailure(f"Could not read project file:\n{path}\n\n{e}") from e


def write_project_text(path: str, text: str) -> None:
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise SaveFailure(f"Could not write project file:\n{path}\n\n{e}") from e
    log.debug("wrote %d characters to %s", len(text), path)


def decode_image(path: str) -> QImage:
    """Decode an image file into a displayable QImage.

    Raises:
        ImportFailure: If the file is missing or cannot be decoded.
    """
    if not os.path.isfile(path):
        raise ImportFailure(f"File does not exist:\n{path}")
    image = QImage(path)
    if image.isNull():
        raise ImportFailure(f"Could not decode image:\n{path}")
    return image


def image_natural_size(image: QImage) -> Size:
    return Size(image.width(), image.height())


def image_info(path: str, image: QImage) -> Dict[str, Any]:
    """Describe an image for the status/info display.

    Pillow supplies mode and bit depth for raster formats; SVG and other
    formats Pillow cannot read fall back to what Qt decoded.
    """
    try:
        filesize_kb = f"{os.path.getsize(path) / 1024.0:.1f} KB"
    except OSError:
        filesize_kb = "unknown"

    try:
        with Image.open(path) as img:
            w, h = img.size
            mode = img.mode
    except (OSError, UnidentifiedImageError):
        return {
            "path": path,
            "size": f"{image.width()} x {image.height()}px",
            "mode": "unknown",
            "depth": f"{image.depth()} bpp",
            "filesize": filesize_kb,
        }

    bpp = _MODE_TO_BPP.get(mode)
    return {
        "path": path,
        "size": f"{w} x {h}px",
        "mode": mode,
        "depth": f"{bpp} bpp" if bpp is not None else "unknown",
        "filesize": filesize_kb,
    }
