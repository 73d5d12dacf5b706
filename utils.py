"""
utils.py

Utility functions for the TriProof geometry annotator.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from PyQt6.QtGui import QColor

from models import normalize_hex_color


def qcolor_to_hex(c: QColor) -> str:
    """
    Convert a QColor to a hex string.

    Args:
        c: The QColor to convert

    Returns:
        Hex string like "#RRGGBB"
    """
    return "#{:02X}{:02X}{:02X}".format(c.red(), c.green(), c.blue())


def hex_to_qcolor(s: str, fallback: QColor) -> QColor:
    """
    Parse a hex string to a QColor.

    Args:
        s: Hex string like "#RRGGBB"
        fallback: Color to return if parsing fails

    Returns:
        Parsed QColor or fallback
    """
    try:
        s = normalize_hex_color(s)
    except ValueError:
        return QColor(fallback)
    return QColor(int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


class IdAllocator:
    """Hands out identities that are never reused within a session.

    Identities look like ``f"{prefix}{n}"``. Identities seen through
    :meth:`reserve` (e.g. loaded from a project file) are skipped.
    """

    def __init__(self, prefix: str = "", start: int = 1):
        self.prefix = prefix
        self._counter = start
        self._taken: set = set()

    def reserve(self, ids: Iterable[str]) -> None:
        self._taken.update(ids)

    def next(self) -> str:
        while True:
            candidate = f"{self.prefix}{self._counter}"
            self._counter += 1
            if candidate not in self._taken:
                self._taken.add(candidate)
                return candidate


# Canonical key order for persisted records
ANNOTATION_KEY_ORDER = ["id", "x", "y", "text", "color", "fontSize"]
DOCUMENT_KEY_ORDER = ["imagePath", "annotations", "proofSteps", "fontSize", "isDarkMode"]


def sort_keys(rec: Dict[str, Any], order: Iterable[str]) -> Dict[str, Any]:
    """
    Sort record keys in canonical order.

    Any keys not in *order* are appended at the end in their original order.

    Args:
        rec: The record dict
        order: Canonical key order

    Returns:
        New dict with keys sorted in canonical order
    """
    result = {}
    for key in order:
        if key in rec:
            result[key] = rec[key]
    for key in rec:
        if key not in result:
            result[key] = rec[key]
    return result


def sort_document_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sort a project document dict, applying key ordering to all annotations.

    Args:
        data: The document dict with an "annotations" list

    Returns:
        New dict with sorted keys
    """
    result = sort_keys(data, DOCUMENT_KEY_ORDER)
    anns = result.get("annotations")
    if isinstance(anns, list):
        result["annotations"] = [
            sort_keys(rec, ANNOTATION_KEY_ORDER) if isinstance(rec, dict) else rec
            for rec in anns
        ]
    return result


def ensure_extension(path: str, extensions: Iterable[str], default: Optional[str] = None) -> str:
    """Append ``.<default>`` to *path* unless it already ends in one of *extensions*."""
    exts = [e.lower().lstrip(".") for e in extensions]
    lower = path.lower()
    if any(lower.endswith("." + e) for e in exts):
        return path
    return f"{path}.{default or exts[0]}"
