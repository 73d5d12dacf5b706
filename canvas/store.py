"""
canvas/store.py

Annotation store: identity-keyed annotations plus the single selection.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from models import Annotation, DEFAULT_FONT_SIZE, clamp_font_size, normalize_hex_color
from utils import IdAllocator

log = logging.getLogger(__name__)

ANNOTATION_ID_PREFIX = "text-"


class AnnotationStore:
    """
    Ordered mapping of annotation identity to annotation.

    List order is insertion order. The selection is held by identity only
    and is cleared whenever its target goes away.

    Args:
        on_changed: Optional callback fired after every mutation.
    """

    def __init__(self, on_changed: Optional[Callable[[], None]] = None):
        self._items: Dict[str, Annotation] = {}
        self._ids = IdAllocator(ANNOTATION_ID_PREFIX)
        self.selected_id: Optional[str] = None
        self.on_changed = on_changed

    def _notify_changed(self):
        if self.on_changed:
            self.on_changed()

    # ---- read access ----

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, ann_id: object) -> bool:
        return ann_id in self._items

    def annotations(self) -> List[Annotation]:
        """Annotations in insertion order."""
        return list(self._items.values())

    def get(self, ann_id: str) -> Optional[Annotation]:
        return self._items.get(ann_id)

    def selected(self) -> Optional[Annotation]:
        if self.selected_id is None:
            return None
        return self._items.get(self.selected_id)

    # ---- mutations ----

    def insert(
        self,
        position: Tuple[float, float],
        text: str,
        color: str,
        font_size: int = DEFAULT_FONT_SIZE,
    ) -> Optional[str]:
        """Add an annotation and select it.

        Returns the new identity, or None when *text* is empty (nothing armed).

        Raises:
            ValueError: If *color* is not an RGB hex colour.
        """
        if not text:
            return None
        x, y = position
        ann = Annotation(
            id=self._ids.next(),
            x=float(x),
            y=float(y),
            text=text,
            color=normalize_hex_color(color),
            font_size=clamp_font_size(font_size),
        )
        self._items[ann.id] = ann
        self.selected_id = ann.id
        log.debug("inserted %s %r at (%.1f, %.1f)", ann.id, text, ann.x, ann.y)
        self._notify_changed()
        return ann.id

    def select(self, ann_id: Optional[str]) -> None:
        """Select *ann_id*, or clear the selection with None.

        Raises:
            KeyError: If *ann_id* is not in the store.
        """
        if ann_id is not None and ann_id not in self._items:
            raise KeyError(ann_id)
        if ann_id == self.selected_id:
            return
        self.selected_id = ann_id
        self._notify_changed()

    def move(self, ann_id: str, position: Tuple[float, float]) -> None:
        """Update a position; unknown identities are ignored."""
        ann = self._items.get(ann_id)
        if ann is None:
            log.debug("move ignored, %s no longer exists", ann_id)
            return
        ann.x, ann.y = float(position[0]), float(position[1])
        self._notify_changed()

    def update_text(self, ann_id: str, text: str) -> None:
        """Replace the text; empty text is allowed while editing."""
        ann = self._items.get(ann_id)
        if ann is None:
            return
        ann.text = text
        self._notify_changed()

    def delete(self, ann_id: str) -> None:
        if self._items.pop(ann_id, None) is None:
            return
        if self.selected_id == ann_id:
            self.selected_id = None
        log.debug("deleted %s", ann_id)
        self._notify_changed()

    def clear(self) -> None:
        self._items.clear()
        self.selected_id = None
        self._notify_changed()

    def replace(self, annotations: Iterable[Annotation]) -> None:
        """Swap in a whole annotation list (project load).

        Raises:
            ValueError: If two annotations share an identity.
        """
        items: Dict[str, Annotation] = {}
        for ann in annotations:
            if ann.id in items:
                raise ValueError(f"duplicate annotation id: {ann.id}")
            items[ann.id] = ann
        self._items = items
        self._ids.reserve(items)
        self.selected_id = None
        log.debug("replaced store with %d annotations", len(items))
        self._notify_changed()
