"""
project/serializer.py

Project document <-> JSON text.

Persisted shape::

    {
      "imagePath": "diagram.png",          # optional
      "annotations": [{"id", "x", "y", "text", "color", "fontSize"}, ...],
      "proofSteps": [{"id", "because", "therefore"}, ...],
      "fontSize": 28,
      "isDarkMode": false
    }

The image reference is returned unresolved; resolving and decoding it is
the caller's job.
"""

from __future__ import annotations

import json
import logging
import math
import os
from typing import Any, Dict, Optional

from models import Annotation, DEFAULT_FONT_SIZE, ProjectDocument, ProofStep, clamp_font_size
from project.errors import LoadFailure
from schemas import validate_document
from utils import sort_document_data

log = logging.getLogger(__name__)


def document_to_dict(document: ProjectDocument) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if document.image_path:
        data["imagePath"] = document.image_path
    data["annotations"] = [ann.to_dict() for ann in document.annotations]
    data["proofSteps"] = [step.to_dict() for step in document.proof_steps]
    data["fontSize"] = document.font_size
    data["isDarkMode"] = document.dark_mode
    return sort_document_data(data)


def serialize(document: ProjectDocument) -> str:
    """Encode *document* as pretty-printed JSON text."""
    return json.dumps(document_to_dict(document), indent=2, ensure_ascii=False)


def document_from_dict(data: Dict[str, Any]) -> ProjectDocument:
    """Build a document from an already parsed dict.

    Raises:
        LoadFailure: If the dict does not match the project schema or
            repeats an identity.
    """
    ok, errors = validate_document(data)
    if not ok:
        raise LoadFailure("Malformed project file:\n" + "\n".join(errors))

    try:
        annotations = [Annotation.from_dict(rec) for rec in data.get("annotations", [])]
        steps = [ProofStep.from_dict(rec) for rec in data.get("proofSteps", [])]
    except (ValueError, OverflowError, TypeError) as e:
        raise LoadFailure(f"Malformed project file: {e}") from e

    ann_ids = [a.id for a in annotations]
    if len(ann_ids) != len(set(ann_ids)):
        raise LoadFailure("Malformed project file: duplicate annotation id")
    step_ids = [s.id for s in steps]
    if len(step_ids) != len(set(step_ids)):
        raise LoadFailure("Malformed project file: duplicate proof step id")

    font_size = data.get("fontSize")
    if font_size is not None and not math.isfinite(font_size):
        raise LoadFailure(f"Malformed project file: fontSize must be finite, got {font_size!r}")
    return ProjectDocument(
        image_path=data.get("imagePath") or None,
        annotations=annotations,
        proof_steps=steps,
        font_size=clamp_font_size(font_size) if font_size else DEFAULT_FONT_SIZE,
        dark_mode=bool(data.get("isDarkMode", False)),
    )


def _reject_constant(name: str):
    raise ValueError(f"non-finite number {name} is not allowed")


def deserialize(text: str) -> ProjectDocument:
    """Decode project JSON text.

    Raises:
        LoadFailure: On malformed JSON or any structural problem. Nothing is
            returned partially.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        raise LoadFailure(f"Malformed project file: {e}") from e
    document = document_from_dict(data)
    log.debug(
        "deserialized project: %d annotations, %d proof steps, image=%s",
        len(document.annotations), len(document.proof_steps), document.image_path,
    )
    return document


def resolve_image_path(image_path: str, project_path: Optional[str] = None) -> str:
    """Resolve a stored image reference against the project file location.

    Relative references are tried next to the project file first; if no
    such file exists the reference is returned as written.
    """
    if os.path.isabs(image_path) or not project_path:
        return image_path
    candidate = os.path.join(os.path.dirname(os.path.abspath(project_path)), image_path)
    if os.path.exists(candidate):
        return candidate
    return image_path
