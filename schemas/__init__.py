"""
schemas/__init__.py

JSON Schema definition and validation for TriProof project files.
"""

from __future__ import annotations

import json
import os
from typing import Dict, List, Optional, Tuple

from jsonschema import Draft202012Validator

# Schema file paths
SCHEMA_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_SCHEMA_PATH = os.path.join(SCHEMA_DIR, "project_schema.json")

# Cached schema and validator
_project_schema: Optional[Dict] = None
_validator: Optional[Draft202012Validator] = None


def get_project_schema() -> Dict:
    """Load and return the project document schema."""
    global _project_schema
    if _project_schema is None:
        with open(PROJECT_SCHEMA_PATH, "r", encoding="utf-8") as f:
            _project_schema = json.load(f)
    return _project_schema


def _get_validator() -> Draft202012Validator:
    global _validator
    if _validator is None:
        _validator = Draft202012Validator(get_project_schema())
    return _validator


def validate_document(data: object) -> Tuple[bool, List[str]]:
    """
    Validate a parsed project document against the schema.

    Args:
        data: The parsed JSON value

    Returns:
        Tuple of (is_valid, list_of_error_messages)
    """
    errors = sorted(_get_validator().iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not errors:
        return True, []

    error_messages = []
    for error in errors:
        path = " -> ".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        error_messages.append(f"{path}: {error.message}")
    return False, error_messages
