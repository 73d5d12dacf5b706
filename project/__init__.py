"""
project package

Project document persistence: JSON serializer, file/image I/O, failures.
"""

from project.errors import ImportFailure, LoadFailure, ProjectError, SaveFailure
from project.serializer import deserialize, resolve_image_path, serialize

__all__ = [
    "ImportFailure",
    "LoadFailure",
    "ProjectError",
    "SaveFailure",
    "deserialize",
    "resolve_image_path",
    "serialize",
]
