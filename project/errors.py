"""
project/errors.py

Failures raised at the import/save/load boundaries.

Picker cancellation is not an error; callers just get an empty path.
"""


class ProjectError(Exception):
    """Base class for recoverable project I/O failures."""

    title = "Error"


class ImportFailure(ProjectError):
    """Image path unreadable or image undecodable."""

    title = "Import failed"


class SaveFailure(ProjectError):
    """Project file could not be written."""

    title = "Save failed"


class LoadFailure(ProjectError):
    """Project file unreadable or malformed."""

    title = "Open failed"
