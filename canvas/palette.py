"""
canvas/palette.py

Quick-insert template palette and its armed (pending) token.
"""

from __future__ import annotations

from typing import Optional, Sequence

from models import TEXT_TEMPLATES


class TemplatePalette:
    """Static token catalog plus the token the next canvas click inserts."""

    def __init__(self, templates: Sequence[str] = TEXT_TEMPLATES):
        self.templates = tuple(templates)
        self.pending_token: Optional[str] = None

    @property
    def is_armed(self) -> bool:
        return self.pending_token is not None

    def arm(self, token: str) -> Optional[str]:
        """Arm *token*; arming the already armed token disarms it.

        Returns the pending token after the toggle.
        """
        if not token or token == self.pending_token:
            self.pending_token = None
        else:
            self.pending_token = token
        return self.pending_token

    def disarm(self) -> None:
        self.pending_token = None

    def consume(self) -> Optional[str]:
        """Return the pending token and clear it."""
        token, self.pending_token = self.pending_token, None
        return token
