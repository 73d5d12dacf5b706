"""
proof/steps.py

Ordered list of proof steps (because ..., therefore ...).

This is a free-text scratchpad; nothing checks that the steps form a valid
proof.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from models import ProofStep
from utils import IdAllocator


class ProofStepList:
    """Append/remove list of :class:`ProofStep` keyed by identity."""

    def __init__(self, steps: Iterable[ProofStep] = ()):
        self._steps: List[ProofStep] = []
        self._ids = IdAllocator()
        self.replace(steps)

    def __len__(self) -> int:
        return len(self._steps)

    def steps(self) -> List[ProofStep]:
        return list(self._steps)

    def get(self, step_id: str) -> Optional[ProofStep]:
        for step in self._steps:
            if step.id == step_id:
                return step
        return None

    def add(self, because: str = "", therefore: str = "") -> ProofStep:
        step = ProofStep(id=self._ids.next(), because=because, therefore=therefore)
        self._steps.append(step)
        return step

    def remove(self, step_id: str) -> None:
        self._steps = [s for s in self._steps if s.id != step_id]

    def update(self, step_id: str, because: Optional[str] = None,
               therefore: Optional[str] = None) -> None:
        step = self.get(step_id)
        if step is None:
            return
        if because is not None:
            step.because = because
        if therefore is not None:
            step.therefore = therefore

    def replace(self, steps: Iterable[ProofStep]) -> None:
        """Swap in a whole step list.

        Raises:
            ValueError: If two steps share an identity.
        """
        new_steps = list(steps)
        ids = [s.id for s in new_steps]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate proof step id")
        self._steps = new_steps
        self._ids.reserve(ids)

    def ensure_seeded(self) -> None:
        """Seed one blank step when the list is empty."""
        if not self._steps:
            self.add()
