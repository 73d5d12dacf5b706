"""
proof package

Proof step list and the dock panel that edits it.
"""

from proof.steps import ProofStepList

__all__ = ["ProofStepList"]
