"""
tests/test_proof_steps.py

Proof step list: append, edit, remove, replace.
"""

from __future__ import annotations

import pytest

from models import ProofStep
from proof.steps import ProofStepList


def test_add_appends_blank_steps_with_unique_ids():
    steps = ProofStepList()
    a = steps.add()
    b = steps.add("AB = AC", "∠B = ∠C")
    assert [s.id for s in steps.steps()] == [a.id, b.id]
    assert a.id != b.id
    assert (a.because, a.therefore) == ("", "")


def test_update_partial_fields():
    steps = ProofStepList()
    step = steps.add()
    steps.update(step.id, because="AB ∥ CD")
    steps.update(step.id, therefore="∠1 = ∠2")
    got = steps.get(step.id)
    assert (got.because, got.therefore) == ("AB ∥ CD", "∠1 = ∠2")


def test_update_unknown_is_noop():
    steps = ProofStepList()
    steps.add()
    steps.update("nope", because="x")
    assert all(s.because == "" for s in steps.steps())


def test_remove():
    steps = ProofStepList()
    a = steps.add()
    b = steps.add()
    steps.remove(a.id)
    assert [s.id for s in steps.steps()] == [b.id]


def test_ensure_seeded_only_when_empty():
    steps = ProofStepList()
    steps.ensure_seeded()
    assert len(steps) == 1
    steps.ensure_seeded()
    assert len(steps) == 1


def test_replace_reserves_ids():
    steps = ProofStepList([ProofStep(id="1"), ProofStep(id="2")])
    new = steps.add()
    assert new.id not in ("1", "2")


def test_replace_rejects_duplicates():
    with pytest.raises(ValueError):
        ProofStepList([ProofStep(id="1"), ProofStep(id="1")])
