"""
tests/test_proof_panel.py

ProofPanel edits flow into the ProofStepList.
"""

from __future__ import annotations

from proof.panel import ProofPanel
from proof.steps import ProofStepList


def test_rows_follow_steps(qapp):
    steps = ProofStepList()
    steps.ensure_seeded()
    panel = ProofPanel(steps)
    assert len(panel._rows) == 1

    panel.add_step()
    assert len(panel._rows) == 2
    assert panel._rows[1].title.text() == "Step 2"


def test_typing_updates_step(qapp):
    steps = ProofStepList()
    step = steps.add()
    panel = ProofPanel(steps)
    row = panel._rows[0]
    row.because_edit.textEdited.emit("AB = AC")
    row.therefore_edit.textEdited.emit("∠B = ∠C")
    assert (steps.get(step.id).because, steps.get(step.id).therefore) == ("AB = AC", "∠B = ∠C")


def test_remove_button(qapp):
    steps = ProofStepList()
    a = steps.add()
    b = steps.add()
    panel = ProofPanel(steps)
    panel._rows[0].remove_btn.click()
    assert [s.id for s in steps.steps()] == [b.id]
    assert len(panel._rows) == 1
    assert panel._rows[0].step_id == b.id
    assert steps.get(a.id) is None


def test_set_steps_rebuilds(qapp):
    panel = ProofPanel(ProofStepList())
    assert panel._rows == []
    other = ProofStepList()
    other.add("x", "y")
    panel.set_steps(other)
    assert panel._rows[0].because_edit.text() == "x"
