"""
tests/test_store.py

Annotation store: identity, selection and mutation rules.
"""

from __future__ import annotations

import pytest

from canvas.store import AnnotationStore
from models import Annotation


@pytest.fixture()
def store():
    return AnnotationStore()


class TestInsert:

    def test_insert_selects_new_annotation(self, store):
        ann_id = store.insert((10, 20), "A", "#ff0000", 28)
        assert ann_id is not None
        assert store.selected_id == ann_id
        ann = store.get(ann_id)
        assert (ann.x, ann.y, ann.text, ann.color, ann.font_size) == (10.0, 20.0, "A", "#FF0000", 28)

    def test_empty_text_is_rejected(self, store):
        assert store.insert((10, 20), "", "#FF0000", 28) is None
        assert len(store) == 0
        assert store.selected_id is None

    def test_identities_are_unique(self, store):
        ids = [store.insert((i, i), "A", "#FF0000") for i in range(20)]
        assert len(set(ids)) == 20

    def test_identities_never_reused_after_delete(self, store):
        first = store.insert((0, 0), "A", "#FF0000")
        store.delete(first)
        second = store.insert((0, 0), "A", "#FF0000")
        assert second != first

    def test_font_size_clamped(self, store):
        small = store.insert((0, 0), "A", "#FF0000", 4)
        large = store.insert((0, 0), "B", "#FF0000", 99)
        assert store.get(small).font_size == 16
        assert store.get(large).font_size == 48

    def test_invalid_color_raises(self, store):
        with pytest.raises(ValueError):
            store.insert((0, 0), "A", "red")
        assert len(store) == 0

    def test_insertion_order_preserved(self, store):
        store.insert((0, 0), "A", "#FF0000")
        store.insert((0, 0), "B", "#FF0000")
        store.insert((0, 0), "C", "#FF0000")
        assert [a.text for a in store.annotations()] == ["A", "B", "C"]


class TestSelection:

    def test_select_none_clears(self, store):
        store.insert((0, 0), "A", "#FF0000")
        store.select(None)
        assert store.selected_id is None
        assert store.selected() is None

    def test_select_unknown_raises(self, store):
        with pytest.raises(KeyError):
            store.select("text-999")

    def test_delete_selected_clears_selection(self, store):
        ann_id = store.insert((0, 0), "A", "#FF0000")
        store.delete(ann_id)
        assert store.selected_id is None
        assert store.get(ann_id) is None

    def test_delete_other_keeps_selection(self, store):
        a = store.insert((0, 0), "A", "#FF0000")
        b = store.insert((0, 0), "B", "#FF0000")
        store.delete(a)
        assert store.selected_id == b

    def test_clear_empties_and_deselects(self, store):
        store.insert((0, 0), "A", "#FF0000")
        store.insert((0, 0), "B", "#FF0000")
        store.clear()
        assert len(store) == 0
        assert store.selected_id is None


class TestMutations:

    def test_move_updates_position_only(self, store):
        ann_id = store.insert((0, 0), "A", "#0000FF", 30)
        store.move(ann_id, (55.5, 66))
        ann = store.get(ann_id)
        assert (ann.x, ann.y) == (55.5, 66.0)
        assert (ann.text, ann.color, ann.font_size) == ("A", "#0000FF", 30)

    def test_move_unknown_is_noop(self, store):
        store.insert((1, 2), "A", "#FF0000")
        before = [(a.id, a.x, a.y) for a in store.annotations()]
        store.move("text-missing", (50, 50))
        assert [(a.id, a.x, a.y) for a in store.annotations()] == before

    def test_update_text_allows_empty_while_editing(self, store):
        ann_id = store.insert((0, 0), "∠___", "#FF0000")
        store.update_text(ann_id, "")
        assert store.get(ann_id).text == ""
        store.update_text(ann_id, "∠ABC")
        assert store.get(ann_id).text == "∠ABC"

    def test_change_callback_fires(self):
        calls = []
        store = AnnotationStore(on_changed=lambda: calls.append(1))
        ann_id = store.insert((0, 0), "A", "#FF0000")
        store.move(ann_id, (5, 5))
        store.delete(ann_id)
        assert len(calls) == 3


class TestReplace:

    def test_replace_rejects_duplicates_without_mutating(self, store):
        existing = store.insert((0, 0), "A", "#FF0000")
        dupes = [
            Annotation(id="text-7", x=0, y=0, text="B"),
            Annotation(id="text-7", x=1, y=1, text="C"),
        ]
        with pytest.raises(ValueError):
            store.replace(dupes)
        assert [a.id for a in store.annotations()] == [existing]

    def test_replace_reserves_loaded_ids(self, store):
        store.replace([Annotation(id="text-1", x=0, y=0, text="A"),
                       Annotation(id="text-2", x=0, y=0, text="B")])
        new_id = store.insert((0, 0), "C", "#FF0000")
        assert new_id not in ("text-1", "text-2")
        assert len({a.id for a in store.annotations()}) == 3

    def test_replace_clears_selection(self, store):
        store.insert((0, 0), "A", "#FF0000")
        store.replace([])
        assert store.selected_id is None
