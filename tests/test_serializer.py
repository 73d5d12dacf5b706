"""
tests/test_serializer.py

Project document <-> JSON: shape, defaults and malformed input.
"""

from __future__ import annotations

import json
import os

import pytest

from models import Annotation, ProjectDocument
from project import LoadFailure, deserialize, resolve_image_path, serialize
from project.serializer import document_to_dict


class TestSerialize:

    def test_round_trip(self, sample_document):
        assert deserialize(serialize(sample_document)) == sample_document

    def test_round_trip_lowercase_color(self):
        doc = ProjectDocument(annotations=[
            Annotation(id="text-1", x=10.0, y=20.0, text="AB", color="#0000ff", font_size=30),
        ])
        loaded = deserialize(serialize(doc))
        assert loaded == doc
        assert loaded.annotations[0].color == "#0000FF"

    def test_persisted_keys(self, sample_document):
        data = json.loads(serialize(sample_document))
        assert list(data) == ["imagePath", "annotations", "proofSteps", "fontSize", "isDarkMode"]
        assert list(data["annotations"][0]) == ["id", "x", "y", "text", "color", "fontSize"]
        assert data["proofSteps"][0] == {"id": "1", "because": "AB = AC", "therefore": "△ABC is isosceles"}
        assert data["isDarkMode"] is True

    def test_unicode_written_verbatim(self, sample_document):
        assert "∠A" in serialize(sample_document)

    def test_image_path_omitted_when_absent(self):
        data = document_to_dict(ProjectDocument())
        assert "imagePath" not in data
        assert data == {"annotations": [], "proofSteps": [], "fontSize": 28, "isDarkMode": False}


class TestDeserializeDefaults:

    def test_minimal_document(self):
        doc = deserialize('{"annotations":[],"proofSteps":[],"fontSize":28,"isDarkMode":false}')
        assert doc == ProjectDocument()

    def test_missing_optional_fields(self):
        doc = deserialize("{}")
        assert doc.annotations == []
        assert doc.proof_steps == []
        assert doc.font_size == 28
        assert doc.dark_mode is False
        assert doc.image_path is None

    def test_zero_font_size_means_default(self):
        assert deserialize('{"fontSize": 0}').font_size == 28

    def test_font_size_clamped(self):
        assert deserialize('{"fontSize": 200}').font_size == 48

    def test_empty_image_path_is_absent(self):
        assert deserialize('{"imagePath": ""}').image_path is None

    def test_json_extension_content_is_interchangeable(self, sample_document, tmp_path):
        text = serialize(sample_document)
        (tmp_path / "a.proof").write_text(text, encoding="utf-8")
        (tmp_path / "a.json").write_text(text, encoding="utf-8")
        a = deserialize((tmp_path / "a.proof").read_text(encoding="utf-8"))
        b = deserialize((tmp_path / "a.json").read_text(encoding="utf-8"))
        assert a == b


class TestDeserializeFailures:

    @pytest.mark.parametrize("text", [
        "",
        "not json",
        "{\"annotations\": [",
        "[]",
        "42",
        '{"annotations": {}}',
        '{"annotations": [{"id": "a", "x": 0, "y": 0, "text": "A"}]}',
        '{"annotations": [{"id": "a", "x": "left", "y": 0, "text": "A", "color": "#FF0000", "fontSize": 28}]}',
        '{"annotations": [{"id": "a", "x": 0, "y": 0, "text": "A", "color": "red", "fontSize": 28}]}',
        '{"proofSteps": [{"because": "x"}]}',
        '{"isDarkMode": "yes"}',
        '{"fontSize": NaN}',
        '{"fontSize": Infinity}',
        '{"fontSize": -Infinity}',
        '{"fontSize": 1e400}',
        '{"annotations": [{"id": "a", "x": 0, "y": 0, "text": "A", "color": "#FF0000", "fontSize": 1e400}]}',
        '{"annotations": [{"id": "a", "x": 1e400, "y": 0, "text": "A", "color": "#FF0000", "fontSize": 28}]}',
        '{"annotations": [{"id": "a", "x": 0, "y": -1e400, "text": "A", "color": "#FF0000", "fontSize": 28}]}',
    ])
    def test_malformed_raises_load_failure(self, text):
        with pytest.raises(LoadFailure):
            deserialize(text)

    def test_duplicate_annotation_ids(self):
        ann = {"id": "a", "x": 0, "y": 0, "text": "A", "color": "#FF0000", "fontSize": 28}
        with pytest.raises(LoadFailure):
            deserialize(json.dumps({"annotations": [ann, dict(ann, text="B")]}))

    def test_duplicate_step_ids(self):
        with pytest.raises(LoadFailure):
            deserialize(json.dumps({"proofSteps": [{"id": "1"}, {"id": "1"}]}))


class TestResolveImagePath:

    def test_absolute_path_unchanged(self, tmp_path):
        p = str(tmp_path / "x.png")
        assert resolve_image_path(p, str(tmp_path / "p.proof")) == p

    def test_relative_to_project_file(self, tmp_path):
        (tmp_path / "diagram.png").write_bytes(b"")
        got = resolve_image_path("diagram.png", str(tmp_path / "p.proof"))
        assert os.path.samefile(got, tmp_path / "diagram.png")

    def test_relative_missing_returned_as_written(self, tmp_path):
        assert resolve_image_path("nowhere.png", str(tmp_path / "p.proof")) == "nowhere.png"

    def test_no_project_path(self):
        assert resolve_image_path("diagram.png") == "diagram.png"
