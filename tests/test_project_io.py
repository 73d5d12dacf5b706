"""
tests/test_project_io.py

File and image primitives. Decoding needs a QApplication for QImage plugins.
"""

from __future__ import annotations

import pytest
from PIL import Image

from models import Size
from project import ImportFailure, LoadFailure, SaveFailure
from project.io import (
    decode_image,
    image_info,
    image_natural_size,
    read_project_text,
    write_project_text,
)


@pytest.fixture()
def png_path(tmp_path):
    path = tmp_path / "triangle.png"
    Image.new("RGB", (320, 200), "white").save(path)
    return str(path)


def test_write_then_read(tmp_path):
    path = tmp_path / "nested" / "p.proof"
    write_project_text(str(path), '{"fontSize": 28}')
    assert read_project_text(str(path)) == '{"fontSize": 28}'


def test_read_missing_raises_load_failure(tmp_path):
    with pytest.raises(LoadFailure):
        read_project_text(str(tmp_path / "missing.proof"))


def test_write_into_file_as_directory_raises_save_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(SaveFailure):
        write_project_text(str(blocker / "p.proof"), "{}")


def test_decode_png(qapp, png_path):
    image = decode_image(png_path)
    assert image_natural_size(image) == Size(320, 200)


def test_decode_missing_raises_import_failure(qapp, tmp_path):
    with pytest.raises(ImportFailure):
        decode_image(str(tmp_path / "nope.png"))


def test_decode_garbage_raises_import_failure(qapp, tmp_path):
    path = tmp_path / "garbage.png"
    path.write_bytes(b"definitely not a png")
    with pytest.raises(ImportFailure):
        decode_image(str(path))


def test_image_info(qapp, png_path):
    info = image_info(png_path, decode_image(png_path))
    assert info["size"] == "320 x 200px"
    assert info["mode"] == "RGB"
    assert info["depth"] == "24 bpp"
    assert info["filesize"].endswith("KB")
