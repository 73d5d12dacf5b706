"""
tests/test_settings.py

TOML settings persistence in an isolated directory.
"""

from __future__ import annotations

from pathlib import Path

from settings import AppSettings, SettingsManager


def test_missing_file_gives_defaults(tmp_path):
    sm = SettingsManager(settings_dir=tmp_path)
    assert sm.settings == AppSettings()
    assert not sm.get_settings_path().exists()


def test_ensure_file_complete_writes_all_sections(tmp_path):
    sm = SettingsManager(settings_dir=tmp_path)
    sm.ensure_file_complete()
    text = sm.get_settings_path().read_text(encoding="utf-8")
    for section in ("[general]", "[canvas.zoom]", "[canvas.viewport]",
                    "[canvas.selection]", "[defaults.text]", "[debug]"):
        assert section in text


def test_round_trip(tmp_path):
    sm = SettingsManager(settings_dir=tmp_path)
    sm.settings.canvas.zoom.step = 1.5
    sm.settings.canvas.viewport.image_anchor = "center"
    sm.settings.defaults.font_size = 36
    sm.settings.confirm_clear = False
    sm.save()

    reloaded = SettingsManager(settings_dir=tmp_path).settings
    assert reloaded.canvas.zoom.step == 1.5
    assert reloaded.canvas.viewport.image_anchor == "center"
    assert reloaded.defaults.font_size == 36
    assert reloaded.confirm_clear is False


def test_partial_file_keeps_other_defaults(tmp_path):
    (tmp_path / "settings.toml").write_text("[canvas.zoom]\nmax_scale = 5.0\n", encoding="utf-8")
    settings = SettingsManager(settings_dir=tmp_path).settings
    assert settings.canvas.zoom.max_scale == 5.0
    assert settings.canvas.zoom.min_scale == 0.1
    assert settings.defaults.color == "#FF0000"


def test_unknown_anchor_ignored(tmp_path):
    (tmp_path / "settings.toml").write_text('[canvas.viewport]\nimage_anchor = "bottom"\n', encoding="utf-8")
    assert SettingsManager(settings_dir=tmp_path).settings.canvas.viewport.image_anchor == "top_left"


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "settings.toml").write_text("this is = = not toml [", encoding="utf-8")
    assert SettingsManager(settings_dir=tmp_path).settings == AppSettings()


def test_workspace_dir(tmp_path):
    sm = SettingsManager(settings_dir=tmp_path)
    assert sm.get_workspace_dir() == Path.home() / "Documents" / "TriProof"
    sm.settings.workspace_dir = str(tmp_path / "ws")
    assert sm.get_workspace_dir() == tmp_path / "ws"
