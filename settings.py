"""
settings.py

Persistent settings management for TriProof.

Handles cross-platform settings storage using TOML format with platformdirs
for proper user config directory detection.

Settings file location:
    - Windows: %APPDATA%/triproof/settings.toml
    - macOS: ~/Library/Application Support/triproof/settings.toml
    - Linux: ~/.config/triproof/settings.toml

Default values are documented in comments throughout this file.
If settings.toml is corrupted, these defaults will be used.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

# TOML reading - use tomllib for Python 3.11+, tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

APP_NAME = "triproof"

# Global settings manager instance (singleton)
_settings_manager: Optional["SettingsManager"] = None


def get_settings() -> "SettingsManager":
    """Get the global settings manager instance.

    Returns:
        The singleton SettingsManager instance.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


# =============================================================================
# Canvas Settings
# =============================================================================

@dataclass
class CanvasZoomSettings:
    """Zoom behavior settings.

    Defaults:
        step: 1.2
        min_scale: 0.1
        max_scale: 3.0
    """
    step: float = 1.2        # Default: 1.2 (multiplicative, 20% per click)
    min_scale: float = 0.1   # Default: 0.1
    max_scale: float = 3.0   # Default: 3.0


@dataclass
class CanvasViewportSettings:
    """Viewport settings used before the view has been measured.

    Defaults:
        default_width: 800
        default_height: 600
        image_anchor: "top_left"
    """
    default_width: int = 800            # Default: 800 pixels
    default_height: int = 600           # Default: 600 pixels
    image_anchor: str = "top_left"      # Default: "top_left" (top_left | center)


@dataclass
class CanvasSelectionSettings:
    """Selected annotation highlight.

    Defaults:
        highlight_color: "#FFD700"
        highlight_blur: 10.0
        outline_width: 2.0
    """
    highlight_color: str = "#FFD700"  # Default: gold
    highlight_blur: float = 10.0      # Default: 10.0 pixels
    outline_width: float = 2.0        # Default: 2.0 pixels


@dataclass
class CanvasSettings:
    """All canvas-related settings."""
    zoom: CanvasZoomSettings = field(default_factory=CanvasZoomSettings)
    viewport: CanvasViewportSettings = field(default_factory=CanvasViewportSettings)
    selection: CanvasSelectionSettings = field(default_factory=CanvasSelectionSettings)


# =============================================================================
# Default Text Settings
# =============================================================================

@dataclass
class DefaultTextSettings:
    """Default formatting for new annotations.

    Defaults:
        font_size: 28
        color: "#FF0000"
        bold: True
    """
    font_size: int = 28        # Default: 28 pixels
    color: str = "#FF0000"     # Default: red
    bold: bool = True          # Default: True


# =============================================================================
# Debug Settings
# =============================================================================

@dataclass
class DebugSettings:
    """Debug trace settings.

    Defaults:
        trace: False
        log_file: ""
    """
    trace: bool = False    # Default: False
    log_file: str = ""     # Default: "" (stderr only)


# =============================================================================
# Main App Settings
# =============================================================================

@dataclass
class AppSettings:
    """Application settings with default values.

    Attributes:
        workspace_dir: Default directory for saving/loading projects.
        confirm_clear: Ask before clearing all annotations.
        canvas: Canvas-related settings.
        defaults: Default text formatting settings.
        debug: Debug trace settings.
    """
    # Workspace directory for project save/load (empty = ~/Documents/TriProof)
    workspace_dir: str = ""

    confirm_clear: bool = True  # Default: True

    # Nested settings categories
    canvas: CanvasSettings = field(default_factory=CanvasSettings)
    defaults: DefaultTextSettings = field(default_factory=DefaultTextSettings)
    debug: DebugSettings = field(default_factory=DebugSettings)


# =============================================================================
# Settings Manager
# =============================================================================

class SettingsManager:
    """Manages loading, saving, and accessing application settings.

    Settings are stored in a TOML file at the platform-appropriate location.
    If the settings file doesn't exist, defaults are used and the file is
    created on first save.

    Args:
        app_name: Application name used for the config directory.
        settings_dir: Explicit directory overriding the platform location.
    """

    def __init__(self, app_name: str = APP_NAME, settings_dir: Optional[Path] = None):
        if settings_dir is None:
            settings_dir = Path(platformdirs.user_config_dir(app_name))
        self.settings_dir = Path(settings_dir)
        self.settings_file = self.settings_dir / "settings.toml"
        self.settings = self.load()
        self._needs_save = not self.settings_file.exists()  # Save if file didn't exist

    def ensure_file_complete(self) -> None:
        """Ensure settings file exists with all sections. Call once at startup."""
        if self._needs_save or not self.settings_file.exists():
            self.save()
            self._needs_save = False

    def load(self) -> AppSettings:
        """Load settings from the TOML file.

        Returns:
            AppSettings instance with values from file or defaults if file
            doesn't exist or is invalid.
        """
        if not self.settings_file.exists():
            return AppSettings()

        try:
            with open(self.settings_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            # If file is corrupted or unreadable, return defaults
            return AppSettings()
        return self._parse_toml(data)

    def _parse_toml(self, data: Dict[str, Any]) -> AppSettings:
        """Parse TOML data into AppSettings.

        Args:
            data: Parsed TOML dictionary.

        Returns:
            AppSettings instance populated from TOML data.
        """
        settings = AppSettings()

        # General section
        general = data.get("general", {})
        settings.workspace_dir = general.get("workspace_dir", settings.workspace_dir)
        settings.confirm_clear = general.get("confirm_clear", settings.confirm_clear)

        # Canvas section
        canvas = data.get("canvas", {})
        if "zoom" in canvas:
            zm = canvas["zoom"]
            settings.canvas.zoom.step = zm.get("step", settings.canvas.zoom.step)
            settings.canvas.zoom.min_scale = zm.get("min_scale", settings.canvas.zoom.min_scale)
            settings.canvas.zoom.max_scale = zm.get("max_scale", settings.canvas.zoom.max_scale)
        if "viewport" in canvas:
            vp = canvas["viewport"]
            settings.canvas.viewport.default_width = vp.get("default_width", settings.canvas.viewport.default_width)
            settings.canvas.viewport.default_height = vp.get("default_height", settings.canvas.viewport.default_height)
            anchor = vp.get("image_anchor", settings.canvas.viewport.image_anchor)
            if anchor in ("top_left", "center"):
                settings.canvas.viewport.image_anchor = anchor
        if "selection" in canvas:
            sel = canvas["selection"]
            settings.canvas.selection.highlight_color = sel.get("highlight_color", settings.canvas.selection.highlight_color)
            settings.canvas.selection.highlight_blur = sel.get("highlight_blur", settings.canvas.selection.highlight_blur)
            settings.canvas.selection.outline_width = sel.get("outline_width", settings.canvas.selection.outline_width)

        # Defaults section
        defaults = data.get("defaults", {})
        if "text" in defaults:
            t = defaults["text"]
            settings.defaults.font_size = t.get("font_size", settings.defaults.font_size)
            settings.defaults.color = t.get("color", settings.defaults.color)
            settings.defaults.bold = t.get("bold", settings.defaults.bold)

        # Debug section
        debug = data.get("debug", {})
        settings.debug.trace = debug.get("trace", settings.debug.trace)
        settings.debug.log_file = debug.get("log_file", settings.debug.log_file)

        return settings

    def save(self) -> None:
        """Save current settings to the TOML file.

        Creates the settings directory if it doesn't exist.
        """
        self.settings_dir.mkdir(parents=True, exist_ok=True)

        data = self._to_toml_dict()

        with open(self.settings_file, "wb") as f:
            tomli_w.dump(data, f)

    def _to_toml_dict(self) -> Dict[str, Any]:
        """Convert settings to a TOML-compatible dictionary structure.

        Returns:
            Dictionary organized by TOML sections.
        """
        s = self.settings
        return {
            "general": {
                "workspace_dir": s.workspace_dir,
                "confirm_clear": s.confirm_clear,
            },
            "canvas": {
                "zoom": {
                    "step": s.canvas.zoom.step,
                    "min_scale": s.canvas.zoom.min_scale,
                    "max_scale": s.canvas.zoom.max_scale,
                },
                "viewport": {
                    "default_width": s.canvas.viewport.default_width,
                    "default_height": s.canvas.viewport.default_height,
                    "image_anchor": s.canvas.viewport.image_anchor,
                },
                "selection": {
                    "highlight_color": s.canvas.selection.highlight_color,
                    "highlight_blur": s.canvas.selection.highlight_blur,
                    "outline_width": s.canvas.selection.outline_width,
                },
            },
            "defaults": {
                "text": {
                    "font_size": s.defaults.font_size,
                    "color": s.defaults.color,
                    "bold": s.defaults.bold,
                },
            },
            "debug": {
                "trace": s.debug.trace,
                "log_file": s.debug.log_file,
            },
        }

    def get_workspace_dir(self) -> Path:
        """Get the resolved workspace directory path.

        Returns:
            Path to workspace directory. Falls back to ~/Documents/TriProof
            if workspace_dir setting is empty.
        """
        if self.settings.workspace_dir:
            return Path(self.settings.workspace_dir)
        return Path.home() / "Documents" / "TriProof"

    def get_settings_path(self) -> Path:
        """Get the path to the settings file.

        Returns:
            Path object pointing to the settings file location.
        """
        return self.settings_file
