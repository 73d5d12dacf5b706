"""
main.py

TriProof - Geometry Diagram Annotator

PyQt6 application for annotating a geometry diagram with:
- Quick-insert text templates (vertex letters, angles, triangles, symbols)
- Drag-to-move annotations with selection highlight
- Fit-to-viewport image display with stepped zoom
- A "because / therefore" proof step list
- Project save/load as .proof JSON

Usage:
    python main.py

Dependencies:
    pip install PyQt6 pillow platformdirs tomli-w jsonschema
"""

from __future__ import annotations

import os
import sys
import traceback
from typing import Optional

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtGui import QAction, QKeySequence, QPixmap
from PyQt6.QtWidgets import (
    QApplication,
    QDockWidget,
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QToolBar,
)

import debug_trace
from canvas.scene import BoardScene
from canvas.view import BoardView
from debug_trace import close_log, trace, trace_call, trace_exception
from models import Size, TEXT_TEMPLATES
from project import (
    ImportFailure,
    LoadFailure,
    ProjectError,
    deserialize,
    resolve_image_path,
    serialize,
)
from project.io import (
    IMAGE_FILTER,
    PROJECT_FILTER,
    decode_image,
    image_info,
    image_natural_size,
    read_project_text,
    write_project_text,
)
from proof.panel import ProofPanel
from properties import ToolPanel
from settings import SettingsManager, get_settings
from state import AppState
from styles import style_for
from utils import ensure_extension


class MainWindow(QMainWindow):
    """Main application window for the geometry annotator.

    Args:
        settings_manager: The SettingsManager instance for application settings.
    """

    def __init__(self, settings_manager: SettingsManager):
        super().__init__()
        self.settings_manager = settings_manager
        settings = settings_manager.settings
        self.setWindowTitle("TriProof - Geometry Proof Annotator")

        self.state = AppState(settings)
        self._applied_dark: Optional[bool] = None

        # Scene and view
        self.scene = BoardScene(settings)
        self.view = BoardView(self.scene, self._on_drop_file)
        self.setCentralWidget(self.view)

        # Tool panel (left)
        self.tools = ToolPanel(TEXT_TEMPLATES, self)
        tools_dock = QDockWidget("Tools", self)
        tools_dock.setWidget(self.tools)
        tools_dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, tools_dock)

        # Proof steps (right)
        self.proof_panel = ProofPanel(self.state.proof, self)
        proof_dock = QDockWidget("Proof", self)
        proof_dock.setWidget(self.proof_panel)
        proof_dock.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, proof_dock)

        self._build_toolbar()

        # Connect tool panel signals
        self.tools.token_clicked.connect(self._on_token_clicked)
        self.tools.color_chosen.connect(self._on_color_chosen)
        self.tools.font_size_changed.connect(self.state.set_font_size)
        self.tools.text_edited.connect(self.state.edit_selected_text)
        self.tools.delete_requested.connect(self.state.delete_selected)

        # Configure renderer -> state callbacks
        self.scene.configure_linkage(
            self._on_canvas_clicked,
            self.state.background_pressed,
            self.state.annotation_clicked,
            self.state.annotation_dragged,
        )
        self.view.on_resized = self.state.viewport_resized
        self.state.on_changed = self.refresh

        self.tools.set_image_info({})
        self.refresh()
        self.statusBar().showMessage("Import a diagram, pick a template, then click the canvas.")

    def _build_toolbar(self):
        """Build the application toolbar."""
        tb = QToolBar("Tools")
        tb.setIconSize(QSize(18, 18))
        tb.setMovable(False)
        self.addToolBar(tb)

        def add_action(text: str, slot, shortcut=None, tooltip: str = "") -> QAction:
            act = QAction(text, self)
            if shortcut is not None:
                act.setShortcut(shortcut)
            if tooltip:
                act.setToolTip(tooltip)
                act.setStatusTip(tooltip)
            act.triggered.connect(lambda _checked=False, f=slot: f())
            tb.addAction(act)
            return act

        add_action("Import Image...", self.import_image_dialog, QKeySequence.StandardKey.New,
                   "Import a diagram image (clears annotations)")
        add_action("Open...", self.open_project_dialog, QKeySequence.StandardKey.Open,
                   "Open a .proof project")
        add_action("Save...", self.save_project_dialog, QKeySequence.StandardKey.Save,
                   "Save the project as .proof")
        tb.addSeparator()
        add_action("Clear", self.clear_annotations, None, "Remove all annotations")
        add_action("Delete", self.state.delete_selected, QKeySequence.StandardKey.Delete,
                   "Delete the selected annotation")
        tb.addSeparator()
        add_action("Zoom In", self.state.zoom_in, QKeySequence.StandardKey.ZoomIn)
        add_action("Zoom Out", self.state.zoom_out, QKeySequence.StandardKey.ZoomOut)
        tb.addSeparator()
        self.theme_act = add_action("Dark Mode", self.toggle_theme, None,
                                    "Switch between light and dark theme")

    # ---- state -> UI ----

    def refresh(self):
        """Re-render the scene and panels from AppState."""
        state = self.state
        self.scene.apply_transform(state.transform)
        self.scene.sync(state.store.annotations(), state.store.selected_id)

        self.tools.show_pending(state.palette.pending_token)
        self.tools.show_color(state.current_color)
        self.tools.show_font_size(state.font_size)
        self.tools.show_selected(state.store.selected())

        if self._applied_dark != state.dark_mode:
            self._applied_dark = state.dark_mode
            self.scene.set_dark_mode(state.dark_mode)
            app = QApplication.instance()
            if app is not None:
                app.setStyleSheet(style_for(state.dark_mode))
            self.theme_act.setText("Light Mode" if state.dark_mode else "Dark Mode")

        n = len(state.store)
        self.statusBar().showMessage(f"{n} annotation{'s' if n != 1 else ''}")

    # ---- renderer / panel events ----

    def _on_canvas_clicked(self, x: float, y: float) -> bool:
        if not self.state.palette.is_armed:
            return False
        inserted = self.state.canvas_clicked(x, y)
        self.refresh()
        return inserted is not None

    def _on_token_clicked(self, token: str):
        self.state.palette.arm(token)
        self.refresh()

    def _on_color_chosen(self, color: str):
        try:
            self.state.set_color(color)
        except ValueError as e:
            QMessageBox.warning(self, "Invalid colour", str(e))
        self.refresh()

    def toggle_theme(self):
        dark = self.state.toggle_dark_mode()
        trace(f"Theme switched to {'dark' if dark else 'light'}", "UI")

    def clear_annotations(self):
        """Remove every annotation (asks first unless disabled in settings)."""
        if len(self.state.store) == 0:
            return
        if self.settings_manager.settings.confirm_clear:
            answer = QMessageBox.question(
                self, "Clear annotations",
                "Remove all annotations from the canvas?",
            )
            if answer != QMessageBox.StandardButton.Yes:
                return
        self.state.clear_annotations()

    # ---- import ----

    def import_image_dialog(self):
        """Pick a diagram image and start a fresh canvas on it."""
        workspace = str(self.settings_manager.get_workspace_dir())
        path, _ = QFileDialog.getOpenFileName(self, "Import Image", workspace, IMAGE_FILTER)
        if not path:
            return
        self._import_image(path)

    def _on_drop_file(self, path: str):
        self._import_image(path)

    def _import_image(self, path: str):
        trace(f"Importing image {path}", "IO")
        try:
            image = decode_image(path)
        except ImportFailure as e:
            QMessageBox.warning(self, e.title, str(e))
            self.statusBar().showMessage(f"{e.title}: {os.path.basename(path)}")
            return
        self.scene.set_background(QPixmap.fromImage(image))
        self.state.import_image(path, image_natural_size(image))
        self.tools.set_image_info(image_info(path, image))
        self.refresh()
        self.statusBar().showMessage(f"Imported image: {os.path.basename(path)}")

    # ---- save / open ----

    @trace_call("IO")
    def save_project_dialog(self):
        """Save the session as a .proof project."""
        workspace = str(self.settings_manager.get_workspace_dir())
        path, _ = QFileDialog.getSaveFileName(
            self, "Save Project", os.path.join(workspace, "proof-project.proof"), PROJECT_FILTER
        )
        if not path:
            return
        path = ensure_extension(path, ("proof", "json"), default="proof")
        trace(f"Saving project {path}", "IO")
        try:
            write_project_text(path, serialize(self.state.to_document()))
        except ProjectError as e:
            QMessageBox.critical(self, e.title, str(e))
            self.statusBar().showMessage(f"{e.title}: {path}")
            return
        self.statusBar().showMessage(f"Saved project: {path}")

    def open_project_dialog(self):
        """Open a .proof project, replacing the current session."""
        workspace = str(self.settings_manager.get_workspace_dir())
        path, _ = QFileDialog.getOpenFileName(self, "Open Project", workspace, PROJECT_FILTER)
        if not path:
            return
        self.open_project(path)

    @trace_call("IO")
    def open_project(self, path: str):
        trace(f"Opening project {path}", "IO")
        try:
            document = deserialize(read_project_text(path))
        except LoadFailure as e:
            QMessageBox.critical(self, e.title, str(e))
            self.statusBar().showMessage(f"{e.title}: {path}")
            return

        image = None
        natural_size: Optional[Size] = None
        if document.image_path:
            image_path = resolve_image_path(document.image_path, path)
            try:
                image = decode_image(image_path)
                natural_size = image_natural_size(image)
            except ImportFailure as e:
                trace(f"Background not restored: {e}", "IO")
                QMessageBox.warning(
                    self, "Image not found",
                    f"The project opened without its background image.\n\n{e}",
                )

        self.state.apply_document(document, natural_size)

        self.scene.set_background(QPixmap.fromImage(image) if image is not None else None)
        self.tools.set_image_info(image_info(image_path, image) if image is not None else {})
        self.proof_panel.set_steps(self.state.proof)
        self.refresh()
        self.statusBar().showMessage(f"Opened project: {path}")


def main():
    """Application entry point."""
    # Global exception handler to catch crashes
    sys.excepthook = excepthook

    settings_manager = get_settings()
    settings_manager.ensure_file_complete()
    debug = settings_manager.settings.debug
    debug_trace.configure(debug.trace, debug.log_file)

    trace("Application starting", "MAIN")
    app = QApplication(sys.argv)
    app.setStyleSheet(style_for(False))

    # Save settings on application quit
    def save_on_quit():
        trace("Saving settings on quit", "MAIN")
        settings_manager.save()
        close_log()

    app.aboutToQuit.connect(save_on_quit)

    trace("Creating MainWindow", "MAIN")
    w = MainWindow(settings_manager)
    w.resize(1400, 900)
    w.show()
    trace("Entering event loop", "MAIN")
    sys.exit(app.exec())


def excepthook(exc_type, exc_value, exc_tb):
    trace("UNCAUGHT EXCEPTION:", "CRASH")
    trace("".join(traceback.format_exception(exc_type, exc_value, exc_tb)), "CRASH")
    close_log()
    sys.__excepthook__(exc_type, exc_value, exc_tb)


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        trace(f"FATAL: {type(e).__name__}: {e}", "CRASH")
        trace_exception("Fatal exception")
        close_log()
        raise
