"""
styles.py

Application stylesheets - Slate (light) and Midnight (dark) themes.
"""

LIGHT_STYLE = """
/* === Slate Light Theme === */
/* Primary: #6366f1 (Indigo-500), Slate grays */

QMainWindow {
    background-color: #f8fafc;
}

QWidget {
    background-color: #f8fafc;
    color: #1e293b;
    font-family: "Inter", "Segoe UI", sans-serif;
    font-size: 13px;
}

/* === Toolbar === */
QToolBar {
    background-color: #ffffff;
    border: none;
    border-bottom: 1px solid #e2e8f0;
    padding: 2px 3px;
    spacing: 2px;
}

QToolBar::separator {
    width: 1px;
    background-color: #e2e8f0;
    margin: 3px 7px;
}

QToolBar QToolButton {
    background-color: #f8fafc;
    color: #475569;
    border: 1px solid #e2e8f0;
    border-radius: 4px;
    padding: 4px 8px;
}

QToolBar QToolButton:hover {
    background-color: #f1f5f9;
    border-color: #cbd5e1;
    color: #6366f1;
}

QToolBar QToolButton:pressed {
    background-color: #e2e8f0;
}

/* === Dock Widgets === */
QDockWidget::title {
    background-color: #f1f5f9;
    padding: 10px 12px;
    border-bottom: 1px solid #e2e8f0;
    font-weight: 600;
    color: #475569;
}

/* === Group Boxes === */
QGroupBox {
    background-color: #ffffff;
    border: 1px solid #e2e8f0;
    border-radius: 8px;
    margin-top: 14px;
    padding: 10px 8px 8px 8px;
    font-weight: 600;
}

QGroupBox::title {
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 4px;
    color: #475569;
}

QGroupBox QLabel {
    background-color: transparent;
}

/* === Buttons === */
QPushButton {
    background-color: #ffffff;
    color: #334155;
    border: 1px solid #cbd5e1;
    border-radius: 6px;
    padding: 6px 10px;
}

QPushButton:hover {
    background-color: #f1f5f9;
    border-color: #6366f1;
}

QPushButton:checked {
    background-color: #e0e7ff;
    border: 2px solid #6366f1;
    color: #4338ca;
}

/* === Inputs === */
QLineEdit {
    background-color: #ffffff;
    color: #1e293b;
    border: 1px solid #cbd5e1;
    border-radius: 6px;
    padding: 6px 8px;
    selection-background-color: #c7d2fe;
}

QLineEdit:focus {
    border: 2px solid #6366f1;
}

QSlider::groove:horizontal {
    height: 6px;
    background-color: #e2e8f0;
    border-radius: 3px;
}

QSlider::handle:horizontal {
    background-color: #6366f1;
    width: 16px;
    margin: -5px 0;
    border-radius: 8px;
}

/* === Scroll Area === */
QScrollArea {
    background-color: #ffffff;
    border: none;
}

QScrollBar:vertical {
    background-color: #f1f5f9;
    width: 10px;
    border-radius: 5px;
}

QScrollBar::handle:vertical {
    background-color: #cbd5e1;
    border-radius: 5px;
    min-height: 30px;
    margin: 1px;
}

QScrollBar::add-line:vertical,
QScrollBar::sub-line:vertical {
    height: 0;
}

/* === Status Bar === */
QStatusBar {
    background-color: #ffffff;
    color: #64748b;
    border-top: 1px solid #e2e8f0;
}
"""

DARK_STYLE = """
/* === Midnight Dark Theme === */
/* Primary: #3d8bfd, Slate-900 surfaces */

QMainWindow {
    background-color: #0f172a;
}

QWidget {
    background-color: #0f172a;
    color: #e2e8f0;
    font-family: "Inter", "Segoe UI", sans-serif;
    font-size: 13px;
}

/* === Toolbar === */
QToolBar {
    background-color: #1e293b;
    border: none;
    border-bottom: 1px solid #334155;
    padding: 2px 3px;
    spacing: 2px;
}

QToolBar::separator {
    width: 1px;
    background-color: #334155;
    margin: 3px 7px;
}

QToolBar QToolButton {
    background-color: #1e293b;
    color: #cbd5e1;
    border: 1px solid #334155;
    border-radius: 4px;
    padding: 4px 8px;
}

QToolBar QToolButton:hover {
    background-color: #334155;
    color: #ffffff;
}

QToolBar QToolButton:pressed {
    background-color: #475569;
}

/* === Dock Widgets === */
QDockWidget::title {
    background-color: #1e293b;
    padding: 10px 12px;
    border-bottom: 1px solid #334155;
    font-weight: 600;
    color: #cbd5e1;
}

/* === Group Boxes === */
QGroupBox {
    background-color: #1e293b;
    border: 1px solid #334155;
    border-radius: 8px;
    margin-top: 14px;
    padding: 10px 8px 8px 8px;
    font-weight: 600;
}

QGroupBox::title {
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 4px;
    color: #cbd5e1;
}

QGroupBox QLabel {
    background-color: transparent;
}

/* === Buttons === */
QPushButton {
    background-color: #334155;
    color: #f1f5f9;
    border: 1px solid #475569;
    border-radius: 6px;
    padding: 6px 10px;
}

QPushButton:hover {
    background-color: #475569;
    border-color: #3d8bfd;
}

QPushButton:checked {
    background-color: #1e3a5f;
    border: 2px solid #3d8bfd;
    color: #ffffff;
}

/* === Inputs === */
QLineEdit {
    background-color: #0f172a;
    color: #f1f5f9;
    border: 1px solid #475569;
    border-radius: 6px;
    padding: 6px 8px;
    selection-background-color: #1d4ed8;
}

QLineEdit:focus {
    border: 2px solid #3d8bfd;
}

QSlider::groove:horizontal {
    height: 6px;
    background-color: #334155;
    border-radius: 3px;
}

QSlider::handle:horizontal {
    background-color: #3d8bfd;
    width: 16px;
    margin: -5px 0;
    border-radius: 8px;
}

/* === Scroll Area === */
QScrollArea {
    background-color: #1e293b;
    border: none;
}

QScrollBar:vertical {
    background-color: #1e293b;
    width: 10px;
    border-radius: 5px;
}

QScrollBar::handle:vertical {
    background-color: #475569;
    border-radius: 5px;
    min-height: 30px;
    margin: 1px;
}

QScrollBar::add-line:vertical,
QScrollBar::sub-line:vertical {
    height: 0;
}

/* === Status Bar === */
QStatusBar {
    background-color: #1e293b;
    color: #94a3b8;
    border-top: 1px solid #334155;
}

QMainWindow::separator:hover {
    background-color: #3d8bfd;
}
"""

# Style registry keyed by theme name
STYLES = {
    "Slate (Light)": LIGHT_STYLE,
    "Midnight (Dark)": DARK_STYLE,
}

LIGHT_THEME = "Slate (Light)"
DARK_THEME = "Midnight (Dark)"

# Board background behind the image (contrasts with the default red text)
CANVAS_BACKGROUND_COLORS = {
    LIGHT_THEME: "#FFFFFF",
    DARK_THEME: "#0F172A",
}


def theme_name(dark: bool) -> str:
    return DARK_THEME if dark else LIGHT_THEME


def style_for(dark: bool) -> str:
    """Return the application stylesheet for the light or dark theme."""
    return STYLES[theme_name(dark)]
