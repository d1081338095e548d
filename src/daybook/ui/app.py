from __future__ import annotations

import logging
import sys

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..services import CalendarService, ServiceContext
from .main_window import MainWindow


def apply_palette(app: QApplication, palette: AppPalette) -> None:
    roles = {
        QPalette.ColorRole.Window: palette.background_primary,
        QPalette.ColorRole.Base: palette.background_secondary,
        QPalette.ColorRole.AlternateBase: palette.surface_alt,
        QPalette.ColorRole.Text: palette.text_primary,
        QPalette.ColorRole.WindowText: palette.text_primary,
        QPalette.ColorRole.Button: palette.accent_primary,
        QPalette.ColorRole.ButtonText: palette.background_secondary,
        QPalette.ColorRole.Highlight: palette.cell_selected,
        QPalette.ColorRole.HighlightedText: palette.cell_selected_text,
        # day cells carry their full date as a tooltip
        QPalette.ColorRole.ToolTipBase: palette.surface,
        QPalette.ColorRole.ToolTipText: palette.text_primary,
    }
    qt_palette = QPalette()
    for role, color in roles.items():
        qt_palette.setColor(role, QColor(color))
    app.setPalette(qt_palette)
    app.setStyleSheet(palette.as_stylesheet())


def run_gui() -> None:
    configure_logging()
    settings = get_settings()
    logging.getLogger(__name__).info("%s starting; events file %s", settings.ui.app_name, settings.storage.events_file)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(settings.ui.app_name)
    app.setOrganizationName(settings.ui.organization)
    palette = AppPalette()
    apply_palette(app, palette)

    calendar = CalendarService(ServiceContext(settings=settings))
    window = MainWindow(calendar=calendar, settings=settings, palette=palette)
    window.show()
    sys.exit(app.exec())
