from __future__ import annotations

import logging
from datetime import date

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QMainWindow, QMessageBox, QSplitter

from ..config import AppPalette, AppSettings
from ..domain import EventNotFoundError, InvalidEventError, OverlapError
from ..services import CalendarService
from .components.calendar_panel import CalendarPanel
from .components.day_panel import DayPanel
from .components.event_dialog import EventDialog

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, *, calendar: CalendarService, settings: AppSettings, palette: AppPalette) -> None:
        super().__init__()
        self.calendar = calendar
        self.settings = settings

        self.setWindowTitle(settings.ui.app_name)
        self.resize(1100, 680)

        self.calendar_panel = CalendarPanel()
        self.day_panel = DayPanel(palette=palette)

        splitter = QSplitter()
        splitter.setOrientation(Qt.Orientation.Horizontal)
        splitter.addWidget(self.calendar_panel)
        splitter.addWidget(self.day_panel)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)
        self.setCentralWidget(splitter)

        self.calendar_panel.previous_requested.connect(self.show_previous_month)
        self.calendar_panel.next_requested.connect(self.show_next_month)
        self.calendar_panel.day_clicked.connect(self.select_day)

        self.day_panel.add_requested.connect(self.add_event)
        self.day_panel.edit_requested.connect(self.edit_event)
        self.day_panel.delete_requested.connect(self.delete_event)
        self.day_panel.export_requested.connect(self.export_events)

        self.refresh()

    # ------------------------------------------------------------------ rendering

    def refresh(self) -> None:
        self.calendar_panel.render(
            self.calendar.title(),
            self.calendar.visible_weeks(),
            self.calendar.busy_days(),
        )
        self.day_panel.set_day(self.calendar.selected_day, self.calendar.events_for_selected_day())

    # ------------------------------------------------------------------ navigation

    def show_previous_month(self) -> None:
        self.calendar.show_previous_month()
        self.refresh()

    def show_next_month(self) -> None:
        self.calendar.show_next_month()
        self.refresh()

    def select_day(self, day: date) -> None:
        self.calendar.select_day(day)
        self.refresh()

    # ------------------------------------------------------------------ actions

    def add_event(self) -> None:
        day = self.calendar.selected_day
        if day is None:
            return
        dialog = EventDialog(day=day)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        try:
            self.calendar.create_event(**dialog.values(), day=day)
        except (OverlapError, InvalidEventError) as exc:
            QMessageBox.warning(self, "Cannot add event", str(exc))
            return
        self.statusBar().showMessage("Event added.", 3000)
        self.refresh()

    def edit_event(self, event_id: str) -> None:
        day = self.calendar.selected_day
        try:
            current = self.calendar.store.get(event_id)
        except EventNotFoundError as exc:
            self._handle_error(exc)
            return
        dialog = EventDialog(day=day or current.date, initial=current)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        try:
            self.calendar.edit_event(event_id, **dialog.values())
        except (OverlapError, InvalidEventError) as exc:
            QMessageBox.warning(self, "Cannot update event", str(exc))
            return
        except EventNotFoundError as exc:
            self._handle_error(exc)
            return
        self.statusBar().showMessage("Event updated.", 3000)
        self.refresh()

    def delete_event(self, event_id: str) -> None:
        try:
            removed = self.calendar.remove_event(event_id)
        except EventNotFoundError as exc:
            self._handle_error(exc)
            return
        self.statusBar().showMessage(f"Deleted '{removed.name}'.", 3000)
        self.refresh()

    def export_events(self) -> None:
        try:
            path = self.calendar.export_csv()
        except OSError as exc:
            self._handle_error(exc)
            return
        self.statusBar().showMessage(f"Exported events to {path}", 5000)

    # ------------------------------------------------------------------ misc

    def _handle_error(self, exc: Exception) -> None:
        logger.error("UI action failed: %s", exc)
        self.statusBar().showMessage(f"Error: {exc}", 5000)
        QMessageBox.critical(self, "Error", str(exc))
