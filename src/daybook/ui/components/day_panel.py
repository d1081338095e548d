from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...config import AppPalette
from ...core import month_name
from ...domain import Event


class DayPanel(QWidget):
    add_requested = pyqtSignal()
    edit_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(str)
    export_requested = pyqtSignal()

    def __init__(self, *, palette: Optional[AppPalette] = None) -> None:
        super().__init__()
        self.setObjectName("dayPanel")
        self.palette_colors = palette or AppPalette()
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.day_label = QLabel("Select a day")
        self.day_label.setObjectName("monthTitle")
        layout.addWidget(self.day_label)

        self.event_list = QListWidget()
        self.event_list.itemSelectionChanged.connect(self._sync_buttons)
        self.event_list.itemDoubleClicked.connect(lambda _item: self._emit_for_current(self.edit_requested))
        layout.addWidget(self.event_list, stretch=1)

        action_row = QHBoxLayout()
        self.add_button = QPushButton("Add Event")
        self.add_button.clicked.connect(self.add_requested)
        action_row.addWidget(self.add_button)

        self.edit_button = QPushButton("Edit")
        self.edit_button.clicked.connect(lambda: self._emit_for_current(self.edit_requested))
        action_row.addWidget(self.edit_button)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setObjectName("deleteButton")
        self.delete_button.clicked.connect(lambda: self._emit_for_current(self.delete_requested))
        action_row.addWidget(self.delete_button)
        layout.addLayout(action_row)

        export_button = QPushButton("Export to CSV")
        export_button.setObjectName("exportButton")
        export_button.clicked.connect(self.export_requested)
        layout.addWidget(export_button)

        self.set_day(None, [])

    def set_day(self, day: Optional[date], events: Iterable[Event]) -> None:
        self.add_button.setEnabled(day is not None)
        if day is None:
            self.day_label.setText("Select a day")
        else:
            self.day_label.setText(f"Events for {month_name(day)} {day.day}, {day.year}")
        self.populate_events(events)

    def populate_events(self, events: Iterable[Event]) -> None:
        self.event_list.clear()
        for event in events:
            label = f"{event.name}\n{event.start_time} - {event.end_time}"
            if event.description:
                label += f"\n{event.description}"
            item = QListWidgetItem(label)
            item.setForeground(QColor(self.palette_colors.category_color(event.category)))
            item.setData(Qt.ItemDataRole.UserRole, event.id)
            item.setToolTip(event.category.label)
            self.event_list.addItem(item)
        self._sync_buttons()

    def _current_event_id(self) -> Optional[str]:
        item = self.event_list.currentItem()
        if not item:
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    def _emit_for_current(self, signal) -> None:
        event_id = self._current_event_id()
        if event_id:
            signal.emit(event_id)

    def _sync_buttons(self) -> None:
        has_selection = self._current_event_id() is not None
        self.edit_button.setEnabled(has_selection)
        self.delete_button.setEnabled(has_selection)
