from __future__ import annotations

from datetime import date
from typing import Optional

from PyQt6.QtCore import QTime
from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QTextEdit,
    QTimeEdit,
    QVBoxLayout,
)

from ...core import long_date
from ...domain import Event, EventCategory

_TIME_FORMAT = "HH:mm"


class EventDialog(QDialog):
    def __init__(self, *, day: date, initial: Optional[Event] = None) -> None:
        super().__init__()
        action = "Edit Event" if initial else "Add Event"
        self.setWindowTitle(f"{action}: {long_date(day)}")
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("Event Name")
        form.addRow("Name", self.name_input)

        self.start_input = QTimeEdit()
        self.start_input.setDisplayFormat(_TIME_FORMAT)
        self.start_input.setTime(QTime(9, 0))
        form.addRow("Start", self.start_input)

        self.end_input = QTimeEdit()
        self.end_input.setDisplayFormat(_TIME_FORMAT)
        self.end_input.setTime(QTime(10, 0))
        form.addRow("End", self.end_input)

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Event Description (Optional)")
        form.addRow("Description", self.description_input)

        self.category_box = QComboBox()
        for category in EventCategory:
            self.category_box.addItem(category.label, category)
        form.addRow("Category", self.category_box)

        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Update Event" if initial else "Add Event")
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        if initial:
            self._fill(initial)

    def _fill(self, event: Event) -> None:
        self.name_input.setText(event.name)
        self.start_input.setTime(QTime.fromString(event.start_time, _TIME_FORMAT))
        self.end_input.setTime(QTime.fromString(event.end_time, _TIME_FORMAT))
        self.description_input.setPlainText(event.description)
        self.category_box.setCurrentIndex(self.category_box.findData(event.category))

    def values(self) -> dict:
        return {
            "name": self.name_input.text().strip(),
            "start_time": self.start_input.time().toString(_TIME_FORMAT),
            "end_time": self.end_input.time().toString(_TIME_FORMAT),
            "description": self.description_input.toPlainText().strip(),
            "category": self.category_box.currentData() or EventCategory.WORK,
        }
