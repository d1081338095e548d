from __future__ import annotations

from datetime import date
from typing import Iterable, List, Set

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ...core import WEEKDAY_LABELS, CalendarCell, long_date


class CalendarPanel(QWidget):
    previous_requested = pyqtSignal()
    next_requested = pyqtSignal()
    day_clicked = pyqtSignal(object)

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(8)

        header = QFrame()
        header.setObjectName("monthHeader")
        header_row = QHBoxLayout(header)
        previous_button = QPushButton("< Previous")
        previous_button.setObjectName("navButton")
        previous_button.clicked.connect(self.previous_requested)
        header_row.addWidget(previous_button)

        self.title_label = QLabel("")
        self.title_label.setObjectName("monthTitle")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header_row.addWidget(self.title_label, stretch=1)

        next_button = QPushButton("Next >")
        next_button.setObjectName("navButton")
        next_button.clicked.connect(self.next_requested)
        header_row.addWidget(next_button)
        layout.addWidget(header)

        self.grid = QGridLayout()
        self.grid.setSpacing(0)
        for column, label in enumerate(WEEKDAY_LABELS):
            weekday = QLabel(label)
            weekday.setObjectName("weekdayLabel")
            weekday.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.grid.addWidget(weekday, 0, column)
        layout.addLayout(self.grid)
        layout.addStretch(1)

        self._cells: List[QPushButton] = []

    def render(self, title: str, weeks: Iterable[Iterable[CalendarCell]], busy_days: Set[date]) -> None:
        self.title_label.setText(title)
        for button in self._cells:
            self.grid.removeWidget(button)
            button.deleteLater()
        self._cells = []

        for row, week in enumerate(weeks, start=1):
            for column, cell in enumerate(week):
                button = self._build_cell(cell, busy=cell.date in busy_days)
                self.grid.addWidget(button, row, column)
                self._cells.append(button)

    def _build_cell(self, cell: CalendarCell, *, busy: bool) -> QPushButton:
        label = f"{cell.label} •" if busy else cell.label
        button = QPushButton(label)
        button.setObjectName("dayCell")
        button.setMinimumHeight(56)
        button.setProperty("outside", "false" if cell.is_current_month else "true")
        button.setProperty("selected", "true" if cell.is_selected else "false")
        button.setProperty("today", "true" if cell.is_today else "false")
        button.setToolTip(long_date(cell.date))
        button.clicked.connect(lambda _checked=False, day=cell.date: self.day_clicked.emit(day))
        return button
