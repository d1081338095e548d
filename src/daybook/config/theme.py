from __future__ import annotations

from dataclasses import dataclass

from ..domain import EventCategory


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#f8fafc"
    background_secondary: str = "#ffffff"
    surface: str = "#e5e7eb"
    surface_alt: str = "#f3f4f6"
    accent_primary: str = "#3b82f6"
    accent_secondary: str = "#22c55e"
    accent_error: str = "#ef4444"
    text_primary: str = "#1f2937"
    text_secondary: str = "#4b5563"
    text_muted: str = "#9ca3af"
    border_subtle: str = "#e5e7eb"
    border_strong: str = "#d1d5db"
    cell_outside_month: str = "#f9fafb"
    cell_selected: str = "#bfdbfe"
    cell_selected_text: str = "#1e3a8a"
    cell_today: str = "#fef08a"
    cell_hover: str = "#dbeafe"
    category_work: str = "blue"
    category_personal: str = "green"
    category_others: str = "orange"

    def category_color(self, category: EventCategory) -> str:
        return {
            EventCategory.WORK: self.category_work,
            EventCategory.PERSONAL: self.category_personal,
            EventCategory.OTHERS: self.category_others,
        }[category]

    def as_stylesheet(self) -> str:
        """Global stylesheet for the PyQt app."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #ffffff;
            border: none;
            padding: 8px 14px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_muted};
        }}
        QPushButton#navButton {{
            background-color: transparent;
            color: {self.accent_primary};
        }}
        QPushButton#exportButton {{
            background-color: {self.accent_secondary};
        }}
        QPushButton#deleteButton {{
            background-color: transparent;
            color: {self.accent_error};
        }}
        QFrame#monthHeader {{
            background-color: {self.surface};
            border-radius: 8px;
        }}
        QLabel#monthTitle {{
            font-size: 18px;
            font-weight: 700;
        }}
        QLabel#weekdayLabel {{
            color: {self.text_secondary};
            font-weight: 600;
            background-color: {self.surface_alt};
        }}
        QPushButton#dayCell {{
            background-color: {self.background_secondary};
            color: {self.text_primary};
            border: 1px solid {self.border_subtle};
            border-radius: 0;
            font-weight: 400;
        }}
        QPushButton#dayCell:hover {{
            background-color: {self.cell_hover};
        }}
        QPushButton#dayCell[outside="true"] {{
            background-color: {self.cell_outside_month};
            color: {self.text_muted};
        }}
        QPushButton#dayCell[selected="true"] {{
            background-color: {self.cell_selected};
            color: {self.cell_selected_text};
            font-weight: 700;
        }}
        QPushButton#dayCell[today="true"] {{
            background-color: {self.cell_today};
            color: #000000;
            font-weight: 700;
        }}
        QLineEdit, QTextEdit, QComboBox, QTimeEdit {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_strong};
            border-radius: 8px;
            padding: 6px 10px;
        }}
        QLineEdit:focus, QTextEdit:focus, QComboBox:focus, QTimeEdit:focus {{
            border-color: {self.accent_primary};
        }}
        QListView {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_strong};
            selection-background-color: {self.cell_hover};
            selection-color: {self.text_primary};
        }}
        """
