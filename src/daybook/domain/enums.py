from __future__ import annotations

from enum import Enum


class EventCategory(str, Enum):
    WORK = "work"
    PERSONAL = "personal"
    OTHERS = "others"

    @property
    def label(self) -> str:
        return self.value.capitalize()
