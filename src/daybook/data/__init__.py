"""Data access layer."""

from __future__ import annotations

from .repositories import EventRepository, InMemoryEventRepository, JsonEventRepository

__all__ = ["EventRepository", "InMemoryEventRepository", "JsonEventRepository"]
