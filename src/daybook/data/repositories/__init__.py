"""Persistence collaborators for the event store."""

from __future__ import annotations

from .events import EventRepository, InMemoryEventRepository, JsonEventRepository

__all__ = ["EventRepository", "InMemoryEventRepository", "JsonEventRepository"]
