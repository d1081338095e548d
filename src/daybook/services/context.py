from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from ..core import EventStore
from ..data import EventRepository, JsonEventRepository
from .export import FileExporter


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, storage, and the export target."""

    settings: AppSettings = field(default_factory=get_settings)
    repository: Optional[EventRepository] = None
    exporter: Optional[FileExporter] = None
    store: EventStore = field(init=False)

    def __post_init__(self) -> None:
        if self.repository is None:
            self.repository = JsonEventRepository(self.settings.storage.events_file)
        if self.exporter is None:
            self.exporter = FileExporter(self.settings.export.directory)
        self.store = EventStore(self.repository)
