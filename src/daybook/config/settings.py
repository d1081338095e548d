from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Daybook"
APP_AUTHOR = "Daybook"


@dataclass(frozen=True)
class StorageSettings:
    data_dir: Path
    events_file: Path


@dataclass(frozen=True)
class ExportSettings:
    directory: Path


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    organization: str


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class AppSettings:
    storage: StorageSettings
    export: ExportSettings
    ui: UiSettings
    logging: LoggingSettings


def _path_from_env(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if not raw:
        return default
    return Path(raw).expanduser()


def _default_export_dir() -> Path:
    downloads = Path.home() / "Downloads"
    return downloads if downloads.is_dir() else Path.home()


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    data_dir = _path_from_env("DAYBOOK_DATA_DIR", Path(user_data_dir(APP_NAME, APP_AUTHOR)))

    storage = StorageSettings(
        data_dir=data_dir,
        events_file=_path_from_env("DAYBOOK_EVENTS_FILE", data_dir / "events.json"),
    )

    export = ExportSettings(
        directory=_path_from_env("DAYBOOK_EXPORT_DIR", _default_export_dir()),
    )

    ui = UiSettings(
        app_name=os.getenv("DAYBOOK_APP_NAME", APP_NAME),
        organization=os.getenv("DAYBOOK_APP_ORG", APP_AUTHOR),
    )

    logging = LoggingSettings(
        level=os.getenv("DAYBOOK_LOG_LEVEL", "INFO").upper(),
        directory=_path_from_env("DAYBOOK_LOG_DIR", data_dir / "logs"),
    )

    return AppSettings(storage=storage, export=export, ui=ui, logging=logging)
