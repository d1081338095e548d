"""Daybook month calendar application package."""

from __future__ import annotations

__all__ = ["main"]


def main() -> None:
    # Qt is only needed once the window starts.
    from .ui.app import run_gui

    run_gui()
