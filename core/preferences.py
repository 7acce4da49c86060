"""
Preferences — Persisted View and Loader Settings

Wraps QSettings. Values are applied to / captured from a ViewState.

Usage:
    prefs = Preferences()
    prefs.apply_to(view_state)
    ...
    prefs.capture(view_state)
    prefs.sync()
"""

from typing import Optional

from PySide6.QtCore import QSettings

from core.types import ViewMode
from core.view_state import ViewState, DEFAULT_ITEM_SIZE, DEFAULT_GAP_SIZE

ORGANIZATION = "SemanticExplorer"
APPLICATION = "Explorer"

DEFAULT_LOAD_TIMEOUT = 30.0


def _to_bool(value) -> bool:
    # INI backends hand booleans back as strings
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)


class Preferences:
    def __init__(self, settings: Optional[QSettings] = None):
        self._settings = settings if settings is not None else QSettings(ORGANIZATION, APPLICATION)

    # -------------------------------------------------------------------------
    # LOADER
    # -------------------------------------------------------------------------

    @property
    def load_timeout(self) -> Optional[float]:
        """Directory fetch timeout in seconds; None when disabled (0)."""
        value = self._settings.value("Loader/timeoutSeconds", DEFAULT_LOAD_TIMEOUT)
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            seconds = DEFAULT_LOAD_TIMEOUT
        return seconds if seconds > 0 else None

    @load_timeout.setter
    def load_timeout(self, seconds: Optional[float]) -> None:
        self._settings.setValue("Loader/timeoutSeconds", float(seconds or 0))

    # -------------------------------------------------------------------------
    # VIEW
    # -------------------------------------------------------------------------

    def apply_to(self, view: ViewState) -> None:
        """Loads persisted view settings into `view`."""
        self._settings.beginGroup("View")
        try:
            mode = self._settings.value("viewMode", ViewMode.GRID.value)
            try:
                view.view_mode = ViewMode(str(mode))
            except ValueError:
                pass  # Unknown mode in settings
            view.item_size = _to_int(self._settings.value("itemSize", DEFAULT_ITEM_SIZE), DEFAULT_ITEM_SIZE)
            view.gap_size = _to_int(self._settings.value("gapSize", DEFAULT_GAP_SIZE), DEFAULT_GAP_SIZE)
            view.show_hidden = _to_bool(self._settings.value("showHidden", False))
        finally:
            self._settings.endGroup()

    def capture(self, view: ViewState) -> None:
        """Stores the current view settings."""
        self._settings.beginGroup("View")
        self._settings.setValue("viewMode", view.view_mode.value)
        self._settings.setValue("itemSize", view.item_size)
        self._settings.setValue("gapSize", view.gap_size)
        self._settings.setValue("showHidden", view.show_hidden)
        self._settings.endGroup()

    def sync(self) -> None:
        self._settings.sync()


def _to_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
