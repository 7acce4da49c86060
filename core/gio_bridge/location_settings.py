"""
Durable storage for custom locations (QSettings array).

Stored as a QSettings array:
    CustomLocations/size
    CustomLocations/1/path
    CustomLocations/1/label
"""

from typing import List, Optional, Sequence

from PySide6.QtCore import QSettings

from core.errors import LocationStorageError
from core.types import CustomLocation

ARRAY_KEY = "CustomLocations"


class LocationSettings:
    def __init__(self, settings: Optional[QSettings] = None):
        self._settings = settings if settings is not None else QSettings("SemanticExplorer", "Locations")

    def load(self) -> List[CustomLocation]:
        """Read saved locations. Entries without a path are skipped."""
        self._settings.sync()
        self._check("read")

        items = []
        count = self._settings.beginReadArray(ARRAY_KEY)
        for i in range(count):
            self._settings.setArrayIndex(i)
            path = self._settings.value("path", "")
            label = self._settings.value("label", "")
            if path:
                items.append(CustomLocation(path=str(path), label=str(label or "")))
        self._settings.endArray()
        return items

    def save(self, locations: Sequence[CustomLocation]) -> None:
        """Replace the saved list and flush it to disk."""
        self._settings.remove(ARRAY_KEY)
        self._settings.beginWriteArray(ARRAY_KEY, len(locations))
        for i, loc in enumerate(locations):
            self._settings.setArrayIndex(i)
            self._settings.setValue("path", loc.path)
            self._settings.setValue("label", loc.label)
        self._settings.endArray()
        self._settings.sync()
        self._check("write")

    def _check(self, action: str) -> None:
        status = self._settings.status()
        if status == QSettings.Status.AccessError:
            raise LocationStorageError(f"Cannot {action} {self._settings.fileName()}: access denied")
        if status == QSettings.Status.FormatError:
            raise LocationStorageError(f"Cannot {action} {self._settings.fileName()}: malformed file")
