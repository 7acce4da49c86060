"""
CustomLocationStore — Saved Shortcut Locations

In-memory mirror of the user's custom locations, kept in sync with
PlatformServices using optimistic updates.

Features:
- One-time startup load (failures fall back to an empty set)
- Uniqueness by path
- Optimistic add/remove with rollback on save failure
- Sidebar aggregation with the platform's standard folders
"""

import asyncio
from typing import List, Sequence, Tuple

from PySide6.QtCore import QObject, Signal

from core.errors import PlatformError
from core.optimistic import apply_optimistic
from core.platform import PlatformServices
from core.types import CustomLocation


class CustomLocationStore(QObject):
    """
    Signals:
        locationsChanged() - Emitted whenever the in-memory set changes (including rollbacks)
        saveFailed(str) - Emitted with the reason after a rollback
    """
    locationsChanged = Signal()
    saveFailed = Signal(str)

    def __init__(self, services: PlatformServices, parent=None):
        super().__init__(parent)
        self._services = services
        self._locations: Tuple[CustomLocation, ...] = ()
        self._loaded = False
        self._lock = asyncio.Lock()

    @property
    def locations(self) -> Tuple[CustomLocation, ...]:
        return self._locations

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def contains(self, path: str) -> bool:
        return any(loc.path == path for loc in self._locations)

    def __len__(self) -> int:
        return len(self._locations)

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    async def load_on_init(self) -> None:
        """
        Loads saved locations once. Never raises on platform failure.

        Runs under the edit lock, so an add/remove issued meanwhile waits and
        builds on the saved set instead of overwriting it.
        """
        async with self._lock:
            if self._loaded:
                return

            try:
                saved = await self._services.load_saved_locations()
            except PlatformError as e:
                print(f"[LocationStore] Failed to load custom locations on init: {e.reason}")
                saved = []

            self._set_locations(_dedupe(saved))
            self._loaded = True

    async def add(self, location: CustomLocation) -> bool:
        """
        Adds a location and persists the new set.
        Returns False if the path is already present or the save failed.
        """
        if not self._loaded:
            await self.load_on_init()
        async with self._lock:
            if self.contains(location.path):
                print(f"[LocationStore] Location already exists: {location.path}")
                return False
            proposed = self._locations + (location,)
            return await self._commit(proposed, f"adding {location.path}")

    async def remove(self, path: str) -> bool:
        """Removes the location with `path`. Unknown paths are a no-op."""
        if not self._loaded:
            await self.load_on_init()
        async with self._lock:
            if not self.contains(path):
                return False
            proposed = tuple(loc for loc in self._locations if loc.path != path)
            return await self._commit(proposed, f"removing {path}")

    def sidebar_items(self, standard: Sequence[CustomLocation]) -> List[CustomLocation]:
        """Standard folders first, then custom locations not already listed."""
        items = list(standard)
        existing = {item.path for item in items}
        for loc in self._locations:
            if loc.path not in existing:
                items.append(loc)
                existing.add(loc.path)
        return items

    # -------------------------------------------------------------------------
    # INTERNAL
    # -------------------------------------------------------------------------

    async def _commit(self, proposed: Tuple[CustomLocation, ...], action: str) -> bool:
        def on_rollback(error: PlatformError):
            print(f"[LocationStore] Failed to save custom locations after {action}: "
                  f"{error.reason} (rolled back)")
            self.saveFailed.emit(error.reason)

        return await apply_optimistic(
            read=lambda: self._locations,
            write=self._set_locations,
            proposed=proposed,
            persist=self._services.save_locations,
            on_rollback=on_rollback,
        )

    def _set_locations(self, locations: Sequence[CustomLocation]) -> None:
        locations = tuple(locations)
        if locations != self._locations:
            self._locations = locations
            self.locationsChanged.emit()


def _dedupe(locations) -> Tuple[CustomLocation, ...]:
    seen = set()
    result = []
    for loc in locations:
        if loc.path in seen:
            continue
        seen.add(loc.path)
        result.append(loc)
    return tuple(result)
