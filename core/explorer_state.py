"""
The owned state store behind one browser window.

Wires the navigation history to the directory loader and holds the location
store and view state. Pass it to whatever needs to read state or dispatch
intents; there is no global instance.

Flow:
    navigate(path) -> NavigationHistory.currentPathChanged
                   -> DirectoryLoader.begin(path)      (LOADING, synchronous)
                   -> DirectoryLoader.complete(request) (task on the asyncio loop)
"""

import asyncio
from typing import Optional, Set

from PySide6.QtCore import QObject, Signal, Slot

from core.directory_loader import DirectoryLoader
from core.errors import PlatformError
from core.location_store import CustomLocationStore
from core.navigation_history import NavigationHistory
from core.platform import PlatformServices
from core.types import Entry
from core.view_state import ViewState


class ExplorerState(QObject):
    """
    Signals:
        noticeRaised(str) - Non-blocking user notification (open/home/save failures)
    """
    noticeRaised = Signal(str)

    def __init__(self, services: PlatformServices, load_timeout: Optional[float] = None,
                 parent=None):
        super().__init__(parent)
        self.services = services

        self.view = ViewState(self)
        self.history = NavigationHistory(self)
        self.loader = DirectoryLoader(services, self.view, timeout=load_timeout, parent=self)
        self.locations = CustomLocationStore(services, self)

        self._tasks: Set[asyncio.Task] = set()

        self.history.currentPathChanged.connect(self._on_path_changed)
        self.locations.saveFailed.connect(self._on_save_failed)

    @property
    def current_path(self) -> str:
        return self.history.current_path

    # -------------------------------------------------------------------------
    # INTENTS
    # -------------------------------------------------------------------------

    @Slot(str)
    def navigate(self, path: str) -> bool:
        return self.history.navigate(path)

    @Slot()
    def back(self) -> bool:
        return self.history.back()

    @Slot()
    def forward(self) -> bool:
        return self.history.forward()

    @Slot()
    def refresh(self) -> None:
        """Re-loads the current directory (retry after a failure)."""
        if self.current_path:
            self._schedule_load(self.current_path)

    def select(self, entry: Optional[Entry]) -> None:
        self.view.select(entry)

    async def activate(self, entry: Entry) -> None:
        """Double-click: enter directories, open files with the OS handler."""
        if entry.is_directory:
            self.navigate(entry.path)
            return

        try:
            await self.services.open_entry(entry.path)
        except PlatformError as e:
            print(f"[ExplorerState] Failed to open {entry.path}: {e.reason}")
            self.noticeRaised.emit(f"Failed to open {entry.name}: {e.reason}")

    async def go_home(self) -> bool:
        try:
            home = await self.services.get_home_directory()
        except PlatformError as e:
            print(f"[ExplorerState] Failed to get home directory: {e.reason}")
            self.noticeRaised.emit("Failed to load home directory.")
            return False
        self.navigate(home)
        return True

    async def start(self, initial_path: Optional[str] = None) -> None:
        """Startup: load saved locations, then open the initial folder."""
        await self.locations.load_on_init()
        if initial_path:
            self.navigate(initial_path)
        else:
            await self.go_home()

    async def settle(self) -> None:
        """Waits until no directory load is in flight."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # -------------------------------------------------------------------------
    # INTERNAL
    # -------------------------------------------------------------------------

    def _on_path_changed(self, path: str) -> None:
        self._schedule_load(path)

    def _schedule_load(self, path: str) -> None:
        request = self.loader.begin(path)
        task = asyncio.ensure_future(self.loader.complete(request))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _on_save_failed(self, reason: str) -> None:
        self.noticeRaised.emit(f"Could not save locations: {reason}")
