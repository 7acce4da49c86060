"""
DirectoryLoader — Async Directory Load Coordination

Fetches the entries of the current directory through PlatformServices and
publishes one terminal state (LOADED or FAILED) per request.

Features:
- Session-tagged requests (path + uuid) to prevent cross-talk
- Stale results are dropped at commit time; nothing is cancelled
- Optional fetch timeout
- Hidden-file filtering as a read-time projection
"""

import asyncio
from dataclasses import dataclass
from typing import Optional, Tuple
from uuid import uuid4

from PySide6.QtCore import QObject, Signal, Property

from core.errors import PlatformError
from core.platform import PlatformServices
from core.types import Entry, LoadState, LoadStatus, visible_entries
from core.view_state import ViewState


@dataclass(frozen=True)
class LoadRequest:
    """One fetch, tagged with the path it targets and a unique session id."""
    path: str
    request_id: str


class DirectoryLoader(QObject):
    """
    Owns the LoadState. Nothing else writes it.

    Signals:
        stateChanged(object) - Emitted with the new LoadState on every transition
        loadingChanged(bool) - Emitted when the loading flag flips
        entriesChanged() - Emitted when the committed entry set changes
    """
    stateChanged = Signal(object)
    loadingChanged = Signal(bool)
    entriesChanged = Signal()

    def __init__(self, services: PlatformServices, view_state: ViewState,
                 timeout: Optional[float] = None, parent=None):
        super().__init__(parent)
        self._services = services
        self._view = view_state
        self._state = LoadState.idle()
        self.timeout = timeout

        # Re-derive the projection when the hidden toggle changes
        self._view.showHiddenChanged.connect(lambda _show: self.entriesChanged.emit())

    @property
    def state(self) -> LoadState:
        return self._state

    @property
    def visible_entries(self) -> Tuple[Entry, ...]:
        return visible_entries(self._state.entries, self._view.show_hidden)

    @Property(bool, notify=loadingChanged)
    def isLoading(self) -> bool:
        return self._state.is_loading

    @Property(str, notify=stateChanged)
    def errorMessage(self) -> str:
        return self._state.error

    def begin(self, path: str) -> LoadRequest:
        """
        Starts a request: LOADING(path) becomes current and the selection of
        the previous listing is dropped. Any older request is now stale.
        """
        request = LoadRequest(path, str(uuid4()))
        self._view.clear_selection()
        self._set_state(LoadState.loading(path, request.request_id))
        print(f"[DirectoryLoader] Loading {path}")
        return request

    async def complete(self, request: LoadRequest) -> LoadState:
        """
        Fetches the entries for `request` and commits the outcome if the
        request is still current.

        Returns the LoadState that is current once the fetch has finished,
        which is another request's state if this one was superseded.
        """
        path, request_id = request.path, request.request_id
        try:
            entries = await self._fetch(path)
        except asyncio.TimeoutError:
            print(f"[DirectoryLoader] Timed out fetching \"{path}\"")
            self._commit(LoadState.failed(
                path, f"Timed out loading directory: {path}", request_id))
        except PlatformError as e:
            print(f"[DirectoryLoader] Error fetching \"{path}\": {e.reason}")
            self._commit(LoadState.failed(
                path, f"Failed to load directory: {path} ({e.reason})", request_id))
        else:
            self._commit(LoadState.loaded(path, entries, request_id))

        return self._state

    async def load(self, path: str) -> LoadState:
        """begin() + complete() in one call."""
        return await self.complete(self.begin(path))

    # -------------------------------------------------------------------------
    # INTERNAL
    # -------------------------------------------------------------------------

    async def _fetch(self, path: str):
        fetch = self._services.list_directory(path)
        if self.timeout:
            return await asyncio.wait_for(fetch, self.timeout)
        return await fetch

    def _commit(self, outcome: LoadState) -> bool:
        """Applies a terminal state only if its request is still current."""
        if not self._state.belongs_to(outcome.path, outcome.request_id):
            print(f"[DirectoryLoader] Discarding stale result for {outcome.path}")
            return False
        self._set_state(outcome)
        return True

    def _set_state(self, state: LoadState) -> None:
        previous = self._state
        self._state = state
        self.stateChanged.emit(state)
        if previous.is_loading != state.is_loading:
            self.loadingChanged.emit(state.is_loading)
        if previous.entries or state.entries or state.status is LoadStatus.LOADED:
            self.entriesChanged.emit()
