"""
In-memory PlatformServices for tests.

Directory listings come from a dict. Paths passed to hold() block until
release() is called, so tests decide the completion order of fetches.
"""

import asyncio
from typing import Dict, List

from core.errors import DirectoryListError, LocationStorageError, OpenEntryError
from core.platform import PlatformServices
from core.types import CustomLocation, Entry


def make_entries(*names, parent="/"):
    """Names ending in '/' become directories."""
    base = parent.rstrip("/")
    entries = []
    for name in names:
        is_dir = name.endswith("/")
        name = name.rstrip("/")
        entries.append(Entry(
            name=name,
            path=f"{base}/{name}",
            is_directory=is_dir,
            file_type="" if is_dir else "text/plain",
            size=None if is_dir else 10,
            modified=1700000000,
        ))
    return entries


class FakePlatformServices(PlatformServices):
    def __init__(self, tree: Dict[str, List[Entry]] = None, home: str = "/home"):
        self.tree = dict(tree or {})
        self.home = home
        self.home_error = None
        self.open_error = None
        self.load_error = None
        self.load_delay = 0
        self.save_error = None
        self.saved_locations: List[CustomLocation] = []
        self.save_calls = 0
        self.opened: List[str] = []
        self.listed: List[str] = []
        self._held = set()
        self._pending: Dict[str, List[asyncio.Future]] = {}

    # --- test controls ---

    def hold(self, path: str) -> None:
        self._held.add(path)

    def pending_count(self, path: str) -> int:
        return len(self._pending.get(path, []))

    def release(self, path: str, result=None) -> None:
        """Completes the oldest held fetch for `path` with entries or an exception."""
        future = self._pending[path].pop(0)
        if result is None:
            result = self.tree.get(path, [])
        future.set_result(result)

    # --- PlatformServices ---

    async def list_directory(self, path):
        self.listed.append(path)
        if path in self._held:
            future = asyncio.get_running_loop().create_future()
            self._pending.setdefault(path, []).append(future)
            result = await future
        elif path in self.tree:
            result = self.tree[path]
        else:
            result = DirectoryListError("No such file or directory", path)

        if isinstance(result, Exception):
            raise result
        return list(result)

    async def get_home_directory(self):
        if self.home_error:
            raise self.home_error
        return self.home

    async def open_entry(self, path):
        if self.open_error:
            raise OpenEntryError(self.open_error, path)
        self.opened.append(path)

    async def load_saved_locations(self):
        if self.load_delay:
            await asyncio.sleep(self.load_delay)
        if self.load_error:
            raise LocationStorageError(self.load_error)
        return list(self.saved_locations)

    async def save_locations(self, locations):
        self.save_calls += 1
        await asyncio.sleep(0)
        if self.save_error:
            raise LocationStorageError(self.save_error)
        self.saved_locations = list(locations)


async def drain(rounds: int = 5):
    """Let scheduled tasks run."""
    for _ in range(rounds):
        await asyncio.sleep(0)
