"""
PlatformServices implementation backed by Gio/GLib and QSettings.

Blocking Gio and QSettings calls run in a worker thread via asyncio.to_thread
so the event loop (QtAsyncio in the application) never blocks.
"""

import asyncio
from pathlib import Path
from typing import List, Optional, Sequence

import gi
gi.require_version('Gio', '2.0')
from gi.repository import Gio, GLib

from core.errors import OpenEntryError, PlatformError
from core.gio_bridge.location_settings import LocationSettings
from core.gio_bridge.scanner import scan_directory
from core.platform import PlatformServices
from core.types import CustomLocation, Entry


# (GLib constant, label) for the well-known folders
XDG_DIRS = [
    (GLib.UserDirectory.DIRECTORY_DESKTOP, "Desktop"),
    (GLib.UserDirectory.DIRECTORY_DOCUMENTS, "Documents"),
    (GLib.UserDirectory.DIRECTORY_DOWNLOAD, "Downloads"),
    (GLib.UserDirectory.DIRECTORY_PICTURES, "Pictures"),
    (GLib.UserDirectory.DIRECTORY_MUSIC, "Music"),
    (GLib.UserDirectory.DIRECTORY_VIDEOS, "Videos"),
]


class GioPlatformServices(PlatformServices):
    def __init__(self, location_settings: Optional[LocationSettings] = None):
        self._locations = location_settings or LocationSettings()

    async def list_directory(self, path: str) -> List[Entry]:
        return await asyncio.to_thread(scan_directory, path)

    async def get_home_directory(self) -> str:
        home = GLib.get_home_dir()
        if not home:
            raise PlatformError("Home directory is not set")
        return home

    async def open_entry(self, path: str) -> None:
        uri = Gio.File.new_for_path(path).get_uri()
        try:
            await asyncio.to_thread(Gio.AppInfo.launch_default_for_uri, uri, None)
        except GLib.Error as e:
            raise OpenEntryError(e.message, path) from e

    async def load_saved_locations(self) -> List[CustomLocation]:
        return await asyncio.to_thread(self._locations.load)

    async def save_locations(self, locations: Sequence[CustomLocation]) -> None:
        await asyncio.to_thread(self._locations.save, list(locations))

    async def list_standard_locations(self) -> List[CustomLocation]:
        """Home first, then XDG folders that exist and differ from home."""
        home_path = Path(GLib.get_home_dir())
        items = [CustomLocation(path=str(home_path), label="Home")]

        for xdg_enum, label in XDG_DIRS:
            path_str = GLib.get_user_special_dir(xdg_enum)
            if not path_str:
                continue
            p = Path(path_str)
            if p.is_dir() and p != home_path:
                items.append(CustomLocation(path=path_str, label=label))

        return items
