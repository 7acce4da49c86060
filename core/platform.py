"""
The narrow boundary the state layer calls through.

Filesystem access and durable storage live behind this interface. All calls
are coroutines and signal failure by raising core.errors.PlatformError.
"""

import abc
from typing import List, Sequence

from core.types import CustomLocation, Entry


class PlatformServices(abc.ABC):
    """Async platform interface (filesystem, launcher, saved locations)."""

    @abc.abstractmethod
    async def list_directory(self, path: str) -> List[Entry]:
        """List the entries of a directory.

        Args:
            path: Directory to list. Passed through unchanged.

        Returns:
            Entries of the directory, in display order.
        """

    @abc.abstractmethod
    async def get_home_directory(self) -> str:
        """Return the user's home directory."""

    @abc.abstractmethod
    async def open_entry(self, path: str) -> None:
        """Open a file with the OS default handler."""

    @abc.abstractmethod
    async def load_saved_locations(self) -> List[CustomLocation]:
        """Return the persisted custom locations."""

    @abc.abstractmethod
    async def save_locations(self, locations: Sequence[CustomLocation]) -> None:
        """Durably replace the persisted custom locations."""

    async def list_standard_locations(self) -> List[CustomLocation]:
        """Well-known folders (Home, Documents, ...). Optional."""
        return []
