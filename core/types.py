"""
Shared Types — Entries, Locations and Load State

Immutable value objects passed between the platform boundary, the state layer
and the Qt models.

Usage:
    from core.types import Entry, CustomLocation, LoadState
    state = LoadState.loading("/home/user", request_id)
    state.visible_entries
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

# Names starting with this marker are hidden files
HIDDEN_PREFIX = "."


class ViewMode(Enum):
    GRID = "grid"
    LIST = "list"


class LoadStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class Entry:
    """One file or directory returned by a directory listing."""
    name: str
    path: str
    is_directory: bool = False
    file_type: str = ""                   # MIME content type, files only
    size: Optional[int] = None            # Bytes, None for directories
    modified: Optional[int] = None        # Epoch seconds
    thumbnail_path: Optional[str] = None

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(HIDDEN_PREFIX)


@dataclass(frozen=True)
class CustomLocation:
    """A user-defined shortcut location. Identity is the path."""
    path: str
    label: str = ""

    @property
    def display_name(self) -> str:
        if self.label:
            return self.label
        return self.path.rstrip("/").rsplit("/", 1)[-1] or self.path


def visible_entries(entries, show_hidden: bool = False) -> Tuple[Entry, ...]:
    """Read-time projection dropping hidden entries."""
    if show_hidden:
        return tuple(entries)
    return tuple(e for e in entries if not e.is_hidden)


@dataclass(frozen=True)
class LoadState:
    """
    Tagged variant over IDLE / LOADING / LOADED / FAILED.

    `path` and `request_id` identify the request that produced the state and
    are empty only for IDLE.
    """
    status: LoadStatus = LoadStatus.IDLE
    path: str = ""
    entries: Tuple[Entry, ...] = field(default_factory=tuple)
    error: str = ""
    request_id: str = ""

    @classmethod
    def idle(cls) -> "LoadState":
        return cls()

    @classmethod
    def loading(cls, path: str, request_id: str) -> "LoadState":
        return cls(LoadStatus.LOADING, path, request_id=request_id)

    @classmethod
    def loaded(cls, path: str, entries, request_id: str) -> "LoadState":
        return cls(LoadStatus.LOADED, path, tuple(entries), request_id=request_id)

    @classmethod
    def failed(cls, path: str, error: str, request_id: str) -> "LoadState":
        return cls(LoadStatus.FAILED, path, error=error, request_id=request_id)

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def visible_entries(self) -> Tuple[Entry, ...]:
        return visible_entries(self.entries)

    def belongs_to(self, path: str, request_id: str) -> bool:
        """True if this state was produced by the given request."""
        return self.path == path and self.request_id == request_id
