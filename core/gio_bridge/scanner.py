"""
Directory Enumeration via Gio

Lists one directory and converts each Gio.FileInfo into an immutable Entry.
Blocking; callers run it off the event loop (asyncio.to_thread).

Features:
- Batched enumeration (BATCH_SIZE infos per call)
- Per-file error tolerance (unnamed infos are skipped)
- MIME type, timestamps and native thumbnail path
"""

import gi
gi.require_version('Gio', '2.0')
from gi.repository import Gio, GLib
from typing import List, Optional

from core.errors import DirectoryListError
from core.types import Entry


# Gio attributes to request
QUERY_ATTRIBUTES = ",".join([
    # Core
    "standard::name",
    "standard::type",
    "standard::size",

    # MIME type (Entry.file_type)
    "standard::content-type",

    # Timestamps
    "time::modified",

    # Thumbnail info (native detection)
    "standard::thumbnail-path",
])

BATCH_SIZE = 200


def scan_directory(path: str) -> List[Entry]:
    """
    Enumerate `path` and return its entries, directories first.

    Hidden entries are included; filtering happens at read time.

    Raises:
        DirectoryListError: the directory cannot be opened or read.
    """
    gfile = Gio.File.new_for_path(path)
    try:
        enumerator = gfile.enumerate_children(
            QUERY_ATTRIBUTES,
            Gio.FileQueryInfoFlags.NONE,
            None,
        )
    except GLib.Error as e:
        raise DirectoryListError(f"Cannot open directory: {e.message}", path) from e

    entries: List[Entry] = []
    try:
        while True:
            try:
                file_infos = enumerator.next_files(BATCH_SIZE, None)
            except GLib.Error as e:
                raise DirectoryListError(
                    f"Error reading directory contents: {e.message}", path) from e
            if not file_infos:
                break
            entries.extend(_process_batch(file_infos, path))
    finally:
        _close_enumerator(enumerator)

    entries.sort(key=lambda e: (not e.is_directory, e.name.lower()))
    return entries


def _process_batch(file_infos: List[Gio.FileInfo], parent_path: str) -> List[Entry]:
    """Convert Gio.FileInfo objects to Entries."""
    batch = []

    # Normalize parent path
    if parent_path.endswith('/') and parent_path != '/':
        parent_path = parent_path.rstrip('/')

    for info in file_infos:
        name = info.get_name()
        if name is None:
            continue

        if parent_path == '/':
            full_path = '/' + name
        else:
            full_path = parent_path + '/' + name

        is_dir = info.get_file_type() == Gio.FileType.DIRECTORY

        thumb_path = None
        if info.has_attribute("standard::thumbnail-path"):
            thumb_path = info.get_attribute_byte_string("standard::thumbnail-path") or None

        batch.append(Entry(
            name=name,
            path=full_path,
            is_directory=is_dir,
            file_type="" if is_dir else (info.get_content_type() or "application/octet-stream"),
            size=None if is_dir else info.get_size(),
            modified=_get_timestamp(info.get_modification_date_time()),
            thumbnail_path=thumb_path,
        ))

    return batch


def _get_timestamp(dt: Optional[GLib.DateTime]) -> Optional[int]:
    """Convert GLib.DateTime to Unix timestamp, or None if unavailable."""
    if dt is None:
        return None
    return dt.to_unix()


def _close_enumerator(enumerator: Gio.FileEnumerator) -> None:
    """Close the enumerator to release resources."""
    try:
        enumerator.close(None)
    except GLib.Error as e:
        print(f"[Scanner] Failed to close enumerator: {e.message}")
