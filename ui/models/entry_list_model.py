from PySide6.QtCore import QAbstractListModel, Qt, QModelIndex, QByteArray

from core.directory_loader import DirectoryLoader


class EntryListModel(QAbstractListModel):
    """
    Exposes the loader's visible entries to QML.
    Read-only: it re-reads the projection whenever the loader reports a change.
    """
    NameRole = Qt.ItemDataRole.UserRole + 1
    PathRole = Qt.ItemDataRole.UserRole + 2
    IsDirRole = Qt.ItemDataRole.UserRole + 3
    FileTypeRole = Qt.ItemDataRole.UserRole + 4
    SizeRole = Qt.ItemDataRole.UserRole + 5
    ModifiedRole = Qt.ItemDataRole.UserRole + 6
    ThumbnailRole = Qt.ItemDataRole.UserRole + 7

    def __init__(self, loader: DirectoryLoader, parent=None):
        super().__init__(parent)
        self._loader = loader
        self._entries = loader.visible_entries
        self._loader.entriesChanged.connect(self._on_entries_changed)

    def rowCount(self, parent=QModelIndex()):
        return len(self._entries)

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or not (0 <= index.row() < len(self._entries)):
            return None

        entry = self._entries[index.row()]

        if role == self.NameRole or role == Qt.ItemDataRole.DisplayRole:
            return entry.name
        if role == self.PathRole: return entry.path
        if role == self.IsDirRole: return entry.is_directory
        if role == self.FileTypeRole: return entry.file_type
        if role == self.SizeRole: return entry.size if entry.size is not None else -1
        if role == self.ModifiedRole: return entry.modified if entry.modified is not None else 0
        if role == self.ThumbnailRole: return entry.thumbnail_path or ""

        return None

    def roleNames(self):
        return {
            self.NameRole: QByteArray(b"name"),
            self.PathRole: QByteArray(b"path"),
            self.IsDirRole: QByteArray(b"isDir"),
            self.FileTypeRole: QByteArray(b"fileType"),
            self.SizeRole: QByteArray(b"size"),
            self.ModifiedRole: QByteArray(b"modified"),
            self.ThumbnailRole: QByteArray(b"thumbnailPath"),
        }

    def entry_at(self, row: int):
        if 0 <= row < len(self._entries):
            return self._entries[row]
        return None

    def _on_entries_changed(self):
        self.beginResetModel()
        self._entries = self._loader.visible_entries
        self.endResetModel()
