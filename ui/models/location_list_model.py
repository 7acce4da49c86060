from PySide6.QtCore import QAbstractListModel, Qt, QModelIndex, QByteArray

from core.location_store import CustomLocationStore


class LocationListModel(QAbstractListModel):
    """Sidebar items: standard folders followed by the user's custom locations."""
    NameRole = Qt.ItemDataRole.UserRole + 1
    PathRole = Qt.ItemDataRole.UserRole + 2
    TypeRole = Qt.ItemDataRole.UserRole + 3

    def __init__(self, store: CustomLocationStore, standard=None, parent=None):
        super().__init__(parent)
        self._store = store
        self._standard = list(standard or [])
        self._items = []
        self._rebuild()
        self._store.locationsChanged.connect(self._on_locations_changed)

    def rowCount(self, parent=QModelIndex()):
        return len(self._items)

    def data(self, index, role=Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or not (0 <= index.row() < len(self._items)):
            return None

        loc, kind = self._items[index.row()]

        if role == self.NameRole or role == Qt.ItemDataRole.DisplayRole: return loc.display_name
        if role == self.PathRole: return loc.path
        if role == self.TypeRole: return kind

        return None

    def roleNames(self):
        return {
            self.NameRole: QByteArray(b"name"),
            self.PathRole: QByteArray(b"path"),
            self.TypeRole: QByteArray(b"type"),
        }

    def set_standard_locations(self, standard):
        """Replaces the standard folders (e.g. after platform lookup)."""
        self._standard = list(standard)
        self._on_locations_changed()

    def _rebuild(self):
        standard_paths = {loc.path for loc in self._standard}
        self._items = [
            (loc, "standard" if loc.path in standard_paths else "custom")
            for loc in self._store.sidebar_items(self._standard)
        ]

    def _on_locations_changed(self):
        self.beginResetModel()
        self._rebuild()
        self.endResetModel()
