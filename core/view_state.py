"""
Selection, inspector and display preferences.

Plain key-value UI state. The directory loader clears the selection and the
inspector whenever a new listing starts.
"""

from typing import Optional

from PySide6.QtCore import QObject, Signal, Slot, Property

from core.types import Entry, ViewMode

ITEM_SIZE_RANGE = (50, 200)
GAP_SIZE_RANGE = (0, 20)
DEFAULT_ITEM_SIZE = 80
DEFAULT_GAP_SIZE = 4


def _clamp(value: int, bounds) -> int:
    low, high = bounds
    return max(low, min(high, int(value)))


class ViewState(QObject):
    selectionChanged = Signal()
    inspectorVisibleChanged = Signal(bool)
    viewModeChanged = Signal(str)
    itemSizeChanged = Signal(int)
    gapSizeChanged = Signal(int)
    showHiddenChanged = Signal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._selected: Optional[Entry] = None
        self._inspector_visible = False
        self._view_mode = ViewMode.GRID
        self._item_size = DEFAULT_ITEM_SIZE
        self._gap_size = DEFAULT_GAP_SIZE
        self._show_hidden = False

    # --- Selection / Inspector ---

    @property
    def selected_entry(self) -> Optional[Entry]:
        return self._selected

    def select(self, entry: Optional[Entry]) -> None:
        if entry != self._selected:
            self._selected = entry
            self.selectionChanged.emit()

    @property
    def inspector_visible(self) -> bool:
        return self._inspector_visible

    @inspector_visible.setter
    def inspector_visible(self, visible: bool) -> None:
        visible = bool(visible)
        if visible != self._inspector_visible:
            self._inspector_visible = visible
            self.inspectorVisibleChanged.emit(visible)

    @Slot()
    def toggle_inspector(self) -> None:
        self.inspector_visible = not self._inspector_visible

    @Slot()
    def clear_selection(self) -> None:
        """Drops the selection and hides the inspector."""
        self.select(None)
        self.inspector_visible = False

    # --- Display ---

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @view_mode.setter
    def view_mode(self, mode) -> None:
        mode = ViewMode(mode)
        if mode is not self._view_mode:
            self._view_mode = mode
            self.viewModeChanged.emit(mode.value)

    @property
    def item_size(self) -> int:
        return self._item_size

    @item_size.setter
    def item_size(self, size: int) -> None:
        size = _clamp(size, ITEM_SIZE_RANGE)
        if size != self._item_size:
            self._item_size = size
            self.itemSizeChanged.emit(size)

    @property
    def gap_size(self) -> int:
        return self._gap_size

    @gap_size.setter
    def gap_size(self, size: int) -> None:
        size = _clamp(size, GAP_SIZE_RANGE)
        if size != self._gap_size:
            self._gap_size = size
            self.gapSizeChanged.emit(size)

    @property
    def show_hidden(self) -> bool:
        return self._show_hidden

    @show_hidden.setter
    def show_hidden(self, show: bool) -> None:
        show = bool(show)
        if show != self._show_hidden:
            self._show_hidden = show
            self.showHiddenChanged.emit(show)

    # --- QML ---

    @Property(str, notify=viewModeChanged)
    def viewMode(self) -> str:
        return self._view_mode.value

    @Property(int, notify=itemSizeChanged)
    def itemSize(self) -> int:
        return self._item_size

    @Property(int, notify=gapSizeChanged)
    def gapSize(self) -> int:
        return self._gap_size

    @Property(bool, notify=inspectorVisibleChanged)
    def inspectorVisible(self) -> bool:
        return self._inspector_visible
