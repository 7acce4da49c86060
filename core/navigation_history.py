"""
NavigationHistory — Back/Forward History and Current Path

Handles:
- Branching history (navigating after Back drops the forward branch)
- Current path, derived from the cursor
- Navigation signals
"""

from typing import List, Tuple

from PySide6.QtCore import QObject, Signal, Slot, Property


class NavigationHistory(QObject):
    """
    Browser-style history: a list of visited paths plus a cursor.

    The current path is always history[cursor]; it is never stored on its own.
    Cursor is -1 while the history is empty.
    """
    canGoBackChanged = Signal()
    canGoForwardChanged = Signal()
    currentPathChanged = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._paths: List[str] = []
        self._cursor: int = -1

    # -------------------------------------------------------------------------
    # QUERIES
    # -------------------------------------------------------------------------

    @property
    def current_path(self) -> str:
        if self._cursor < 0:
            return ""
        return self._paths[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def paths(self) -> Tuple[str, ...]:
        return tuple(self._paths)

    @property
    def can_go_back(self) -> bool:
        return self._cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return self._cursor < len(self._paths) - 1

    def __len__(self) -> int:
        return len(self._paths)

    @Property(str, notify=currentPathChanged)
    def currentPath(self) -> str:
        return self.current_path

    @Property(bool, notify=canGoBackChanged)
    def canGoBack(self) -> bool:
        return self.can_go_back

    @Property(bool, notify=canGoForwardChanged)
    def canGoForward(self) -> bool:
        return self.can_go_forward

    # -------------------------------------------------------------------------
    # NAVIGATION
    # -------------------------------------------------------------------------

    @Slot(str, result=bool)
    def navigate(self, path: str) -> bool:
        """
        Navigates to a new path, discarding any forward entries.
        Re-navigating to the current path does nothing.
        """
        if not path:
            return False
        if self._cursor >= 0 and path == self._paths[self._cursor]:
            return False

        before = self._snapshot()
        del self._paths[self._cursor + 1:]
        self._paths.append(path)
        self._cursor = len(self._paths) - 1
        self._emit_changes(before)
        return True

    @Slot(result=bool)
    def back(self) -> bool:
        """Moves to the previous path. Returns False at the start."""
        if not self.can_go_back:
            return False
        before = self._snapshot()
        self._cursor -= 1
        self._emit_changes(before)
        return True

    @Slot(result=bool)
    def forward(self) -> bool:
        """Moves to the next path. Returns False at the end."""
        if not self.can_go_forward:
            return False
        before = self._snapshot()
        self._cursor += 1
        self._emit_changes(before)
        return True

    # -------------------------------------------------------------------------
    # INTERNAL
    # -------------------------------------------------------------------------

    def _snapshot(self) -> Tuple[bool, bool]:
        return self.can_go_back, self.can_go_forward

    def _emit_changes(self, before: Tuple[bool, bool]) -> None:
        could_back, could_forward = before
        if could_back != self.can_go_back:
            self.canGoBackChanged.emit()
        if could_forward != self.can_go_forward:
            self.canGoForwardChanged.emit()
        self.currentPathChanged.emit(self.current_path)
