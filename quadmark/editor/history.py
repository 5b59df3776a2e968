"""
Linear undo/redo history over committed quadrilateral snapshots.

Built on QUndoStack: every commit pushes a SnapshotCommand holding the
committed shape. Commands below the stack index form the undo side (the one
just below the index is the shape on display); commands from the index up
form the redo side, next redo first. Any new commit discards the redo side.

Snapshots are immutable Quadrilateral values, so no command can alias live
editing state.
"""

from typing import List, Optional

from PySide6.QtGui import QUndoCommand, QUndoStack

from quadmark.editor.quadrilateral import Quadrilateral
from quadmark.services.logging_service import get_logger


class SnapshotCommand(QUndoCommand):
    """Command recording one committed shape."""

    def __init__(self, quad: Quadrilateral) -> None:
        super().__init__("Edit Quadrilateral")
        self._quad = quad

    @property
    def quad(self) -> Quadrilateral:
        return self._quad

    # The shape on display is derived from the stack index, so stepping
    # through the stack needs no side effects.
    def redo(self) -> None:
        pass

    def undo(self) -> None:
        pass


class HistoryStack:
    """
    Undo/redo history for the editor.

    History is unbounded unless a positive limit is given, in which case the
    oldest undo entries are dropped once the limit is exceeded.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        self._logger = get_logger(__name__)
        self._limit = limit if limit is not None and limit > 0 else None
        self._stack = QUndoStack()
        if self._limit is not None:
            self._stack.setUndoLimit(self._limit)

    # ─── Inspection ───────────────────────────────────────────────────────

    @property
    def limit(self) -> Optional[int]:
        return self._limit

    @property
    def can_undo(self) -> bool:
        return self._stack.canUndo()

    @property
    def can_redo(self) -> bool:
        return self._stack.canRedo()

    @property
    def current(self) -> Optional[Quadrilateral]:
        """The shape on display, or None when nothing is left to undo."""
        index = self._stack.index()
        return self._stack.command(index - 1).quad if index > 0 else None

    @property
    def undo_entries(self) -> List[Quadrilateral]:
        """Undo side, oldest first."""
        return [self._stack.command(i).quad for i in range(self._stack.index())]

    @property
    def redo_entries(self) -> List[Quadrilateral]:
        """Redo side, next redo first."""
        return [
            self._stack.command(i).quad
            for i in range(self._stack.index(), self._stack.count())
        ]

    # ─── Mutation ─────────────────────────────────────────────────────────

    def commit(self, quad: Quadrilateral) -> None:
        """Push a snapshot; QUndoStack drops everything that could be redone."""
        self._stack.push(SnapshotCommand(quad))
        self._logger.debug(f"Committed snapshot ({self._stack.index()} undo entries)")

    def undo(self) -> Optional[Quadrilateral]:
        """
        Step back one commit.

        Returns:
            The shape to display after the step (None when the undo side is
            now empty). When there is nothing to undo the stack is left
            untouched and None is returned; check can_undo first to tell the
            two cases apart.
        """
        if not self._stack.canUndo():
            return None

        self._stack.undo()
        return self.current

    def redo(self) -> Optional[Quadrilateral]:
        """
        Re-apply the next undone commit.

        Returns:
            The redone shape, or None when there is nothing to redo.
        """
        if not self._stack.canRedo():
            return None

        self._stack.redo()
        return self.current

    def clear_redo(self) -> None:
        """Discard the redo side only."""
        if not self._stack.canRedo():
            return

        kept = self.undo_entries
        self._stack.clear()
        for quad in kept:
            self._stack.push(SnapshotCommand(quad))

    def clear(self) -> None:
        """Empty the whole history."""
        self._stack.clear()
