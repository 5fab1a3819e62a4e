"""Undo/redo history over full configuration snapshots."""

from __future__ import annotations

from configurator.models import ContainerConfig, DesignContext


DEFAULT_HISTORY_LIMIT = 50


class HistoryManager:
    """
    Bounded undo and redo stacks stored on a DesignContext.

    Both stacks evict their oldest entry once they exceed `limit`.
    The manager only moves snapshots; recomputing, persisting and
    notifying are left to the session.
    """

    def __init__(self, context: DesignContext, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        self.context = context
        self.limit = limit

    @property
    def can_undo(self) -> bool:
        return len(self.context.undo_stack) > 0

    @property
    def can_redo(self) -> bool:
        return len(self.context.redo_stack) > 0

    def push_undo(self, snapshot: ContainerConfig) -> None:
        """Record `snapshot` as the state to return to. Clears redo."""
        self._push(self.context.undo_stack, snapshot)
        self.context.redo_stack.clear()

    def undo(self) -> ContainerConfig | None:
        """Restore the previous snapshot. Returns it, or None if there is none."""
        if not self.context.undo_stack:
            return None
        previous = self.context.undo_stack.pop()
        self._push(self.context.redo_stack, self.context.current)
        self.context.replace(previous)
        return previous

    def redo(self) -> ContainerConfig | None:
        """Re-apply the last undone snapshot. Returns it, or None if there is none."""
        if not self.context.redo_stack:
            return None
        following = self.context.redo_stack.pop()
        self._push(self.context.undo_stack, self.context.current)
        self.context.replace(following)
        return following

    def clear(self) -> None:
        self.context.undo_stack.clear()
        self.context.redo_stack.clear()

    def _push(self, stack: list[ContainerConfig], snapshot: ContainerConfig) -> None:
        stack.append(snapshot)
        while len(stack) > self.limit:
            stack.pop(0)
