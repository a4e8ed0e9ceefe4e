"""Undo/redo history of form document snapshots."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from formbuilder.model.document import FormDocument


@dataclass(slots=True)
class HistoryManager:
    """Two unbounded stacks of documents with a linear history policy.

    ``undo_stack`` holds the most recent snapshot last. ``redo_stack`` holds
    the next document to redo at the front.
    """

    undo_stack: list[FormDocument] = field(default_factory=list)
    redo_stack: deque[FormDocument] = field(default_factory=deque)

    @property
    def can_undo(self) -> bool:
        return bool(self.undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self.redo_stack)

    def begin_mutation(self, current: FormDocument) -> None:
        self.undo_stack.append(current)
        self.redo_stack.clear()

    def undo(self, current: FormDocument) -> FormDocument | None:
        if not self.undo_stack:
            return None
        previous = self.undo_stack.pop()
        self.redo_stack.appendleft(current)
        return previous

    def redo(self, current: FormDocument) -> FormDocument | None:
        if not self.redo_stack:
            return None
        following = self.redo_stack.popleft()
        self.undo_stack.append(current)
        return following

    def clear(self) -> None:
        self.undo_stack.clear()
        self.redo_stack.clear()
