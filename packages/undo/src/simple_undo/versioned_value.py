"""
VersionedValue — a value wrapper that records updates and can undo/redo them.

Undo never stores inverse operations: it rebuilds the value by replaying the
recorded operations from a clone of the initial snapshot.  Redo applies the
next recorded operation forward.

    text = VersionedValue("")
    text.update(lambda s: s + "Simple ")
    text.update(lambda s: s + "undo !")
    text.undo()          # "Simple "
    text.redo()          # "Simple undo !"
    text.unwrap()        # "Simple undo !"
"""
from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .errors import ConsumedError, ReplayError
from .operation import Operation

logger = logging.getLogger(__name__)

S = TypeVar("S")


# ─────────────────────────────────────────────────────────────────────────────
# Introspection types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class HistoryState:
    """Position of the cursor within the recorded operations."""

    cursor: int
    length: int

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < self.length


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded operation and whether it is currently applied."""

    index: int
    label: str | None
    applied: bool


# ─────────────────────────────────────────────────────────────────────────────
# VersionedValue
# ─────────────────────────────────────────────────────────────────────────────

class VersionedValue(Generic[S]):
    """
    Wraps a value and tracks every update applied to it.

    The visible value always equals the initial snapshot folded through the
    first ``cursor`` recorded operations.  Operations must be deterministic
    since every undo re-invokes them.

    Undoing with nothing to undo, or redoing with nothing to redo, is a
    silent no-op; use ``can_undo`` / ``can_redo`` to tell the cases apart.
    """

    def __init__(self, initial: S, *, clone: Callable[[S], S] = copy.deepcopy) -> None:
        self._clone = clone
        self._initial: S = clone(initial)
        self._current: S = clone(initial)
        self._operations: list[Operation[S]] = []
        self._cursor = 0
        self._consumed = False

    # ── Current value ─────────────────────────────────────────────────────

    @property
    def value(self) -> S:
        """The current value.  Treat it as read-only; mutate through update()."""
        self._ensure_live()
        return self._current

    @property
    def initial(self) -> S:
        """A copy of the snapshot taken at construction time."""
        self._ensure_live()
        return self._clone(self._initial)

    # ── Updates ───────────────────────────────────────────────────────────

    def update(self, fn: Callable[[S], S], *, label: str | None = None) -> S:
        """
        Apply *fn* (old value -> new value) and record it.

        Any operations undone before this call are discarded.  If *fn*
        raises, the exception propagates and nothing changes.
        """
        return self._record(Operation.of(fn, label=label))

    def update_in_place(self, fn: Callable[[S], Any], *, label: str | None = None) -> S:
        """Like update(), for a mutator that changes its argument in place."""
        return self._record(Operation.of(fn, in_place=True, label=label))

    def _record(self, op: Operation[S]) -> S:
        self._ensure_live()
        # Applied to a copy so a failing operation leaves current untouched.
        new_value = self._apply(op, self._clone(self._current))

        if self._cursor < len(self._operations):
            logger.debug(
                "Discarding %d redoable operation(s) after index %d",
                len(self._operations) - self._cursor,
                self._cursor,
            )
            del self._operations[self._cursor:]

        self._operations.append(op)
        self._cursor += 1
        self._current = new_value
        logger.debug("Applied operation #%d (%s)", self._cursor - 1, op.label)
        return self._current

    # ── Undo / redo ───────────────────────────────────────────────────────

    def undo(self) -> S:
        """Step back one operation by replaying from the initial snapshot."""
        self._ensure_live()
        if self._cursor == 0:
            logger.debug("Nothing to undo")
            return self._current

        target = self._cursor - 1
        value = self._replay(target)
        self._cursor = target
        self._current = value
        logger.debug("Undo: replayed %d operation(s)", target)
        return self._current

    def redo(self) -> S:
        """Re-apply the next undone operation."""
        self._ensure_live()
        if self._cursor == len(self._operations):
            logger.debug("Nothing to redo")
            return self._current

        op = self._operations[self._cursor]
        try:
            value = self._apply(op, self._clone(self._current))
        except Exception as exc:
            raise ReplayError(self._cursor, op.label) from exc
        self._cursor += 1
        self._current = value
        logger.debug("Redo: re-applied operation #%d (%s)", self._cursor - 1, op.label)
        return self._current

    def _replay(self, count: int) -> S:
        value = self._clone(self._initial)
        for index, op in enumerate(self._operations[:count]):
            try:
                value = self._apply(op, value)
            except Exception as exc:
                raise ReplayError(index, op.label) from exc
        return value

    def _apply(self, op: Operation[S], value: S) -> S:
        result = op.apply(value)
        # Returned objects may be shared with the caller; keep a private copy.
        if result is not value:
            result = self._clone(result)
        return result

    # ── Consumption ───────────────────────────────────────────────────────

    def unwrap(self) -> S:
        """Return the current value and discard all history."""
        self._ensure_live()
        value = self._current
        self._consumed = True
        self._operations = []
        self._cursor = 0
        self._initial = None  # type: ignore[assignment]
        self._current = None  # type: ignore[assignment]
        logger.debug("Unwrapped; history discarded")
        return value

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _ensure_live(self) -> None:
        if self._consumed:
            raise ConsumedError()

    # ── Introspection ─────────────────────────────────────────────────────

    @property
    def cursor(self) -> int:
        self._ensure_live()
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < len(self._operations)

    @property
    def undo_count(self) -> int:
        """Number of operations that undo() can step back through."""
        return self.cursor

    @property
    def redo_count(self) -> int:
        """Number of operations that redo() can step forward through."""
        return len(self._operations) - self.cursor

    @property
    def length(self) -> int:
        self._ensure_live()
        return len(self._operations)

    def __len__(self) -> int:
        return self.length

    def state(self) -> HistoryState:
        return HistoryState(cursor=self.cursor, length=len(self._operations))

    def history(self) -> list[HistoryEntry]:
        """Every recorded operation, oldest first, flagged if currently applied."""
        cursor = self.cursor
        return [
            HistoryEntry(index=i, label=op.label, applied=i < cursor)
            for i, op in enumerate(self._operations)
        ]

    def __repr__(self) -> str:
        if self._consumed:
            return "VersionedValue(<consumed>)"
        return f"VersionedValue({self._current!r}, cursor={self._cursor}, length={len(self._operations)})"
