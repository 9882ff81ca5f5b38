"""
Exceptions raised by simple_undo.
"""
from __future__ import annotations


class UndoError(Exception):
    """Base class for all simple_undo errors."""


class ConsumedError(UndoError):
    """Raised when a VersionedValue is used after unwrap()."""

    def __init__(self) -> None:
        super().__init__("VersionedValue was consumed by unwrap() and can no longer be used")


class ReplayError(UndoError):
    """
    A stored operation raised while it was being re-applied.

    Stored operations must be deterministic, so this signals a caller
    contract violation rather than a recoverable condition.  The original
    exception is available as ``__cause__``.
    """

    def __init__(self, index: int, label: str | None) -> None:
        self.index = index
        self.label = label
        name = label or "<unnamed>"
        super().__init__(f"Operation #{index} ({name}) failed during replay")
