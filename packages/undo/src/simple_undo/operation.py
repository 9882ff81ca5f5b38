"""
Operation — a recorded update step that can be re-applied during replay.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

S = TypeVar("S")


@dataclass(frozen=True)
class Operation(Generic[S]):
    """
    A stored update.

    ``fn`` either returns the new value (``in_place=False``) or mutates its
    argument and returns nothing useful (``in_place=True``).
    """

    fn: Callable[[S], Any]
    in_place: bool = False
    label: str | None = None

    @classmethod
    def of(cls, fn: Callable[[S], Any], *, in_place: bool = False, label: str | None = None) -> "Operation[S]":
        """Wrap *fn*, defaulting the label to the callable's name."""
        if not callable(fn):
            raise TypeError(f"Operation must be callable, got {type(fn).__name__}")
        if label is None:
            label = getattr(fn, "__name__", None)
        return cls(fn=fn, in_place=in_place, label=label)

    def apply(self, value: S) -> S:
        """Run the operation on *value* and return the resulting value."""
        if self.in_place:
            self.fn(value)
            return value
        return self.fn(value)
