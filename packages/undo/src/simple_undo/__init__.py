"""
simple_undo — wrap a value, record updates, undo and redo them by replay.
"""
from .config import VERSION, configure_logging, get_log_level
from .errors import ConsumedError, ReplayError, UndoError
from .operation import Operation
from .versioned_value import HistoryEntry, HistoryState, VersionedValue

__version__ = VERSION

__all__ = [
    "ConsumedError",
    "HistoryEntry",
    "HistoryState",
    "Operation",
    "ReplayError",
    "UndoError",
    "VersionedValue",
    "configure_logging",
    "get_log_level",
]
