"""
Session layer: the creation session, its request epoch and poem history.
"""
from .epoch import RequestEpoch
from .history import HistoryBuffer, HistoryEntry
from .session_state import (
    BUSY_STATUSES,
    CreationSession,
    SessionSnapshot,
    SessionStatus,
)

__all__ = [
    "RequestEpoch",
    "HistoryBuffer",
    "HistoryEntry",
    "BUSY_STATUSES",
    "CreationSession",
    "SessionSnapshot",
    "SessionStatus",
]
