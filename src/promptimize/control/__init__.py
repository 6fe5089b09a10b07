"""History, storage and diff module."""

from .history import HistoryStore, MAX_HISTORY
from .storage import (
    HistoryBackend,
    FileHistoryBackend,
    MemoryHistoryBackend,
    ChatRecord,
    decode_history,
    parse_history,
    serialize_history,
)
from .diff import render_diff, render_versions, tokenize

__all__ = [
    # History
    "HistoryStore",
    "MAX_HISTORY",
    # Storage
    "HistoryBackend",
    "FileHistoryBackend",
    "MemoryHistoryBackend",
    "ChatRecord",
    "decode_history",
    "parse_history",
    "serialize_history",
    # Diff
    "render_diff",
    "render_versions",
    "tokenize",
]
