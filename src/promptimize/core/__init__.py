"""Core module - foundational types, configuration, and errors."""

from .types import (
    Chat,
    AnalysisResult,
    DiffToken,
    VersionDiff,
    SharePayload,
    DecodeResult,
    now_ms,
)
from .config import Settings, get_settings, reload_settings
from .exceptions import (
    PromptimizeError,
    EmptyInputError,
    StorageParseError,
    StorageWriteError,
    ClipboardError,
    DecodeError,
    ImprovementInProgressError,
    ImprovementCancelledError,
)
from .logging import configure_logging

__all__ = [
    # Types
    "Chat",
    "AnalysisResult",
    "DiffToken",
    "VersionDiff",
    "SharePayload",
    "DecodeResult",
    "now_ms",
    # Configuration
    "Settings",
    "get_settings",
    "reload_settings",
    "configure_logging",
    # Exceptions
    "PromptimizeError",
    "EmptyInputError",
    "StorageParseError",
    "StorageWriteError",
    "ClipboardError",
    "DecodeError",
    "ImprovementInProgressError",
    "ImprovementCancelledError",
]
