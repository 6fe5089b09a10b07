"""Durable storage backends for the chat history record."""

import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ..core.types import Chat, DecodeResult
from ..core.exceptions import StorageParseError, StorageWriteError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "promptimize.history"


class ChatRecord(BaseModel):
    """Schema of one stored chat."""
    id: str = Field(min_length=1)
    prompt: str
    improved: str
    versions: Optional[List[str]] = None
    favorited: bool = False
    createdAt: int = 0


_history_schema = TypeAdapter(List[ChatRecord])


def decode_history(raw: Optional[str], key: str = DEFAULT_STORAGE_KEY) -> DecodeResult[List[Chat]]:
    """
    Parse and validate a stored history record.

    Never raises; an absent or malformed record comes back as a failure
    result carrying the reason.
    """
    try:
        return DecodeResult.success(parse_history(raw, key))
    except StorageParseError as e:
        return DecodeResult.failure(e.message)


def parse_history(raw: Optional[str], key: str = DEFAULT_STORAGE_KEY) -> List[Chat]:
    """
    Parse and validate a stored history record.

    Raises:
        StorageParseError: If the record is absent, not JSON, or off-schema
    """
    if raw is None:
        raise StorageParseError("No stored history", key=key)

    try:
        records = _history_schema.validate_json(raw)
    except ValidationError as e:
        raise StorageParseError(
            "Stored history is corrupt",
            key=key,
            details={"errors": e.error_count()},
            cause=e
        ) from e

    chats = []
    for record in records:
        chat = Chat.from_dict(record.model_dump())
        # Keep the invariant that improved is the latest version
        if chat.versions[-1] != chat.improved:
            chat.versions.append(chat.improved)
        chats.append(chat)
    return chats


def serialize_history(chats: List[Chat]) -> str:
    """Serialize chats to the stored JSON array form."""
    return json.dumps([c.to_dict() for c in chats], ensure_ascii=False)


class HistoryBackend:
    """Abstract backend holding the single history record."""

    key: str = DEFAULT_STORAGE_KEY

    def load(self) -> Optional[str]:
        """Return the raw stored record, or None if there is none."""
        raise NotImplementedError

    def save(self, payload: str) -> None:
        """Replace the stored record. Raises StorageWriteError on failure."""
        raise NotImplementedError


class FileHistoryBackend(HistoryBackend):
    """Stores the history record as a JSON file named after the key."""

    def __init__(self, storage_dir: str, key: str = DEFAULT_STORAGE_KEY):
        self.storage_dir = Path(storage_dir).expanduser()
        self.key = key

    @property
    def path(self) -> Path:
        return self.storage_dir / f"{self.key}.json"

    def load(self) -> Optional[str]:
        if not self.path.exists():
            return None
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return None

    def save(self, payload: str) -> None:
        # Atomic replace via a sibling temp file
        tmp_path = self.path.with_suffix(".json.tmp")
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise StorageWriteError(
                "Failed to write history",
                location=str(self.path),
                cause=e
            ) from e


class MemoryHistoryBackend(HistoryBackend):
    """In-memory backend for testing."""

    def __init__(self, initial: Optional[str] = None, key: str = DEFAULT_STORAGE_KEY):
        self.key = key
        self.payload = initial
        self.writes = 0

    def load(self) -> Optional[str]:
        return self.payload

    def save(self, payload: str) -> None:
        self.payload = payload
        self.writes += 1
