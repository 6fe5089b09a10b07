"""Core type definitions for the prompt improver."""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Generic, TypeVar
import time
import uuid

T = TypeVar("T")


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass
class Chat:
    """
    One prompt-and-its-improvements lineage.

    ``prompt`` never changes after creation; merges only touch ``improved``,
    ``versions`` and ``created_at``. ``improved`` is always the last entry
    of ``versions``.
    """
    prompt: str
    improved: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    versions: List[str] = field(default_factory=list)
    favorited: bool = False
    created_at: int = field(default_factory=now_ms)

    def __post_init__(self):
        if not self.versions:
            self.versions = [self.improved]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the durable storage record format."""
        return {
            "id": self.id,
            "prompt": self.prompt,
            "improved": self.improved,
            "versions": list(self.versions),
            "favorited": self.favorited,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chat":
        """Create from a storage record."""
        return cls(
            id=data["id"],
            prompt=data["prompt"],
            improved=data["improved"],
            versions=list(data.get("versions") or []),
            favorited=data.get("favorited", False),
            created_at=data.get("createdAt", now_ms()),
        )

    def copy(self) -> "Chat":
        """Create a detached copy (same id)."""
        return Chat(
            id=self.id,
            prompt=self.prompt,
            improved=self.improved,
            versions=list(self.versions),
            favorited=self.favorited,
            created_at=self.created_at,
        )


@dataclass
class AnalysisResult:
    """Heuristic quality analysis of a prompt."""
    score: int  # 1-10
    percent: int  # 0-100
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "percent": self.percent,
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class DiffToken:
    """A word or whitespace run of improved text, tagged as added or not."""
    text: str
    added: bool = False


@dataclass
class VersionDiff:
    """One stored version of a chat, diffed against the chat's prompt."""
    index: int
    text: str
    tokens: List[DiffToken] = field(default_factory=list)

    @property
    def added_words(self) -> List[str]:
        return [t.text for t in self.tokens if t.added]


@dataclass(frozen=True)
class SharePayload:
    """The (prompt, improved) pair carried by a share token."""
    prompt: str
    improved: str


@dataclass
class DecodeResult(Generic[T]):
    """
    Tagged outcome of decoding untrusted input.

    Exactly one of ``value`` / ``error`` is set.
    """
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "DecodeResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "DecodeResult[T]":
        return cls(error=error)
