"""API response schemas."""

from typing import Optional, List
from pydantic import BaseModel, Field

from ...core.types import Chat, AnalysisResult, DiffToken, VersionDiff


class AnalysisResponse(BaseModel):
    """Heuristic prompt analysis."""
    score: int = Field(..., ge=1, le=10)
    percent: int = Field(..., ge=0, le=100)
    suggestions: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        return cls(**result.to_dict())


class ChatResponse(BaseModel):
    """A chat in history."""
    id: str
    prompt: str
    improved: str
    versions: List[str]
    favorited: bool
    created_at: int

    @classmethod
    def from_chat(cls, chat: Chat) -> "ChatResponse":
        return cls(
            id=chat.id,
            prompt=chat.prompt,
            improved=chat.improved,
            versions=chat.versions,
            favorited=chat.favorited,
            created_at=chat.created_at,
        )


class ImproveResponse(BaseModel):
    """Response for prompt improvement."""
    success: bool
    original_prompt: str
    improved_prompt: str
    applied_rules: List[str] = Field(default_factory=list)
    analysis: AnalysisResponse
    chat: ChatResponse
    processing_time_ms: float = 0.0


class DiffTokenResponse(BaseModel):
    """One token of a diff."""
    text: str
    added: bool

    @classmethod
    def from_token(cls, token: DiffToken) -> "DiffTokenResponse":
        return cls(text=token.text, added=token.added)


class DiffResponse(BaseModel):
    """Response for a word-level diff."""
    tokens: List[DiffTokenResponse]
    added_count: int


class VersionResponse(BaseModel):
    """One stored version diffed against the chat's prompt."""
    index: int
    text: str
    tokens: List[DiffTokenResponse]

    @classmethod
    def from_version(cls, version: VersionDiff) -> "VersionResponse":
        return cls(
            index=version.index,
            text=version.text,
            tokens=[DiffTokenResponse.from_token(t) for t in version.tokens],
        )


class VersionHistoryResponse(BaseModel):
    """All versions of a chat."""
    chat_id: str
    prompt: str
    versions: List[VersionResponse]


class HistoryResponse(BaseModel):
    """The chat history, most recent first."""
    chats: List[ChatResponse]
    total: int


class ShareResponse(BaseModel):
    """A share link."""
    token: str
    url: str
    copied: bool = False


class OpenShareResponse(BaseModel):
    """Result of loading a share token."""
    loaded: bool
    chat: Optional[ChatResponse] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    history_size: int


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None
