"""API request schemas."""

from pydantic import BaseModel, Field


class ImproveRequest(BaseModel):
    """Request for prompt improvement."""
    prompt: str = Field(..., description="The prompt to improve")


class AnalyzeRequest(BaseModel):
    """Request for prompt analysis."""
    prompt: str = Field("", description="The prompt to analyze (may be empty)")


class DiffRequest(BaseModel):
    """Request for a word-level diff."""
    original: str = Field(..., description="The original prompt")
    improved: str = Field(..., description="The improved text")


class ShareRequest(BaseModel):
    """Request for a share link for a chat in history."""
    chat_id: str = Field(..., description="Id of the chat to share")
    copy_to_clipboard: bool = Field(
        False,
        description="Also copy the link to the server's clipboard"
    )
