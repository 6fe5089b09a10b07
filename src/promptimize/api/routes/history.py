"""History routes."""

from fastapi import APIRouter, Depends, HTTPException

from ... import Promptimize
from ..schemas import (
    ChatResponse,
    HistoryResponse,
    VersionHistoryResponse,
    VersionResponse,
    ErrorResponse,
)
from .deps import get_app_core

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=HistoryResponse)
async def list_history(core: Promptimize = Depends(get_app_core)) -> HistoryResponse:
    """All chats, most recent first."""
    chats = core.history
    return HistoryResponse(
        chats=[ChatResponse.from_chat(c) for c in chats],
        total=len(chats)
    )


@router.get("/favorites", response_model=HistoryResponse)
async def list_favorites(core: Promptimize = Depends(get_app_core)) -> HistoryResponse:
    """Favorited chats, in history order."""
    chats = core.favorites()
    return HistoryResponse(
        chats=[ChatResponse.from_chat(c) for c in chats],
        total=len(chats)
    )


@router.get(
    "/{chat_id}/versions",
    response_model=VersionHistoryResponse,
    responses={404: {"model": ErrorResponse}}
)
async def chat_versions(
    chat_id: str,
    core: Promptimize = Depends(get_app_core)
) -> VersionHistoryResponse:
    """Every improvement of a chat, diffed against its original prompt."""
    chat = core.get_chat(chat_id)
    if chat is None:
        raise HTTPException(status_code=404, detail=f"Chat '{chat_id}' not found")

    return VersionHistoryResponse(
        chat_id=chat.id,
        prompt=chat.prompt,
        versions=[VersionResponse.from_version(v) for v in core.versions(chat_id)]
    )


@router.post(
    "/{chat_id}/favorite",
    response_model=ChatResponse,
    responses={404: {"model": ErrorResponse}}
)
async def toggle_favorite(
    chat_id: str,
    core: Promptimize = Depends(get_app_core)
) -> ChatResponse:
    """Flip the favorited flag of a chat."""
    chat = core.toggle_favorite(chat_id)
    if chat is None:
        raise HTTPException(status_code=404, detail=f"Chat '{chat_id}' not found")
    return ChatResponse.from_chat(chat)


@router.delete("/{chat_id}")
async def delete_chat(chat_id: str, core: Promptimize = Depends(get_app_core)) -> dict:
    """
    Delete a chat.

    Deleting an unknown id is a no-op and reports ``deleted: false``.
    """
    return {"deleted": core.delete_chat(chat_id)}
