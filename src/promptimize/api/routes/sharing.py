"""Share link routes."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ... import Promptimize
from ...core.exceptions import ClipboardError
from ..schemas import (
    ShareRequest,
    ShareResponse,
    OpenShareResponse,
    ChatResponse,
    ErrorResponse,
)
from .deps import get_app_core

router = APIRouter(prefix="/share", tags=["sharing"])


@router.post(
    "",
    response_model=ShareResponse,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}}
)
async def create_share_link(
    request: ShareRequest,
    core: Promptimize = Depends(get_app_core)
) -> ShareResponse:
    """Build a share link carrying a chat's prompt and latest improvement."""
    token = core.share_token(request.chat_id)
    if token is None:
        raise HTTPException(status_code=404, detail=f"Chat '{request.chat_id}' not found")

    url = core.share_url(request.chat_id)
    if request.copy_to_clipboard:
        try:
            core.copy(url)
        except ClipboardError as e:
            raise HTTPException(status_code=502, detail=e.message)

    return ShareResponse(token=token, url=url, copied=request.copy_to_clipboard)


@router.get("", response_model=OpenShareResponse)
async def open_share_link(
    share: Optional[str] = None,
    core: Promptimize = Depends(get_app_core)
) -> OpenShareResponse:
    """
    Load a shared pair into history.

    A missing or malformed token is ignored and reported as ``loaded: false``.
    """
    if not share:
        return OpenShareResponse(loaded=False)

    chat = core.open_shared(share)
    if chat is None:
        return OpenShareResponse(loaded=False)
    return OpenShareResponse(loaded=True, chat=ChatResponse.from_chat(chat))
