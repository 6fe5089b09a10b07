"""Improvement, analysis and diff routes."""

from fastapi import APIRouter, Depends, HTTPException

from ... import Promptimize
from ...core.exceptions import EmptyInputError, ImprovementInProgressError
from ..schemas import (
    ImproveRequest,
    ImproveResponse,
    AnalyzeRequest,
    AnalysisResponse,
    DiffRequest,
    DiffResponse,
    DiffTokenResponse,
    ChatResponse,
    ErrorResponse,
)
from .deps import get_app_core

router = APIRouter(tags=["enhancement"])


@router.post(
    "/improve",
    response_model=ImproveResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}}
)
async def improve_prompt(
    request: ImproveRequest,
    core: Promptimize = Depends(get_app_core)
) -> ImproveResponse:
    """
    Improve a prompt and record it in history.

    Submitting the same prompt as the most recent chat adds a new version
    to that chat instead of creating another one.
    """
    try:
        result = await core.improve(request.prompt)
    except EmptyInputError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ImprovementInProgressError as e:
        raise HTTPException(status_code=409, detail=e.message)

    return ImproveResponse(
        success=True,
        original_prompt=result.original_prompt,
        improved_prompt=result.improved_prompt,
        applied_rules=result.applied_rules,
        analysis=AnalysisResponse.from_result(result.analysis),
        chat=ChatResponse.from_chat(result.chat),
        processing_time_ms=result.processing_time_ms
    )


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze_prompt(
    request: AnalyzeRequest,
    core: Promptimize = Depends(get_app_core)
) -> AnalysisResponse:
    """
    Score a prompt from 1 to 10.

    Returns at most four suggestions, in a fixed order.
    """
    return AnalysisResponse.from_result(core.analyze(request.prompt))


@router.post("/diff", response_model=DiffResponse)
async def diff_prompts(
    request: DiffRequest,
    core: Promptimize = Depends(get_app_core)
) -> DiffResponse:
    """Tag each word of the improved text as unchanged or added."""
    tokens = core.diff(request.original, request.improved)
    return DiffResponse(
        tokens=[DiffTokenResponse.from_token(t) for t in tokens],
        added_count=sum(1 for t in tokens if t.added)
    )


@router.get("/rules")
async def list_rules(core: Promptimize = Depends(get_app_core)) -> dict:
    """List the rewrite rules in the order they are applied."""
    rules = core.enhancer.list_rules()
    return {
        "rules": rules,
        "total": len(rules)
    }
