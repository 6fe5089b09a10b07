"""API schemas."""

from .requests import (
    ImproveRequest,
    AnalyzeRequest,
    DiffRequest,
    ShareRequest,
)
from .responses import (
    AnalysisResponse,
    ChatResponse,
    ImproveResponse,
    DiffTokenResponse,
    DiffResponse,
    VersionResponse,
    VersionHistoryResponse,
    HistoryResponse,
    ShareResponse,
    OpenShareResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    # Requests
    "ImproveRequest",
    "AnalyzeRequest",
    "DiffRequest",
    "ShareRequest",
    # Responses
    "AnalysisResponse",
    "ChatResponse",
    "ImproveResponse",
    "DiffTokenResponse",
    "DiffResponse",
    "VersionResponse",
    "VersionHistoryResponse",
    "HistoryResponse",
    "ShareResponse",
    "OpenShareResponse",
    "HealthResponse",
    "ErrorResponse",
]
