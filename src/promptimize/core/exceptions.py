"""Custom exceptions for the prompt improver."""

from typing import Optional, Dict, Any


class PromptimizeError(Exception):
    """Base exception for all prompt improver errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class EmptyInputError(PromptimizeError):
    """A blank prompt was submitted."""

    def __init__(
        self,
        message: str = "The prompt field cannot be empty",
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.field = field
        if field:
            self.details["field"] = field


class StorageParseError(PromptimizeError):
    """The durable history record is missing or corrupt."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.key = key
        if key:
            self.details["key"] = key


class StorageWriteError(PromptimizeError):
    """Writing the durable history record failed."""

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.location = location
        if location:
            self.details["location"] = location


class ClipboardError(PromptimizeError):
    """Writing to the system clipboard failed."""


class DecodeError(PromptimizeError):
    """A share token could not be decoded."""

    def __init__(
        self,
        message: str,
        reason: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, details, cause)
        self.reason = reason
        if reason:
            self.details["reason"] = reason


class ImprovementInProgressError(PromptimizeError):
    """An improvement was requested while another one is still pending."""


class ImprovementCancelledError(PromptimizeError):
    """A pending improvement was cancelled before it produced output."""
