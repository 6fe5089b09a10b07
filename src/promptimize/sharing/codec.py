"""Encode and decode share tokens for (prompt, improved) pairs."""

import base64
import binascii
import json
import logging
import re
from typing import Optional
from urllib.parse import quote, unquote, urlencode, urlsplit, urlunsplit, parse_qs, parse_qsl

from pydantic import BaseModel, ValidationError, field_validator

from ..core.types import SharePayload, DecodeResult
from ..core.exceptions import DecodeError

logger = logging.getLogger(__name__)

DEFAULT_PARAM = "share"

# Characters left unescaped, matching JavaScript's encodeURIComponent
_URI_SAFE = "-_.!~*'()"
_TOKEN_CHARS = re.compile(r"^[A-Za-z0-9_-]+={0,2}$")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class _WirePayload(BaseModel):
    """Schema of the decoded token body."""
    p: str
    i: str

    @field_validator("p", "i")
    @classmethod
    def _not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value


def encode(prompt: str, improved: str) -> str:
    """
    Encode a (prompt, improved) pair as a URL-safe token.

    JSON ``{"p": ..., "i": ...}`` is percent-escaped, then base64url
    encoded without padding.
    """
    body = json.dumps({"p": prompt, "i": improved}, ensure_ascii=False, separators=(",", ":"))
    escaped = quote(body, safe=_URI_SAFE)
    return base64.urlsafe_b64encode(escaped.encode("ascii")).decode("ascii").rstrip("=")


def decode(token: str) -> SharePayload:
    """
    Decode a share token.

    Raises:
        DecodeError: If the token is not base64url text, the body is not
            valid percent-escaped JSON, or ``p``/``i`` are missing or empty
    """
    token = (token or "").strip()
    if not _TOKEN_CHARS.match(token):
        raise DecodeError("Share token is not base64 text", reason="base64")

    stripped = token.rstrip("=")
    padded = stripped + "=" * (-len(stripped) % 4)
    try:
        escaped = base64.b64decode(padded, altchars=b"-_", validate=True).decode("ascii")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise DecodeError("Share token is not base64 text", reason="base64", cause=e) from e

    if _BAD_ESCAPE.search(escaped):
        raise DecodeError("Share token has a malformed escape", reason="escape")
    try:
        body = unquote(escaped, errors="strict")
    except UnicodeDecodeError as e:
        raise DecodeError("Share token has a malformed escape", reason="escape", cause=e) from e

    try:
        payload = _WirePayload.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(
            "Share token does not carry a prompt and improved text",
            reason="schema",
            details={"errors": e.error_count()},
            cause=e
        ) from e

    return SharePayload(prompt=payload.p, improved=payload.i)


def try_decode(token: str) -> DecodeResult[SharePayload]:
    """Decode a share token without raising."""
    try:
        return DecodeResult.success(decode(token))
    except DecodeError as e:
        logger.warning("Ignoring share token: %s", e)
        return DecodeResult.failure(e.message)


def build_share_url(base_url: str, token: str, param: str = DEFAULT_PARAM) -> str:
    """Set ``param=token`` on ``base_url``, keeping its other query parameters."""
    parts = urlsplit(base_url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != param]
    query.append((param, token))
    return urlunsplit(parts._replace(query=urlencode(query)))


def token_from_url(url_or_token: str, param: str = DEFAULT_PARAM) -> Optional[str]:
    """
    Extract the share token from a URL.

    Input without a query string is returned as-is, treating it as a bare
    token. Returns None when a URL has no share parameter.
    """
    url_or_token = url_or_token.strip()
    parts = urlsplit(url_or_token)
    if not parts.query and not parts.scheme:
        return url_or_token or None

    values = parse_qs(parts.query).get(param)
    return values[0] if values else None
