"""Share links and clipboard module."""

from .codec import (
    encode,
    decode,
    try_decode,
    build_share_url,
    token_from_url,
    DEFAULT_PARAM,
)
from .clipboard import copy_to_clipboard

__all__ = [
    "encode",
    "decode",
    "try_decode",
    "build_share_url",
    "token_from_url",
    "DEFAULT_PARAM",
    "copy_to_clipboard",
]
