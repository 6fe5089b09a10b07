"""Word-level diff of improved text against the original prompt."""

import re
from collections import Counter
from typing import List

from ..core.types import Chat, DiffToken, VersionDiff

_WHITESPACE_RUN = re.compile(r"(\s+)")


def tokenize(text: str) -> List[str]:
    """Split text into words and the whitespace runs between them."""
    return [token for token in _WHITESPACE_RUN.split(text) if token]


def render_diff(original: str, improved: str) -> List[DiffToken]:
    """
    Tag each word of ``improved`` as unchanged or added.

    Words of ``original`` form a multiset; each word of ``improved`` consumes
    one matching copy if any is left, first occurrence first. Position is
    ignored, so moved words still count as unchanged. Whitespace runs are
    passed through untagged.

    Args:
        original: The text the user wrote
        improved: The rewritten text

    Returns:
        Tokens of ``improved`` in order; joining their text gives ``improved``
    """
    remaining = Counter(original.split())
    tokens: List[DiffToken] = []

    for token in tokenize(improved):
        if token.isspace():
            tokens.append(DiffToken(token, added=False))
        elif remaining[token] > 0:
            remaining[token] -= 1
            tokens.append(DiffToken(token, added=False))
        else:
            tokens.append(DiffToken(token, added=True))

    return tokens


def render_versions(chat: Chat) -> List[VersionDiff]:
    """Diff every stored version of a chat against its prompt, oldest first."""
    versions = chat.versions or [chat.improved]
    return [
        VersionDiff(index=i + 1, text=version, tokens=render_diff(chat.prompt, version))
        for i, version in enumerate(versions)
    ]
