"""CLI commands."""

from .enhance import improve, analyze, diff
from .history import history
from .share import share, open_link

__all__ = [
    "improve",
    "analyze",
    "diff",
    "history",
    "share",
    "open_link",
]
