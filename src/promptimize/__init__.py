"""
Promptimize - heuristic prompt improvement with a versioned history

Improves free-text prompts with a deterministic rule pipeline, scores their
quality, keeps a small versioned history of edits, and shares results as
URL-safe tokens.

Basic Usage:
    >>> from promptimize import Promptimize
    >>> app = Promptimize()
    >>>
    >>> # Improve a prompt (recorded in history)
    >>> result = await app.improve("Write a poem about autumn")
    >>> print(result.improved_prompt)
    >>>
    >>> # Score a prompt
    >>> print(app.analyze("Write a poem").score)
    >>>
    >>> # Share the latest chat
    >>> url = app.share_url(app.history[0].id)

For more control, use the individual modules:
    - promptimize.enhancement: Rule pipeline, analyzer, simulated latency
    - promptimize.control: History store, storage backends, diffs
    - promptimize.sharing: Share tokens and clipboard
    - promptimize.api: REST API server
    - promptimize.cli: Command-line interface
"""

import asyncio
from typing import Optional, List

from .core.types import (
    Chat,
    AnalysisResult,
    DiffToken,
    VersionDiff,
    SharePayload,
    DecodeResult,
)
from .core.config import Settings, get_settings
from .core.exceptions import (
    PromptimizeError,
    EmptyInputError,
    StorageParseError,
    StorageWriteError,
    ClipboardError,
    DecodeError,
    ImprovementInProgressError,
    ImprovementCancelledError,
)
from .enhancement import (
    PromptEnhancer,
    PromptAnalyzer,
    ImprovementConfig,
    ImprovementResult,
)
from .control import (
    HistoryStore,
    HistoryBackend,
    FileHistoryBackend,
    MemoryHistoryBackend,
    render_diff,
)
from .sharing import (
    encode,
    decode,
    try_decode,
    build_share_url,
    token_from_url,
    copy_to_clipboard,
    DEFAULT_PARAM,
)

__version__ = "1.0.0"
__all__ = [
    # Main class
    "Promptimize",
    # Core types
    "Chat",
    "AnalysisResult",
    "DiffToken",
    "VersionDiff",
    "SharePayload",
    "DecodeResult",
    "ImprovementResult",
    # Exceptions
    "PromptimizeError",
    "EmptyInputError",
    "StorageParseError",
    "StorageWriteError",
    "ClipboardError",
    "DecodeError",
    "ImprovementInProgressError",
    "ImprovementCancelledError",
    # Individual components (for advanced use)
    "PromptEnhancer",
    "PromptAnalyzer",
    "HistoryStore",
    "HistoryBackend",
    "FileHistoryBackend",
    "MemoryHistoryBackend",
    # Functions
    "render_diff",
    "encode",
    "decode",
]


class Promptimize:
    """
    Main interface tying the enhancer, the history store and sharing together.

    Example:
        >>> app = Promptimize(backend=MemoryHistoryBackend(), delay=0)
        >>> result = app.improve_sync("Write a poem")
        >>> app.history[0].versions
    """

    def __init__(
        self,
        backend: Optional[HistoryBackend] = None,
        delay: float = 1.5,
        share_base_url: str = "http://localhost:8000/",
        share_param: str = DEFAULT_PARAM,
    ):
        """
        Initialize the application core.

        Args:
            backend: Durable storage for history (None for in-memory)
            delay: Simulated improvement latency in seconds
            share_base_url: URL that share links point at
            share_param: Query parameter carrying the share token
        """
        self.backend = backend or MemoryHistoryBackend()
        self.share_base_url = share_base_url
        self.share_param = share_param

        self.enhancer = PromptEnhancer(config=ImprovementConfig(delay=delay))
        self._store: Optional[HistoryStore] = None

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Promptimize":
        """Build an instance with file storage from settings."""
        settings = settings or get_settings()
        return cls(
            backend=FileHistoryBackend(
                settings.history.storage_dir,
                key=settings.history.storage_key
            ),
            delay=settings.enhancement.improve_delay,
            share_base_url=settings.share.base_url,
            share_param=settings.share.param,
        )

    @property
    def store(self) -> HistoryStore:
        """Get or create the history store (loads storage on first use)."""
        if self._store is None:
            self._store = HistoryStore(self.backend)
        return self._store

    # Improvement
    async def improve(self, prompt: str) -> ImprovementResult:
        """
        Improve a prompt and record it in history.

        Args:
            prompt: The prompt as typed

        Returns:
            ImprovementResult with the improved text, the input's analysis
            and the chat it was recorded in

        Raises:
            EmptyInputError: If the prompt is blank
            ImprovementInProgressError: If an improvement is already pending
        """
        result = await self.enhancer.improve(prompt)
        result.chat = self.store.add(prompt, result.improved_prompt)
        return result

    def improve_sync(self, prompt: str) -> ImprovementResult:
        """Synchronous version of improve."""
        return asyncio.run(self.improve(prompt))

    def enhance(self, prompt: str) -> str:
        """Rewrite a prompt without delay or history."""
        return self.enhancer.enhance(prompt)

    def analyze(self, prompt: str) -> AnalysisResult:
        """Score a prompt and list what it is missing."""
        return self.enhancer.analyze(prompt)

    def diff(self, original: str, improved: str) -> List[DiffToken]:
        """Word-level diff of improved text against the original."""
        return render_diff(original, improved)

    # History
    @property
    def history(self) -> List[Chat]:
        """All chats, most recent first."""
        return self.store.chats

    def favorites(self) -> List[Chat]:
        return self.store.favorites()

    def get_chat(self, chat_id: str) -> Optional[Chat]:
        return self.store.get(chat_id)

    def toggle_favorite(self, chat_id: str) -> Optional[Chat]:
        return self.store.toggle_favorite(chat_id)

    def delete_chat(self, chat_id: str) -> bool:
        return self.store.delete(chat_id)

    def versions(self, chat_id: str) -> Optional[List[VersionDiff]]:
        return self.store.versions(chat_id)

    # Sharing
    def share_token(self, chat_id: str) -> Optional[str]:
        """Encode a chat's prompt and latest improvement as a token."""
        chat = self.store.get(chat_id)
        if chat is None:
            return None
        return encode(chat.prompt, chat.improved)

    def share_url(self, chat_id: str) -> Optional[str]:
        """Build a share link for a chat."""
        token = self.share_token(chat_id)
        if token is None:
            return None
        return build_share_url(self.share_base_url, token, self.share_param)

    def open_shared(self, url_or_token: str) -> Optional[Chat]:
        """
        Load a shared pair into history.

        A missing or malformed token is ignored.

        Returns:
            The chat the pair was recorded in, or None
        """
        token = token_from_url(url_or_token, self.share_param)
        if token is None:
            return None

        result = try_decode(token)
        if not result.ok:
            return None

        payload = result.value
        return self.store.add(payload.prompt, payload.improved)

    # Clipboard
    def copy(self, text: str) -> None:
        """
        Copy text to the clipboard.

        Raises:
            ClipboardError: If the clipboard is unavailable
        """
        copy_to_clipboard(text)
