"""Bounded, most-recent-first chat history."""

import logging
from typing import Callable, Iterator, List, Optional

from ..core.types import Chat, VersionDiff, now_ms
from ..core.exceptions import StorageParseError, StorageWriteError
from .diff import render_versions
from .storage import HistoryBackend, MemoryHistoryBackend, parse_history, serialize_history

logger = logging.getLogger(__name__)

MAX_HISTORY = 5


class HistoryStore:
    """
    Ordered collection of at most ``MAX_HISTORY`` chats, newest first.

    Every mutation writes the whole list back to the backend. Only the head
    chat is considered for merging: re-submitting an older prompt that is no
    longer at position 0 creates a new chat.
    """

    def __init__(
        self,
        backend: Optional[HistoryBackend] = None,
        clock: Callable[[], int] = now_ms,
        autoload: bool = True
    ):
        """
        Initialize the store.

        Args:
            backend: Storage backend (defaults to in-memory)
            clock: Returns the current time in epoch milliseconds
            autoload: Read the backend immediately
        """
        self.backend = backend or MemoryHistoryBackend()
        self.clock = clock
        self._chats: List[Chat] = []
        if autoload:
            self.load()

    def load(self) -> List[Chat]:
        """
        Replace in-memory state with the stored history.

        An absent or corrupt record yields an empty history.
        """
        try:
            chats = parse_history(self.backend.load(), self.backend.key)
        except StorageParseError as e:
            if e.cause is not None:
                logger.warning("Discarding stored history: %s", e)
            chats = []

        self._chats = chats[:MAX_HISTORY]
        return self.chats

    @property
    def chats(self) -> List[Chat]:
        """Detached copies of all chats, newest first."""
        return [c.copy() for c in self._chats]

    @property
    def head(self) -> Optional[Chat]:
        return self._chats[0].copy() if self._chats else None

    def __len__(self) -> int:
        return len(self._chats)

    def __iter__(self) -> Iterator[Chat]:
        return iter(self.chats)

    def get(self, chat_id: str) -> Optional[Chat]:
        """Get a chat by id."""
        chat = self._find(chat_id)
        return chat.copy() if chat else None

    def favorites(self) -> List[Chat]:
        """Favorited chats in history order."""
        return [c.copy() for c in self._chats if c.favorited]

    def versions(self, chat_id: str) -> Optional[List[VersionDiff]]:
        """Diff every version of a chat against its prompt."""
        chat = self._find(chat_id)
        return render_versions(chat) if chat else None

    def add(self, prompt_text: str, improved_text: str) -> Chat:
        """
        Record an improvement.

        Merges into the head chat when its prompt matches (ignoring
        surrounding whitespace), otherwise inserts a new chat at the head.

        Args:
            prompt_text: The prompt as the user wrote it
            improved_text: The improved text

        Returns:
            The merged or created chat
        """
        head = self._chats[0] if self._chats else None

        if head is not None and head.prompt.strip() == prompt_text.strip():
            if not head.versions:
                head.versions = [head.improved]
            head.improved = improved_text
            head.versions.append(improved_text)
            head.created_at = self.clock()
            chat = head
            logger.info("Merged version %d into chat %s", len(head.versions), head.id)
        else:
            chat = Chat(
                prompt=prompt_text,
                improved=improved_text,
                versions=[improved_text],
                created_at=self.clock()
            )
            self._chats.insert(0, chat)
            logger.info("Created chat %s", chat.id)

        del self._chats[MAX_HISTORY:]
        self._persist()
        return chat.copy()

    def toggle_favorite(self, chat_id: str) -> Optional[Chat]:
        """
        Flip the favorited flag of a chat.

        Returns:
            The updated chat, or None if no chat has that id
        """
        chat = self._find(chat_id)
        if chat is None:
            return None
        chat.favorited = not chat.favorited
        logger.info("Chat %s favorited=%s", chat_id, chat.favorited)
        self._persist()
        return chat.copy()

    def delete(self, chat_id: str) -> bool:
        """
        Remove a chat.

        Returns:
            True if a chat was removed; an unknown id changes nothing
        """
        chat = self._find(chat_id)
        if chat is None:
            return False
        self._chats.remove(chat)
        logger.info("Deleted chat %s", chat_id)
        self._persist()
        return True

    def _find(self, chat_id: str) -> Optional[Chat]:
        for chat in self._chats:
            if chat.id == chat_id:
                return chat
        return None

    def _persist(self) -> None:
        try:
            self.backend.save(serialize_history(self._chats))
        except StorageWriteError as e:
            # In-memory state stays authoritative
            logger.warning("History not persisted: %s", e)
