"""Tests for control module - diff, storage backends and history."""

import json
import pytest

from promptimize.core.types import Chat
from promptimize.core.exceptions import StorageParseError, StorageWriteError
from promptimize.control import (
    HistoryStore,
    MAX_HISTORY,
    FileHistoryBackend,
    MemoryHistoryBackend,
    decode_history,
    parse_history,
    serialize_history,
    render_diff,
    render_versions,
    tokenize,
)


def _record(chat_id, prompt, improved, **extra):
    record = {"id": chat_id, "prompt": prompt, "improved": improved}
    record.update(extra)
    return record


class TestDiff:
    """Tests for word-level diff."""

    def test_tokenize_keeps_whitespace(self):
        assert tokenize("a  b\nc") == ["a", "  ", "b", "\n", "c"]

    def test_tokenize_drops_empty(self):
        assert tokenize(" a ") == [" ", "a", " "]
        assert tokenize("") == []

    def test_inserted_word(self):
        tokens = render_diff("hello world", "hello there world")
        assert [(t.text, t.added) for t in tokens] == [
            ("hello", False),
            (" ", False),
            ("there", True),
            (" ", False),
            ("world", False),
        ]

    def test_duplicates_consume_counts(self):
        """Test each original word matches at most once."""
        tokens = render_diff("the cat", "the the cat")
        words = [(t.text, t.added) for t in tokens if not t.text.isspace()]
        assert words == [("the", False), ("the", True), ("cat", False)]

    def test_moved_words_unchanged(self):
        tokens = render_diff("a b c", "c b a")
        assert not any(t.added for t in tokens)

    def test_join_reproduces_improved(self):
        improved = "Create  a detailed\tpoem,\nplease"
        tokens = render_diff("poem", improved)
        assert "".join(t.text for t in tokens) == improved

    def test_punctuation_is_part_of_word(self):
        tokens = render_diff("Write a poem", "Write a poem, please")
        added = [t.text for t in tokens if t.added]
        assert added == ["poem,", "please"]

    def test_empty_texts(self):
        assert render_diff("", "") == []
        assert all(t.added for t in render_diff("", "new words") if not t.text.isspace())

    def test_render_versions(self):
        chat = Chat(prompt="Write a poem", improved="Write a short poem",
                    versions=["Write a long poem", "Write a short poem"])
        versions = render_versions(chat)
        assert [v.index for v in versions] == [1, 2]
        assert versions[0].added_words == ["long"]
        assert versions[1].added_words == ["short"]
        assert versions[1].text == "Write a short poem"


class TestStorage:
    """Tests for history parsing and backends."""

    def test_parse_missing(self):
        with pytest.raises(StorageParseError) as exc_info:
            parse_history(None)
        assert exc_info.value.cause is None

    @pytest.mark.parametrize("raw", [
        "not json",
        "{}",
        '"a string"',
        '[{"id": "x"}]',
        '[{"id": "", "prompt": "p", "improved": "i"}]',
        '[{"id": "x", "prompt": "p", "improved": "i", "versions": "nope"}]',
    ])
    def test_parse_corrupt(self, raw):
        with pytest.raises(StorageParseError) as exc_info:
            parse_history(raw, key="k")
        assert exc_info.value.key == "k"
        assert exc_info.value.cause is not None

    def test_parse_fills_missing_versions(self):
        chats = parse_history(json.dumps([_record("a", "p", "i", createdAt=3)]))
        assert chats[0].versions == ["i"]
        assert chats[0].created_at == 3
        assert chats[0].favorited is False

    def test_parse_appends_stale_improved(self):
        raw = json.dumps([_record("a", "p", "new", versions=["old"])])
        assert parse_history(raw)[0].versions == ["old", "new"]

    def test_decode_history(self):
        assert decode_history("[]").value == []
        result = decode_history("garbage")
        assert not result.ok
        assert result.error == "Stored history is corrupt"

    def test_serialize_uses_record_keys(self):
        chat = Chat(id="a", prompt="Zoë", improved="i", created_at=9)
        data = json.loads(serialize_history([chat]))
        assert data == [{
            "id": "a",
            "prompt": "Zoë",
            "improved": "i",
            "versions": ["i"],
            "favorited": False,
            "createdAt": 9,
        }]

    def test_file_backend_round_trip(self, tmp_path):
        backend = FileHistoryBackend(str(tmp_path / "store"), key="promptimize.history")
        assert backend.load() is None

        backend.save("[]")
        assert backend.path == tmp_path / "store" / "promptimize.history.json"
        assert backend.load() == "[]"
        assert not (tmp_path / "store" / "promptimize.history.json.tmp").exists()

    def test_file_backend_write_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")
        backend = FileHistoryBackend(str(blocker / "store"))
        with pytest.raises(StorageWriteError):
            backend.save("[]")

    def test_memory_backend_counts_writes(self):
        backend = MemoryHistoryBackend(initial="[]")
        assert backend.load() == "[]"
        backend.save("[1]")
        assert backend.payload == "[1]"
        assert backend.writes == 1


class FailingBackend(MemoryHistoryBackend):
    """Backend whose writes always fail."""

    def save(self, payload):
        raise StorageWriteError("disk full", location="memory")


class TestHistoryStore:
    """Tests for HistoryStore."""

    def test_add_creates_chat(self, store, memory_backend):
        chat = store.add("Write a poem", "Improved poem")
        assert len(store) == 1
        assert chat.prompt == "Write a poem"
        assert chat.improved == "Improved poem"
        assert chat.versions == ["Improved poem"]
        assert chat.favorited is False
        assert memory_backend.writes == 1

    def test_add_accepts_whitespace_prompt(self, store, memory_backend):
        """Test a whitespace-only prompt from a share link is recorded as-is."""
        chat = store.add("   ", "x")
        assert chat.prompt == "   "
        assert len(store) == 1
        assert memory_backend.writes == 1

    def test_merge_into_head(self, store, clock):
        first = store.add("Write a poem", "v1")
        second = store.add("  Write a poem ", "v2")
        assert len(store) == 1
        assert second.id == first.id
        assert second.prompt == "Write a poem"
        assert second.improved == "v2"
        assert second.versions == ["v1", "v2"]
        assert second.created_at == clock.now
        assert second.created_at > first.created_at

    def test_merge_keeps_favorite(self, store):
        chat = store.add("p", "v1")
        store.toggle_favorite(chat.id)
        assert store.add("p", "v2").favorited is True

    def test_only_head_merges(self, store):
        """Test an older matching prompt gets a new chat."""
        a1 = store.add("A", "X")
        store.add("B", "Y")
        a2 = store.add("A", "Z")

        chats = store.chats
        assert [c.prompt for c in chats] == ["A", "B", "A"]
        assert a2.id != a1.id
        assert chats[0].versions == ["Z"]
        assert chats[2].id == a1.id
        assert chats[2].versions == ["X"]

    def test_bounded(self, store):
        for i in range(MAX_HISTORY + 2):
            store.add(f"prompt {i}", f"improved {i}")
        prompts = [c.prompt for c in store.chats]
        assert len(prompts) == MAX_HISTORY
        assert prompts == ["prompt 6", "prompt 5", "prompt 4", "prompt 3", "prompt 2"]

    def test_persists_whole_list(self, store, memory_backend):
        store.add("A", "X")
        store.add("B", "Y")
        data = json.loads(memory_backend.payload)
        assert [r["prompt"] for r in data] == ["B", "A"]
        assert set(data[0]) == {"id", "prompt", "improved", "versions", "favorited", "createdAt"}

    def test_reload_from_backend(self, store, memory_backend):
        chat = store.add("A", "X")
        reloaded = HistoryStore(memory_backend)
        assert [c.id for c in reloaded.chats] == [chat.id]
        assert reloaded.head.versions == ["X"]

    @pytest.mark.parametrize("raw", [None, "not json", "{}", "[1, 2]"])
    def test_bad_storage_loads_empty(self, raw):
        store = HistoryStore(MemoryHistoryBackend(initial=raw))
        assert store.chats == []
        assert store.head is None

    def test_load_truncates(self):
        raw = json.dumps([_record(str(i), f"p{i}", f"i{i}") for i in range(8)])
        store = HistoryStore(MemoryHistoryBackend(initial=raw))
        assert [c.id for c in store.chats] == ["0", "1", "2", "3", "4"]

    def test_load_without_autoload(self):
        backend = MemoryHistoryBackend(initial=json.dumps([_record("a", "p", "i")]))
        store = HistoryStore(backend, autoload=False)
        assert len(store) == 0
        store.load()
        assert len(store) == 1

    def test_toggle_favorite(self, store, memory_backend):
        chat = store.add("A", "X")
        assert store.toggle_favorite(chat.id).favorited is True
        assert json.loads(memory_backend.payload)[0]["favorited"] is True
        assert store.toggle_favorite(chat.id).favorited is False

    def test_favorites(self, store):
        a = store.add("A", "X")
        store.add("B", "Y")
        c = store.add("C", "Z")
        store.toggle_favorite(a.id)
        store.toggle_favorite(c.id)
        assert [f.prompt for f in store.favorites()] == ["C", "A"]

    def test_delete(self, store, memory_backend):
        a = store.add("A", "X")
        store.add("B", "Y")
        assert store.delete(a.id) is True
        assert [c.prompt for c in store.chats] == ["B"]
        assert len(json.loads(memory_backend.payload)) == 1

    def test_unknown_id_is_noop(self, store, memory_backend):
        store.add("A", "X")
        payload, writes = memory_backend.payload, memory_backend.writes

        assert store.toggle_favorite("missing") is None
        assert store.delete("missing") is False
        assert store.get("missing") is None
        assert store.versions("missing") is None
        assert memory_backend.payload == payload
        assert memory_backend.writes == writes

    def test_write_failure_keeps_memory(self):
        store = HistoryStore(FailingBackend())
        chat = store.add("A", "X")
        assert store.get(chat.id).improved == "X"
        assert len(store) == 1

    def test_returns_copies(self, store):
        store.add("A", "X")
        chat = store.chats[0]
        chat.versions.append("tampered")
        chat.favorited = True
        assert store.head.versions == ["X"]
        assert store.head.favorited is False

    def test_iter(self, store):
        store.add("A", "X")
        store.add("B", "Y")
        assert [c.prompt for c in store] == ["B", "A"]

    def test_versions(self, store):
        chat = store.add("Write a poem", "Write a long poem")
        store.add("Write a poem", "Write a short poem")
        versions = store.versions(chat.id)
        assert [v.text for v in versions] == ["Write a long poem", "Write a short poem"]
        assert versions[1].added_words == ["short"]
