"""Shared pytest fixtures for Promptimize tests."""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from promptimize import Promptimize
from promptimize.control import HistoryStore, MemoryHistoryBackend


# Sample prompts for testing
@pytest.fixture
def short_prompt():
    """A short, simple prompt."""
    return "Write a poem"


@pytest.fixture
def short_prompt_improved():
    """What the rule pipeline turns the short prompt into."""
    return (
        "Create a detailed Write a poem, ensuring high quality output, "
        "maintaining a professional and engaging style. Present the information "
        "in a clear, well-structured format, including relevant examples where appropriate"
    )


@pytest.fixture
def rich_prompt():
    """A prompt that satisfies every analysis check except length."""
    return "Give two examples in a friendly tone, formatted as steps, for an audience of beginners"


@pytest.fixture
def vague_prompt():
    """A prompt with vague wording."""
    return "Do a nice poem with examples in a warm tone"


@pytest.fixture
def unicode_prompt():
    """A prompt with non-ASCII and URL-special characters."""
    return "Résumé für Zoë ✨ & friends? 100% #1 a+b=c/d"


class FakeClock:
    """Deterministic millisecond clock."""

    def __init__(self, start=1_700_000_000_000, step=1000):
        self.now = start
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_backend():
    """An empty in-memory history backend."""
    return MemoryHistoryBackend()


@pytest.fixture
def store(memory_backend, clock):
    """A history store over an empty in-memory backend."""
    return HistoryStore(memory_backend, clock=clock)


@pytest.fixture
def core(memory_backend):
    """A Promptimize instance with no latency and in-memory storage."""
    return Promptimize(backend=memory_backend, delay=0)

