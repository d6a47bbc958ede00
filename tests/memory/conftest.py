"""Shared fixtures for memory tests."""

from datetime import datetime, timezone

import pytest

from memory.memory_comparison import MemoryComparer
from memory.memory_snapshot import MemorySnapshot
from textdiff.textdiff_engine import TextDiffEngine
from textdiff.textdiff_settings import TextDiffSettings


@pytest.fixture
def created_at():
    """Fixed creation time for snapshots."""
    return datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def snapshot(created_at):
    """Create a memory snapshot."""
    return MemorySnapshot(
        id="mem-1",
        title="Trip to the lake",
        content="We drove to the lake.\nThe water was cold.\n",
        created_at=created_at,
        tags=["travel", "family"],
        is_public=False,
        user_id="user-7"
    )


@pytest.fixture
def comparer():
    """Create a memory comparer with the default engine."""
    return MemoryComparer()


@pytest.fixture
def comparer_custom():
    """Factory for memory comparers with a size-limited engine."""
    def _create_comparer(max_tokens: int = 200000, fallback: bool = True):
        engine = TextDiffEngine(TextDiffSettings(max_tokens=max_tokens))
        return MemoryComparer(engine, fallback=fallback)
    return _create_comparer
