"""Shared fixtures and utilities for text diff tests."""

import pytest
from typing import List

from textdiff.textdiff_engine import TextDiffEngine
from textdiff.textdiff_settings import TextDiffSettings
from textdiff.textdiff_types import (
    SegmentStatus,
    TextSegment,
    reconstruct_new_text,
    reconstruct_old_text,
)


@pytest.fixture
def engine():
    """Create a text diff engine with default settings."""
    return TextDiffEngine()


@pytest.fixture
def engine_custom():
    """Factory for text diff engines with custom limits."""
    def _create_engine(
        max_tokens: int = 200000,
        lcs_cell_limit: int = 4000000,
        greedy_cell_limit: int = 25000000
    ):
        return TextDiffEngine(TextDiffSettings(
            max_tokens=max_tokens,
            lcs_cell_limit=lcs_cell_limit,
            greedy_cell_limit=greedy_cell_limit
        ))
    return _create_engine


class TextDiffTestHelpers:
    """Helper utilities for text diff testing."""

    @staticmethod
    def assert_valid_diff(segments: List[TextSegment], old_text: str, new_text: str) -> None:
        """Check reconstruction and maximality of a diff."""
        assert reconstruct_old_text(segments) == old_text
        assert reconstruct_new_text(segments) == new_text
        for segment in segments:
            assert segment.value != ''

        for first, second in zip(segments, segments[1:]):
            assert first.status != second.status

    @staticmethod
    def statuses(segments: List[TextSegment]) -> List[SegmentStatus]:
        """Get the status sequence of a diff."""
        return [segment.status for segment in segments]

    @staticmethod
    def as_pairs(segments: List[TextSegment]) -> List[tuple]:
        """Convert segments to (status value, text) pairs for compact assertions."""
        return [(segment.status.value, segment.value) for segment in segments]


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return TextDiffTestHelpers
