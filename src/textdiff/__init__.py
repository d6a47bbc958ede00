"""
Text differencing for memory content.

This package compares two versions of a text at character, word or line
granularity and returns ordered segments of unchanged, added and removed text.
"""

from textdiff.textdiff_aligner import TextDiffAligner
from textdiff.textdiff_changes import create_content_changes
from textdiff.textdiff_coalescer import TextDiffCoalescer
from textdiff.textdiff_engine import (
    TextDiffEngine,
    compare,
    compare_by_character,
    compare_by_line,
    compare_by_word,
)
from textdiff.textdiff_exceptions import (
    TextDiffError,
    TextDiffResourceExceededError,
    TextDiffSettingsError,
)
from textdiff.textdiff_settings import TextDiffSettings
from textdiff.textdiff_tokenizer import TextDiffTokenizer
from textdiff.textdiff_types import (
    ContentChange,
    Granularity,
    SegmentStatus,
    TextDiffStats,
    TextSegment,
    reconstruct_new_text,
    reconstruct_old_text,
    segments_to_dicts,
)

__all__ = [
    # Exceptions
    'TextDiffError',
    'TextDiffResourceExceededError',
    'TextDiffSettingsError',
    # Types
    'Granularity',
    'SegmentStatus',
    'TextSegment',
    'ContentChange',
    'TextDiffStats',
    'TextDiffSettings',
    'reconstruct_old_text',
    'reconstruct_new_text',
    'segments_to_dicts',
    # Core classes
    'TextDiffTokenizer',
    'TextDiffAligner',
    'TextDiffCoalescer',
    'TextDiffEngine',
    # Functions
    'compare',
    'compare_by_character',
    'compare_by_word',
    'compare_by_line',
    'create_content_changes',
]
