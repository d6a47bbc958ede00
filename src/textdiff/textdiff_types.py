"""Shared types for text diff operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence


class Granularity(Enum):
    """Unit size at which two texts are compared."""
    CHARACTER = "character"
    WORD = "word"
    LINE = "line"

    @classmethod
    def parse(cls, value: "Granularity | str") -> "Granularity":
        """
        Convert a granularity name or enum member into a Granularity.

        Args:
            value: Granularity member or one of its names (singular or plural)

        Returns:
            Matching Granularity

        Raises:
            ValueError: If the value does not name a granularity
        """
        if isinstance(value, Granularity):
            return value

        if isinstance(value, str):
            granularity = _GRANULARITY_ALIASES.get(value.strip().lower())
            if granularity is not None:
                return granularity

        raise ValueError(f"Unknown granularity: {value!r}")

    def coarser(self) -> "Granularity | None":
        """Get the next coarser granularity, or None if this is the coarsest."""
        if self is Granularity.CHARACTER:
            return Granularity.WORD

        if self is Granularity.WORD:
            return Granularity.LINE

        return None


_GRANULARITY_ALIASES = {
    "character": Granularity.CHARACTER,
    "characters": Granularity.CHARACTER,
    "char": Granularity.CHARACTER,
    "chars": Granularity.CHARACTER,
    "word": Granularity.WORD,
    "words": Granularity.WORD,
    "line": Granularity.LINE,
    "lines": Granularity.LINE,
}


class SegmentStatus(Enum):
    """Classification of a run of text within a diff."""
    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class TextSegment:
    """
    A maximal run of text sharing one status.

    Attributes:
        value: The exact text covered by this run
        status: Whether the text is unchanged, only in the new text, or only in the old text
    """
    value: str
    status: SegmentStatus

    @property
    def added(self) -> bool:
        """True if this text is present only in the new text."""
        return self.status is SegmentStatus.ADDED

    @property
    def removed(self) -> bool:
        """True if this text is present only in the old text."""
        return self.status is SegmentStatus.REMOVED

    def to_dict(self) -> Dict[str, str]:
        """Convert the segment to a plain dictionary."""
        return {
            "value": self.value,
            "status": self.status.value
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "TextSegment":
        """
        Create a segment from its dictionary form.

        Args:
            data: Dictionary with "value" and "status" keys

        Returns:
            New TextSegment

        Raises:
            ValueError: If required fields are missing or invalid
        """
        missing_fields = [f for f in ("value", "status") if f not in data]
        if missing_fields:
            raise ValueError(f"Missing required fields: {', '.join(missing_fields)}")

        try:
            status = SegmentStatus(data["status"])

        except ValueError as e:
            raise ValueError(f"Invalid segment status: {data['status']}") from e

        return cls(value=data["value"], status=status)


@dataclass(frozen=True)
class ContentChange:
    """
    A positional change within the new text.

    Offsets and lengths count Python code points (`len(str)`), not UTF-16 code
    units, so they differ from JavaScript string indexes after any character
    outside the Basic Multilingual Plane, such as most emoji.

    Attributes:
        type: "addition" or "deletion"
        position: Offset in code points into the new text at which the change applies
        content: The added or deleted text
        length: Length of the content in code points
    """
    type: str
    position: int
    content: str
    length: int


@dataclass(frozen=True)
class TextDiffStats:
    """Summary counts for a diff."""
    added_chars: int = 0
    removed_chars: int = 0
    unchanged_chars: int = 0
    added_segments: int = 0
    removed_segments: int = 0

    @classmethod
    def from_segments(cls, segments: Sequence[TextSegment]) -> "TextDiffStats":
        """
        Summarize a list of segments.

        Args:
            segments: Segments produced by a comparison

        Returns:
            TextDiffStats for the segments
        """
        added_chars = 0
        removed_chars = 0
        unchanged_chars = 0
        added_segments = 0
        removed_segments = 0

        for segment in segments:
            if segment.status is SegmentStatus.ADDED:
                added_chars += len(segment.value)
                added_segments += 1

            elif segment.status is SegmentStatus.REMOVED:
                removed_chars += len(segment.value)
                removed_segments += 1

            else:
                unchanged_chars += len(segment.value)

        return cls(
            added_chars=added_chars,
            removed_chars=removed_chars,
            unchanged_chars=unchanged_chars,
            added_segments=added_segments,
            removed_segments=removed_segments
        )

    @property
    def has_changes(self) -> bool:
        """True if anything was added or removed."""
        return self.added_segments > 0 or self.removed_segments > 0

    @property
    def similarity(self) -> float:
        """Unchanged characters as a fraction of the longer text (1.0 for two empty texts)."""
        longest = max(self.unchanged_chars + self.removed_chars, self.unchanged_chars + self.added_chars)
        if longest == 0:
            return 1.0

        return self.unchanged_chars / longest


def reconstruct_old_text(segments: Sequence[TextSegment]) -> str:
    """Rebuild the old text by dropping added segments."""
    return "".join(s.value for s in segments if s.status is not SegmentStatus.ADDED)


def reconstruct_new_text(segments: Sequence[TextSegment]) -> str:
    """Rebuild the new text by dropping removed segments."""
    return "".join(s.value for s in segments if s.status is not SegmentStatus.REMOVED)


def segments_to_dicts(segments: Sequence[TextSegment]) -> List[Dict[str, str]]:
    """Convert a list of segments to plain dictionaries."""
    return [segment.to_dict() for segment in segments]
