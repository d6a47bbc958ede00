"""Compare two snapshots of the same memory."""

from dataclasses import dataclass, field
import logging
from typing import List

from memory.memory_snapshot import MemorySnapshot
from textdiff.textdiff_changes import create_content_changes
from textdiff.textdiff_engine import TextDiffEngine
from textdiff.textdiff_exceptions import TextDiffResourceExceededError
from textdiff.textdiff_types import ContentChange, Granularity, TextDiffStats, TextSegment


@dataclass
class MemoryContentDiff:
    """Result of comparing the content of two memory snapshots."""

    memory_id: str
    requested_granularity: Granularity
    granularity: Granularity  # Granularity actually used, coarser if the request was too large
    segments: List[TextSegment]
    stats: TextDiffStats = field(default_factory=TextDiffStats)

    @property
    def fell_back(self) -> bool:
        """True if the comparison ran at a coarser granularity than requested."""
        return self.granularity is not self.requested_granularity

    def changes(self) -> List[ContentChange]:
        """Get the additions and deletions positioned in the new content."""
        return create_content_changes(self.segments)


class MemoryComparer:
    """Feed memory snapshots into the diff engine."""

    def __init__(self, engine: TextDiffEngine | None = None, fallback: bool = True):
        """
        Initialize the comparer.

        Args:
            engine: Diff engine to use (a default engine if not given)
            fallback: Retry at a coarser granularity when an input is too large
        """
        self._engine = engine if engine is not None else TextDiffEngine()
        self._fallback = fallback
        self._logger = logging.getLogger("MemoryComparer")

    def compare_content(
        self,
        old: MemorySnapshot,
        new: MemorySnapshot,
        granularity: Granularity | str = Granularity.CHARACTER
    ) -> MemoryContentDiff:
        """
        Compare the content of two snapshots of one memory.

        Args:
            old: Earlier snapshot
            new: Later snapshot
            granularity: Requested unit size

        Returns:
            MemoryContentDiff describing the change

        Raises:
            ValueError: If the snapshots belong to different memories
            TextDiffResourceExceededError: If the content is too large even at line granularity,
                or fallback is disabled
        """
        self._check_same_memory(old, new)
        requested = Granularity.parse(granularity)
        current = requested

        while True:
            try:
                segments = self._engine.compare(old.content, new.content, current)
                break

            except TextDiffResourceExceededError as e:
                coarser = current.coarser()
                if not self._fallback or coarser is None:
                    raise

                self._logger.warning(
                    "Memory %s too large to compare at %s granularity, retrying at %s: %s",
                    old.id, current.value, coarser.value, e
                )
                current = coarser

        return MemoryContentDiff(
            memory_id=old.id,
            requested_granularity=requested,
            granularity=current,
            segments=segments,
            stats=TextDiffStats.from_segments(segments)
        )

    def compare_title(self, old: MemorySnapshot, new: MemorySnapshot) -> List[TextSegment]:
        """
        Compare the titles of two snapshots of one memory, word by word.

        Raises:
            ValueError: If the snapshots belong to different memories
        """
        self._check_same_memory(old, new)
        return self._engine.compare_by_word(old.title, new.title)

    def _check_same_memory(self, old: MemorySnapshot, new: MemorySnapshot) -> None:
        if old.id != new.id:
            raise ValueError(f"Cannot compare different memories: {old.id} and {new.id}")
