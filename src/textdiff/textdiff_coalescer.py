"""Merge classified tokens into maximal segments."""

from typing import Iterable, List, Tuple

from textdiff.textdiff_types import SegmentStatus, TextSegment


class TextDiffCoalescer:
    """Build segments from runs of tokens that share a status."""

    def coalesce(self, classified: Iterable[Tuple[SegmentStatus, str]]) -> List[TextSegment]:
        """
        Concatenate consecutive same-status tokens into single segments.

        Args:
            classified: (status, token) pairs in output order

        Returns:
            Segments where no two neighbours share a status
        """
        segments: List[TextSegment] = []
        current_status: SegmentStatus | None = None
        parts: List[str] = []

        for status, token in classified:
            if not token:
                continue

            if status is not current_status:
                if parts and current_status is not None:
                    segments.append(TextSegment("".join(parts), current_status))

                current_status = status
                parts = []

            parts.append(token)

        if parts and current_status is not None:
            segments.append(TextSegment("".join(parts), current_status))

        return segments

    def merge(self, segments: Iterable[TextSegment]) -> List[TextSegment]:
        """
        Re-coalesce an existing list of segments.

        Args:
            segments: Segments that may contain empty values or same-status neighbours

        Returns:
            Maximal segments covering the same text
        """
        return self.coalesce((segment.status, segment.value) for segment in segments)
