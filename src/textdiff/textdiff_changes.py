"""Positional change records derived from diff segments."""

from typing import List, Sequence

from textdiff.textdiff_types import ContentChange, SegmentStatus, TextSegment


def create_content_changes(segments: Sequence[TextSegment]) -> List[ContentChange]:
    """
    Convert segments into additions and deletions positioned in the new text.

    The position only advances over unchanged and added text, so a deletion is
    reported at the offset where its text used to sit. Positions and lengths are
    counted in code points.

    Args:
        segments: Segments produced by a comparison

    Returns:
        List of ContentChange records in segment order
    """
    changes: List[ContentChange] = []
    position = 0

    for segment in segments:
        if segment.status is SegmentStatus.ADDED:
            changes.append(ContentChange(
                type="addition",
                position=position,
                content=segment.value,
                length=len(segment.value)
            ))

        elif segment.status is SegmentStatus.REMOVED:
            changes.append(ContentChange(
                type="deletion",
                position=position,
                content=segment.value,
                length=len(segment.value)
            ))
            continue

        position += len(segment.value)

    return changes
