"""Token alignment using a longest common subsequence."""

import difflib
import logging
from typing import Dict, List, Sequence, Tuple

from textdiff.textdiff_exceptions import TextDiffResourceExceededError
from textdiff.textdiff_settings import TextDiffSettings
from textdiff.textdiff_types import Granularity, SegmentStatus


ClassifiedToken = Tuple[SegmentStatus, str]


class TextDiffAligner:
    """
    Classify tokens as unchanged, removed or added.

    Tokens shared by both sequences are found with a longest common subsequence
    (LCS) over token values. When several LCS alignments of equal length exist the
    forward walk resolves them the same way every time:

    - equal tokens at the current positions are always matched (diagonal first);
    - otherwise the old token is removed if that loses no LCS length compared with
      adding the new token, so removals come before additions in a changed region.

    This matches tokens at the earliest possible positions on both sides.

    Work is bounded by three limits, all counted after the common prefix is matched:

    - up to `lcs_cell_limit` old x new cells the exact LCS table is used;
    - above that the common suffix is also matched and the remaining middle is
      aligned with difflib's longest-matching-block heuristic, which is still a valid
      edit script but not guaranteed minimal;
    - if that middle needs more than `greedy_cell_limit` cells, or either side has
      more than `max_tokens` tokens, TextDiffResourceExceededError is raised before
      any alignment work starts.

    difflib's matcher costs roughly one unit per cell on repetitive tokens such as
    characters, so the default `greedy_cell_limit` of 25 000 000 keeps the worst
    accepted comparison to about a second.
    """

    def __init__(self, settings: TextDiffSettings | None = None):
        """
        Initialize the aligner.

        Args:
            settings: Size limits to apply (defaults if not given)
        """
        self._settings = settings if settings is not None else TextDiffSettings.create_default()
        self._logger = logging.getLogger("TextDiffAligner")

    def settings(self) -> TextDiffSettings:
        """Get the settings used by this aligner."""
        return self._settings

    def align(
        self,
        old_tokens: Sequence[str],
        new_tokens: Sequence[str],
        granularity: Granularity | None = None
    ) -> List[ClassifiedToken]:
        """
        Classify every token of both sequences, preserving order on each side.

        Args:
            old_tokens: Tokens of the old text
            new_tokens: Tokens of the new text
            granularity: Granularity the tokens came from (only used in error details)

        Returns:
            List of (status, token) pairs

        Raises:
            TextDiffResourceExceededError: If either side has more than `max_tokens` tokens,
                or the greedy matcher would need more than `greedy_cell_limit` cells
        """
        self._check_size(old_tokens, new_tokens, granularity)

        prefix = 0
        limit = min(len(old_tokens), len(new_tokens))
        while prefix < limit and old_tokens[prefix] == new_tokens[prefix]:
            prefix += 1

        result: List[ClassifiedToken] = [(SegmentStatus.UNCHANGED, token) for token in old_tokens[:prefix]]

        old_rest = old_tokens[prefix:]
        new_rest = new_tokens[prefix:]

        if not old_rest or not new_rest:
            result.extend((SegmentStatus.REMOVED, token) for token in old_rest)
            result.extend((SegmentStatus.ADDED, token) for token in new_rest)
            return result

        cells = len(old_rest) * len(new_rest)
        if cells <= self._settings.lcs_cell_limit:
            result.extend(self._align_lcs(old_rest, new_rest))
            return result

        suffix = 0
        limit = min(len(old_rest), len(new_rest))
        while suffix < limit and old_rest[-1 - suffix] == new_rest[-1 - suffix]:
            suffix += 1

        old_middle = old_rest[:len(old_rest) - suffix]
        new_middle = new_rest[:len(new_rest) - suffix]
        greedy_cells = len(old_middle) * len(new_middle)
        self._check_greedy_cells(old_middle, new_middle, granularity)

        self._logger.debug(
            "Alignment needs %d cells (limit %d), using greedy matcher for %d x %d tokens",
            cells, self._settings.lcs_cell_limit, len(old_middle), len(new_middle)
        )

        if greedy_cells == 0:
            result.extend((SegmentStatus.REMOVED, token) for token in old_middle)
            result.extend((SegmentStatus.ADDED, token) for token in new_middle)

        else:
            result.extend(self._align_greedy(old_middle, new_middle))

        result.extend((SegmentStatus.UNCHANGED, token) for token in old_rest[len(old_rest) - suffix:])
        return result

    def _suggestion(self, granularity: Granularity | None, limit_name: str) -> str:
        """Describe what a caller can do about an oversized comparison."""
        coarser = granularity.coarser() if granularity is not None else None
        if coarser is not None:
            return f"Compare at {coarser.value} granularity or reject the comparison"

        return f"Reject the comparison or raise {limit_name}"

    def _check_size(
        self,
        old_tokens: Sequence[str],
        new_tokens: Sequence[str],
        granularity: Granularity | None
    ) -> None:
        """
        Refuse inputs that are larger than the configured token limit.

        Raises:
            TextDiffResourceExceededError: If either side is too large
        """
        max_tokens = self._settings.max_tokens
        if len(old_tokens) <= max_tokens and len(new_tokens) <= max_tokens:
            return

        raise TextDiffResourceExceededError(
            f"Input exceeds the limit of {max_tokens} tokens",
            {
                'granularity': granularity.value if granularity is not None else None,
                'old_tokens': len(old_tokens),
                'new_tokens': len(new_tokens),
                'max_tokens': max_tokens,
                'suggestion': self._suggestion(granularity, 'max_tokens')
            }
        )

    def _check_greedy_cells(
        self,
        old_tokens: Sequence[str],
        new_tokens: Sequence[str],
        granularity: Granularity | None
    ) -> None:
        """
        Refuse a greedy alignment whose cost would exceed the configured cell budget.

        Raises:
            TextDiffResourceExceededError: If the unmatched middle is too large
        """
        greedy_cell_limit = self._settings.greedy_cell_limit
        cells = len(old_tokens) * len(new_tokens)
        if cells <= greedy_cell_limit:
            return

        raise TextDiffResourceExceededError(
            f"Changed region needs {cells} cells, over the limit of {greedy_cell_limit}",
            {
                'granularity': granularity.value if granularity is not None else None,
                'old_tokens': len(old_tokens),
                'new_tokens': len(new_tokens),
                'cells': cells,
                'greedy_cell_limit': greedy_cell_limit,
                'suggestion': self._suggestion(granularity, 'greedy_cell_limit')
            }
        )

    def _align_lcs(self, old_tokens: Sequence[str], new_tokens: Sequence[str]) -> List[ClassifiedToken]:
        """
        Align two non-empty sequences exactly with a suffix LCS table.

        Args:
            old_tokens: Tokens of the old text
            new_tokens: Tokens of the new text

        Returns:
            List of (status, token) pairs
        """
        # Intern tokens so the inner loop compares ints
        ids: Dict[str, int] = {}
        a = [ids.setdefault(token, len(ids)) for token in old_tokens]
        b = [ids.setdefault(token, len(ids)) for token in new_tokens]
        n = len(a)
        m = len(b)

        # lengths[i][j] is the LCS length of a[i:] and b[j:]
        lengths = [[0] * (m + 1) for _ in range(n + 1)]
        for i in range(n - 1, -1, -1):
            row = lengths[i]
            below = lengths[i + 1]
            ai = a[i]
            for j in range(m - 1, -1, -1):
                if ai == b[j]:
                    row[j] = below[j + 1] + 1

                else:
                    down = below[j]
                    right = row[j + 1]
                    row[j] = down if down >= right else right

        result: List[ClassifiedToken] = []
        i = 0
        j = 0
        while i < n and j < m:
            if a[i] == b[j]:
                result.append((SegmentStatus.UNCHANGED, old_tokens[i]))
                i += 1
                j += 1

            elif lengths[i + 1][j] >= lengths[i][j + 1]:
                result.append((SegmentStatus.REMOVED, old_tokens[i]))
                i += 1

            else:
                result.append((SegmentStatus.ADDED, new_tokens[j]))
                j += 1

        result.extend((SegmentStatus.REMOVED, token) for token in old_tokens[i:])
        result.extend((SegmentStatus.ADDED, token) for token in new_tokens[j:])
        return result

    def _align_greedy(self, old_tokens: Sequence[str], new_tokens: Sequence[str]) -> List[ClassifiedToken]:
        """
        Align two sequences using difflib's matching blocks.

        Args:
            old_tokens: Tokens of the old text
            new_tokens: Tokens of the new text

        Returns:
            List of (status, token) pairs
        """
        # autojunk=False so frequent tokens such as spaces are never skipped
        matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
        result: List[ClassifiedToken] = []

        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == 'equal':
                result.extend((SegmentStatus.UNCHANGED, token) for token in old_tokens[i1:i2])
                continue

            # 'replace', 'delete' and 'insert' all reduce to removals followed by additions
            result.extend((SegmentStatus.REMOVED, token) for token in old_tokens[i1:i2])
            result.extend((SegmentStatus.ADDED, token) for token in new_tokens[j1:j2])

        return result
