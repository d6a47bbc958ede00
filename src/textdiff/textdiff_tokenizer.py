"""Split text into comparison tokens."""

import re
from typing import List, Pattern

from textdiff.textdiff_types import Granularity


class TextDiffTokenizer:
    """
    Lossless tokenizer for each diff granularity.

    Joining the tokens returned for any text always gives back that text.
    """

    # Alternating runs of non-whitespace and whitespace
    _WORD_PATTERN: Pattern[str] = re.compile(r'\S+|\s+')

    # A line with its terminator, or the unterminated tail
    _LINE_PATTERN: Pattern[str] = re.compile(r'[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+')

    def tokenize(self, text: str, granularity: Granularity) -> List[str]:
        """
        Split text into tokens for the given granularity.

        Args:
            text: Text to split
            granularity: Unit size of the tokens

        Returns:
            List of tokens (empty for empty text)
        """
        if not text:
            return []

        if granularity is Granularity.CHARACTER:
            return list(text)

        if granularity is Granularity.WORD:
            return self._WORD_PATTERN.findall(text)

        if granularity is Granularity.LINE:
            return self._LINE_PATTERN.findall(text)

        raise ValueError(f"Unknown granularity: {granularity!r}")
