"""Compare two texts at character, word or line granularity."""

import logging
from typing import List

from textdiff.textdiff_aligner import TextDiffAligner
from textdiff.textdiff_changes import create_content_changes
from textdiff.textdiff_coalescer import TextDiffCoalescer
from textdiff.textdiff_settings import TextDiffSettings
from textdiff.textdiff_tokenizer import TextDiffTokenizer
from textdiff.textdiff_types import ContentChange, Granularity, SegmentStatus, TextSegment


class TextDiffEngine:
    """
    Diff engine shared by every granularity.

    The engine holds no per-call state, so one instance can be used from any
    number of threads at once.
    """

    def __init__(self, settings: TextDiffSettings | None = None):
        """
        Initialize the engine.

        Args:
            settings: Size limits to apply (defaults if not given)

        Raises:
            TextDiffSettingsError: If the settings are invalid
        """
        self._settings = settings if settings is not None else TextDiffSettings.create_default()
        self._settings.validate()
        self._tokenizer = TextDiffTokenizer()
        self._aligner = TextDiffAligner(self._settings)
        self._coalescer = TextDiffCoalescer()
        self._logger = logging.getLogger("TextDiffEngine")

    def settings(self) -> TextDiffSettings:
        """Get the settings used by this engine."""
        return self._settings

    def compare(
        self,
        old_text: str,
        new_text: str,
        granularity: Granularity | str = Granularity.CHARACTER
    ) -> List[TextSegment]:
        """
        Compare two texts.

        Args:
            old_text: The original text
            new_text: The changed text
            granularity: Unit size to compare at

        Returns:
            Ordered segments; dropping removed segments rebuilds new_text and dropping
            added segments rebuilds old_text

        Raises:
            TypeError: If either text is not a string
            ValueError: If the granularity is unknown
            TextDiffResourceExceededError: If either text has too many tokens
        """
        if not isinstance(old_text, str) or not isinstance(new_text, str):
            raise TypeError(
                f"Texts must be strings, got {type(old_text).__name__} and {type(new_text).__name__}"
            )

        granularity = Granularity.parse(granularity)

        if old_text == new_text:
            return [TextSegment(old_text, SegmentStatus.UNCHANGED)] if old_text else []

        if not old_text:
            return [TextSegment(new_text, SegmentStatus.ADDED)]

        if not new_text:
            return [TextSegment(old_text, SegmentStatus.REMOVED)]

        old_tokens = self._tokenizer.tokenize(old_text, granularity)
        new_tokens = self._tokenizer.tokenize(new_text, granularity)
        self._logger.debug(
            "Comparing %d old and %d new tokens at %s granularity",
            len(old_tokens), len(new_tokens), granularity.value
        )

        classified = self._aligner.align(old_tokens, new_tokens, granularity)
        return self._coalescer.coalesce(classified)

    def compare_by_character(self, old_text: str, new_text: str) -> List[TextSegment]:
        """Compare two texts one character at a time."""
        return self.compare(old_text, new_text, Granularity.CHARACTER)

    def compare_by_word(self, old_text: str, new_text: str) -> List[TextSegment]:
        """Compare two texts as alternating word and whitespace runs."""
        return self.compare(old_text, new_text, Granularity.WORD)

    def compare_by_line(self, old_text: str, new_text: str) -> List[TextSegment]:
        """Compare two texts line by line, terminators included."""
        return self.compare(old_text, new_text, Granularity.LINE)

    def content_changes(
        self,
        old_text: str,
        new_text: str,
        granularity: Granularity | str = Granularity.CHARACTER
    ) -> List[ContentChange]:
        """
        Describe the edits between two texts as positioned additions and deletions.

        Args:
            old_text: The original text
            new_text: The changed text
            granularity: Unit size to compare at

        Returns:
            List of ContentChange records
        """
        return create_content_changes(self.compare(old_text, new_text, granularity))


_default_engine = TextDiffEngine()


def compare(
    old_text: str,
    new_text: str,
    granularity: Granularity | str = Granularity.CHARACTER
) -> List[TextSegment]:
    """Compare two texts with the default engine."""
    return _default_engine.compare(old_text, new_text, granularity)


def compare_by_character(old_text: str, new_text: str) -> List[TextSegment]:
    """Compare two texts character by character with the default engine."""
    return _default_engine.compare_by_character(old_text, new_text)


def compare_by_word(old_text: str, new_text: str) -> List[TextSegment]:
    """Compare two texts word by word with the default engine."""
    return _default_engine.compare_by_word(old_text, new_text)


def compare_by_line(old_text: str, new_text: str) -> List[TextSegment]:
    """Compare two texts line by line with the default engine."""
    return _default_engine.compare_by_line(old_text, new_text)
