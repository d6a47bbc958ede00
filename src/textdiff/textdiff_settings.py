"""Configuration for the text diff engine."""

from dataclasses import dataclass
import json
from typing import Any, Dict

from textdiff.textdiff_exceptions import TextDiffSettingsError


@dataclass
class TextDiffSettings:
    """
    Limits applied when aligning two token sequences.

    Attributes:
        max_tokens: Largest token count accepted on either side before a comparison is refused
        lcs_cell_limit: Largest old x new token product solved exactly; larger inputs use
            the greedy matcher
        greedy_cell_limit: Largest old x new token product handed to the greedy matcher;
            larger inputs are refused
    """
    max_tokens: int = 200000
    lcs_cell_limit: int = 4000000
    greedy_cell_limit: int = 25000000

    @classmethod
    def create_default(cls) -> "TextDiffSettings":
        """Create a new TextDiffSettings object with default values."""
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextDiffSettings":
        """
        Create settings from a dictionary, using defaults for missing keys.

        Args:
            data: Dictionary using "maxTokens", "lcsCellLimit" and "greedyCellLimit" keys

        Returns:
            Validated TextDiffSettings

        Raises:
            TextDiffSettingsError: If the data is not a dictionary or holds invalid values
        """
        if not isinstance(data, dict):
            raise TextDiffSettingsError(
                "Settings must be a JSON object",
                {"received_type": type(data).__name__}
            )

        settings = cls.create_default()
        settings.max_tokens = data.get("maxTokens", settings.max_tokens)
        settings.lcs_cell_limit = data.get("lcsCellLimit", settings.lcs_cell_limit)
        settings.greedy_cell_limit = data.get("greedyCellLimit", settings.greedy_cell_limit)
        settings.validate()
        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to their dictionary form."""
        return {
            "maxTokens": self.max_tokens,
            "lcsCellLimit": self.lcs_cell_limit,
            "greedyCellLimit": self.greedy_cell_limit
        }

    def validate(self) -> None:
        """
        Check that every limit is a positive integer.

        Raises:
            TextDiffSettingsError: If any limit is invalid
        """
        limits = (
            ("max_tokens", self.max_tokens),
            ("lcs_cell_limit", self.lcs_cell_limit),
            ("greedy_cell_limit", self.greedy_cell_limit)
        )
        for name, value in limits:
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise TextDiffSettingsError(
                    f"{name} must be a positive integer, got {value!r}",
                    {"setting": name, "value": value}
                )

    @classmethod
    def load(cls, path: str) -> "TextDiffSettings":
        """
        Load settings from file.

        Args:
            path: Path to the settings file

        Returns:
            TextDiffSettings object with loaded values

        Raises:
            TextDiffSettingsError: If the file holds invalid JSON or invalid values
            OSError: If the file cannot be read
        """
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)

            except json.JSONDecodeError as e:
                raise TextDiffSettingsError(
                    f"Invalid settings file: {path}",
                    {"path": path, "reason": str(e)}
                ) from e

        return cls.from_dict(data)

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save the settings file
        """
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)
