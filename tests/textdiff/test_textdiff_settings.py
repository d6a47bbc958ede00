"""Tests for text diff settings."""

import json

import pytest

from textdiff.textdiff_exceptions import TextDiffError, TextDiffSettingsError
from textdiff.textdiff_settings import TextDiffSettings


class TestTextDiffSettingsDefaults:
    """Test default settings."""

    def test_create_default(self):
        """Test the default limits."""
        settings = TextDiffSettings.create_default()
        assert settings.max_tokens == 200000
        assert settings.lcs_cell_limit == 4000000
        assert settings.greedy_cell_limit == 25000000

    def test_default_is_valid(self):
        """Test that default settings pass validation."""
        TextDiffSettings.create_default().validate()


class TestTextDiffSettingsValidation:
    """Test settings validation."""

    @pytest.mark.parametrize("value", [0, -1, 1.5, "100", None, True])
    def test_invalid_max_tokens(self, value):
        """Test that non-positive or non-integer limits are rejected."""
        settings = TextDiffSettings(max_tokens=value)

        with pytest.raises(TextDiffSettingsError) as exc_info:
            settings.validate()

        assert exc_info.value.error_details['setting'] == 'max_tokens'

    def test_invalid_cell_limit(self):
        """Test that a zero cell limit is rejected."""
        with pytest.raises(TextDiffSettingsError) as exc_info:
            TextDiffSettings(lcs_cell_limit=0).validate()

        assert exc_info.value.error_details['setting'] == 'lcs_cell_limit'

    def test_invalid_greedy_cell_limit(self):
        """Test that a negative greedy cell limit is rejected."""
        with pytest.raises(TextDiffSettingsError) as exc_info:
            TextDiffSettings(greedy_cell_limit=-10).validate()

        assert exc_info.value.error_details['setting'] == 'greedy_cell_limit'

    def test_settings_error_is_diff_error(self):
        """Test that settings errors are TextDiffErrors."""
        with pytest.raises(TextDiffError):
            TextDiffSettings(max_tokens=-5).validate()


class TestTextDiffSettingsDict:
    """Test dictionary conversion."""

    def test_to_dict(self):
        """Test conversion to the camelCase dictionary form."""
        settings = TextDiffSettings(max_tokens=10, lcs_cell_limit=20)
        assert settings.to_dict() == {"maxTokens": 10, "lcsCellLimit": 20, "greedyCellLimit": 25000000}

    def test_from_dict(self):
        """Test loading both keys."""
        settings = TextDiffSettings.from_dict({"maxTokens": 10, "lcsCellLimit": 20, "greedyCellLimit": 30})
        assert settings == TextDiffSettings(max_tokens=10, lcs_cell_limit=20, greedy_cell_limit=30)

    def test_from_dict_uses_defaults(self):
        """Test that missing keys keep their defaults."""
        settings = TextDiffSettings.from_dict({"maxTokens": 50})
        assert settings.max_tokens == 50
        assert settings.lcs_cell_limit == 4000000

    def test_from_dict_rejects_non_dict(self):
        """Test that a non-object is rejected."""
        with pytest.raises(TextDiffSettingsError) as exc_info:
            TextDiffSettings.from_dict([1, 2])

        assert exc_info.value.error_details['received_type'] == 'list'

    def test_from_dict_validates(self):
        """Test that loaded values are validated."""
        with pytest.raises(TextDiffSettingsError):
            TextDiffSettings.from_dict({"lcsCellLimit": -1})


class TestTextDiffSettingsFile:
    """Test loading and saving settings files."""

    def test_save_and_load(self, tmp_path):
        """Test that saved settings load back unchanged."""
        path = str(tmp_path / "textdiff.json")
        TextDiffSettings(max_tokens=123, lcs_cell_limit=456).save(path)

        assert TextDiffSettings.load(path) == TextDiffSettings(max_tokens=123, lcs_cell_limit=456)

    def test_saved_file_format(self, tmp_path):
        """Test the JSON written to disk."""
        path = tmp_path / "textdiff.json"
        TextDiffSettings(max_tokens=7, lcs_cell_limit=8, greedy_cell_limit=9).save(str(path))

        assert json.loads(path.read_text(encoding='utf-8')) == {"maxTokens": 7, "lcsCellLimit": 8, "greedyCellLimit": 9}

    def test_load_invalid_json(self, tmp_path):
        """Test that malformed JSON raises a settings error."""
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding='utf-8')

        with pytest.raises(TextDiffSettingsError) as exc_info:
            TextDiffSettings.load(str(path))

        assert exc_info.value.error_details['path'] == str(path)

    def test_load_missing_file(self, tmp_path):
        """Test that a missing file raises OSError."""
        with pytest.raises(OSError):
            TextDiffSettings.load(str(tmp_path / "missing.json"))
