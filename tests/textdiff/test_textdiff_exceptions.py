"""Tests for text diff exceptions."""

import pytest

from textdiff.textdiff_exceptions import (
    TextDiffError,
    TextDiffResourceExceededError,
    TextDiffSettingsError,
)


class TestTextDiffError:
    """Test base TextDiffError exception."""

    def test_create_simple_error(self):
        """Test creating an error without details."""
        error = TextDiffError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.error_details is None

    def test_create_error_with_details(self):
        """Test creating an error with details."""
        error = TextDiffError("Too big", error_details={'max_tokens': 10})
        assert error.error_details == {'max_tokens': 10}

    def test_error_is_exception(self):
        """Test that TextDiffError is an Exception."""
        assert isinstance(TextDiffError("test"), Exception)


class TestTextDiffSubclasses:
    """Test the TextDiffError subclasses."""

    @pytest.mark.parametrize("error_class", [TextDiffResourceExceededError, TextDiffSettingsError])
    def test_inherits_from_text_diff_error(self, error_class):
        """Test that subclasses can be caught as TextDiffError."""
        with pytest.raises(TextDiffError) as exc_info:
            raise error_class("failure", {'reason': 'test'})

        assert exc_info.value.error_details == {'reason': 'test'}

    def test_subclasses_are_distinct(self):
        """Test that resource and settings errors are not confused."""
        with pytest.raises(TextDiffResourceExceededError):
            try:
                raise TextDiffResourceExceededError("too large")

            except TextDiffSettingsError:
                pytest.fail("Resource error caught as settings error")
