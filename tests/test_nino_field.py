"""
Test Suite for NinoField
========================

Tests for the NinoField value object covering:
- Construction from a raw string (validated) and from parts (trusted)
- Body / suffix accessors
- set_nino atomicity
- Re-validation of stored data
- Benefit day for stored data

Run with: pytest tests/test_nino_field.py -v
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nino_validator import NinoField, Weekday, InvalidNinoError, NINO_ERROR_MESSAGE


TEST_BODY = "AA370773"
TEST_SUFFIX = "A"
TEST_INPUT = TEST_BODY + TEST_SUFFIX
TEST_BODY_LOWER_SPACES = "aa 37 07 73"
TEST_INPUT_SPACES = "AA 37 07 73 A"
TEST_INVALID_BODY = "12345678"
TEST_INVALID_SUFFIX = "E"


# =============================================================================
# TEST FIXTURES
# =============================================================================

@pytest.fixture
def nino():
    """A NinoField built from a valid string."""
    return NinoField.from_string(TEST_INPUT)


@pytest.fixture
def invalid_nino():
    """A NinoField holding unvalidated, bad data."""
    return NinoField(TEST_INVALID_BODY, TEST_SUFFIX)


# =============================================================================
# CONSTRUCTION TESTS
# =============================================================================

class TestFromString:
    """Tests for NinoField.from_string."""

    def test_splits_body_and_suffix(self, nino):
        assert nino.body == TEST_BODY
        assert nino.suffix == TEST_SUFFIX

    def test_normalizes_input(self):
        nino = NinoField.from_string("aa 37 07 73 b")
        assert nino.body == TEST_BODY
        assert nino.suffix == "B"

    def test_no_suffix(self):
        nino = NinoField.from_string(TEST_BODY_LOWER_SPACES)
        assert nino.body == TEST_BODY
        assert nino.suffix == ""

    def test_trailing_space_suffix_becomes_empty(self):
        """Spaces are stripped before splitting."""
        nino = NinoField.from_string("AA370773 ")
        assert nino.suffix == ""

    def test_empty_raises(self):
        with pytest.raises(InvalidNinoError):
            NinoField.from_string("")

    def test_none_raises_with_message(self):
        with pytest.raises(InvalidNinoError) as exc_info:
            NinoField.from_string(None)
        assert str(exc_info.value) == NINO_ERROR_MESSAGE

    def test_invalid_raises(self):
        with pytest.raises(InvalidNinoError):
            NinoField.from_string(TEST_BODY + TEST_INVALID_SUFFIX)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            NinoField.from_string("ZZ370773A")

    def test_round_trip(self):
        """body + suffix reproduces the normalized 9-character input."""
        for value in ("AB123456C", "ab123456d", "OA000000A"):
            nino = NinoField.from_string(value)
            assert nino.body + nino.suffix == value.upper()
            assert str(nino) == value.upper()


class TestTrustedConstruction:
    """Tests for building from pre-split parts."""

    def test_parts_stored_as_given(self):
        nino = NinoField(TEST_BODY, TEST_SUFFIX)
        assert nino.body == TEST_BODY
        assert nino.suffix == TEST_SUFFIX

    def test_invalid_parts_accepted(self, invalid_nino):
        """No validation happens until asked for."""
        assert invalid_nino.body == TEST_INVALID_BODY

    def test_trusted_factory(self):
        assert NinoField.trusted(TEST_BODY, TEST_SUFFIX) == NinoField(TEST_BODY, TEST_SUFFIX)

    def test_trusted_default_suffix(self):
        assert NinoField.trusted(TEST_BODY).suffix == ""

    def test_empty_instance(self):
        nino = NinoField()
        assert nino.body is None
        assert nino.suffix is None
        assert nino.validate_this() is False


# =============================================================================
# SET NINO TESTS
# =============================================================================

class TestSetNino:
    """Tests for NinoField.set_nino."""

    def test_replaces_both_fields(self, nino):
        assert nino.set_nino("ab 12 34 56") is True
        assert nino.body == "AB123456"
        assert nino.suffix == ""

    def test_failure_leaves_fields_unchanged(self, nino):
        assert nino.set_nino("ZZ123456A") is False
        assert nino.body == TEST_BODY
        assert nino.suffix == TEST_SUFFIX

    def test_none_returns_false(self, nino):
        assert nino.set_nino(None) is False
        assert nino.body == TEST_BODY

    def test_non_string_returns_false(self, nino):
        assert nino.set_nino(12345678) is False  # type: ignore


# =============================================================================
# RE-VALIDATION TESTS
# =============================================================================

class TestValidateThis:
    """Tests for validate_this / validate_this_strict."""

    def test_valid_parts(self):
        assert NinoField(TEST_BODY, TEST_SUFFIX).validate_this() is True

    def test_invalid_parts(self, invalid_nino):
        assert invalid_nino.validate_this() is False
        assert invalid_nino.validate_this_strict() is False

    def test_from_spaced_string(self):
        assert NinoField.from_string(TEST_INPUT_SPACES).validate_this() is True

    def test_from_spaced_string_without_suffix(self):
        assert NinoField.from_string(TEST_BODY_LOWER_SPACES).validate_this() is True

    def test_strict_needs_suffix(self):
        """Stored data without a suffix is only 8 characters."""
        nino = NinoField.from_string(TEST_BODY)
        assert nino.validate_this() is True
        assert nino.validate_this_strict() is False

    def test_strict_with_space_suffix(self):
        assert NinoField(TEST_BODY, " ").validate_this_strict() is True

    def test_strict_with_letter_suffix(self, nino):
        assert nino.validate_this_strict() is True

    def test_bad_suffix(self):
        assert NinoField(TEST_BODY, TEST_INVALID_SUFFIX).validate_this() is False


# =============================================================================
# BENEFIT DAY TESTS
# =============================================================================

class TestInstanceDayOfWeek:
    """Tests for NinoField.day_of_week."""

    def test_thursday(self, nino):
        assert nino.day_of_week() == Weekday.THURSDAY

    def test_suffix_ignored(self):
        assert NinoField(TEST_BODY, TEST_INVALID_SUFFIX).day_of_week() == Weekday.THURSDAY

    def test_invalid_body_raises(self, invalid_nino):
        with pytest.raises(InvalidNinoError):
            invalid_nino.day_of_week()

    def test_missing_body_raises(self):
        with pytest.raises(InvalidNinoError):
            NinoField().day_of_week()


# =============================================================================
# VALUE SEMANTICS TESTS
# =============================================================================

class TestValueSemantics:
    """Tests for equality and representation."""

    def test_equality(self, nino):
        assert nino == NinoField(TEST_BODY, TEST_SUFFIX)
        assert nino != NinoField(TEST_BODY, "B")

    def test_not_equal_to_string(self, nino):
        assert nino != TEST_INPUT

    def test_repr_masks_body(self, nino):
        assert "370773" not in repr(nino)
        assert repr(nino).startswith("NinoField(")
