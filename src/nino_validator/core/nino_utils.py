"""
NINO Utilities - Single Source of Truth
=======================================

Normalization, format validation and benefit-day derivation for UK National
Insurance Numbers (NINOs). Every other module calls into these functions
rather than re-implementing the format rules.

A NINO is laid out as::

    LL NNNNNN S
    |  |      +-- optional suffix: A, B, C, D or a space
    |  +--------- six digits
    +------------ two prefix letters

Two rulesets share one grammar:

* lenient - raw input of at least 8 characters, tolerant of case and
  embedded spaces;
* strict  - raw input of exactly 9 characters.
"""

import logging
import string
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, FrozenSet, List, Optional

from ..config import get_config
from ..exceptions import InvalidNinoError

logger = logging.getLogger(__name__)


# =============================================================================
# NINO CONSTANTS
# =============================================================================

class NINOConstants:
    """Immutable NINO format constants."""

    BODY_LENGTH: int = 8
    FULL_LENGTH: int = 9
    MIN_RAW_LENGTH: int = 8
    STRICT_RAW_LENGTH: int = 9

    PREFIX_LENGTH: int = 2
    DIGITS_START: int = 2
    DIGITS_END: int = 8

    # Benefit day is taken from the last two digits of the numeric block
    DAY_DIGITS_START: int = 6
    DAY_DIGITS_END: int = 8
    DAY_BAND_WIDTH: int = 20

    LETTERS: FrozenSet[str] = frozenset(string.ascii_uppercase)
    DIGITS: FrozenSet[str] = frozenset(string.digits)

    INVALID_FIRST_LETTERS: FrozenSet[str] = frozenset("DFIQUV")
    INVALID_SECOND_LETTERS: FrozenSet[str] = frozenset("DFIOQUV")
    INVALID_PREFIXES: FrozenSet[str] = frozenset(
        {"BG", "GB", "NK", "KN", "TN", "NT", "ZZ"}
    )

    VALID_SUFFIXES: FrozenSet[str] = frozenset("ABCD ")


NINO_BODY_LENGTH = NINOConstants.BODY_LENGTH
NINO_FULL_LENGTH = NINOConstants.FULL_LENGTH
NINO_INVALID_PREFIXES = NINOConstants.INVALID_PREFIXES
NINO_VALID_SUFFIXES = NINOConstants.VALID_SUFFIXES

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


class Weekday(IntEnum):
    """Day of week, ISO numbering (Monday = 1)."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


# =============================================================================
# NORMALIZATION
# =============================================================================

def normalize_nino(raw: Optional[str]) -> Optional[str]:
    """
    Standardise input before validation or storage.

    Removes every space character and uppercases ASCII letters. Casing is
    locale independent: non-ASCII characters are left as they are and will
    later fail the grammar.

    Args:
        raw: Raw NINO input, or None

    Returns:
        Normalized string, or None when the input is None

    Examples:
        >>> normalize_nino("aa 37 07 73 a")
        'AA370773A'
        >>> normalize_nino(None) is None
        True
    """
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise TypeError(f"expected str, got {type(raw).__name__}")
    return raw.replace(" ", "").translate(_ASCII_UPPER)


def normalize_nino_strict(raw: Optional[str]) -> Optional[str]:
    """
    Normalize input into the fixed-width strict form.

    A normalized value shorter than 9 characters gets exactly one trailing
    space, which stands for "no suffix".

    Examples:
        >>> normalize_nino_strict("aa370773")
        'AA370773 '
    """
    normalized = normalize_nino(raw)
    if normalized is None:
        return None
    if len(normalized) < NINO_FULL_LENGTH:
        return normalized + " "
    return normalized


def mask_nino(value: Optional[str]) -> str:
    """
    Render a NINO-like value for log output.

    When redaction is enabled in the logging configuration only the prefix
    letters are kept; the rest is replaced with '*'.
    """
    if value is None:
        return "None"
    if not isinstance(value, str):
        return f"<{type(value).__name__}>"
    if not get_config().logging.redact_values:
        return repr(value)
    visible = value[:NINOConstants.PREFIX_LENGTH]
    return repr(visible + "*" * (len(value) - len(visible)))


# =============================================================================
# GRAMMAR
# =============================================================================

def _has_valid_length(normalized: str) -> bool:
    return len(normalized) in (NINO_BODY_LENGTH, NINO_FULL_LENGTH)


def _has_valid_prefix_letters(normalized: str) -> bool:
    if len(normalized) < NINOConstants.PREFIX_LENGTH:
        return False
    first, second = normalized[0], normalized[1]
    return (
        first in NINOConstants.LETTERS
        and second in NINOConstants.LETTERS
        and first not in NINOConstants.INVALID_FIRST_LETTERS
        and second not in NINOConstants.INVALID_SECOND_LETTERS
    )


def _has_banned_prefix(normalized: str) -> bool:
    return normalized[:NINOConstants.PREFIX_LENGTH] in NINO_INVALID_PREFIXES


def _has_valid_digits(normalized: str) -> bool:
    digits = normalized[NINOConstants.DIGITS_START:NINOConstants.DIGITS_END]
    if len(digits) != NINOConstants.DIGITS_END - NINOConstants.DIGITS_START:
        return False
    return all(c in NINOConstants.DIGITS for c in digits)


def _has_valid_suffix(normalized: str) -> bool:
    suffix = normalized[NINO_BODY_LENGTH:]
    return suffix == "" or (len(suffix) == 1 and suffix in NINO_VALID_SUFFIXES)


def _matches_grammar(normalized: str) -> bool:
    """Full match of a normalized value against the NINO layout."""
    return (
        _has_valid_length(normalized)
        and _has_valid_prefix_letters(normalized)
        and not _has_banned_prefix(normalized)
        and _has_valid_digits(normalized)
        and _has_valid_suffix(normalized)
    )


# =============================================================================
# NINO VALIDATION
# =============================================================================

def validate_nino(raw: Optional[str]) -> bool:
    """
    Lenient NINO validation.

    Checks:
    1. Input is a string (None is rejected)
    2. Raw input is at least 8 characters, measured before spaces are removed
    3. Normalized input matches the NINO grammar

    Args:
        raw: NINO input, any case, may contain spaces

    Returns:
        True if the input is a valid NINO, False otherwise
    """
    if not isinstance(raw, str):
        return False
    if len(raw) < NINOConstants.MIN_RAW_LENGTH:
        logger.debug(f"Rejected {mask_nino(raw)}: shorter than {NINOConstants.MIN_RAW_LENGTH} characters")
        return False
    if not _matches_grammar(normalize_nino(raw)):
        logger.debug(f"Rejected {mask_nino(raw)}: does not match NINO format")
        return False
    return True


def validate_nino_strict(raw: Optional[str]) -> bool:
    """
    Strict NINO validation.

    Same grammar as validate_nino(), but the raw input must be exactly
    9 characters long, so the suffix (or a trailing space standing in for
    it) has to be supplied explicitly.
    """
    if not isinstance(raw, str):
        return False
    if len(raw) != NINOConstants.STRICT_RAW_LENGTH:
        logger.debug(f"Rejected {mask_nino(raw)}: strict form must be {NINOConstants.STRICT_RAW_LENGTH} characters")
        return False
    if not _matches_grammar(normalize_nino(raw)):
        logger.debug(f"Rejected {mask_nino(raw)}: does not match NINO format")
        return False
    return True


@dataclass
class NINOValidationResult:
    """Rule-by-rule breakdown of a NINO validation."""
    raw: Optional[str]
    nino: Optional[str]
    is_valid_length: bool
    has_valid_prefix_letters: bool
    has_banned_prefix: bool
    has_valid_digits: bool
    has_valid_suffix: bool
    is_valid: bool
    is_valid_strict: bool
    errors: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return (
            f"NINOValidationResult(nino={mask_nino(self.nino)}, "
            f"is_valid={self.is_valid}, is_valid_strict={self.is_valid_strict}, "
            f"errors={self.errors!r})"
        )

    def to_dict(self) -> Dict:
        return {
            'nino': self.nino,
            'is_valid_length': self.is_valid_length,
            'has_valid_prefix_letters': self.has_valid_prefix_letters,
            'has_banned_prefix': self.has_banned_prefix,
            'has_valid_digits': self.has_valid_digits,
            'has_valid_suffix': self.has_valid_suffix,
            'is_valid': self.is_valid,
            'is_valid_strict': self.is_valid_strict,
            'errors': list(self.errors),
        }


def inspect_nino(raw: Optional[str]) -> NINOValidationResult:
    """
    Comprehensive NINO validation report.

    Unlike validate_nino(), every rule is evaluated so callers can tell the
    user why a value was rejected. The raw-length gates are reported as
    errors alongside the grammar rules.

    Args:
        raw: NINO input to inspect

    Returns:
        NINOValidationResult with all validation details
    """
    if not isinstance(raw, str):
        return NINOValidationResult(
            raw=raw,
            nino=None,
            is_valid_length=False,
            has_valid_prefix_letters=False,
            has_banned_prefix=False,
            has_valid_digits=False,
            has_valid_suffix=False,
            is_valid=False,
            is_valid_strict=False,
            errors=["input is not a string"],
        )

    normalized = normalize_nino(raw)
    errors = []

    if len(raw) < NINOConstants.MIN_RAW_LENGTH:
        errors.append(f"input shorter than {NINOConstants.MIN_RAW_LENGTH} characters")

    is_valid_length = _has_valid_length(normalized)
    if not is_valid_length:
        errors.append(f"expected {NINO_BODY_LENGTH} or {NINO_FULL_LENGTH} characters, got {len(normalized)}")

    has_valid_prefix_letters = _has_valid_prefix_letters(normalized)
    if not has_valid_prefix_letters:
        errors.append("invalid prefix letters")

    has_banned_prefix = _has_banned_prefix(normalized)
    if has_banned_prefix:
        errors.append(f"prefix {normalized[:NINOConstants.PREFIX_LENGTH]} is not allocated")

    has_valid_digits = _has_valid_digits(normalized)
    if not has_valid_digits:
        errors.append("characters 3-8 must be digits")

    has_valid_suffix = _has_valid_suffix(normalized)
    if not has_valid_suffix:
        errors.append("suffix must be A, B, C or D")

    return NINOValidationResult(
        raw=raw,
        nino=normalized,
        is_valid_length=is_valid_length,
        has_valid_prefix_letters=has_valid_prefix_letters,
        has_banned_prefix=has_banned_prefix,
        has_valid_digits=has_valid_digits,
        has_valid_suffix=has_valid_suffix,
        is_valid=validate_nino(raw),
        is_valid_strict=validate_nino_strict(raw),
        errors=errors,
    )


# =============================================================================
# CANONICAL FORMS
# =============================================================================

def get_form_nino(raw: Optional[str]) -> Optional[str]:
    """
    Validate a NINO and return it uppercased and space-stripped for display.

    None and the empty string are passed through without validation, for
    callers where no value was supplied.

    Raises:
        InvalidNinoError: if a non-empty input is not a valid NINO

    Examples:
        >>> get_form_nino("aa 37 07 73 a")
        'AA370773A'
    """
    if raw is not None and raw != "" and not validate_nino(raw):
        raise InvalidNinoError()
    return normalize_nino(raw)


def get_strict_form_nino(raw: Optional[str]) -> Optional[str]:
    """
    Like get_form_nino(), but returns the 9-character strict form.

    Examples:
        >>> get_strict_form_nino("AA370773")
        'AA370773 '
    """
    if raw is not None and raw != "" and not validate_nino(raw):
        raise InvalidNinoError()
    return normalize_nino_strict(raw)


# =============================================================================
# BENEFIT DAY
# =============================================================================

def day_of_week(raw: Optional[str]) -> Weekday:
    """
    Return the benefit payment day for a NINO.

    The last two digits select a band of 20: 00-19 Monday, 20-39 Tuesday,
    40-59 Wednesday, 60-79 Thursday, 80-99 Friday. Saturday and Sunday are
    never returned.

    Raises:
        InvalidNinoError: if the input is None or not a valid NINO
    """
    normalized = normalize_nino(raw) if isinstance(raw, str) else None
    if normalized is None or not validate_nino(normalized):
        raise InvalidNinoError()
    digits = normalized[NINOConstants.DAY_DIGITS_START:NINOConstants.DAY_DIGITS_END]
    return Weekday(int(digits) // NINOConstants.DAY_BAND_WIDTH + 1)
