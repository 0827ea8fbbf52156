"""
NINO Validator Core Module
==========================

NINO constants, normalization, validation and the NinoField value object.
Single Source of Truth for all NINO format rules.
"""

from .nino_utils import (
    # Constants
    NINOConstants,
    NINO_BODY_LENGTH,
    NINO_FULL_LENGTH,
    NINO_INVALID_PREFIXES,
    NINO_VALID_SUFFIXES,
    Weekday,
    # Normalization
    normalize_nino,
    normalize_nino_strict,
    mask_nino,
    # Validation
    NINOValidationResult,
    validate_nino,
    validate_nino_strict,
    inspect_nino,
    # Canonical forms
    get_form_nino,
    get_strict_form_nino,
    # Benefit day
    day_of_week,
)
from .nino_field import NinoField

__all__ = [
    # Constants
    "NINOConstants",
    "NINO_BODY_LENGTH",
    "NINO_FULL_LENGTH",
    "NINO_INVALID_PREFIXES",
    "NINO_VALID_SUFFIXES",
    "Weekday",
    # Normalization
    "normalize_nino",
    "normalize_nino_strict",
    "mask_nino",
    # Validation
    "NINOValidationResult",
    "validate_nino",
    "validate_nino_strict",
    "inspect_nino",
    # Canonical forms
    "get_form_nino",
    "get_strict_form_nino",
    # Benefit day
    "day_of_week",
    # Value object
    "NinoField",
]
