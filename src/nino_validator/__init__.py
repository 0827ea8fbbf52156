"""
NINO Validator
==============

Format validation and canonicalization for UK National Insurance Numbers.

Package Structure:
    nino_validator/
    ├── core/           # NINO constants, validation, NinoField
    ├── config.py       # Logging configuration (env vars, JSON/YAML files)
    └── exceptions.py   # InvalidNinoError, ConfigurationError

Quick Start:
    from nino_validator import validate_nino, get_form_nino, NinoField

    validate_nino("aa 37 07 73 a")        # True
    get_form_nino("aa 37 07 73 a")        # 'AA370773A'

    nino = NinoField.from_string("AA370773A")
    print(nino.body, nino.suffix)         # AA370773 A
    print(nino.day_of_week().name)        # THURSDAY

Version: 1.0.0
"""

__version__ = "1.0.0"
__author__ = "NINO Validator Team"

from .core import (
    NINOConstants,
    NINO_BODY_LENGTH,
    NINO_FULL_LENGTH,
    Weekday,
    normalize_nino,
    normalize_nino_strict,
    mask_nino,
    NINOValidationResult,
    validate_nino,
    validate_nino_strict,
    inspect_nino,
    get_form_nino,
    get_strict_form_nino,
    day_of_week,
    NinoField,
)
from .exceptions import (
    NINO_ERROR_MESSAGE,
    NinoError,
    InvalidNinoError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    "__author__",
    # Core
    "NINOConstants",
    "NINO_BODY_LENGTH",
    "NINO_FULL_LENGTH",
    "Weekday",
    "normalize_nino",
    "normalize_nino_strict",
    "mask_nino",
    "NINOValidationResult",
    "validate_nino",
    "validate_nino_strict",
    "inspect_nino",
    "get_form_nino",
    "get_strict_form_nino",
    "day_of_week",
    "NinoField",
    # Errors
    "NINO_ERROR_MESSAGE",
    "NinoError",
    "InvalidNinoError",
    "ConfigurationError",
]
