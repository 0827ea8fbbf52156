"""
NINO Field
==========

Value object holding a NINO split into its 8-character body and optional
suffix.

There are two ways to build one:

* ``NinoField.from_string(raw)`` normalizes and validates ``raw`` and raises
  InvalidNinoError when it is not a valid NINO.
* ``NinoField(body, suffix)`` (or ``NinoField.trusted``) stores the parts as
  given for data that has already been validated elsewhere. Nothing is
  checked until validate_this() or validate_this_strict() is called.

Instances are not synchronized; share them between threads read-only.
"""

import logging
from typing import Optional

from ..exceptions import InvalidNinoError
from .nino_utils import (
    NINO_BODY_LENGTH,
    Weekday,
    day_of_week,
    mask_nino,
    normalize_nino,
    validate_nino,
    validate_nino_strict,
)

logger = logging.getLogger(__name__)


class NinoField:
    """A National Insurance Number held as body + suffix."""

    __slots__ = ("_body", "_suffix")

    def __init__(self, body: Optional[str] = None, suffix: Optional[str] = None):
        self._body = body
        self._suffix = suffix

    @classmethod
    def trusted(cls, body: str, suffix: str = "") -> "NinoField":
        """Build from pre-validated parts without checking them."""
        return cls(body, suffix)

    @classmethod
    def from_string(cls, raw: Optional[str]) -> "NinoField":
        """
        Build from a raw NINO string.

        Args:
            raw: NINO input, any case, may contain spaces

        Raises:
            InvalidNinoError: if raw is None, empty or not a valid NINO
        """
        nino = cls()
        if not nino.set_nino(raw):
            raise InvalidNinoError()
        return nino

    def set_nino(self, raw: Optional[str]) -> bool:
        """
        Validate and store a raw NINO.

        Both fields are replaced only when the input is valid; on failure the
        instance is left untouched.

        Returns:
            True if the input was valid and stored, False otherwise
        """
        normalized = normalize_nino(raw) if isinstance(raw, str) else None
        if normalized is None or not validate_nino(normalized):
            logger.debug(f"Not storing {mask_nino(raw)}: invalid NINO")
            return False

        self._body = normalized[:NINO_BODY_LENGTH]
        self._suffix = normalized[NINO_BODY_LENGTH:NINO_BODY_LENGTH + 1]
        return True

    @property
    def body(self) -> Optional[str]:
        """The 8-character letters and digits part, without the suffix."""
        return self._body

    @property
    def suffix(self) -> Optional[str]:
        """The suffix letter (A-D), a space, or '' when there is none."""
        return self._suffix

    def _joined(self) -> str:
        return (self._body or "") + (self._suffix or "")

    def validate_this(self) -> bool:
        """Re-validate the stored body and suffix (lenient rules)."""
        return validate_nino(self._joined())

    def validate_this_strict(self) -> bool:
        """Re-validate the stored body and suffix (strict rules)."""
        return validate_nino_strict(self._joined())

    def day_of_week(self) -> Weekday:
        """
        Benefit day for the stored NINO, derived from the body only.

        Raises:
            InvalidNinoError: if the stored body is missing or invalid
        """
        return day_of_week(self._body)

    def __str__(self) -> str:
        return self._joined()

    def __repr__(self) -> str:
        return f"NinoField(body={mask_nino(self._body)}, suffix={self._suffix!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, NinoField):
            return NotImplemented
        return (self._body, self._suffix) == (other._body, other._suffix)
