"""
NINO Validator Exceptions
=========================

Exception hierarchy shared by the validation core and the configuration layer.
"""

NINO_ERROR_MESSAGE = "Nino Validation Failed"


class NinoError(Exception):
    """Base exception for NINO validator errors."""
    pass


class InvalidNinoError(NinoError, ValueError):
    """Raised when input is not a validly formatted NINO."""

    def __init__(self, message: str = NINO_ERROR_MESSAGE):
        super().__init__(message)


class ConfigurationError(NinoError):
    """Raised when configuration cannot be loaded or saved."""
    pass
