"""
Custom exceptions for MRZ verification.

These are raised inside the verification core and converted into failed
checks by the validator; they never escape ``validate``.
"""

from mrz_verifier.models import TD3_LINE_LENGTH


class MRZException(Exception):
    """Base exception class for MRZ handling errors."""

    def __init__(self, message) -> None:
        super().__init__(message)
        self.message = message


class MRZLengthError(MRZException):
    """Raised when an MRZ line does not have the expected TD3 length."""

    def __init__(self, actual, expected=TD3_LINE_LENGTH) -> None:
        super().__init__(f"Expected {expected} characters, found {actual}")
        self.actual = actual
        self.expected = expected


class MRZDateError(MRZException):
    """Raised when a YYMMDD field cannot be read as a date."""

    def __init__(self, value) -> None:
        super().__init__(f"Date field must consist of six digits: {value!r}")
        self.value = value


class ConfigurationError(MRZException):
    """Exception raised for configuration-related errors."""
