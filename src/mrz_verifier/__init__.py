"""
MRZ verifier - check digit and expiry verification for TD3 passport MRZ lines.
"""

__version__ = "0.1.0"

from .exceptions import ConfigurationError, MRZDateError, MRZException, MRZLengthError
from .models import CalendarDate, DisplayFields, MRZErrorCode, MRZFields, ValidationReport
from .validation import MRZValidator, validate, validate_mrz_text

__all__ = [
    "CalendarDate",
    "ConfigurationError",
    "DisplayFields",
    "MRZDateError",
    "MRZErrorCode",
    "MRZException",
    "MRZFields",
    "MRZLengthError",
    "MRZValidator",
    "ValidationReport",
    "validate",
    "validate_mrz_text",
]
