"""
MRZ verification models.

This module provides the data models shared by the verification core and the
HTTP service:
- Field layout of the TD3 second line
- Extracted field values and check digits
- Resolved calendar dates
- The immutable validation report and its display projection
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

TD3_LINE_LENGTH = 44


class MRZErrorCode(str, Enum):
    """Reasons a report was produced without running the checks."""

    MISSING_INPUT = "MISSING_INPUT"
    MALFORMED_LENGTH = "MALFORMED_LENGTH"


class FieldSpec(BaseModel):
    """Location of a logical field within a TD3 line."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Field name")
    offset: int = Field(..., ge=0, description="Start position (0-based)")
    length: int = Field(..., ge=1, description="Number of characters")
    check_digit_offset: int = Field(..., ge=0, description="Position of the check digit")

    @property
    def end(self) -> int:
        return self.offset + self.length

    def value(self, line: str) -> str:
        """Slice the field out of ``line``."""
        return line[self.offset : self.end]

    def check_digit(self, line: str) -> str:
        """Return the check digit character, or an empty string past the end of ``line``."""
        return line[self.check_digit_offset : self.check_digit_offset + 1]


class MRZFields(BaseModel):
    """Raw substrings and check digits extracted from a TD3 second line."""

    model_config = ConfigDict(frozen=True)

    document_number: str
    document_number_check: str
    birth_date: str
    birth_date_check: str
    expiry_date: str
    expiry_date_check: str
    personal_number: str
    personal_number_check: str
    composite_check: str

    @property
    def composite_source(self) -> str:
        """The fields and their check digits covered by the composite check digit."""
        return (
            self.document_number
            + self.document_number_check
            + self.birth_date
            + self.birth_date_check
            + self.expiry_date
            + self.expiry_date_check
            + self.personal_number
            + self.personal_number_check
        )


class CalendarDate(BaseModel):
    """A (year, month, day) triple with a four-digit year.

    Month and day are kept exactly as read from the MRZ and may be out of range.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int

    @property
    def is_calendar_date(self) -> bool:
        """Whether month and day name a day that exists."""
        if not 1 <= self.month <= 12:
            return False
        return 1 <= self.day <= calendar.monthrange(self.year, self.month)[1]

    def to_date(self) -> date:
        """Convert to a ``date``, rolling out-of-range months and days into adjacent ones.

        ``CalendarDate(year=1994, month=13, day=1)`` becomes 1995-01-01 and
        ``CalendarDate(year=1994, month=3, day=0)`` becomes 1994-02-28.
        """
        year = self.year + (self.month - 1) // 12
        month = (self.month - 1) % 12 + 1
        return date(year, month, 1) + timedelta(days=self.day - 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class DisplayFields(BaseModel):
    """Values shown to the user; blank unless the document validated."""

    document_number: str = ""
    personal_number: str = ""
    expiry_date: str = ""


class ValidationReport(BaseModel):
    """Outcome of verifying one TD3 second line."""

    model_config = ConfigDict(frozen=True)

    document_number_valid: bool = Field(default=False, description="Document number check digit")
    birth_date_valid: bool = Field(default=False, description="Birth date check digit")
    expiry_date_valid: bool = Field(default=False, description="Expiry date check digit")
    personal_number_valid: bool = Field(default=False, description="Personal number check digit")
    composite_valid: bool = Field(default=False, description="Composite check digit")
    not_expired: bool = Field(default=False, description="Expiry date is today or later")

    document_number: str = Field(default="", description="Document number as printed")
    personal_number: str = Field(default="", description="First 10 characters of the personal number")
    expiry_date: str = Field(default="", description="Expiry date as printed (YYMMDD)")

    error: MRZErrorCode | None = Field(
        default=None, description="Why the checks were not run, if they were not"
    )

    @computed_field  # type: ignore[misc]
    @property
    def is_valid(self) -> bool:
        return (
            self.document_number_valid
            and self.birth_date_valid
            and self.expiry_date_valid
            and self.personal_number_valid
            and self.composite_valid
            and self.not_expired
        )

    @classmethod
    def failed(cls, error: MRZErrorCode) -> ValidationReport:
        """A report with every check false."""
        return cls(error=error)

    def display(self) -> DisplayFields:
        if not self.is_valid:
            return DisplayFields()
        return DisplayFields(
            document_number=self.document_number,
            personal_number=self.personal_number,
            expiry_date=self.expiry_date,
        )
