"""
YYMMDD date interpretation for MRZ date fields.
"""

from __future__ import annotations

from mrz_verifier.exceptions import MRZDateError
from mrz_verifier.models import CalendarDate

DEFAULT_CENTURY_PIVOT = 50


def resolve_year(two_digit_year: int, pivot: int = DEFAULT_CENTURY_PIVOT) -> int:
    """Years at or above the pivot belong to the 1900s, the rest to the 2000s."""
    if two_digit_year >= pivot:
        return 1900 + two_digit_year
    return 2000 + two_digit_year


def interpret_date(yymmdd: str, pivot: int = DEFAULT_CENTURY_PIVOT) -> CalendarDate:
    """
    Interpret a six digit YYMMDD field.

    Month and day are not range-checked; see ``CalendarDate.to_date`` for how
    impossible values are resolved.

    Args:
        yymmdd: The date field as printed in the MRZ
        pivot: Two-digit years at or above this value resolve to the 1900s

    Returns:
        CalendarDate with a four-digit year

    Raises:
        MRZDateError: If the field is not six ASCII digits
    """
    if len(yymmdd) != 6 or not all("0" <= char <= "9" for char in yymmdd):
        raise MRZDateError(yymmdd)

    return CalendarDate(
        year=resolve_year(int(yymmdd[0:2]), pivot),
        month=int(yymmdd[2:4]),
        day=int(yymmdd[4:6]),
    )
