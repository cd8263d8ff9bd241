"""
Field extraction for the second line of a TD3 (passport) MRZ.

Line layout per ICAO Doc 9303 Part 4:
DOCUMENT_NUMBER CHECK NATIONALITY BIRTH_DATE CHECK SEX EXPIRY_DATE CHECK PERSONAL_NUMBER CHECK COMPOSITE
"""

from __future__ import annotations

from mrz_verifier.exceptions import MRZLengthError
from mrz_verifier.logging_config import get_logger
from mrz_verifier.models import TD3_LINE_LENGTH, FieldSpec, MRZFields

logger = get_logger(__name__)

DOCUMENT_NUMBER = FieldSpec(name="document_number", offset=0, length=9, check_digit_offset=9)
BIRTH_DATE = FieldSpec(name="birth_date", offset=13, length=6, check_digit_offset=19)
EXPIRY_DATE = FieldSpec(name="expiry_date", offset=21, length=6, check_digit_offset=27)
PERSONAL_NUMBER = FieldSpec(name="personal_number", offset=28, length=14, check_digit_offset=42)
COMPOSITE_CHECK_DIGIT_OFFSET = 43

FIELD_SPECS = (DOCUMENT_NUMBER, BIRTH_DATE, EXPIRY_DATE, PERSONAL_NUMBER)


def select_last_line(mrz_text: str | None) -> str:
    """
    Pick the last non-empty line of a multi-line MRZ block.

    OCR services return the whole zone as one newline-separated blob; for TD3
    the data line checked here is the final one.
    """
    if not mrz_text:
        return ""
    lines = [line.strip() for line in mrz_text.splitlines() if line.strip()]
    return lines[-1] if lines else ""


def extract_fields(line: str, strict: bool = True) -> MRZFields:
    """
    Slice a TD3 second line into its checked fields.

    Args:
        line: The 44 character MRZ line
        strict: Reject lines that are not exactly 44 characters. When False a
            short line yields truncated fields and empty check digits.

    Returns:
        MRZFields with the raw field values and check digit characters

    Raises:
        MRZLengthError: In strict mode, if the line length is wrong
    """
    if strict and len(line) != TD3_LINE_LENGTH:
        raise MRZLengthError(len(line))

    if len(line) < TD3_LINE_LENGTH:
        logger.debug("Extracting from short MRZ line (%d characters)", len(line))

    return MRZFields(
        document_number=DOCUMENT_NUMBER.value(line),
        document_number_check=DOCUMENT_NUMBER.check_digit(line),
        birth_date=BIRTH_DATE.value(line),
        birth_date_check=BIRTH_DATE.check_digit(line),
        expiry_date=EXPIRY_DATE.value(line),
        expiry_date_check=EXPIRY_DATE.check_digit(line),
        personal_number=PERSONAL_NUMBER.value(line),
        personal_number_check=PERSONAL_NUMBER.check_digit(line),
        composite_check=line[COMPOSITE_CHECK_DIGIT_OFFSET : COMPOSITE_CHECK_DIGIT_OFFSET + 1],
    )
