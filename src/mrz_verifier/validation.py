"""
TD3 MRZ validation.

Runs the per-field and composite check digit verification and the expiry
check over the data line of a passport MRZ. Malformed input never raises;
every failure is reported as a false check in the returned report.
"""

from __future__ import annotations

from datetime import date, datetime

from mrz_verifier.config import Settings, settings
from mrz_verifier.exceptions import MRZDateError, MRZLengthError
from mrz_verifier.extraction import extract_fields, select_last_line
from mrz_verifier.logging_config import get_logger
from mrz_verifier.models import MRZErrorCode, MRZFields, ValidationReport
from mrz_verifier.utils.check_digit import verify_check_digit
from mrz_verifier.utils.dates import interpret_date

logger = get_logger(__name__)

PERSONAL_NUMBER_DISPLAY_LENGTH = 10


class MRZValidator:
    """Verifies TD3 data lines with a fixed configuration."""

    def __init__(self, config: Settings | None = None) -> None:
        config = config or settings
        self.strict_length = config.MRZ_STRICT_LENGTH
        self.century_pivot = config.MRZ_CENTURY_PIVOT
        self.reject_impossible_dates = config.MRZ_REJECT_IMPOSSIBLE_DATES
        self.timezone = config.expiry_timezone()

    def validate(
        self, mrz_line: str | None, now: datetime | date | None = None
    ) -> ValidationReport:
        """
        Validate the last line of a TD3 MRZ.

        Args:
            mrz_line: The 44 character data line
            now: Reference time for the expiry check; defaults to the current time.
                Naive datetimes are taken to be in the configured time zone.

        Returns:
            ValidationReport with one flag per check
        """
        if not mrz_line:
            logger.warning(
                "MRZ code is missing, skipping validation",
                extra={"mrz_error": MRZErrorCode.MISSING_INPUT.value},
            )
            return ValidationReport.failed(MRZErrorCode.MISSING_INPUT)

        logger.debug("Validating MRZ line %s", mrz_line)

        try:
            fields = extract_fields(mrz_line, strict=self.strict_length)
        except MRZLengthError as exc:
            logger.warning(
                "Rejecting MRZ line: %s",
                exc.message,
                extra={"mrz_error": MRZErrorCode.MALFORMED_LENGTH.value},
            )
            return ValidationReport.failed(MRZErrorCode.MALFORMED_LENGTH)

        report = ValidationReport(
            document_number_valid=verify_check_digit(
                fields.document_number, fields.document_number_check
            ),
            birth_date_valid=verify_check_digit(fields.birth_date, fields.birth_date_check),
            expiry_date_valid=verify_check_digit(fields.expiry_date, fields.expiry_date_check),
            personal_number_valid=verify_check_digit(
                fields.personal_number, fields.personal_number_check
            ),
            composite_valid=verify_check_digit(fields.composite_source, fields.composite_check),
            not_expired=self._is_not_expired(fields, now),
            document_number=fields.document_number,
            personal_number=fields.personal_number[:PERSONAL_NUMBER_DISPLAY_LENGTH],
            expiry_date=fields.expiry_date,
        )

        logger.debug(
            "MRZ checks: document=%s birth=%s expiry=%s personal=%s composite=%s not_expired=%s",
            report.document_number_valid,
            report.birth_date_valid,
            report.expiry_date_valid,
            report.personal_number_valid,
            report.composite_valid,
            report.not_expired,
        )
        return report

    def validate_text(
        self, mrz_text: str | None, now: datetime | date | None = None
    ) -> ValidationReport:
        """Validate the final line of a multi-line MRZ block as returned by OCR."""
        return self.validate(select_last_line(mrz_text), now)

    def today(self, now: datetime | date | None = None) -> date:
        """Calendar day of ``now`` in the configured time zone."""
        if now is None:
            return datetime.now(self.timezone).date()
        if isinstance(now, datetime):
            if now.tzinfo is None:
                return now.date()
            return now.astimezone(self.timezone).date()
        return now

    def _is_not_expired(self, fields: MRZFields, now: datetime | date | None) -> bool:
        try:
            expiry = interpret_date(fields.expiry_date, self.century_pivot)
        except MRZDateError as exc:
            logger.warning("Cannot evaluate expiry: %s", exc.message)
            return False

        if not expiry.is_calendar_date:
            if self.reject_impossible_dates:
                logger.warning("Expiry date %s does not exist", expiry)
                return False
            logger.debug("Expiry date %s rolled over to %s", expiry, expiry.to_date())

        # A document is still valid on its expiry day
        return expiry.to_date() >= self.today(now)


def validate(mrz_line: str | None, now: datetime | date | None = None) -> ValidationReport:
    """Validate a TD3 data line with the default settings."""
    return MRZValidator().validate(mrz_line, now)


def validate_mrz_text(mrz_text: str | None, now: datetime | date | None = None) -> ValidationReport:
    """Validate the last line of an OCR MRZ block with the default settings."""
    return MRZValidator().validate_text(mrz_text, now)
