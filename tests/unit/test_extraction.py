import pytest

from mrz_verifier.exceptions import MRZLengthError
from mrz_verifier.extraction import FIELD_SPECS, extract_fields, select_last_line
from mrz_verifier.models import TD3_LINE_LENGTH
from tests.conftest import ICAO_APPENDIX_LINE, SPECIMEN_LINE


def test_extract_specimen_fields():
    fields = extract_fields(SPECIMEN_LINE)

    assert fields.document_number == "L898902C<"
    assert fields.document_number_check == "3"
    assert fields.birth_date == "690806"
    assert fields.birth_date_check == "1"
    assert fields.expiry_date == "940623"
    assert fields.expiry_date_check == "6"
    assert fields.personal_number == "ZE184226B<<<<<"
    assert fields.personal_number_check == "1"
    assert fields.composite_check == "4"


def test_composite_source_skips_nationality_and_sex():
    fields = extract_fields(ICAO_APPENDIX_LINE)
    assert fields.composite_source == "L898902C36" + "7408122" + "1204159" + "ZE184226B<<<<<1"


def test_field_table():
    layout = {spec.name: (spec.offset, spec.length, spec.check_digit_offset) for spec in FIELD_SPECS}
    assert layout == {
        "document_number": (0, 9, 9),
        "birth_date": (13, 6, 19),
        "expiry_date": (21, 6, 27),
        "personal_number": (28, 14, 42),
    }


def test_line_length_error_defaults_to_td3_length():
    assert TD3_LINE_LENGTH == 44
    assert MRZLengthError(10).expected == TD3_LINE_LENGTH


@pytest.mark.parametrize("length", [0, 20, 43, 45, 88])
def test_strict_mode_rejects_wrong_length(length):
    line = (SPECIMEN_LINE * 2)[:length]
    with pytest.raises(MRZLengthError) as exc_info:
        extract_fields(line)
    assert exc_info.value.actual == length
    assert exc_info.value.expected == 44


def test_permissive_mode_truncates_short_line():
    fields = extract_fields(SPECIMEN_LINE[:30], strict=False)

    assert fields.document_number == "L898902C<"
    assert fields.expiry_date == "940623"
    assert fields.expiry_date_check == "6"
    assert fields.personal_number == "ZE"
    assert fields.personal_number_check == ""
    assert fields.composite_check == ""


def test_permissive_mode_on_tiny_line():
    fields = extract_fields("L89", strict=False)

    assert fields.document_number == "L89"
    assert fields.document_number_check == ""
    assert fields.birth_date == ""
    assert fields.expiry_date == ""


def test_select_last_line():
    block = "P<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<\n" + SPECIMEN_LINE
    assert select_last_line(block) == SPECIMEN_LINE


def test_select_last_line_ignores_trailing_blank_lines_and_carriage_returns():
    block = "P<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<\r\n" + SPECIMEN_LINE + "\r\n\n"
    assert select_last_line(block) == SPECIMEN_LINE


@pytest.mark.parametrize("text", [None, "", "\n\n", "   "])
def test_select_last_line_of_nothing(text):
    assert select_last_line(text) == ""
