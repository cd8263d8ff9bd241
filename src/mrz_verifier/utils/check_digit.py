"""
Check digit calculation according to ICAO Doc 9303 Part 3, Section 4.9.
"""

WEIGHTS = (7, 3, 1)


def character_value(char: str) -> int:
    """
    Numeric value of an MRZ character.

    Digits keep their value, A-Z map to 10-35 and every other character,
    including the filler '<', counts as zero.
    """
    if "0" <= char <= "9":
        return int(char)
    if "A" <= char <= "Z":
        # A = 10, B = 11, ..., Z = 35
        return ord(char) - ord("A") + 10
    return 0


def calculate_check_digit(input_string: str) -> int:
    """
    Calculate the check digit for a string.

    The 7-3-1 weighting starts over at the first character of every input,
    so a composite digit is computed over its own concatenated string.

    Args:
        input_string: String to calculate check digit for

    Returns:
        Check digit between 0 and 9
    """
    total = 0
    for i, char in enumerate(input_string):
        total += character_value(char) * WEIGHTS[i % 3]
    return total % 10


def verify_check_digit(input_string: str, check_digit: str) -> bool:
    """
    Validate a check digit character against an input string.

    Args:
        input_string: String the check digit was computed over
        check_digit: The check digit as it appears in the MRZ

    Returns:
        True if valid, False otherwise (including a missing or non-digit check character)
    """
    if len(check_digit) != 1 or not "0" <= check_digit <= "9":
        return False
    return calculate_check_digit(input_string) == int(check_digit)
