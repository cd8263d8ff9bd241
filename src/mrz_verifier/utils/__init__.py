from .check_digit import calculate_check_digit, character_value, verify_check_digit
from .dates import interpret_date, resolve_year

__all__ = [
    "calculate_check_digit",
    "character_value",
    "interpret_date",
    "resolve_year",
    "verify_check_digit",
]
