"""
Brazilian phone number masking and validation.

Supports landline (10 digits) and mobile (11 digits) numbers:

    Landline: (99) 9999-9999
    Mobile:   (99) 99999-9999

All functions are pure and accept any string; they never raise.
"""

import re
from typing import Optional

PHONE_INCOMPLETE = "Incomplete phone number. Enter area code + number."
PHONE_TOO_LONG = "Phone number is too long."
PHONE_INVALID_AREA_CODE = "Invalid area code. Enter a valid area code (11-99)."
PHONE_MOBILE_PREFIX = "Mobile numbers must start with 9 after the area code."

MIN_AREA_CODE = 11
MAX_AREA_CODE = 99
LANDLINE_LENGTH = 10
MOBILE_LENGTH = 11

# ASCII only: \D would keep non-ASCII digits such as Arabic-Indic numerals
_NON_DIGIT = re.compile(r"[^0-9]")


def extract_digits(value: str) -> str:
    """Strip every character that is not a decimal digit."""
    return _NON_DIGIT.sub("", value)


def format_phone_number(value: str) -> str:
    """
    Format a phone number progressively, as the user types.

    Examples:
        ```python
        format_phone_number("1")            # '(1'
        format_phone_number("11234")        # '(11) 234'
        format_phone_number("1123456789")   # '(11) 2345-6789'
        format_phone_number("11987654321")  # '(11) 98765-4321'
        ```
    """
    digits = extract_digits(value)

    if not digits:
        return ""

    if len(digits) <= 2:
        return f"({digits}"

    if len(digits) <= 6:
        return f"({digits[:2]}) {digits[2:]}"

    if len(digits) <= LANDLINE_LENGTH:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"

    # Anything past the eleventh digit is dropped
    return f"({digits[:2]}) {digits[2:7]}-{digits[7:11]}"


def _area_code(digits: str) -> int:
    return int(digits[:2])


def is_valid_phone_number(value: str) -> bool:
    """
    Validate a phone number.

    An empty value is valid since the field is optional.
    """
    digits = extract_digits(value)

    if not digits:
        return True

    if len(digits) not in (LANDLINE_LENGTH, MOBILE_LENGTH):
        return False

    if not MIN_AREA_CODE <= _area_code(digits) <= MAX_AREA_CODE:
        return False

    if len(digits) == MOBILE_LENGTH and digits[2] != "9":
        return False

    return True


def get_phone_validation_error(value: str) -> Optional[str]:
    """
    Return the message for the first rule a phone number breaks.

    Checks run in a fixed order, so a short number reports PHONE_INCOMPLETE
    even when its partial area code is also out of range.

    Returns:
        None when the number is valid
    """
    digits = extract_digits(value)

    if not digits:
        return None

    if len(digits) < LANDLINE_LENGTH:
        return PHONE_INCOMPLETE

    if len(digits) > MOBILE_LENGTH:
        return PHONE_TOO_LONG

    if not MIN_AREA_CODE <= _area_code(digits) <= MAX_AREA_CODE:
        return PHONE_INVALID_AREA_CODE

    if len(digits) == MOBILE_LENGTH and digits[2] != "9":
        return PHONE_MOBILE_PREFIX

    return None
