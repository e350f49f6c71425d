"""
Sprintdesk phone module.

Masking and validation for Brazilian phone numbers.
"""

from .mask import (
    PHONE_INCOMPLETE,
    PHONE_INVALID_AREA_CODE,
    PHONE_MOBILE_PREFIX,
    PHONE_TOO_LONG,
    extract_digits,
    format_phone_number,
    get_phone_validation_error,
    is_valid_phone_number,
)

__all__ = [
    "extract_digits",
    "format_phone_number",
    "is_valid_phone_number",
    "get_phone_validation_error",
    "PHONE_INCOMPLETE",
    "PHONE_TOO_LONG",
    "PHONE_INVALID_AREA_CODE",
    "PHONE_MOBILE_PREFIX",
]
