"""
Display formatting for dashboard values.

Hours, percentages, counts and dates arrive from spreadsheets and user
input in all shapes. These helpers always return something printable and
never raise: invalid input falls back to 0, "0" or "-".
"""

import math
from datetime import date, datetime
from typing import Any, Optional, Union

MAX_SAFE_HOURS = 100000
EMPTY_DATE = "-"

DateLike = Optional[Union[date, datetime, str]]


def _to_number(value: Any) -> float:
    """Coerce to float, NaN when impossible. None counts as zero."""
    if value is None:
        return 0.0
    if isinstance(value, str) and not value.strip():
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def _compact(value: float) -> Union[int, float]:
    """Integer when whole, otherwise rounded to one decimal place."""
    if value.is_integer():
        return int(value)
    return round(value, 1)


def is_safe_number(value: Any) -> bool:
    """True for finite, non-negative values below MAX_SAFE_HOURS."""
    num = _to_number(value)
    return math.isfinite(num) and 0 <= num < MAX_SAFE_HOURS


def format_hours(hours: Any) -> Union[int, float]:
    """
    Hours with at most one decimal place.

    Negative, non-finite and absurdly large values become 0.
    """
    value = _to_number(hours)
    if not is_safe_number(value):
        return 0
    return _compact(value)


def format_hours_display(hours: Any) -> str:
    """Hours as a display string, e.g. "12.5h"."""
    return f"{format_hours(hours)}h"


def format_number(num: Any) -> str:
    """
    Number with pt-BR separators: "." for thousands, "," for decimals.

    Example:
        ```python
        format_number(1234567.5)  # '1.234.567,5'
        ```
    """
    value = _to_number(num)
    if not math.isfinite(value):
        return "0"

    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_percentage(value: Any) -> Union[int, float]:
    """Percentage clamped to [0, 100] with at most one decimal place."""
    num = _to_number(value)
    if not math.isfinite(num) or num < 0:
        return 0
    if num > 100:
        return 100
    return _compact(num)


def format_percentage_display(value: Any) -> str:
    """Percentage as a display string, e.g. "85.5%"."""
    return f"{format_percentage(value)}%"


def sanitize_estimated_hours(value: Any) -> Union[int, float]:
    """
    Parse estimated hours from an imported cell.

    Accepts "8h", "2,5", " 3.5H " and plain numbers.
    """
    if isinstance(value, str):
        cleaned = value.strip()
        if cleaned[-1:] in ("h", "H"):
            cleaned = cleaned[:-1]
        cleaned = cleaned.strip().replace(",", ".", 1)
        return format_hours(cleaned if cleaned else math.nan)
    return format_hours(value)


def truncate_text(text: Optional[str], max_length: int) -> Optional[str]:
    """Cut text to max_length characters followed by "..."."""
    if not text or len(text) <= max_length:
        return text
    return f"{text[:max_length]}..."


def _coerce_date(value: DateLike) -> Optional[Union[date, datetime]]:
    if not value:
        return None
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        # fromisoformat only understands a trailing "Z" from 3.11 on
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(value: DateLike) -> str:
    """Date as dd/mm/yyyy, "-" when missing or unparseable."""
    parsed = _coerce_date(value)
    if parsed is None:
        return EMPTY_DATE
    return parsed.strftime("%d/%m/%Y")


def format_datetime(value: DateLike) -> str:
    """Date and time as "dd/mm/yyyy, HH:MM", "-" when missing or unparseable."""
    parsed = _coerce_date(value)
    if parsed is None:
        return EMPTY_DATE
    if not isinstance(parsed, datetime):
        parsed = datetime(parsed.year, parsed.month, parsed.day)
    return parsed.strftime("%d/%m/%Y, %H:%M")
