"""
Sprintdesk formatting module.

Display helpers for hours, percentages, counts, text and dates.
"""

from .display import (
    format_date,
    format_datetime,
    format_hours,
    format_hours_display,
    format_number,
    format_percentage,
    format_percentage_display,
    is_safe_number,
    sanitize_estimated_hours,
    truncate_text,
)

__all__ = [
    "format_hours",
    "format_hours_display",
    "format_number",
    "format_percentage",
    "format_percentage_display",
    "sanitize_estimated_hours",
    "is_safe_number",
    "truncate_text",
    "format_date",
    "format_datetime",
]
