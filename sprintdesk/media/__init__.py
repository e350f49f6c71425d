"""
Sprintdesk media module.

Trusted image URLs and avatar placeholders.
"""

from .avatar import Avatar, AvatarSize, get_color_from_name, get_initials, resolve_avatar
from .urls import is_trusted_url

__all__ = [
    "is_trusted_url",
    "Avatar",
    "AvatarSize",
    "get_initials",
    "get_color_from_name",
    "resolve_avatar",
]
