"""
Avatar resolution for team members and partners.

Picks between a user's photo and a generated placeholder (initials on a
palette color). A photo is only kept when its URL passes is_trusted_url.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .urls import is_trusted_url

COLOR_PALETTE = (
    "chart-1",
    "chart-2",
    "chart-3",
    "chart-4",
    "chart-5",
)


class AvatarSize(str, Enum):
    """Avatar sizes with their pixel dimension."""

    SM = "sm"
    MD = "md"
    LG = "lg"
    XL = "xl"

    @property
    def pixels(self) -> int:
        return _SIZE_PIXELS[self]


_SIZE_PIXELS = {
    AvatarSize.SM: 32,
    AvatarSize.MD: 40,
    AvatarSize.LG: 48,
    AvatarSize.XL: 64,
}


class Avatar(BaseModel):
    """Resolved avatar: either a trusted photo URL or placeholder data."""

    name: str
    initials: str
    color: str
    size: AvatarSize = AvatarSize.MD
    photo_url: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        return self.photo_url is None


def get_initials(name: str) -> str:
    """
    Up to two initials from the first two space-separated name parts.

    Example:
        ```python
        get_initials("ana maria souza")  # 'AM'
        ```
    """
    return "".join(part[:1] for part in name.split(" ")[:2]).upper()


def get_color_from_name(name: str) -> str:
    """Stable palette color keyed on the first character of the name."""
    if not name:
        return COLOR_PALETTE[0]
    return COLOR_PALETTE[ord(name[0]) % len(COLOR_PALETTE)]


def resolve_avatar(
    name: str,
    photo_url: Optional[str] = None,
    size: AvatarSize | str = AvatarSize.MD,
) -> Avatar:
    """
    Resolve what to display for a person.

    Placeholder fields are always filled so the caller can fall back to them
    if a trusted photo later fails to load.

    Args:
        name: Display name
        photo_url: User-supplied photo URL, if any
        size: Avatar size

    Returns:
        Avatar with photo_url set only when the URL is trusted
    """
    return Avatar(
        name=name,
        initials=get_initials(name),
        color=get_color_from_name(name),
        size=AvatarSize(size),
        photo_url=photo_url if is_trusted_url(photo_url) else None,
    )
