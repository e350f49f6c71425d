"""
Sprintdesk team module.

Team members and name matching for task assignment.
"""

from .matcher import (
    NameParts,
    find_member_by_name,
    find_members_from_list,
    get_name_parts,
    normalize_name,
)
from .models import AmbiguousName, MatchConfidence, MemberListMatch, MemberMatch, TeamMember

__all__ = [
    "TeamMember",
    "MatchConfidence",
    "MemberMatch",
    "MemberListMatch",
    "AmbiguousName",
    "NameParts",
    "normalize_name",
    "get_name_parts",
    "find_member_by_name",
    "find_members_from_list",
]
