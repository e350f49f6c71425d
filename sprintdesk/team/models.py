"""
Sprintdesk team models.

Team members and the results of matching free-text names against them.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class TeamMember(BaseModel):
    """A member of the sprint team."""

    id: str
    name: str
    nickname: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    photo_url: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "m-1",
                "name": "João Pereira",
                "nickname": "Jota",
                "email": "joao@example.com",
            }
        },
    }


class MatchConfidence(str, Enum):
    """How sure a name match is, from strongest to none."""

    EXACT = "exact"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class MemberMatch(BaseModel):
    """
    Result of matching one name.

    ``member`` is set for exact, high and medium matches. A low match has no
    member but lists the ambiguous candidates.
    """

    member: Optional[TeamMember] = None
    confidence: MatchConfidence = MatchConfidence.NONE
    matched_by: str = ""
    candidates: List[TeamMember] = Field(default_factory=list)


class AmbiguousName(BaseModel):
    """A name that matched several members equally well."""

    name: str
    candidates: List[TeamMember]


class MemberListMatch(BaseModel):
    """Result of matching a list of names."""

    matched: List[TeamMember] = Field(default_factory=list)
    unmatched: List[str] = Field(default_factory=list)
    ambiguous: List[AmbiguousName] = Field(default_factory=list)
