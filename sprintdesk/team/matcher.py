"""
Match free-text names (as typed in task assignments) to team members.

Names are compared after normalize_name: lowercase, trimmed and without
accents, so "JOÃO" and "joao" are the same name.
"""

import re
import unicodedata
from typing import Iterable, List, NamedTuple

from .models import AmbiguousName, MatchConfidence, MemberListMatch, MemberMatch, TeamMember

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")

MATCHED_BY_FULL_NAME = "full name"
MATCHED_BY_FIRST_AND_LAST = "first and last name"
MATCHED_BY_NICKNAME = "nickname"
MATCHED_BY_FIRST_NAME = "first name"
MATCHED_BY_LAST_NAME = "last name"
MATCHED_BY_PARTIAL_NICKNAME = "partial nickname"
MATCHED_BY_MULTIPLE = "multiple matches"


class NameParts(NamedTuple):
    first: str
    last: str
    all: List[str]


def normalize_name(value: str) -> str:
    """
    Lowercase, trim and strip accents.

    Example:
        ```python
        normalize_name("  Conceição ")  # 'conceicao'
        ```
    """
    decomposed = unicodedata.normalize("NFD", value.lower().strip())
    return _COMBINING_MARKS.sub("", decomposed)


def get_name_parts(name: str) -> NameParts:
    """Normalized first, last and all words of a name."""
    parts = normalize_name(name).split()
    return NameParts(
        first=parts[0] if parts else "",
        last=parts[-1] if parts else "",
        all=parts,
    )


def _nickname(member: TeamMember) -> str:
    return normalize_name(member.nickname) if member.nickname else ""


def _single_or_ambiguous(candidates: List[TeamMember], matched_by: str) -> MemberMatch:
    if len(candidates) == 1:
        return MemberMatch(
            member=candidates[0],
            confidence=MatchConfidence.MEDIUM,
            matched_by=matched_by,
            candidates=candidates,
        )
    return MemberMatch(
        confidence=MatchConfidence.LOW,
        matched_by=MATCHED_BY_MULTIPLE,
        candidates=candidates,
    )


def find_member_by_name(search_name: str, members: Iterable[TeamMember]) -> MemberMatch:
    """
    Find the member a name refers to.

    Rules are tried in order and the first that applies wins:

    1. Full name equal -> exact
    2. Same first and last name -> high
    3. Nickname equal -> high
    4. First name or nickname equal to the search -> medium, or low if
       several members qualify
    5. Last name equal to the search -> medium, or low if several qualify
    6. Nickname contains the search or the search contains the nickname,
       for exactly one member -> medium

    Args:
        search_name: Name as typed
        members: Candidates

    Returns:
        MemberMatch; confidence NONE when nothing applies
    """
    members = list(members)
    search = normalize_name(search_name)
    if not search:
        return MemberMatch()

    search_parts = get_name_parts(search_name)

    for member in members:
        if normalize_name(member.name) == search:
            return MemberMatch(
                member=member,
                confidence=MatchConfidence.EXACT,
                matched_by=MATCHED_BY_FULL_NAME,
                candidates=[member],
            )

    for member in members:
        parts = get_name_parts(member.name)
        if parts.first == search_parts.first and parts.last == search_parts.last:
            return MemberMatch(
                member=member,
                confidence=MatchConfidence.HIGH,
                matched_by=MATCHED_BY_FIRST_AND_LAST,
                candidates=[member],
            )

    for member in members:
        if _nickname(member) == search:
            return MemberMatch(
                member=member,
                confidence=MatchConfidence.HIGH,
                matched_by=MATCHED_BY_NICKNAME,
                candidates=[member],
            )

    by_first_name = [
        m for m in members
        if get_name_parts(m.name).first == search or _nickname(m) == search
    ]
    if by_first_name:
        return _single_or_ambiguous(by_first_name, MATCHED_BY_FIRST_NAME)

    by_last_name = [m for m in members if get_name_parts(m.name).last == search]
    if by_last_name:
        return _single_or_ambiguous(by_last_name, MATCHED_BY_LAST_NAME)

    # Blank nicknames would be contained in every search
    by_partial_nickname = [
        m for m in members
        if _nickname(m) and (search in _nickname(m) or _nickname(m) in search)
    ]
    if len(by_partial_nickname) == 1:
        return MemberMatch(
            member=by_partial_nickname[0],
            confidence=MatchConfidence.MEDIUM,
            matched_by=MATCHED_BY_PARTIAL_NICKNAME,
            candidates=by_partial_nickname,
        )

    return MemberMatch()


def find_members_from_list(
    names: Iterable[str],
    members: Iterable[TeamMember],
) -> MemberListMatch:
    """
    Match every name in a list, e.g. the parts of "joao + maria".

    Each member appears at most once in ``matched``. Names with several
    equally good candidates go to ``ambiguous``; the rest to ``unmatched``.
    """
    members = list(members)
    result = MemberListMatch()
    seen_ids = set()

    for name in names:
        match = find_member_by_name(name, members)
        if match.member is not None:
            if match.member.id not in seen_ids:
                seen_ids.add(match.member.id)
                result.matched.append(match.member)
        elif len(match.candidates) > 1:
            result.ambiguous.append(AmbiguousName(name=name, candidates=match.candidates))
        else:
            result.unmatched.append(name)

    return result
