from __future__ import annotations

from typing import Any, Sequence

from ..config import GROUP_SIZE
from ..schemas import (
    Candidate,
    Gathering,
    MatchEvent,
    MatchMember,
    MultiMatchResult,
    ProfileCreate,
    SingleMatchResult,
)
from .event_templates import EVENT_TEMPLATES, match_reason

GATHERING_COUNT = 3
MIN_GROUP_SIZE = 3
MAX_GROUP_SIZE = 5


def check_group_size(group_size: int) -> int:
    if not MIN_GROUP_SIZE <= group_size <= MAX_GROUP_SIZE:
        raise ValueError(f"GROUP_SIZE must be between {MIN_GROUP_SIZE} and {MAX_GROUP_SIZE}, got {group_size}")
    return group_size


def partition_groups(
    candidates: Sequence[Candidate],
    group_size: int = GROUP_SIZE,
    count: int = GATHERING_COUNT,
) -> list[list[Candidate]]:
    """Consecutive slices of group_size; a short slice is replaced by the first group."""
    check_group_size(group_size)
    if len(candidates) < MIN_GROUP_SIZE:
        raise ValueError(f"At least {MIN_GROUP_SIZE} candidates are required, got {len(candidates)}")
    first = list(candidates[:group_size])
    groups: list[list[Candidate]] = []
    for i in range(count):
        chunk = list(candidates[i * group_size : (i + 1) * group_size])
        groups.append(chunk if len(chunk) >= group_size else first)
    return groups


def _members(group: list[Candidate], values: list[str] | None) -> list[MatchMember]:
    return [
        MatchMember(
            id=c.id,
            name=c.name,
            age=c.age,
            neighborhood=c.neighborhood,
            match_reason=match_reason(pos, c.name, c.neighborhood, values),
        )
        for pos, c in enumerate(group)
    ]


def _event(template: dict[str, Any]) -> MatchEvent:
    return MatchEvent(
        title=template["title"],
        type=template["type"],
        description=template["description"],
        venue=template["venue"],
        address=template["address"],
        suggested_date=template["suggested_date"],
        suggested_time=template["suggested_time"],
        conversation_starters=list(template["conversation_starters"]),
        why_this_event=template["why_this_event"],
    )


def build_fallback_gatherings(
    candidates: Sequence[Candidate],
    profile: ProfileCreate | None = None,
    group_size: int = GROUP_SIZE,
) -> MultiMatchResult:
    values = list(profile.values) if profile else None
    groups = partition_groups(candidates, group_size=group_size, count=len(EVENT_TEMPLATES))
    gatherings = [
        Gathering(
            group=_members(group, values),
            event=_event(template),
            compatibility_score=template["compatibility_score"],
        )
        for group, template in zip(groups, EVENT_TEMPLATES)
    ]
    return MultiMatchResult(gatherings=gatherings, recommended_index=0)


def build_fallback_match(
    candidates: Sequence[Candidate],
    profile: ProfileCreate | None = None,
    group_size: int = GROUP_SIZE,
) -> SingleMatchResult:
    values = list(profile.values) if profile else None
    group = partition_groups(candidates, group_size=group_size, count=1)[0]
    return SingleMatchResult(group=_members(group, values), event=_event(EVENT_TEMPLATES[0]))
