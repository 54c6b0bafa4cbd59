import pytest

from app.candidates import get_candidate_pool
from app.schemas import Candidate, MultiMatchResult, SingleMatchResult
from app.services.event_templates import EVENT_TEMPLATES
from app.services.fallback import build_fallback_gatherings, build_fallback_match, partition_groups


def _pool(n):
    return [
        Candidate(id=f"c{i:02d}", name=f"Person {i}", age=25 + i, neighborhood="Harlem", gender_identity="Man", interested_in=["Women"])
        for i in range(n)
    ]


def test_partition_takes_consecutive_slices_of_four():
    groups = partition_groups(_pool(12))
    assert [[c.id for c in g] for g in groups] == [
        ["c00", "c01", "c02", "c03"],
        ["c04", "c05", "c06", "c07"],
        ["c08", "c09", "c10", "c11"],
    ]


def test_short_third_partition_is_replaced_by_first_group():
    groups = partition_groups(_pool(10))
    assert [c.id for c in groups[2]] == ["c00", "c01", "c02", "c03"]
    assert [c.id for c in groups[1]] == ["c04", "c05", "c06", "c07"]


def test_partition_rejects_tiny_pools():
    with pytest.raises(ValueError):
        partition_groups(_pool(2))


@pytest.mark.parametrize("group_size", [0, 2, 6])
def test_partition_rejects_group_size_out_of_range(group_size):
    with pytest.raises(ValueError, match="GROUP_SIZE"):
        partition_groups(_pool(12), group_size=group_size)


def test_gatherings_shape_and_recommendation():
    result = build_fallback_gatherings(_pool(12))
    assert isinstance(result, MultiMatchResult)
    assert result.recommended_index == 0
    assert len(result.gatherings) == 3
    assert [g.event.title for g in result.gatherings] == [t["title"] for t in EVENT_TEMPLATES]
    assert len({g.event.venue for g in result.gatherings}) == 3
    for g in result.gatherings:
        assert len(g.group) == 4
        assert 0 <= g.compatibility_score <= 100
        assert all(m.match_reason for m in g.group)


def test_fallback_is_deterministic():
    pool = list(get_candidate_pool())
    a = build_fallback_gatherings(pool).model_dump_json(by_alias=True)
    b = build_fallback_gatherings(pool).model_dump_json(by_alias=True)
    assert a == b


def test_single_shape_uses_first_group_and_first_template():
    result = build_fallback_match(_pool(12))
    assert isinstance(result, SingleMatchResult)
    assert [m.id for m in result.group] == ["c00", "c01", "c02", "c03"]
    assert result.event.title == EVENT_TEMPLATES[0]["title"]


def test_match_reasons_use_profile_values():
    class _Profile:
        values = ["Adventure", "Humor"]

    result = build_fallback_match(_pool(4), _Profile())
    assert "adventure" in result.group[0].match_reason
    assert result.group[0].match_reason.startswith("Person 0")


def test_camel_case_wire_format():
    payload = build_fallback_gatherings(_pool(12)).model_dump(by_alias=True)
    assert payload["recommendedIndex"] == 0
    event = payload["gatherings"][0]["event"]
    assert {"suggestedDate", "suggestedTime", "conversationStarters", "whyThisEvent", "type"} <= set(event)
    assert "matchReason" in payload["gatherings"][0]["group"][0]
    assert "compatibilityScore" in payload["gatherings"][0]
