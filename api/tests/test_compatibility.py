from app.candidates import get_candidate_pool
from app.schemas import Candidate
from app.services.compatibility import (
    compatible_pool,
    filter_compatible,
    is_mutually_compatible,
    labels_for_identity,
)


class _Requester:
    def __init__(self, gender_identity, interested_in):
        self.gender_identity = gender_identity
        self.interested_in = interested_in


def _candidate(cid, gender, interested):
    return Candidate(id=cid, name=cid.upper(), age=30, neighborhood="Astoria", gender_identity=gender, interested_in=interested)


def test_labels_for_known_and_unknown_identities():
    assert labels_for_identity("Woman") == {"Women", "All genders"}
    assert labels_for_identity("Genderqueer") == {"Nonbinary folks", "All genders"}
    assert labels_for_identity("Prefer not to say") == {"Women", "Men", "Nonbinary folks", "All genders"}
    assert labels_for_identity("something else") == {"Women", "Men", "Nonbinary folks", "All genders"}


def test_mutual_compatibility_requires_both_directions():
    assert is_mutually_compatible("Woman", ["Men"], "Man", ["Women"]) is True
    assert is_mutually_compatible("Woman", ["Men"], "Man", ["Men"]) is False
    assert is_mutually_compatible("Man", ["Men"], "Man", ["Men"]) is True
    assert is_mutually_compatible("Nonbinary", ["All genders"], "Woman", ["Men"]) is False
    assert is_mutually_compatible("Nonbinary", ["All genders"], "Woman", ["All genders"]) is True


def test_unrecognized_identity_is_universally_compatible():
    assert is_mutually_compatible("Prefer to self-describe", ["Women"], "Woman", ["Men"]) is True


def test_custom_mapping_overrides_default():
    mapping = {"Woman": ["Women"], "Man": ["Men"]}
    assert is_mutually_compatible("Woman", ["Men"], "Man", ["All genders"], mapping) is False
    assert is_mutually_compatible("Woman", ["Men"], "Man", ["Women"], mapping) is True


def test_filter_is_symmetric_over_seeded_pool():
    pool = get_candidate_pool()
    for gender, interested in [("Woman", ["Men"]), ("Man", ["Women"]), ("Nonbinary", ["All genders"]), ("Man", ["Men", "Nonbinary folks"])]:
        requester = _Requester(gender, interested)
        for c in filter_compatible(requester, pool):
            assert set(interested) & labels_for_identity(c.gender_identity)
            assert set(c.interested_in) & labels_for_identity(gender)


def test_filter_preserves_pool_order():
    pool = [_candidate("a", "Man", ["Women"]), _candidate("b", "Woman", ["Men"]), _candidate("c", "Man", ["Women"])]
    out = filter_compatible(_Requester("Woman", ["Men"]), pool)
    assert [c.id for c in out] == ["a", "c"]


def test_compatible_pool_uses_full_pool_below_minimum():
    pool = [_candidate(f"m{i}", "Man", ["Women"]) for i in range(5)] + [_candidate(f"w{i}", "Woman", ["Men"]) for i in range(5)]
    requester = _Requester("Woman", ["Men"])
    assert len(compatible_pool(requester, pool, minimum=5)) == 5
    assert compatible_pool(requester, pool, minimum=6) == pool


def test_seeded_pool_supports_three_groups_for_common_orientations():
    pool = get_candidate_pool()
    assert len(filter_compatible(_Requester("Woman", ["Men"]), pool)) >= 12
    assert len(filter_compatible(_Requester("Man", ["Women"]), pool)) >= 12
    nb = _Requester("Nonbinary", ["All genders"])
    assert len(filter_compatible(nb, pool)) < 12
    assert compatible_pool(nb, pool) == list(pool)
