from __future__ import annotations

from typing import Iterable, Sequence

from .. import config
from ..config import MIN_COMPATIBLE_POOL
from ..options import DEFAULT_ORIENTATION_LABELS, INTERESTED_IN_OPTIONS
from ..schemas import Candidate, ProfileCreate


def orientation_labels() -> dict[str, list[str]]:
    labels = config.ORIENTATION_LABELS
    return labels if labels is not None else DEFAULT_ORIENTATION_LABELS


def labels_for_identity(gender_identity: str, mapping: dict[str, list[str]] | None = None) -> set[str]:
    mapping = orientation_labels() if mapping is None else mapping
    labels = mapping.get((gender_identity or "").strip())
    if labels is None:
        return set(INTERESTED_IN_OPTIONS)
    return set(labels)


def is_mutually_compatible(
    gender_a: str,
    interested_a: Iterable[str],
    gender_b: str,
    interested_b: Iterable[str],
    mapping: dict[str, list[str]] | None = None,
) -> bool:
    a_accepts_b = bool(set(interested_a) & labels_for_identity(gender_b, mapping))
    b_accepts_a = bool(set(interested_b) & labels_for_identity(gender_a, mapping))
    return a_accepts_b and b_accepts_a


def filter_compatible(
    profile: ProfileCreate,
    pool: Sequence[Candidate],
    mapping: dict[str, list[str]] | None = None,
) -> list[Candidate]:
    return [
        c
        for c in pool
        if is_mutually_compatible(
            profile.gender_identity,
            profile.interested_in,
            c.gender_identity,
            c.interested_in,
            mapping,
        )
    ]


def compatible_pool(
    profile: ProfileCreate,
    pool: Sequence[Candidate],
    minimum: int = MIN_COMPATIBLE_POOL,
    mapping: dict[str, list[str]] | None = None,
) -> list[Candidate]:
    """Compatible candidates in pool order, or the whole pool when too few qualify."""
    compatible = filter_compatible(profile, pool, mapping)
    if len(compatible) < minimum:
        return list(pool)
    return compatible
