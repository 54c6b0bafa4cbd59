from __future__ import annotations

import logging
from typing import Protocol, Sequence

from ..config import GROUP_SIZE, MATCH_RESPONSE_SHAPE, MIN_COMPATIBLE_POOL
from ..schemas import Candidate, MatchResult, MatchShape, ProfileCreate
from .compatibility import compatible_pool
from .fallback import build_fallback_gatherings, build_fallback_match, check_group_size

logger = logging.getLogger(__name__)


class Matcher(Protocol):
    def match(self, profile: ProfileCreate, pool: Sequence[Candidate], shape: MatchShape) -> MatchResult: ...


class FallbackMatcher:
    """Deterministic matcher: compatible pool sliced into canned gatherings."""

    def __init__(self, minimum: int = MIN_COMPATIBLE_POOL, group_size: int = GROUP_SIZE) -> None:
        self._minimum = minimum
        self._group_size = check_group_size(group_size)

    def match(self, profile: ProfileCreate, pool: Sequence[Candidate], shape: MatchShape) -> MatchResult:
        candidates = compatible_pool(profile, pool, minimum=self._minimum)
        if shape == "single":
            return build_fallback_match(candidates, profile, group_size=self._group_size)
        return build_fallback_gatherings(candidates, profile, group_size=self._group_size)


class MatchService:
    def __init__(
        self,
        primary: Matcher | None,
        fallback: Matcher | None = None,
        shape: MatchShape | str = MATCH_RESPONSE_SHAPE,
    ) -> None:
        if shape not in {"single", "multi"}:
            raise ValueError(f"Unknown match response shape: {shape}")
        self.primary = primary
        self.fallback = fallback or FallbackMatcher()
        self.shape: MatchShape = shape  # type: ignore[assignment]

    def run(self, profile: ProfileCreate, pool: Sequence[Candidate], profile_id: str | None = None) -> tuple[MatchResult, str]:
        """Return (result, source) where source is "live" or "fallback"."""
        if self.primary is not None:
            try:
                result = self.primary.match(profile, pool, self.shape)
                logger.info("[MATCH] live result profile_id=%s shape=%s", profile_id, self.shape)
                return result, "live"
            except Exception as exc:
                logger.warning(
                    "[MATCH] live matcher failed, serving fallback profile_id=%s error=%s: %s",
                    profile_id,
                    type(exc).__name__,
                    exc,
                )
        result = self.fallback.match(profile, pool, self.shape)
        logger.info("[MATCH] fallback result profile_id=%s shape=%s", profile_id, self.shape)
        return result, "fallback"
