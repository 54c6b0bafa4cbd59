from functools import lru_cache

from .candidates import get_candidate_pool
from .repo import Storage, build_storage
from .schemas import Candidate
from .services.llm_matcher import AnthropicMatcher
from .services.matching import MatchService


@lru_cache(maxsize=1)
def get_storage() -> Storage:
    return build_storage()


@lru_cache(maxsize=1)
def get_match_service() -> MatchService:
    return MatchService(primary=AnthropicMatcher())


def get_pool() -> tuple[Candidate, ...]:
    return get_candidate_pool()
