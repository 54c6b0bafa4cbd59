import json
from functools import lru_cache

from .config import CANDIDATE_POOL_PATH
from .schemas import Candidate


@lru_cache(maxsize=1)
def get_candidate_pool() -> tuple[Candidate, ...]:
    with CANDIDATE_POOL_PATH.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"Candidate pool at {CANDIDATE_POOL_PATH} must be a JSON list")
    return tuple(Candidate.model_validate(item) for item in raw)
