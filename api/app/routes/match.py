from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from ..deps import get_match_service, get_pool, get_storage
from ..http_helpers import require_text_field
from ..repo import Storage
from ..schemas import Candidate, Profile
from ..services.matching import MatchService

router = APIRouter()
scaffold_router = APIRouter()


@scaffold_router.get("/health")
def match_scaffold_health() -> dict[str, str]:
    return {"status": "ok", "module": "match"}


@router.post("/api/match")
def create_match(
    response: Response,
    payload: Any = Body(None),
    storage: Storage = Depends(get_storage),
    service: MatchService = Depends(get_match_service),
    pool: tuple[Candidate, ...] = Depends(get_pool),
) -> dict[str, Any]:
    profile_id = require_text_field(payload, "profileId")
    row = storage.get_profile(profile_id)
    if not row:
        raise HTTPException(status_code=404, detail="Profile not found")

    result, source = service.run(Profile.model_validate(row), pool, profile_id=profile_id)
    response.headers["X-Match-Source"] = source
    return result.model_dump(by_alias=True)
