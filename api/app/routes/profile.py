import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError

from ..deps import get_storage
from ..http_helpers import validation_http_error
from ..repo import Storage
from ..schemas import Profile, ProfileCreate

logger = logging.getLogger(__name__)

router = APIRouter()
scaffold_router = APIRouter()


@scaffold_router.get("/health")
def profile_scaffold_health() -> dict[str, str]:
    return {"status": "ok", "module": "profile"}


@router.post("/api/profiles", status_code=201)
def create_profile(payload: Any = Body(None), storage: Storage = Depends(get_storage)) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")
    try:
        profile = ProfileCreate.model_validate(payload)
    except ValidationError as exc:
        raise validation_http_error(exc) from exc

    row = storage.create_profile(profile.model_dump())
    logger.info("[PROFILE] created profile_id=%s", row["id"])
    return Profile.model_validate(row).model_dump(by_alias=True)


@router.get("/api/profiles/{profile_id}")
def get_profile(profile_id: str, storage: Storage = Depends(get_storage)) -> dict[str, Any]:
    row = storage.get_profile(profile_id)
    if not row:
        raise HTTPException(status_code=404, detail="Profile not found")
    return Profile.model_validate(row).model_dump(by_alias=True)
