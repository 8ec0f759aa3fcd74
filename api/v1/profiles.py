from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.errors import NotFound
from services.store import MemStore
from api.v1.deps import get_store
from api.v1.schemas import ProfileIn, ProfileOut, ProfileUpdate

router = APIRouter()


# ───────────────────────── read ─────────────────────────────
@router.get("/{user_id}", response_model=ProfileOut)
async def get_profile(
    user_id: str,
    store: MemStore = Depends(get_store),
) -> ProfileOut:
    profile = store.get_user_profile(user_id)
    if profile is None:
        raise NotFound("Profile not found")
    return ProfileOut.model_validate(profile, from_attributes=True)


# ───────────────────────── upsert ───────────────────────────
@router.post("", response_model=ProfileOut, status_code=status.HTTP_200_OK)
async def upsert_profile(
    body: ProfileIn,
    store: MemStore = Depends(get_store),
) -> ProfileOut:
    fields = body.model_dump(exclude={"user_id"})

    # one profile per user: a second POST replaces every field
    profile = store.update_user_profile(body.user_id, fields)
    if profile is None:
        profile = store.create_user_profile(body.user_id, fields)
    return ProfileOut.model_validate(profile, from_attributes=True)


# ───────────────────────── partial update ───────────────────
@router.put("/{user_id}", response_model=ProfileOut)
async def update_profile(
    user_id: str,
    body: ProfileUpdate,
    store: MemStore = Depends(get_store),
) -> ProfileOut:
    profile = store.update_user_profile(user_id, body.model_dump(exclude_unset=True))
    if profile is None:
        raise NotFound("Profile not found")
    return ProfileOut.model_validate(profile, from_attributes=True)
