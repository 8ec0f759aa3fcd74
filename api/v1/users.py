from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from services.store import MemStore
from api.v1.deps import get_store
from api.v1.schemas import UserCreate, UserOut

router = APIRouter()


# ───────────────────────── create ──────────────────────────
@router.post(
    "",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    store: MemStore = Depends(get_store),
) -> UserOut:
    if store.get_user_by_username(body.username):
        raise HTTPException(status_code=409, detail="User already exists")

    user = store.create_user(body.username)
    return UserOut.model_validate(user, from_attributes=True)


# ───────────────────────── fetch one ────────────────────────
@router.get("/{user_id}", response_model=UserOut)
async def fetch_user(
    user_id: str,
    store: MemStore = Depends(get_store),
) -> UserOut:
    usr = store.get_user(user_id)
    if usr is None:
        raise HTTPException(status_code=404, detail="User not found")
    return UserOut.model_validate(usr, from_attributes=True)
