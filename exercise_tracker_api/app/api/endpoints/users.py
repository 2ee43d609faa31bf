"""
User endpoints.

Register users and list every registered user.
"""

from typing import List

from fastapi import APIRouter, Depends

from exercise_tracker_api.app.api.deps import get_store, user_create_body
from exercise_tracker_api.app.core.store import JsonStore
from exercise_tracker_api.app.schemas.user import UserCreate, UserRead
from exercise_tracker_api.app.services.user_service import UserService


router = APIRouter()


@router.post("", response_model=UserRead)
async def create_user(
    user: UserCreate = Depends(user_create_body),
    store: JsonStore = Depends(get_store),
) -> UserRead:
    """Register a new user and return it with its generated ``id``."""
    return await UserService.create_user(store, user)


@router.get("", response_model=List[UserRead])
async def list_users(store: JsonStore = Depends(get_store)) -> List[UserRead]:
    """Return all users in creation order, without pagination."""
    return await UserService.list_users(store)
