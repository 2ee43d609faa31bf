"""
Business logic for users.

Users are stored in the JSON dataset managed by ``JsonStore``.  Ids
are random hex tokens generated on creation and never reused.
"""

import logging
import uuid
from typing import List

from ..core.store import JsonStore
from ..schemas.user import UserCreate, UserRead


logger = logging.getLogger(__name__)


class UserNotFoundError(ValueError):
    """Raised when no user matches the requested id."""

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class UserService:
    """Operations on users."""

    @classmethod
    async def create_user(cls, store: JsonStore, data: UserCreate) -> UserRead:
        """Create a user with a fresh id and persist it."""
        user = {"username": data.username, "id": uuid.uuid4().hex}
        async with store.transaction() as dataset:
            dataset.add_user(user)
        logger.info("Created user %s (%s)", user["id"], data.username)
        return UserRead(**user)

    @classmethod
    async def list_users(cls, store: JsonStore) -> List[UserRead]:
        """Return all users in creation order."""
        dataset = await store.read()
        return [UserRead(**user) for user in dataset.users.values()]
