"""Application service (use case) for User operations."""

import logging
import secrets
import time
from typing import Any

from flatfile_api.application.interfaces import CollectionStore
from flatfile_api.domain.entities import User

from .collection_service import CollectionService

logger = logging.getLogger(__name__)


def generate_user_id() -> str:
    """Random 52-bit hex component followed by the millisecond clock in hex."""
    return f"{secrets.randbits(52):x}{time.time_ns() // 1_000_000:x}"


class UserService(CollectionService[User]):
    """Orchestrates user CRUD logic over the users collection."""

    record_type = User

    def __init__(self, store: CollectionStore, collection: str = "users.json"):
        super().__init__(store, collection)

    async def list_users(self) -> list[User]:
        return await self._load()

    async def get_user(self, user_id: str) -> User:
        return await self._get(user_id)

    async def create_user(self, payload: dict[str, Any]) -> User:
        users = await self._load()
        # A client-supplied id is kept as long as it is not empty
        user_id = str(payload["id"]) if payload.get("id") else generate_user_id()
        user = User(id=user_id).merged(payload)
        users.append(user)
        await self._save(users)
        logger.info("Created user %s", user.id)
        return user

    async def update_user(self, user_id: str, payload: dict[str, Any]) -> User:
        return await self._update(user_id, payload)

    async def delete_user(self, user_id: str) -> User:
        user = await self._delete(user_id)
        logger.info("Deleted user %s", user.id)
        return user
