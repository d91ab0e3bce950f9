"""User CRUD endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, status

from flatfile_api.application.schemas import (
    RecordEnvelope,
    RecordListEnvelope,
    success,
    success_list,
)
from flatfile_api.application.services import UserService
from flatfile_api.infrastructure.dependencies import get_user_service
from flatfile_api.presentation.api.payload import record_payload

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=RecordListEnvelope)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> RecordListEnvelope:
    """Retrieve every user in insertion order."""
    users = await service.list_users()
    return success_list("users", users)


@router.get("/{user_id}", response_model=RecordEnvelope)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> RecordEnvelope:
    """Retrieve a single user by ID."""
    user = await service.get_user(user_id)
    return success("user", user)


@router.post("", response_model=RecordEnvelope, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: dict[str, Any] = Depends(record_payload),
    service: UserService = Depends(get_user_service),
) -> RecordEnvelope:
    """Create a new user; a missing id is generated."""
    user = await service.create_user(payload)
    return success("user", user)


@router.patch("/{user_id}", response_model=RecordEnvelope)
async def update_user(
    user_id: str,
    payload: dict[str, Any] = Depends(record_payload),
    service: UserService = Depends(get_user_service),
) -> RecordEnvelope:
    """Merge the given fields into an existing user. The id never changes."""
    user = await service.update_user(user_id, payload)
    return success("user", user)


@router.delete("/{user_id}", response_model=RecordEnvelope)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> RecordEnvelope:
    """Delete a user and return the removed record."""
    user = await service.delete_user(user_id)
    return success("user", user)
