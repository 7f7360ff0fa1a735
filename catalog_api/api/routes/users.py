"""User Routes — registration, lookup, full-record update and deactivation.

Invariants:
    - /by-email is registered before /{user_id}
    - PUT requires the body id to equal the path id (InvalidOperationError otherwise)
    - DELETE deactivates (is_active = False); the record stays in the store
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from catalog_api.api.dependencies import get_user_service
from catalog_api.core.errors import InvalidOperationError, ResourceNotFoundError
from catalog_api.schemas.user import UserCreate, UserResponse, UserUpdate
from catalog_api.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_active_users(service: UserService = Depends(get_user_service)):
    return [UserResponse.from_entity(u) for u in await service.get_active_users()]


@router.get("/by-email", response_model=UserResponse)
async def get_user_by_email(
    email: str = Query(""), service: UserService = Depends(get_user_service),
):
    user = await service.get_by_email(email)
    if user is None:
        raise ResourceNotFoundError(
            "User", email, message=f"User with email {email} not found",
        )
    return UserResponse.from_entity(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, service: UserService = Depends(get_user_service),
):
    user = await service.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundError("User", user_id)
    return UserResponse.from_entity(user)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """Register a user and send the welcome email."""
    created = await service.create(body.to_entity())
    response.headers["Location"] = f"{router.prefix}/{created.id}"
    return UserResponse.from_entity(created)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    if body.id != user_id:
        raise InvalidOperationError("User ID mismatch")
    updated = await service.update(body.to_entity())
    return UserResponse.from_entity(updated)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def deactivate_user(
    user_id: str, service: UserService = Depends(get_user_service),
):
    if not await service.deactivate(user_id):
        raise ResourceNotFoundError("User", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
