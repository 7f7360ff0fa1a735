"""User Service — validation, email uniqueness and welcome notification.

Invariants:
    - Blank ids are rejected (ValidationError) before any repository call
    - Email uniqueness (case-insensitive) is enforced here, not in the repository
    - A user is created once persisted; the welcome email never changes that outcome
    - update() replaces email, names and active flag; id and created_at are kept

Design Decisions:
    - Welcome email is sent after persistence. A False result is logged as a
      warning; a NotificationError is logged with traceback. Neither rolls back
"""

import logging
from datetime import datetime, timezone

from catalog_api.core.errors import (
    ConflictError, NotificationError, ResourceNotFoundError, ValidationError,
)
from catalog_api.core.identifiers import is_blank, new_opaque_id
from catalog_api.core.repository_protocols import EmailSender, UserRepository
from catalog_api.core.user import User

logger = logging.getLogger(__name__)


class UserService:
    """User account use cases."""

    def __init__(self, repository: UserRepository, email_sender: EmailSender):
        if repository is None:
            raise ValueError("repository is required")
        if email_sender is None:
            raise ValueError("email_sender is required")
        self._repository = repository
        self._email_sender = email_sender

    async def get_by_id(self, user_id: str | None) -> User | None:
        if is_blank(user_id):
            raise ValidationError("User ID cannot be null or empty", "user_id")
        return await self._repository.get_by_id(user_id)

    async def get_by_email(self, email: str | None) -> User | None:
        if is_blank(email):
            return None
        return await self._repository.get_by_email(email)

    async def create(self, user: User | None) -> User:
        if user is None:
            raise ValidationError("User is required", "user")
        if not user.is_email_valid():
            raise ValidationError("Invalid email address", "email")

        if await self._repository.get_by_email(user.email) is not None:
            raise ConflictError(f"User with email {user.email} already exists")

        user.id = new_opaque_id()
        user.created_at = datetime.now(timezone.utc)
        created = await self._repository.create(user)
        logger.info("Created user", extra={"user_id": created.id})

        await self._send_welcome(created)
        return created

    async def _send_welcome(self, user: User) -> None:
        try:
            sent = await self._email_sender.send_welcome_email(
                user.email, user.full_name,
            )
        except NotificationError:
            logger.error(
                "Welcome email failed",
                extra={"user_id": user.id, "email": user.email},
                exc_info=True,
            )
            return
        if not sent:
            logger.warning(
                "Welcome email was not accepted",
                extra={"user_id": user.id, "email": user.email},
            )

    async def get_active_users(self) -> list[User]:
        return await self._repository.get_active()

    async def deactivate(self, user_id: str) -> bool:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            return False
        user.is_active = False
        await self._repository.update(user)
        logger.info("Deactivated user", extra={"user_id": user_id})
        return True

    async def update(self, user: User | None) -> User:
        if user is None:
            raise ValidationError("User is required", "user")
        if is_blank(user.id):
            raise ValidationError("User ID is required for updates", "id")
        if await self._repository.get_by_id(user.id) is None:
            raise ResourceNotFoundError("User", user.id)
        return await self._repository.update(user)
