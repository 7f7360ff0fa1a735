"""Boundary Protocols — contracts between the service layer and storage/notification shells.

Invariants:
    - Services NEVER import a concrete repository — only these Protocols
    - get/delete on a missing id return None/False; update on a missing id raises
      ResourceNotFoundError
    - create() owns identifier assignment (sequential scheme)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: the SQL backend does IO; the in-memory backend complies trivially
"""

from typing import Protocol

from catalog_api.core.product import Product
from catalog_api.core.user import User


class ProductRepository(Protocol):
    """Contract for product storage."""
    async def get_by_id(self, product_id: str) -> Product | None: ...
    async def get_by_category(self, category: str) -> list[Product]: ...
    async def get_in_stock(self) -> list[Product]: ...
    async def get_all(self) -> list[Product]: ...
    async def create(self, product: Product) -> Product: ...
    async def update(self, product: Product) -> Product: ...
    async def delete(self, product_id: str) -> bool: ...


class UserRepository(Protocol):
    """Contract for user storage. No uniqueness enforcement on create."""
    async def get_by_id(self, user_id: str) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...
    async def get_active(self) -> list[User]: ...
    async def create(self, user: User) -> User: ...
    async def update(self, user: User) -> User: ...
    async def delete(self, user_id: str) -> bool: ...
    async def exists(self, user_id: str) -> bool: ...


class EmailSender(Protocol):
    """Contract for outbound email. Returns True when the message was accepted."""
    async def send_email(self, to: str, subject: str, body: str) -> bool: ...
    async def send_welcome_email(self, user_email: str, user_name: str) -> bool: ...
    async def send_password_reset_email(
        self, user_email: str, reset_token: str,
    ) -> bool: ...
