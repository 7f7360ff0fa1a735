"""Route Dependencies — FastAPI providers for repositories and services.

Invariants:
    - Routes obtain services only through these providers
    - Repository providers are the override points for tests
      (app.dependency_overrides[get_product_repository] = ...)
"""

from fastapi import Depends

from catalog_api.core.repository_protocols import (
    EmailSender, ProductRepository, UserRepository,
)
from catalog_api.infrastructure.storage import get_storage
from catalog_api.services.product_service import ProductService
from catalog_api.services.user_service import UserService


def get_product_repository() -> ProductRepository:
    return get_storage().products


def get_user_repository() -> UserRepository:
    return get_storage().users


def get_email_sender() -> EmailSender:
    return get_storage().email_sender


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
    email_sender: EmailSender = Depends(get_email_sender),
) -> UserService:
    return UserService(repository, email_sender)
