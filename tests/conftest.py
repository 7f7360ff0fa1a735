"""Root conftest — fresh stores and an HTTP client wired to them.

Invariants:
    - Every test gets freshly seeded repositories (no cross-test leakage)
    - Repository/email providers overridden on the app; lifespan never runs
"""

import os

os.environ.setdefault("CATALOG_LOG_FORMAT", "text")

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_api.api.dependencies import (
    get_email_sender, get_product_repository, get_user_repository,
)
from catalog_api.infrastructure.email_sender import MockEmailSender
from catalog_api.infrastructure.memory_repositories import (
    InMemoryProductRepository, InMemoryUserRepository,
)
from catalog_api.main import app


@pytest.fixture
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def email_sender():
    return MockEmailSender()


@pytest.fixture
async def client(product_repo, user_repo, email_sender):
    """FastAPI test client with storage providers overridden."""
    app.dependency_overrides[get_product_repository] = lambda: product_repo
    app.dependency_overrides[get_user_repository] = lambda: user_repo
    app.dependency_overrides[get_email_sender] = lambda: email_sender

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
