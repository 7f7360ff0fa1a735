"""Storage Container — process-wide repositories and notification sender.

Invariants:
    - Exactly one Storage per process, built by init_storage() during lifespan
    - Routes reach repositories only through api/dependencies.py, never this module directly
    - backend "memory" needs no IO; backend "sql" creates tables and seeds on first start

Design Decisions:
    - Module-level singleton mirrors the database manager lifecycle: created on
      startup, closed on shutdown, replaceable in tests via dependency overrides
"""

import logging
from dataclasses import dataclass

from catalog_api.core.repository_protocols import (
    EmailSender, ProductRepository, UserRepository,
)
from catalog_api.infrastructure.database import DatabaseSessionManager
from catalog_api.infrastructure.email_sender import MockEmailSender
from catalog_api.infrastructure.memory_repositories import (
    InMemoryProductRepository, InMemoryUserRepository,
)
from catalog_api.infrastructure.sql_repositories import (
    SqlProductRepository, SqlUserRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Storage:
    """Wired collaborators for one process."""
    products: ProductRepository
    users: UserRepository
    email_sender: EmailSender
    db_manager: DatabaseSessionManager | None = None

    async def health_check(self) -> bool:
        if self.db_manager is None:
            return True
        return await self.db_manager.health_check()


storage: Storage | None = None


async def init_storage(
    backend: str = "memory",
    database_url: str | None = None,
    seed: bool = True,
    **db_kwargs,
) -> Storage:
    """Build the process-wide Storage for the configured backend."""
    global storage
    sender = MockEmailSender()
    if backend == "memory":
        storage = Storage(
            products=InMemoryProductRepository(None if seed else []),
            users=InMemoryUserRepository(None if seed else []),
            email_sender=sender,
        )
    elif backend == "sql":
        if not database_url:
            raise ValueError("database_url is required for the sql backend")
        db_manager = DatabaseSessionManager(database_url, **db_kwargs)
        await db_manager.create_schema()
        products = SqlProductRepository(db_manager)
        users = SqlUserRepository(db_manager)
        if seed:
            await products.seed_if_empty()
            await users.seed_if_empty()
        storage = Storage(
            products=products, users=users,
            email_sender=sender, db_manager=db_manager,
        )
    else:
        raise ValueError(f"Unknown storage backend: {backend!r}")
    logger.info(f"Storage initialized ({backend})", extra={"backend": backend})
    return storage


async def close_storage() -> None:
    global storage
    if storage is not None and storage.db_manager is not None:
        await storage.db_manager.dispose()
    storage = None


def get_storage() -> Storage:
    if storage is None:
        raise RuntimeError("Storage not initialized")
    return storage
