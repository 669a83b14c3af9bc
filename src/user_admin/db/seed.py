"""Seed script for populating the users table with development data."""

from __future__ import annotations

import asyncio
import logging

from ..core.config import Settings, get_settings
from ..core.logging import configure_logging
from ..models import User
from ..repositories import UserRepository
from .session import Database

logger = logging.getLogger(__name__)


def _seed_user(number: int) -> User:
    return User(
        first_name=f"First{number}",
        last_name=f"Last{number}",
        initials=f"FL{number}",
        email=f"user{number}@example.com",
    )


async def seed_users(database: Database, *, total: int = 1000, batch_size: int = 100) -> int:
    """Insert ``total`` numbered users in batches, skipping emails already taken.

    Returns the number of rows actually inserted.
    """
    inserted = 0
    for start in range(0, total, batch_size):
        stop = min(start + batch_size, total)
        batch = [_seed_user(number) for number in range(start + 1, stop + 1)]
        async with database.session() as session:
            repository = UserRepository(session)
            existing = await repository.list_existing_emails([user.email for user in batch])
            fresh = [user for user in batch if user.email not in existing]
            session.add_all(fresh)
            await session.commit()
        inserted += len(fresh)
        logger.info(
            "Seeded users %d to %d",
            start + 1,
            stop,
            extra={"inserted": len(fresh), "skipped": len(batch) - len(fresh)},
        )
    return inserted


async def seed(settings: Settings | None = None) -> int:
    """Connect using ``settings``, populate the users table and disconnect."""
    settings = settings or get_settings()
    database = Database.from_settings(settings)
    await database.connect()
    try:
        inserted = await seed_users(
            database,
            total=settings.seed_total_users,
            batch_size=settings.seed_batch_size,
        )
    finally:
        await database.disconnect()
    logger.info("Finished populating users table", extra={"inserted": inserted})
    return inserted


def main() -> None:
    """Entry-point hook for ``python -m`` execution."""
    settings = get_settings()
    configure_logging(settings)
    asyncio.run(seed(settings))


if __name__ == "__main__":  # pragma: no cover - manual execution entry-point
    main()
