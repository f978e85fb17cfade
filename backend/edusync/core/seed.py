"""Seed reference roles into the database."""
import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from edusync.db.session import AsyncSessionLocal
from edusync.models.user import DEFAULT_ROLES, Role

logger = logging.getLogger(__name__)


async def seed_roles(db: AsyncSession) -> list[str]:
    """Insert any missing default role. Returns the names that were created."""
    result = await db.execute(select(Role.name))
    existing = set(result.scalars().all())

    created = []
    for name in DEFAULT_ROLES:
        if name in existing:
            logger.info("Role already exists: %s, skipping", name)
            continue
        db.add(Role(name=name))
        created.append(name)
        logger.info("Seeded role: %s", name)

    await db.commit()
    return created


async def run_seed() -> None:
    async with AsyncSessionLocal() as db:
        await seed_roles(db)
    logger.info("Seeding complete.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_seed())
