"""Seed script: creates roles, an admin user, sample classes and fee types.

Idempotent: checks for existing records before inserting.
Run: python scripts/seed.py
"""
import asyncio
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from edusync.core.config import settings
from edusync.core.security import hash_password
from edusync.core.seed import seed_roles
from edusync.models.academic import AcademicClass, Section
from edusync.models.finance import FeeType
from edusync.models.user import ROLE_ADMIN, Role, User

CLASSES = {
    "Class 9": ["A", "B"],
    "Class 10": ["A", "B", "C"],
}
FEE_TYPES = {
    "Tuition": "Regular teaching fee",
    "Transport": "School bus service",
    "Library": "Library membership and late fees",
}


# ─── Upsert helpers ───────────────────────────────────────────────────────────

async def _upsert_admin(db: AsyncSession, email: str, username: str) -> User:
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalars().first()
    if user:
        print(f"  [skip] User {email}")
        return user
    role = (await db.execute(select(Role).where(Role.name == ROLE_ADMIN))).scalar_one()
    user = User(
        username=username, email=email,
        password_hash=hash_password("changeme123"),
        role_id=role.id, is_active=True,
    )
    db.add(user)
    await db.flush()
    print(f"  [new]  User {email} ({ROLE_ADMIN})")
    return user


async def _upsert_class(db: AsyncSession, name: str, sections: list[str]) -> AcademicClass:
    result = await db.execute(select(AcademicClass).where(AcademicClass.name == name))
    academic_class = result.scalars().first()
    if academic_class:
        print(f"  [skip] Class {name}")
        return academic_class
    academic_class = AcademicClass(name=name, sections=[Section(section_name=s) for s in sections])
    db.add(academic_class)
    await db.flush()
    print(f"  [new]  Class {name} (sections {', '.join(sections)})")
    return academic_class


async def _upsert_fee_type(db: AsyncSession, name: str, description: str) -> FeeType:
    result = await db.execute(select(FeeType).where(FeeType.name == name))
    fee_type = result.scalars().first()
    if fee_type:
        print(f"  [skip] FeeType {name}")
        return fee_type
    fee_type = FeeType(name=name, description=description)
    db.add(fee_type)
    await db.flush()
    print(f"  [new]  FeeType {name}")
    return fee_type


# ─── Main ─────────────────────────────────────────────────────────────────────

async def seed():
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    SessionLocal = async_sessionmaker(engine, expire_on_commit=False)

    async with SessionLocal() as db:
        print("\n── Roles ──")
        created = await seed_roles(db)
        print(f"  {len(created)} new role(s)")

        print("\n── Users ──")
        await _upsert_admin(db, "admin@greenfield.edu", "admin")
        await db.commit()

        print("\n── Classes ──")
        for name, sections in CLASSES.items():
            await _upsert_class(db, name, sections)
        await db.commit()

        print("\n── Fee Types ──")
        for name, description in FEE_TYPES.items():
            await _upsert_fee_type(db, name, description)
        await db.commit()

    await engine.dispose()
    print("\nSeed complete.")


if __name__ == "__main__":
    asyncio.run(seed())
