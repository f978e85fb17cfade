"""Tests for role seeding."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select

from edusync.core.seed import seed_roles
from edusync.models import Role
from edusync.models.enums import StaffType
from edusync.models.user import DEFAULT_ROLES, ROLE_ADMIN, ROLE_STUDENT, staff_role_name


# ─── Helpers ──────────────────────────────────────────────────────────────────

def make_mock_session(existing_names):
    """AsyncSession stand-in whose role query returns ``existing_names``."""
    result = MagicMock()
    result.scalars.return_value.all.return_value = list(existing_names)
    session = AsyncMock()
    session.execute = AsyncMock(return_value=result)
    session.add = MagicMock()
    return session


def added_roles(session) -> list[Role]:
    return [call.args[0] for call in session.add.call_args_list]


# ─── Tests ────────────────────────────────────────────────────────────────────

def test_default_roles_are_distinct():
    assert len(DEFAULT_ROLES) == len(set(DEFAULT_ROLES))
    assert {ROLE_ADMIN, ROLE_STUDENT} <= set(DEFAULT_ROLES)
    assert {staff_role_name(t) for t in StaffType} <= set(DEFAULT_ROLES)


@pytest.mark.asyncio
async def test_seed_roles_twice_on_empty_database(session_factory):
    """First run creates every role once and commits cleanly; second run adds nothing."""
    first = make_mock_session(existing_names=[])

    created = await seed_roles(first)

    assert created == list(DEFAULT_ROLES)
    first.commit.assert_awaited_once()

    # Persist what the first run added; a repeated name would break roles.name UNIQUE
    with session_factory() as db, db.begin():
        db.add_all(Role(name=role.name) for role in added_roles(first))
    with session_factory() as db:
        stored = db.execute(select(Role.name)).scalars().all()
    assert sorted(stored) == sorted(DEFAULT_ROLES)

    second = make_mock_session(existing_names=stored)

    assert await seed_roles(second) == []
    second.add.assert_not_called()
