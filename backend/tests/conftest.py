"""Shared fixtures: an in-memory SQLite database with reference data seeded."""
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from edusync.db.base import Base
from edusync.models import AcademicClass, Role, Section
from edusync.models.user import DEFAULT_ROLES

CLASSES = {
    "Class 9": ["A"],
    "Class 10": ["A", "B"],
}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _sqlite_pragmas(dbapi_conn, _rec):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Empty schema, no reference data."""
    return sessionmaker(bind=engine, expire_on_commit=False)


def seed_reference_data(factory, roles=DEFAULT_ROLES, classes=None):
    classes = CLASSES if classes is None else classes
    with factory() as db, db.begin():
        db.add_all(Role(name=name) for name in roles)
        for class_name, sections in classes.items():
            db.add(AcademicClass(
                name=class_name,
                sections=[Section(section_name=s) for s in sections],
            ))


@pytest.fixture
def seeded_factory(session_factory):
    """All default roles plus Class 9 (A) and Class 10 (A, B)."""
    seed_reference_data(session_factory)
    return session_factory


@pytest.fixture
def fast_password_hash(monkeypatch):
    """Swap bcrypt for a cheap stand-in; rows are hashed once each."""
    monkeypatch.setattr(
        "edusync.services.registration.hash_password", lambda password: f"hashed:{password}"
    )


@pytest.fixture
def seed(session_factory):
    """Seed custom reference data: ``seed(roles=[...], classes={...})``."""
    return lambda **kwargs: seed_reference_data(session_factory, **kwargs)
