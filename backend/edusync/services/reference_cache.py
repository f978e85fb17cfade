"""Run-scoped lookup tables for the bulk importer.

Roles and class/sections are read once when an import starts and never
refreshed during the run. Entries are frozen snapshots rather than ORM
instances, so a row that rolls back cannot expire or detach them.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from edusync.models.academic import Section
from edusync.models.user import Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CachedRole:
    id: int
    name: str


@dataclass(frozen=True)
class CachedSection:
    id: int
    class_name: str
    section_name: str


def section_key(class_name: str, section_name: str) -> str:
    return f"{class_name}:{section_name}"


@dataclass(frozen=True)
class ReferenceCache:
    roles: Mapping[str, CachedRole] = field(default_factory=lambda: MappingProxyType({}))
    sections: Mapping[str, CachedSection] = field(default_factory=lambda: MappingProxyType({}))

    def role(self, name: str) -> CachedRole | None:
        return self.roles.get(name)

    def section(self, class_name: str, section_name: str) -> CachedSection | None:
        return self.sections.get(section_key(class_name, section_name))


def build_reference_cache(db: Session) -> ReferenceCache:
    """Snapshot every role by name and every section by "<class>:<section>"."""
    roles = {
        role.name: CachedRole(id=role.id, name=role.name)
        for role in db.execute(select(Role)).scalars().all()
    }

    # Eager-load the parent class so building the key costs no extra query
    sections_stmt = select(Section).options(joinedload(Section.academic_class))
    sections = {}
    for section in db.execute(sections_stmt).scalars().all():
        class_name = section.academic_class.name
        sections[section_key(class_name, section.section_name)] = CachedSection(
            id=section.id,
            class_name=class_name,
            section_name=section.section_name,
        )

    logger.info("Reference cache built with %d roles and %d sections", len(roles), len(sections))
    return ReferenceCache(roles=MappingProxyType(roles), sections=MappingProxyType(sections))
