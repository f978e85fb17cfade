"""Academic classes and their sections."""
import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from edusync.models.academic import AcademicClass, Section
from edusync.schemas.academic_class import AcademicClassCreate

logger = logging.getLogger(__name__)


class ClassNotFoundError(LookupError):
    pass


class DuplicateClassError(ValueError):
    pass


async def add_class(db: AsyncSession, payload: AcademicClassCreate) -> AcademicClass:
    name = payload.name.strip()
    existing = await db.execute(select(AcademicClass).where(AcademicClass.name == name))
    if existing.scalar_one_or_none() is not None:
        raise DuplicateClassError(f"Class '{name}' already exists.")

    # Blank and repeated section names are dropped, order kept
    section_names = dict.fromkeys(s.strip() for s in payload.sections if s.strip())
    academic_class = AcademicClass(
        name=name,
        sections=[Section(section_name=s) for s in section_names],
    )
    db.add(academic_class)
    try:
        await db.commit()
    except IntegrityError:
        # Concurrent insert of the same name
        await db.rollback()
        raise DuplicateClassError(f"Class '{name}' already exists.")
    logger.info("Added class '%s' with %d sections", name, len(section_names))
    return academic_class


async def list_classes(db: AsyncSession) -> list[AcademicClass]:
    result = await db.execute(select(AcademicClass).order_by(AcademicClass.name))
    return list(result.scalars().all())


async def get_class(db: AsyncSession, class_id: uuid.UUID) -> AcademicClass:
    result = await db.execute(select(AcademicClass).where(AcademicClass.uuid == class_id))
    academic_class = result.scalar_one_or_none()
    if academic_class is None:
        raise ClassNotFoundError(f"Class not found with id: {class_id}")
    return academic_class
