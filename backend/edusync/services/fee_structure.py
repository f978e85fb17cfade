"""Fee structures and their particulars."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from edusync.models.finance import FeeParticular, FeeStructure, FeeType
from edusync.schemas.fee_structure import FeeStructureCreate

logger = logging.getLogger(__name__)


class FeeTypeNotFoundError(LookupError):
    pass


async def create_fee_structure(db: AsyncSession, payload: FeeStructureCreate) -> FeeStructure:
    """Create a fee structure and all its particulars in one commit.

    Every particular must reference an existing fee type; the first unknown
    id raises FeeTypeNotFoundError before anything is added to the session.
    """
    structure = FeeStructure(
        name=payload.name,
        academic_year=payload.academic_year,
        description=payload.description,
        is_active=payload.is_active,
        particulars=[],
    )

    for item in payload.particulars:
        fee_type = await db.get(FeeType, item.fee_type_id)
        if fee_type is None:
            raise FeeTypeNotFoundError(f"FeeType not found with id: {item.fee_type_id}")
        structure.particulars.append(FeeParticular(
            name=item.name,
            amount=item.amount,
            frequency=item.frequency,
            fee_type=fee_type,
        ))

    db.add(structure)
    await db.commit()
    logger.info(
        "Created fee structure '%s' (%s) with %d particulars",
        structure.name, structure.academic_year, len(structure.particulars),
    )
    return structure


async def list_fee_structures(db: AsyncSession) -> list[FeeStructure]:
    result = await db.execute(select(FeeStructure).order_by(FeeStructure.id))
    return list(result.scalars().all())
