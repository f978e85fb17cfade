"""Fee structure endpoints."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from edusync.core.deps import require_role
from edusync.db.session import get_session
from edusync.models.user import ROLE_ADMIN
from edusync.schemas.fee_structure import FeeStructureCreate, FeeStructureOut
from edusync.services import fee_structure as fee_svc

router = APIRouter()


@router.post(
    "/structures",
    response_model=FeeStructureOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a fee structure with its particulars (ROLE_ADMIN)",
)
async def create_fee_structure(
    body: FeeStructureCreate,
    db: Annotated[AsyncSession, Depends(get_session)],
    current_user: Annotated[object, Depends(require_role(ROLE_ADMIN))],
):
    try:
        return await fee_svc.create_fee_structure(db, body)
    except fee_svc.FeeTypeNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.get(
    "/structures",
    response_model=list[FeeStructureOut],
    summary="List fee structures with their particulars (ROLE_ADMIN)",
)
async def list_fee_structures(
    db: Annotated[AsyncSession, Depends(get_session)],
    current_user: Annotated[object, Depends(require_role(ROLE_ADMIN))],
):
    return await fee_svc.list_fee_structures(db)
