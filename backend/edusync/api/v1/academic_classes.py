"""Academic class endpoints."""
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from edusync.core.deps import require_role
from edusync.db.session import get_session
from edusync.models.user import ROLE_ADMIN
from edusync.schemas.academic_class import AcademicClassCreate, AcademicClassOut
from edusync.services import academic_class as class_svc

router = APIRouter()


@router.post(
    "",
    response_model=AcademicClassOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add a class with its sections (ROLE_ADMIN)",
)
async def add_class(
    body: AcademicClassCreate,
    db: Annotated[AsyncSession, Depends(get_session)],
    current_user: Annotated[object, Depends(require_role(ROLE_ADMIN))],
):
    try:
        return await class_svc.add_class(db, body)
    except class_svc.DuplicateClassError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))


@router.get("", response_model=list[AcademicClassOut], summary="List classes (ROLE_ADMIN)")
async def list_classes(
    db: Annotated[AsyncSession, Depends(get_session)],
    current_user: Annotated[object, Depends(require_role(ROLE_ADMIN))],
):
    return await class_svc.list_classes(db)


@router.get("/{class_id}", response_model=AcademicClassOut, summary="Get a class by id (ROLE_ADMIN)")
async def get_class(
    class_id: uuid.UUID,
    db: Annotated[AsyncSession, Depends(get_session)],
    current_user: Annotated[object, Depends(require_role(ROLE_ADMIN))],
):
    try:
        return await class_svc.get_class(db, class_id)
    except class_svc.ClassNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
