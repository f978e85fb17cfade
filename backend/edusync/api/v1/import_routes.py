"""CSV bulk import endpoint for students and staff."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session, sessionmaker

from edusync.core.config import settings
from edusync.core.deps import require_role
from edusync.db.session import get_sync_session_factory
from edusync.models.user import ROLE_ADMIN
from edusync.schemas.imports import ImportReport
from edusync.services.bulk_import import MalformedImportFileError, import_users

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/import/{user_type}",
    response_model=ImportReport,
    summary="Bulk import students or staff from CSV (ROLE_ADMIN)",
)
async def import_users_csv(
    user_type: str,
    session_factory: Annotated[sessionmaker[Session], Depends(get_sync_session_factory)],
    current_user: Annotated[object, Depends(require_role(ROLE_ADMIN))],
    file: UploadFile = File(...),
):
    content = await file.read()
    logger.info("Bulk import of %s requested: %s (%d bytes)", user_type, file.filename, len(content))

    # Row-by-row sync transactions; keep them off the event loop
    try:
        return await run_in_threadpool(
            import_users,
            session_factory,
            content,
            user_type,
            settings.BULK_IMPORT_DEFAULT_PASSWORD,
        )
    except MalformedImportFileError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
