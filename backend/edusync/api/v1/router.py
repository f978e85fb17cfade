from fastapi import APIRouter

from edusync.api.v1 import academic_classes, auth, fee_structures, import_routes

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(import_routes.router, prefix="/enrollment", tags=["enrollment"])
api_router.include_router(fee_structures.router, prefix="/finance", tags=["finance"])
api_router.include_router(academic_classes.router, prefix="/classes", tags=["classes"])
