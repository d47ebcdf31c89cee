"""Router de mídia: agrega os endpoints de importação."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.media.url_import import router as url_import_router

router = APIRouter()

# POST/OPTIONS /import-url (montado sob /api)
router.include_router(url_import_router)
