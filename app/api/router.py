from fastapi import APIRouter

from api.routes.locale import router as locale_router
from api.routes.system import router as system_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(locale_router)
