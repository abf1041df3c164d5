from fastapi import APIRouter

from .endpoints.analysis import router as analysis_router
from .endpoints.chat import router as chat_router
from .endpoints.health import router as health_router
from .endpoints.profile import router as profile_router
from .endpoints.recommendations import router as recommendations_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "Prayaas API is running"}


api_router.include_router(health_router)
api_router.include_router(profile_router)
api_router.include_router(recommendations_router)
api_router.include_router(analysis_router)
api_router.include_router(chat_router)
