import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from prayaas.api.main import api_router

from .config import settings
from .version import __version__


def configure_logging() -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    configure_logging()
    logger.info(f"{settings.ASSISTANT_NAME} advisory service v{__version__} starting ({settings.APP_ENV})")
    yield
    logger.info("Advisory service stopped")


app = FastAPI(
    title="Prayaas",
    description="Insurance advisory engine: focus-area recommendations, policy scoring and topic-guided chat",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
