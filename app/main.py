import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.forms import router as forms_router
from app.api.health import router as health_router
from app.api.root import router as root_router
from app.core.config import settings
from app.core.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL, settings.log_format)
    logger.info(f"HR Forms Service started (env={settings.APP_ENV})")
    yield
    logger.info("HR Forms Service shutting down")


app = FastAPI(title="HR Forms Service", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(forms_router)
