"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vehicle_api.api import router as api_router
from vehicle_api.core.config import settings
from vehicle_api.core.database import SessionLocal, create_tables
from vehicle_api.core.exceptions import register_exception_handlers
from vehicle_api.core.logging import configure_logging
from vehicle_api.security import install_security_filters
from vehicle_api.services.data_initializer import seed_data

configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Create tables and seed demo data on startup when SEED_DATA is enabled."""
    if settings.SEED_DATA:
        create_tables()
        db = SessionLocal()
        try:
            seed_data(db)
        finally:
            db.close()
    logger.info("Vehicle API started (env=%s)", settings.APP_ENV)
    yield


app = FastAPI(
    title="Vehicle API",
    description="Vehicle CRUD protected by a JWT authentication filter.",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Added before CORS so that CORS stays outermost and answers preflight requests.
install_security_filters(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Vehicle API"}
