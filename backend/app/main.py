"""FastAPI application entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from secure import Secure
from asgi_correlation_id import CorrelationIdMiddleware

from app.api import api_router
from app.api.errors import register_exception_handlers
from app.core.config import get_settings
from app.core.logging import configure_logging
from app.db.session import dispose_engine
from app.services.bootstrap_service import ensure_pet_types

logger = logging.getLogger(__name__)

settings = get_settings()

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.seed_pet_types:
        try:
            await ensure_pet_types()
        except Exception:  # pragma: no cover - best effort bootstrap
            logger.exception("Failed to seed pet types")
    try:
        yield
    finally:
        await dispose_engine()


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin for origin in settings.cors_allow_origins if origin],
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID", "Location"],
)
app.add_middleware(CorrelationIdMiddleware, header_name="X-Request-ID")

_secure_headers = Secure()


@app.middleware("http")
async def _apply_security_headers(request, call_next):
    response = await call_next(request)
    _secure_headers.set_headers(response)
    return response


register_exception_handlers(app)

app.include_router(api_router)


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Return a simple welcome message."""
    return {"message": settings.app_name}
