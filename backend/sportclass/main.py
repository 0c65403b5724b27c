# backend/sportclass/main.py
"""
SportClass API application.

Run with:
    uvicorn sportclass.main:app --reload
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import settings
from .core.constants import API_DESCRIPTION, API_VERSION
from .database import init_db
from .routes import health, prometheus
from .routes.v1 import contents as contents_v1
from .routes.v1 import lessons as lessons_v1
from .routes.v1 import sports as sports_v1
from .routes.v1 import teachers as teachers_v1

logging.basicConfig(level=settings.log_level, format=settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup/shutdown."""
    logger.info(f"{settings.api_title} starting up...")
    logger.info(f"Environment: {settings.environment}")
    init_db()
    yield
    logger.info(f"{settings.api_title} shutting down...")


app = FastAPI(
    title=settings.api_title,
    description=API_DESCRIPTION,
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=app_lifespan,
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed requests use the same 400 envelope as domain validation errors."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body") or "request"
    reason = first.get("msg", "invalid request")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "message": f"{field}: {reason}",
                "code": "VALIDATION_ERROR",
                "details": {"field": field, "reason": reason},
            }
        },
    )


# Create API v1 router
api_v1 = APIRouter(prefix="/api/v1")

api_v1.include_router(lessons_v1.router, prefix="/lessons")
api_v1.include_router(teachers_v1.router, prefix="/teachers")
api_v1.include_router(sports_v1.router, prefix="/sports")
api_v1.include_router(contents_v1.router, prefix="/contents")

app.include_router(api_v1)
app.include_router(health.router)
app.include_router(prometheus.router)
