# backend/sportclass/routes/health.py
"""
Health check endpoint.

Reports whether the service is running and the lookup store's database
answers a trivial query.
"""

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.constants import API_VERSION
from ..database import get_db

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


class HealthCheckResponse(BaseModel):
    status: str
    version: str
    environment: str
    database: bool


@router.get("/health", response_model=HealthCheckResponse)
def health_check(response: Response, db: Session = Depends(get_db)) -> HealthCheckResponse:
    """
    Basic health check endpoint.

    Returns:
        "healthy", or "degraded" when the database is unreachable.
    """
    try:
        db.execute(text("SELECT 1"))
        db_status = True
        status = "healthy"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        db_status = False
        status = "degraded"

    response.headers["Cache-Control"] = "no-store"
    return HealthCheckResponse(
        status=status,
        version=API_VERSION,
        environment=settings.environment,
        database=db_status,
    )
