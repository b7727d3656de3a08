"""Liveness check for the RadioHub API and its database."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Always 200 while the process serves requests; `database` reports reachability."""
    connected = check_db_connected(db)
    if not connected:
        logger.warning("Health check: database unreachable")
    return HealthResponse(
        status="ok",
        environment=get_settings().APP_ENV,
        database="connected" if connected else "disconnected",
    )
