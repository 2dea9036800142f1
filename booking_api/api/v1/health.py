from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking_api.api.dependencies import get_session
from booking_api.schemas import HealthResponse, RootResponse

router = APIRouter()


@router.get("", response_model=RootResponse)
def root():
    return RootResponse(
        message="Car Service API is running!", timestamp=datetime.now(timezone.utc)
    )


@router.get("/health", response_model=HealthResponse)
def health_check(session: Session = Depends(get_session)):
    now = datetime.now(timezone.utc)
    try:
        session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return HealthResponse(status="DEGRADED", timestamp=now, database="Disconnected")
    return HealthResponse(timestamp=now)
