import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from spacedash.db import get_db
from spacedash.repositories import latest_telemetry
from spacedash.schemas import TelemetryList
from spacedash.settings import TELEMETRY_LIMIT

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["telemetry"])


@router.get("/telemetry", response_model=TelemetryList)
def list_telemetry(
    limit: int = Query(TELEMETRY_LIMIT, ge=1, le=200, description="Max rows, newest first"),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """Latest rows of the legacy telemetry table: {"items": [...]}."""
    try:
        return {"items": latest_telemetry(db, limit)}
    except SQLAlchemyError as e:
        log.exception("telemetry query failed")
        raise HTTPException(500, f"Telemetry query failed: {e}")
