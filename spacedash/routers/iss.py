import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from spacedash.db import get_db
from spacedash.repositories import iss_history, iss_trend_points, last_iss
from spacedash.schemas import IssFetch, IssHistory, IssTrend
from spacedash.settings import ISS_HISTORY_LIMIT, ISS_TREND_LIMIT

log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Router setup
# --------------------------------------------------------------------
router = APIRouter(prefix="/api/iss", tags=["iss"])


@router.get("/last", response_model=IssFetch)
def get_last(db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Most recent ISS fetch (payload carries latitude/longitude/velocity/altitude)."""
    try:
        row = last_iss(db)
    except SQLAlchemyError as e:
        log.exception("iss last query failed")
        raise HTTPException(500, f"ISS query failed: {e}")
    if row is None:
        raise HTTPException(404, "No ISS position data available")
    return row


@router.get("/trend", response_model=IssTrend)
def get_trend(
    limit: int = Query(ISS_TREND_LIMIT, ge=1, le=1000, description="How many recent fetches to plot"),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """
    Track for the map and charts.

    Response JSON:
      {"points": [{"lat", "lon", "velocity", "altitude", "at"}, ...]}  # oldest first
    """
    try:
        return {"points": iss_trend_points(db, limit)}
    except SQLAlchemyError as e:
        log.exception("iss trend query failed")
        raise HTTPException(500, f"ISS query failed: {e}")


@router.get("/history", response_model=IssHistory)
def get_history(
    limit: int = Query(ISS_HISTORY_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    try:
        return {"items": iss_history(db, limit)}
    except SQLAlchemyError as e:
        log.exception("iss history query failed")
        raise HTTPException(500, f"ISS query failed: {e}")
