import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from spacedash.models import CmsBlock, IssFetchLog, TelemetryLegacy
from spacedash.normalizers.fields import as_number

log = logging.getLogger(__name__)


def _iso(dt: Optional[datetime]) -> Optional[str]:
    return dt.isoformat() if dt is not None else None


def _payload_of(row: IssFetchLog) -> Dict[str, Any]:
    """Stored payloads are JSON objects, but older rows may hold a JSON string."""
    p = row.payload
    if isinstance(p, str):
        try:
            p = json.loads(p)
        except ValueError:
            log.warning("iss_fetch_log row has undecodable payload: id=%s", row.id)
            return {}
    return p if isinstance(p, dict) else {}


# -------------------------------------------------------------------
# Telemetry
# -------------------------------------------------------------------
def latest_telemetry(db: Session, limit: int) -> List[Dict[str, Any]]:
    """Newest rows first."""
    rows = db.execute(
        select(TelemetryLegacy).order_by(TelemetryLegacy.recorded_at.desc()).limit(limit)
    ).scalars().all()
    return [
        {
            "id": t.id,
            "recorded_at": _iso(t.recorded_at),
            "voltage": t.voltage,
            "temp": t.temp,
            "source_file": t.source_file,
        }
        for t in rows
    ]


# -------------------------------------------------------------------
# ISS fetch log
# -------------------------------------------------------------------
def _fetch_log_to_dict(row: IssFetchLog) -> Dict[str, Any]:
    return {
        "id": row.id,
        "fetched_at": _iso(row.fetched_at),
        "source_url": row.source_url,
        "payload": _payload_of(row),
    }


def _last_fetch_rows(db: Session, limit: int) -> List[IssFetchLog]:
    return db.execute(
        select(IssFetchLog).order_by(IssFetchLog.fetched_at.desc(), IssFetchLog.id.desc()).limit(limit)
    ).scalars().all()


def iss_history(db: Session, limit: int) -> List[Dict[str, Any]]:
    return [_fetch_log_to_dict(r) for r in _last_fetch_rows(db, limit)]


def last_iss(db: Session) -> Optional[Dict[str, Any]]:
    rows = _last_fetch_rows(db, 1)
    return _fetch_log_to_dict(rows[0]) if rows else None


def iss_trend_points(db: Session, limit: int) -> List[Dict[str, Any]]:
    """
    Track points for the map and the speed/altitude charts, oldest first.
    Rows without a usable latitude/longitude are skipped.
    """
    points: List[Dict[str, Any]] = []
    for row in reversed(_last_fetch_rows(db, limit)):
        p = _payload_of(row)
        lat = as_number(p.get("latitude"))
        lon = as_number(p.get("longitude"))
        if lat is None or lon is None:
            continue
        points.append({
            "lat": lat,
            "lon": lon,
            "velocity": as_number(p.get("velocity")),
            "altitude": as_number(p.get("altitude")),
            "at": _iso(row.fetched_at),
        })
    return points


# -------------------------------------------------------------------
# CMS blocks
# -------------------------------------------------------------------
def active_cms_block(db: Session, slug: str) -> Optional[CmsBlock]:
    return db.execute(
        select(CmsBlock).where(CmsBlock.slug == slug, CmsBlock.is_active.is_(True)).limit(1)
    ).scalar_one_or_none()
