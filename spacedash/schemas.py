# spacedash/schemas.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel

class TelemetryItem(BaseModel):
    id: int
    recorded_at: Optional[str] = None   # ISO timestamp
    voltage: Optional[float] = None
    temp: Optional[float] = None
    source_file: Optional[str] = None

class TelemetryList(BaseModel):
    items: List[TelemetryItem] = []

class IssFetch(BaseModel):
    id: int
    fetched_at: Optional[str] = None
    source_url: str
    payload: Dict[str, Any] = {}        # upstream JSON as stored

class IssHistory(BaseModel):
    items: List[IssFetch] = []

class TrendPoint(BaseModel):
    lat: float
    lon: float
    velocity: Optional[float] = None    # km/h
    altitude: Optional[float] = None    # km
    at: Optional[str] = None

class IssTrend(BaseModel):
    points: List[TrendPoint] = []

class CmsBlockOut(BaseModel):
    slug: str
    content: str
