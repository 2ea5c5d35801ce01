# client/map_state.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

LatLon = Tuple[float, float]

TRAIL_COLOR = "#1f77b4"
MARKER_COLOR = "#d62728"


def _num(v: Any) -> Optional[float]:
    if isinstance(v, bool):
        return None
    try:
        return float(v)
    except (TypeError, ValueError):
        return None


@dataclass
class IssMapState:
    """
    The ISS map widget: where it is centered, the trail polyline and the marker.
    One instance lives in st.session_state and is handed to whoever updates it.
    """
    center: LatLon = (0.0, 0.0)
    zoom: int = 2
    trail: List[LatLon] = field(default_factory=list)
    marker: LatLon = (0.0, 0.0)

    @classmethod
    def from_last(cls, payload: Optional[Dict[str, Any]]) -> "IssMapState":
        """Initial view from the last known ISS position, world view if unknown."""
        p = payload or {}
        lat, lon = _num(p.get("latitude")), _num(p.get("longitude"))
        if lat is None or lon is None:
            return cls()
        return cls(center=(lat, lon), zoom=3, marker=(lat, lon))

    def apply_points(self, points: List[Dict[str, Any]]) -> None:
        """Replace the trail with the trend points; marker jumps to the newest one."""
        trail = []
        for p in points or []:
            lat, lon = _num(p.get("lat")), _num(p.get("lon"))
            if lat is not None and lon is not None:
                trail.append((lat, lon))
        if not trail:
            return  # keep the previous view rather than blanking the map
        self.trail = trail
        self.marker = trail[-1]

    def to_frame(self) -> pd.DataFrame:
        """Rows for st.map: the trail in small dots, the marker as one large dot."""
        rows = [{"lat": a, "lon": o, "size": 2000, "color": TRAIL_COLOR} for a, o in self.trail]
        rows.append({"lat": self.marker[0], "lon": self.marker[1], "size": 60000, "color": MARKER_COLOR})
        return pd.DataFrame(rows, columns=["lat", "lon", "size", "color"])


def trend_frame(points: List[Dict[str, Any]]) -> pd.DataFrame:
    """Speed/altitude series indexed by fetch time, for st.line_chart."""
    df = pd.DataFrame(points or [], columns=["at", "velocity", "altitude"])
    df["at"] = pd.to_datetime(df["at"], errors="coerce", utc=True)
    return df.dropna(subset=["at"]).set_index("at")
