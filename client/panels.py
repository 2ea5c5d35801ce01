# client/panels.py
"""
Per-panel loaders. Each one fetches, normalizes and returns a PanelResult;
a failure turns into a placeholder message instead of an exception, so one
broken panel never takes the rest of the dashboard down with it.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

import api as API
from spacedash.normalizers import map_feed
from spacedash.views import build_events_view

log = logging.getLogger(__name__)

LOADING_ERROR = "loading error"
NO_DATA = "no data"
NO_EVENTS = "no events found"
BLOCK_NOT_FOUND = "block not found"


@dataclass
class PanelResult:
    ok: bool
    data: Any = None
    message: Optional[str] = None   # placeholder to show when there's nothing to render


def load_events(lat, lon, days) -> PanelResult:
    try:
        payload = API.astro_events(lat, lon, days)
        view = build_events_view(payload)
    except Exception as e:
        log.warning("astro events panel degraded: %s", e)
        return PanelResult(False, message=LOADING_ERROR)
    if not view.rows:
        # raw JSON is still worth showing when nothing was recognised
        return PanelResult(True, data=view, message=NO_EVENTS)
    return PanelResult(True, data=view)


def load_gallery(**params) -> PanelResult:
    try:
        feed = map_feed(API.jwst_feed(**params))
    except Exception as e:
        log.warning("jwst gallery panel degraded: %s", e)
        return PanelResult(False, message=LOADING_ERROR)
    if not feed.items:
        return PanelResult(True, data=feed, message=NO_DATA)
    return PanelResult(True, data=feed)


def load_trend(limit: int = 240) -> PanelResult:
    try:
        js = API.iss_trend(limit)
        points = js.get("points") if isinstance(js, dict) else None
    except Exception as e:
        log.warning("iss trend panel degraded: %s", e)
        return PanelResult(False, message=LOADING_ERROR)
    if not isinstance(points, list) or not points:
        return PanelResult(True, data=[], message=NO_DATA)
    return PanelResult(True, data=points)


def load_last_iss() -> PanelResult:
    try:
        row = API.iss_last()
    except Exception as e:
        log.warning("iss last position unavailable: %s", e)
        return PanelResult(False, message=NO_DATA)
    payload = row.get("payload") if isinstance(row, dict) else None
    return PanelResult(True, data=payload if isinstance(payload, dict) else {})


def load_cms_block(slug: str) -> PanelResult:
    try:
        block = API.cms_block(slug)
    except Exception as e:
        # 404 and connection errors alike end up as the same placeholder
        log.warning("cms block %s unavailable: %s", slug, e)
        return PanelResult(False, message=BLOCK_NOT_FOUND)
    content = block.get("content") if isinstance(block, dict) else None
    if not content:
        return PanelResult(False, message=BLOCK_NOT_FOUND)
    return PanelResult(True, data=content)


def load_list(fetch, **params) -> PanelResult:
    """For the simple {items: [...]} endpoints (telemetry, ISS history)."""
    try:
        js = fetch(**params)
    except Exception as e:
        log.warning("list panel degraded: %s", e)
        return PanelResult(False, message=LOADING_ERROR)
    items = js.get("items") if isinstance(js, dict) else None
    if not items:
        return PanelResult(True, data=[], message=NO_DATA)
    return PanelResult(True, data=items)
