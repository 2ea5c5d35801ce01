# spacedash/views.py
"""
Display adapters: turn normalized feed results into what the dashboard shows.

Nothing here talks to the network or to Streamlit, so the placeholder,
truncation and escaping rules can be tested on their own.
"""
import html
import json
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from spacedash.normalizers import FeedResult, GalleryItem, NormalizedEvent, normalize_events
from spacedash.settings import EVENTS_DISPLAY_LIMIT

PLACEHOLDER = "—"


# -------------------------------------------------------------------
# Astro events table
# -------------------------------------------------------------------
@dataclass(frozen=True)
class EventRow:
    index: int
    name: str
    type: str
    when: str
    extra: str


@dataclass
class EventsView:
    rows: List[EventRow] = field(default_factory=list)
    total: int = 0          # before truncation
    raw_json: str = ""      # full upstream payload, pretty-printed

    @property
    def truncated(self) -> bool:
        return self.total > len(self.rows)


def event_row(index: int, ev: NormalizedEvent) -> EventRow:
    """Empty fields become the placeholder; an empty `extra` stays blank."""
    return EventRow(
        index=index,
        name=ev.name or PLACEHOLDER,
        type=ev.type or PLACEHOLDER,
        when=ev.when or PLACEHOLDER,
        extra=ev.extra or "",
    )


def pretty_json(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        # not JSON-serializable (or cyclic): still show something
        return repr(payload)


def build_events_view(
    payload: Any,
    limit: int = EVENTS_DISPLAY_LIMIT,
    events: Sequence[NormalizedEvent] | None = None,
) -> EventsView:
    if events is None:
        events = normalize_events(payload)
    shown = events[: max(0, limit)]
    return EventsView(
        rows=[event_row(i, ev) for i, ev in enumerate(shown, start=1)],
        total=len(events),
        raw_json=pretty_json(payload),
    )


def events_records(view: EventsView) -> List[Dict[str, Any]]:
    """Rows as plain dicts, column names as shown in the table header."""
    return [
        {"#": r.index, "Body": r.name, "Event": r.type, "When (UTC)": r.when, "Extra": r.extra}
        for r in view.rows
    ]


def events_caption(view: EventsView) -> str:
    if view.truncated:
        return f"Showing {len(view.rows)} of {view.total} events"
    return f"{view.total} events"


# -------------------------------------------------------------------
# JWST gallery
# -------------------------------------------------------------------
def gallery_figure_html(item: GalleryItem) -> str:
    # caption was escaped by the mapper; attributes are escaped here
    href = html.escape(item.link or item.url, quote=True)
    src = html.escape(item.url, quote=True)
    return (
        '<figure class="jwst-item">'
        f'<a href="{href}" target="_blank" rel="noreferrer">'
        f'<img loading="lazy" src="{src}" alt="JWST"></a>'
        f'<figcaption class="jwst-cap">{item.caption}</figcaption>'
        "</figure>"
    )


GALLERY_CSS = """
<style>
.jwst-track{display:flex;gap:.75rem;overflow-x:auto;scroll-snap-type:x mandatory;padding:.25rem}
.jwst-item{flex:0 0 180px;scroll-snap-align:start;margin:0}
.jwst-item img{width:100%;height:180px;object-fit:cover;border-radius:.5rem}
.jwst-cap{font-size:.85rem;margin-top:.25rem}
</style>
"""


def gallery_html(items: Sequence[GalleryItem]) -> str:
    figures = "".join(gallery_figure_html(it) for it in items)
    return f'{GALLERY_CSS}<div class="jwst-track">{figures}</div>'


def feed_info(feed: FeedResult) -> str:
    return f"Source: {feed.source or PLACEHOLDER} · Showing {feed.count or 0}"


def shift_window(start: int, delta: int, total: int, size: int) -> int:
    """Prev/next paging over the gallery track; result always a valid start."""
    if total <= 0 or size <= 0:
        return 0
    last_start = max(0, total - size)
    return max(0, min(start + delta, last_start))


# -------------------------------------------------------------------
# ISS metrics
# -------------------------------------------------------------------
def format_metric(value: Any) -> str:
    """27598.4 -> '27 598'; anything non-numeric -> placeholder."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return PLACEHOLDER
    try:
        num = float(value)
    except (ValueError, OverflowError):
        return PLACEHOLDER
    if not math.isfinite(num):
        return PLACEHOLDER
    return f"{num:,.0f}".replace(",", " ")
