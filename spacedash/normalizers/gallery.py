# spacedash/normalizers/gallery.py
import html
import math
from typing import Any

from .fields import as_number, first_text, keys
from .types import FeedResult, GalleryItem


def escape_caption(caption: str) -> str:
    """Captions are rendered as HTML; make sure no markup survives."""
    return html.escape(caption, quote=False)


def map_gallery_item(item: Any) -> GalleryItem:
    """
    {url, link?, caption?} -> GalleryItem.
    Items without a url are kept as-is (no filtering), link falls back to url.
    """
    url = first_text(item, keys("url"))
    return GalleryItem(
        url=url,
        link=first_text(item, keys("link"), url),
        caption=escape_caption(first_text(item, keys("caption"))),
    )


def map_feed(response: Any) -> FeedResult:
    """Map a JWST feed response {items, source, count} to a FeedResult."""
    body = response if isinstance(response, dict) else {}
    raw_items = body.get("items")
    items = tuple(map_gallery_item(it) for it in raw_items) if isinstance(raw_items, list) else ()

    count = as_number(body.get("count"))
    return FeedResult(
        items=items,
        source=first_text(body, keys("source")),
        count=int(count) if count is not None and math.isfinite(count) else len(items),
    )
