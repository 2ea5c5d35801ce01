# spacedash/normalizers/types.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

# Whatever json.loads() hands back for an upstream response
RawPayload = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


@dataclass(frozen=True)
class NormalizedEvent:
    """One row of the astro events table. Missing source fields stay empty."""
    name: str = ""
    type: str = ""
    when: str = ""
    extra: str = ""


@dataclass(frozen=True)
class GalleryItem:
    url: str = ""
    link: str = ""
    caption: str = ""   # already HTML-escaped


@dataclass(frozen=True)
class FeedResult:
    items: Tuple[GalleryItem, ...] = ()
    source: str = ""
    count: int = 0


@dataclass
class TableRow:
    """A row of the AstronomyAPI `data.table.rows[]` shape."""
    entry: Dict[str, Any] = field(default_factory=dict)
    cells: List[Any] = field(default_factory=list)
