from .pipeline import get_default_normalizer, normalize_events, ShapeDispatchNormalizer
from .events import StructuredTableNormalizer, DepthFirstNormalizer
from .gallery import map_feed, map_gallery_item
from .shape import detect_structured_table
from .types import FeedResult, GalleryItem, NormalizedEvent, RawPayload, TableRow
from .base import EventNormalizer

__all__ = [
    "get_default_normalizer",
    "normalize_events",
    "ShapeDispatchNormalizer",
    "StructuredTableNormalizer",
    "DepthFirstNormalizer",
    "map_feed",
    "map_gallery_item",
    "detect_structured_table",
    "FeedResult",
    "GalleryItem",
    "NormalizedEvent",
    "RawPayload",
    "TableRow",
    "EventNormalizer",
]
