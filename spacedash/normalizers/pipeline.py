import logging
from typing import List
from .base import EventNormalizer
from .events import DepthFirstNormalizer, StructuredTableNormalizer
from .shape import detect_structured_table
from .types import NormalizedEvent, RawPayload

log = logging.getLogger(__name__)

class ShapeDispatchNormalizer(EventNormalizer):
    """
    Picks exactly one strategy per payload:
    the structured table path when `data.table.rows` is a list,
    otherwise the generic depth-first search. The two are never combined.
    """
    def __init__(self, structured: StructuredTableNormalizer, fallback: EventNormalizer):
        self.structured = structured
        self.fallback = fallback

    def normalize(self, payload: RawPayload) -> List[NormalizedEvent]:
        rows = detect_structured_table(payload)
        if rows is not None:
            events = self.structured.normalize_rows(rows)
            log.debug("astro payload: structured table, rows=%d events=%d", len(rows), len(events))
        else:
            events = self.fallback.normalize(payload)
            log.debug("astro payload: no table shape, depth-first events=%d", len(events))
        return events

def get_default_normalizer() -> EventNormalizer:
    """Factory for the astro events normalizer used by the dashboard."""
    return ShapeDispatchNormalizer(StructuredTableNormalizer(), DepthFirstNormalizer())

def normalize_events(payload: RawPayload) -> List[NormalizedEvent]:
    return get_default_normalizer().normalize(payload)
