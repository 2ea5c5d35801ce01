# spacedash/normalizers/events.py
import math
from typing import Any, Iterable, List, Optional

from .base import EventNormalizer
from .fields import as_number, first_present, first_text, is_present, keys, path
from .types import NormalizedEvent, RawPayload, TableRow


# -------------------------------------------------------------------
# Structured AstronomyAPI table: data.table.rows[].cells[]
# -------------------------------------------------------------------
UNKNOWN_BODY = "Unknown"
UNKNOWN_TYPE = "unknown"

# A peak wins; eclipse phases fall back to their start times
CELL_WHEN = [
    path("eventHighlights", "peak", "date"),
    path("eventHighlights", "partialStart", "date"),
    path("eventHighlights", "totalStart", "date"),
    path("date"),
    path("time"),
]
_obscuration = path("extraInfo", "obscuration")


def format_obscuration(value: Any) -> Optional[str]:
    """0.873 -> 'Obscuration: 87%'. Non-numeric values -> None."""
    frac = as_number(value)
    if frac is None or not math.isfinite(frac):
        return None
    pct = int(math.floor(frac * 100 + 0.5))   # half-up, not banker's rounding
    return f"Obscuration: {pct}%"


def cell_extra(cell: Any) -> str:
    obscuration = _obscuration(cell)
    if is_present(obscuration):
        text = format_obscuration(obscuration)
        if text is not None:
            return text
    return first_text(cell, [path("extra")])


class StructuredTableNormalizer:
    """
    One event per cell, row-then-cell order. Works on rows already found by
    detect_structured_table, so the dispatcher checks the shape only once.
    """

    def normalize_rows(self, rows: Iterable[TableRow]) -> List[NormalizedEvent]:
        out: List[NormalizedEvent] = []
        for row in rows:
            body_name = first_text(row.entry, [path("name")], UNKNOWN_BODY)
            for cell in row.cells:
                out.append(NormalizedEvent(
                    name=body_name,
                    type=first_text(cell, [path("type")], UNKNOWN_TYPE),
                    when=first_text(cell, CELL_WHEN),
                    extra=cell_extra(cell),
                ))
        return out


# -------------------------------------------------------------------
# Generic depth-first search for event-looking objects
# -------------------------------------------------------------------
NAME_FIELDS = keys("name", "body", "object", "target")
TYPE_FIELDS = keys("type", "event_type", "category")
WHEN_FIELDS = keys("time", "date", "occursAt", "peak", "instant")
EXTRA_FIELDS = keys("magnitude", "mag", "altitude", "note")


def looks_like_event(node: Any) -> bool:
    return (
        isinstance(node, dict)
        and is_present(first_present(node, TYPE_FIELDS))
        and is_present(first_present(node, NAME_FIELDS))
    )


def event_from_node(node: dict) -> NormalizedEvent:
    return NormalizedEvent(
        name=first_text(node, NAME_FIELDS),
        type=first_text(node, TYPE_FIELDS),
        when=first_text(node, WHEN_FIELDS),
        extra=first_text(node, EXTRA_FIELDS),
    )


class DepthFirstNormalizer(EventNormalizer):
    """
    Pre-order walk over lists (by element) and mappings (by value).
    Every node is visited, including the children of matching nodes.
    Uses an explicit stack plus a visited set so that deep or cyclic
    object graphs neither blow the recursion limit nor loop forever.
    """

    def normalize(self, payload: RawPayload) -> List[NormalizedEvent]:
        out: List[NormalizedEvent] = []
        seen: set[int] = set()
        stack: List[Any] = [payload]

        while stack:
            node = stack.pop()
            if isinstance(node, dict):
                children = list(node.values())
            elif isinstance(node, list):
                children = node
            else:
                continue  # scalars carry nothing

            if id(node) in seen:
                continue
            seen.add(id(node))

            if looks_like_event(node):
                out.append(event_from_node(node))

            # reversed so the first child is popped first (document order)
            stack.extend(reversed(children))
        return out
