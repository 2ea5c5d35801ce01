# spacedash/normalizers/fields.py
"""
Priority lookups over loosely-shaped JSON objects.

An accessor is any callable node -> value. `first_present` walks a list of
accessors in order and returns the first value that counts as present.
"""
import math
from typing import Any, Callable, Iterable, Optional

Accessor = Callable[[Any], Any]

# Sentinel for "nothing found", distinct from a legitimate None/"" in the payload
MISSING = object()


def is_present(value: Any) -> bool:
    """None, empty string and False count as absent. Zero does not."""
    if value is None or value is MISSING or value is False:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def key(name: str) -> Accessor:
    """Accessor for a single top-level key."""
    def _get(node: Any) -> Any:
        if isinstance(node, dict):
            return node.get(name, MISSING)
        return MISSING
    return _get


def path(*names: str) -> Accessor:
    """Accessor for a nested key path, e.g. path("eventHighlights", "peak", "date")."""
    def _get(node: Any) -> Any:
        cur = node
        for n in names:
            if not isinstance(cur, dict) or n not in cur:
                return MISSING
            cur = cur[n]
        return cur
    return _get


def keys(*names: str) -> list[Accessor]:
    return [key(n) for n in names]


def first_present(node: Any, accessors: Iterable[Accessor], default: Any = MISSING) -> Any:
    """Evaluate accessors in order; stop at the first present value."""
    for acc in accessors:
        value = acc(node)
        if is_present(value):
            return value
    return default


def as_text(value: Any, default: str = "") -> str:
    """Render a looked-up value for display. Absent -> default."""
    if not is_present(value):
        return default
    if isinstance(value, str):
        return value
    if value is True:
        return "true"
    if isinstance(value, float):
        return _float_text(value)
    return str(value)


def _float_text(value: float) -> str:
    """JS-style number text: -12.0 -> "-12", inf -> "Infinity"."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def first_text(node: Any, accessors: Iterable[Accessor], default: str = "") -> str:
    return as_text(first_present(node, accessors), default)


def as_number(value: Any) -> Optional[float]:
    """Numbers and numeric strings -> float; anything else -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:  # JSON ints have no size cap
            return None
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None
