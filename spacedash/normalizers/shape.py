# spacedash/normalizers/shape.py
from typing import List, Optional

from .fields import MISSING, path
from .types import RawPayload, TableRow

_rows_of = path("data", "table", "rows")


def detect_structured_table(payload: RawPayload) -> Optional[List[TableRow]]:
    """
    Look for the AstronomyAPI table shape: {data: {table: {rows: [...]}}}.

    Returns the rows (possibly an empty list) when `data.table.rows` is a list,
    or None when the shape is absent and the generic search should be used.
    Never raises; a row that is not an object becomes an empty TableRow.
    """
    rows = _rows_of(payload)
    if rows is MISSING or not isinstance(rows, list):
        return None

    out: List[TableRow] = []
    for row in rows:
        if not isinstance(row, dict):
            out.append(TableRow())
            continue
        entry = row.get("entry")
        cells = row.get("cells")
        out.append(TableRow(
            entry=entry if isinstance(entry, dict) else {},
            cells=cells if isinstance(cells, list) else [],
        ))
    return out
