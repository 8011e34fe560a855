import math
from typing import Dict, List, Optional

from .columns import ColumnMap


RECORD_FIELDS = ["type", "id", "name", "lat", "lon"]


def parse_coordinate(s: str) -> Optional[float]:
    # ASCII decimals only, no digit separators
    if not s.isascii() or "_" in s:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    if not math.isfinite(v):
        return None
    return v


def row_to_record(cols: List[str], columns: ColumnMap) -> Optional[Dict]:
    """
    Map one tokenized row onto a record dict.
    Returns None for rows that cannot carry a point: too short for the positional
    layout, or missing/unparsable coordinates.
    """
    if not cols or not columns.accepts(cols):
        return None
    lat = parse_coordinate(columns.get(cols, "lat"))
    lon = parse_coordinate(columns.get(cols, "lon"))
    if lat is None or lon is None:
        return None
    return {
        "type": columns.get(cols, "type"),
        "id": columns.get(cols, "id"),
        "name": columns.get(cols, "name"),
        "lat": lat,
        "lon": lon,
    }
