from typing import Dict, List, Optional, Tuple


HEADER_SENTINEL = "::type"

# Overpass writes "::type"/"::id" for out:csv metadata columns, "@type"/"@id" in older exports.
FIELD_SYNONYMS: Dict[str, Tuple[str, ...]] = {
    "type": ("::type", "@type", "type"),
    "id": ("::id", "@id", "id"),
    "name": ("name",),
    "lat": ("::lat", "@lat", "lat"),
    "lon": ("::lon", "@lon", "lon"),
}

# type,id,name,building,addr:housenumber,addr:street,lat,lon
POSITIONAL_FIELDS: Dict[str, int] = {"type": 0, "id": 1, "name": 2, "lat": 6, "lon": 7}
POSITIONAL_WIDTH = 8


def trim(s: str) -> str:
    return s.strip(" \t")


def looks_like_header(cols: List[str]) -> bool:
    if not cols:
        return False
    c0 = cols[0].lower()
    return "type" in c0 or "@type" in c0 or c0 == HEADER_SENTINEL


class ColumnMap:
    """
    Resolves logical fields (type, id, name, lat, lon) out of a tokenized row.
    Built once from the header row, or positional when the export has no header.
    """

    def __init__(self, index: Optional[Dict[str, int]] = None):
        self.index = index

    @classmethod
    def from_header(cls, cols: List[str]) -> "ColumnMap":
        index: Dict[str, int] = {}
        for i, col in enumerate(cols):
            index[trim(col).lower()] = i
        return cls(index)

    @classmethod
    def positional(cls) -> "ColumnMap":
        return cls(None)

    @property
    def has_header(self) -> bool:
        return self.index is not None

    def accepts(self, cols: List[str]) -> bool:
        return self.has_header or len(cols) >= POSITIONAL_WIDTH

    def get(self, cols: List[str], field: str) -> str:
        if self.index is None:
            return trim(cols[POSITIONAL_FIELDS[field]])
        for key in FIELD_SYNONYMS[field]:
            i = self.index.get(key)
            if i is None or i >= len(cols):
                continue
            value = trim(cols[i])
            if value:
                return value
        return ""
