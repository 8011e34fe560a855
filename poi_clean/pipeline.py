import logging
from typing import Dict, List

import pandas as pd

from .columns import ColumnMap, looks_like_header
from .config import CleanOptions
from .filters import keep_record
from .geometry import centroid, max_extent_km, project_local_m
from .io_utils import iter_rows, write_outputs
from .normalize import RECORD_FIELDS, row_to_record


logger = logging.getLogger(__name__)


class CleanError(RuntimeError):
    pass


class InputOpenError(CleanError):
    pass


class OutputOpenError(CleanError):
    pass


class NoUsableRowsError(CleanError):
    pass


def read_points(f, options: CleanOptions) -> pd.DataFrame:
    """
    Tokenize, map and filter every row of an open export.
    Rows are read with the fixed 8-column overpass order until a header row
    shows up; from then on columns are resolved by name.
    """
    columns = ColumnMap.positional()
    rows: List[Dict] = []
    skipped = 0
    for cols in iter_rows(f):
        if not columns.has_header and looks_like_header(cols):
            columns = ColumnMap.from_header(cols)
            continue
        rec = row_to_record(cols, columns)
        if rec is None:
            skipped += 1
            continue
        if not keep_record(rec, options):
            continue
        rows.append(rec)
    logger.debug("Skipped rows: %d", skipped)
    return pd.DataFrame(rows, columns=RECORD_FIELDS)


def clean_csv(in_path: str, out_path: str, options: CleanOptions) -> Dict:
    """
    Run the full clean: read + filter, centroid, dedupe, project, write.
    Returns a summary dict; raises CleanError subclasses for I/O failures and empty results.
    The output file is not created when no row survives filtering.
    """
    try:
        with open(in_path, 'r', encoding='utf-8-sig', newline='') as f:
            pts = read_points(f, options)
    except OSError as e:
        raise InputOpenError(f"Failed to open input: {in_path}") from e
    except UnicodeDecodeError as e:
        raise InputOpenError(f"Input is not UTF-8 text: {in_path}") from e

    if pts.empty:
        raise NoUsableRowsError("No usable rows found. Check that your export includes lat/lon (use 'out center').")

    # Origin for local meters uses every filtered point, duplicates included
    lat0, lon0 = centroid(pts)

    if options.max_extent_km > 0:
        extent = max_extent_km(pts, lat0, lon0)
        if extent > options.max_extent_km:
            logger.warning(
                "Points extend %.1f km from the origin; local x/y meters are approximate beyond %.1f km",
                extent, options.max_extent_km,
            )

    pts["key"] = pts["type"] + ":" + pts["id"]
    out = pts.drop_duplicates(subset="key", keep="first") if options.dedupe else pts
    out = project_local_m(out, lat0, lon0)

    try:
        f = open(out_path, 'w', encoding='utf-8', newline='')
    except OSError as e:
        raise OutputOpenError(f"Failed to open output: {out_path}") from e
    with f:
        written = write_outputs(out, f)

    logger.info("Read points: %d", len(pts))
    logger.info("Wrote points: %d", written)
    logger.info("Origin (lat,lon): %s,%s", lat0, lon0)
    return {
        'read': len(pts),
        'written': written,
        'origin': (lat0, lon0),
    }
