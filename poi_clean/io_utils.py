import csv
from typing import Iterator, List

import pandas as pd

from .csv_line import parse_csv_line


OUTPUT_COLUMNS = ['id', 'name', 'lat', 'lon', 'x_m', 'y_m']


def iter_rows(f) -> Iterator[List[str]]:
    """
    Yield tokenized fields for every non-empty line of an open text file.
    Lines break on "\\n" only; open the file with newline='' so a "\\r" inside a
    quoted field stays part of the field.
    """
    for line in f.read().split("\n"):
        if not line:
            continue
        yield parse_csv_line(line, ",")


def format_float(v: float) -> str:
    return repr(float(v))


def write_outputs(df: pd.DataFrame, f) -> int:
    """
    Write the cleaned rows to an open text file and return the number of data rows.
    Expects key, name, lat, lon, x_m and y_m columns.
    """
    w = csv.writer(f, lineterminator='\n')
    w.writerow(OUTPUT_COLUMNS)
    written = 0
    for key, name, lat, lon, x, y in zip(df["key"], df["name"], df["lat"], df["lon"], df["x_m"], df["y_m"]):
        # If no name, give a stable fallback
        w.writerow([key, name or key, format_float(lat), format_float(lon), format_float(x), format_float(y)])
        written += 1
    return written
