import math
from typing import Tuple

import numpy as np
import pandas as pd
from geopy.distance import geodesic


EARTH_RADIUS_M = 6371000.0


def centroid(df: pd.DataFrame) -> Tuple[float, float]:
    """
    Unweighted mean (lat, lon) of all rows.
    """
    return float(df["lat"].mean()), float(df["lon"].mean())


def project_local_m(df: pd.DataFrame, lat0: float, lon0: float) -> pd.DataFrame:
    """
    Equirectangular projection around (lat0, lon0), returning a copy with x_m/y_m columns.
    Only accurate for small extents; no ellipsoid correction.
    """
    out = df.copy()
    scale = np.cos(np.radians(lat0))
    out["x_m"] = np.radians(out["lon"] - lon0) * scale * EARTH_RADIUS_M
    out["y_m"] = np.radians(out["lat"] - lat0) * EARTH_RADIUS_M
    return out


def max_extent_km(df: pd.DataFrame, lat0: float, lon0: float) -> float:
    """Largest geodesic distance from the origin to any row, inf if a latitude is off the globe."""
    if abs(lat0) > 90 or (df["lat"].abs() > 90).any():
        return math.inf
    extent = 0.0
    for lat, lon in zip(df["lat"], df["lon"]):
        extent = max(extent, geodesic((lat0, lon0), (lat, lon)).km)
    return extent
