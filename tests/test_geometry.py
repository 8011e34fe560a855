import math

import pandas as pd
import pytest

from poi_clean.geometry import EARTH_RADIUS_M, centroid, max_extent_km, project_local_m


def _df(points):
    return pd.DataFrame(points, columns=["lat", "lon"])


def test_centroid_is_mean():
    assert centroid(_df([(10.0, 20.0), (12.0, 22.0), (11.0, 21.0)])) == (11.0, 21.0)


def test_centroid_point_projects_to_origin():
    df = _df([(10.0, 20.0), (12.0, 22.0), (11.0, 21.0)])
    lat0, lon0 = centroid(df)
    out = project_local_m(df, lat0, lon0)
    assert out["x_m"].iloc[2] == pytest.approx(0.0, abs=1e-9)
    assert out["y_m"].iloc[2] == pytest.approx(0.0, abs=1e-9)


def test_projection_formula():
    out = project_local_m(_df([(1.0, 1.0)]), 0.0, 0.0)
    expected = math.radians(1.0) * EARTH_RADIUS_M
    assert out["x_m"].iloc[0] == pytest.approx(expected)
    assert out["y_m"].iloc[0] == pytest.approx(expected)


def test_projection_scales_longitude_by_origin_latitude():
    out = project_local_m(_df([(60.0, 1.0)]), 60.0, 0.0)
    assert out["x_m"].iloc[0] == pytest.approx(math.radians(1.0) * 0.5 * EARTH_RADIUS_M)
    assert out["y_m"].iloc[0] == 0.0


def test_max_extent_km():
    df = _df([(0.0, 0.0), (0.0, 1.0)])
    assert max_extent_km(df, 0.0, 0.5) == pytest.approx(55.66, rel=1e-3)
    assert max_extent_km(_df([(95.0, 0.0)]), 0.0, 0.0) == math.inf
