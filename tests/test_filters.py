from poi_clean.config import CleanOptions
from poi_clean.filters import keep_record


def _rec(type_="way", name="Cafe"):
    return {"type": type_, "id": "1", "name": name, "lat": 0.0, "lon": 0.0}


def test_keep_type():
    opts = CleanOptions(keep_type="way")
    assert keep_record(_rec("way"), opts)
    assert not keep_record(_rec("relation"), opts)
    assert not keep_record(_rec("node"), opts)
    opts = CleanOptions(keep_type="relation")
    assert keep_record(_rec("relation"), opts)
    assert not keep_record(_rec("way"), opts)


def test_require_name():
    assert not keep_record(_rec(name=""), CleanOptions(require_name=True))
    assert keep_record(_rec(name=""), CleanOptions())


def test_min_name_len_boundary():
    opts = CleanOptions(min_name_len=4)
    assert keep_record(_rec(name="Cafe"), opts)
    assert not keep_record(_rec(name="Caf"), opts)


def test_min_name_len_counts_characters():
    assert keep_record(_rec(name="Café"), CleanOptions(min_name_len=4))


def test_negative_min_name_len_clamped():
    assert CleanOptions(min_name_len=-5).min_name_len == 0
