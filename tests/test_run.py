import pandas as pd
import pytest

from geopair_app.run import main

DMS_ROWS = [
    {"name_a": "Eiffel", "lat_a": "48°51'29\"N", "lon_a": "2°17'40\"E",
     "name_b": "Liberty", "lat_b": "40°41'21\"N", "lon_b": "74°2'40\"W"},
    {"name_a": "Bad", "lat_a": "91°0'0\"N", "lon_a": "2°17'40\"E",
     "name_b": "Liberty", "lat_b": "40°41'21\"N", "lon_b": "74°2'40\"W"},
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GEOPAIR_LOG_LEVEL", "GEOPAIR_TOLERANCE_DEG", "GEOPAIR_STRICT"):
        monkeypatch.delenv(name, raising=False)


def write_input(tmp_path, rows):
    path = tmp_path / "in.csv"
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


def read_output(path):
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def test_main_permissive_run(tmp_path, capsys):
    src = write_input(tmp_path, DMS_ROWS)
    out = tmp_path / "out.csv"

    code = main(["-i", str(src), "-o", str(out), "-f", "dms"])
    assert code == 0

    df = read_output(out)
    assert len(df) == 1
    assert df.loc[0, "id"] == "1"
    assert df.loc[0, "name_a"] == "Eiffel"
    assert float(df.loc[0, "lat_a_dd"]) == 48.858056
    assert df.loc[0, "lat_a_dms"] == "48°51'29.00\"N"
    assert df.loc[0, "nearly_both"] == "false"
    assert abs(float(df.loc[0, "distance_km"]) - 5837.0) < 5.0

    assert "1 ignored line(s)" in capsys.readouterr().err


def test_main_strict_run_fails(tmp_path, capsys):
    src = write_input(tmp_path, DMS_ROWS)
    out = tmp_path / "out.csv"

    code = main(["-i", str(src), "-o", str(out), "-f", "dms", "--strict"])
    assert code == 1
    assert "Error: Line 3: invalid DMS" in capsys.readouterr().err
    assert not out.exists()


def test_main_strict_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("GEOPAIR_STRICT", "1")
    src = write_input(tmp_path, DMS_ROWS)
    assert main(["-i", str(src), "-o", str(tmp_path / "out.csv"), "-f", "dms"]) == 1


def test_main_no_strict_overrides_env(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("GEOPAIR_STRICT", "1")
    src = write_input(tmp_path, DMS_ROWS)
    out = tmp_path / "out.csv"

    assert main(["-i", str(src), "-o", str(out), "-f", "dms", "--no-strict"]) == 0
    assert len(read_output(out)) == 1
    assert "1 ignored line(s)" in capsys.readouterr().err


OVERLONG_DD = (
    "name_a,lat_a,lon_a,name_b,lat_b,lon_b\n"
    "A,1.0,2.0,B,3.0,4.0\n"
    "A,1.0,2.0,B,3.0,4.0,EXTRA\n"
    "C,5.0,6.0,D,7.0,8.0\n"
)


def test_main_overlong_row_skipped(tmp_path, capsys):
    src = tmp_path / "in.csv"
    src.write_text(OVERLONG_DD, encoding="utf-8")
    out = tmp_path / "out.csv"

    assert main(["-i", str(src), "-o", str(out), "-f", "dd"]) == 0
    df = read_output(out)
    assert list(df["id"]) == ["1", "2"]
    assert list(df["name_a"]) == ["A", "C"]
    assert "1 ignored line(s)" in capsys.readouterr().err


def test_main_overlong_row_strict(tmp_path, capsys):
    src = tmp_path / "in.csv"
    src.write_text(OVERLONG_DD, encoding="utf-8")
    out = tmp_path / "out.csv"

    assert main(["-i", str(src), "-o", str(out), "-f", "dd", "--strict"]) == 1
    assert "Invalid coordinate format on line 3 (expected: dd)" in capsys.readouterr().err
    assert not out.exists()


def test_main_tolerance_flag(tmp_path):
    rows = [{"name_a": "A", "lat_a": "10.0", "lon_a": "20.0",
             "name_b": "B", "lat_b": "10.5", "lon_b": "20.0"}]
    src = write_input(tmp_path, rows)
    out = tmp_path / "out.csv"

    assert main(["-i", str(src), "-o", str(out), "-f", "dd", "--tolerance", "1"]) == 0
    assert read_output(out).loc[0, "nearly_both"] == "true"


def test_main_tolerance_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("GEOPAIR_TOLERANCE_DEG", "1")
    rows = [{"name_a": "A", "lat_a": "10.0", "lon_a": "20.0",
             "name_b": "B", "lat_b": "10.5", "lon_b": "20.0"}]
    src = write_input(tmp_path, rows)
    out = tmp_path / "out.csv"

    assert main(["-i", str(src), "-o", str(out), "-f", "dd"]) == 0
    assert read_output(out).loc[0, "nearly_lat"] == "true"


def test_main_missing_header(tmp_path, capsys):
    src = tmp_path / "in.csv"
    src.write_text("name_a,lat_a,lon_a,name_b,lat_b\nA,1,2,B,3\n", encoding="utf-8")
    code = main(["-i", str(src), "-o", str(tmp_path / "out.csv"), "-f", "dd"])
    assert code == 1
    assert "Missing header field 'lon_b'" in capsys.readouterr().err


def test_main_no_valid_rows_still_writes_header(tmp_path):
    src = write_input(tmp_path, DMS_ROWS[1:])
    out = tmp_path / "out.csv"
    assert main(["-i", str(src), "-o", str(out), "-f", "dms"]) == 0
    df = read_output(out)
    assert df.empty
    assert "distance_km" in df.columns


def test_main_usage_errors(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["-i", "a.csv", "-o", "b.csv", "-f", "utm"])
    assert exc.value.code == 2

    with pytest.raises(SystemExit) as exc:
        main(["-i", "a.csv", "-o", "b.csv", "-f", "dd", "--tolerance", "-1"])
    assert exc.value.code == 2
