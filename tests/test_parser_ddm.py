import pytest

from geopair_engine import (
    CoordField,
    CoordinateKind,
    DdmCoordError,
    DdmFieldError,
    DdmFormatError,
    InvalidDirectionError,
    InvalidMinutesError,
    OutOfRangeError,
    ddm_to_dd,
    haversine,
    round_to,
)
from geopair_engine.parser_ddm import ddm_pattern

LAT = CoordinateKind.LATITUDE
LON = CoordinateKind.LONGITUDE


def test_ddm_basic():
    assert ddm_to_dd("48° 51.492' N", LAT) == pytest.approx(48 + 51.492 / 60)
    assert ddm_to_dd("74° 2.646' W", LON) == pytest.approx(-(74 + 2.646 / 60))


def test_ddm_unicode_prime_and_case():
    assert ddm_to_dd("48°51.492′n", LAT) == ddm_to_dd("48° 51.492' N", LAT)


def test_ddm_ouest():
    assert ddm_to_dd("2°17.652'O", LON) == ddm_to_dd("2°17.652'W", LON)


def test_ddm_invalid_deg_field():
    with pytest.raises(DdmFieldError) as exc:
        ddm_to_dd("48c°57'N", LAT)
    assert exc.value.field is CoordField.DEG


def test_ddm_invalid_min_field():
    with pytest.raises(DdmFieldError) as exc:
        ddm_to_dd("48°x'N", LAT)
    assert exc.value.field is CoordField.MIN
    assert str(exc.value) == "invalid DDM field: minutes"


def test_ddm_invalid_format():
    for text in ("48.858056", "48°51'29\"N", "48 51.4 N", "48°51.4'NE"):
        with pytest.raises(DdmFormatError):
            ddm_to_dd(text, LAT)
    with pytest.raises(DdmFormatError):
        ddm_to_dd("inf°0'N", LAT)


def test_ddm_invalid_values():
    cases = {
        "48°61'N": InvalidMinutesError,
        "48°-1'N": InvalidMinutesError,
        "91°0'N": OutOfRangeError,
        "90°0.5'N": OutOfRangeError,
        "48°30'X": InvalidDirectionError,
    }
    for text, inner in cases.items():
        with pytest.raises(DdmCoordError) as exc:
            ddm_to_dd(text, LAT)
        assert isinstance(exc.value.error, inner)


def test_ddm_boundaries():
    assert ddm_to_dd("90°0'S", LAT) == -90.0
    assert ddm_to_dd("180°0'W", LON) == -180.0


def test_ddm_to_distance_integration():
    lat1 = ddm_to_dd("48° 51.492' N", LAT)
    lon1 = ddm_to_dd("2° 17.652' E", LON)
    lat2 = ddm_to_dd("40° 41.358' N", LAT)
    lon2 = ddm_to_dd("74° 2.646' W", LON)

    assert lat1 > 0 and lon1 > 0 and lat2 > 0
    assert lon2 < 0

    distance = round_to(haversine(lat1, lon1, lat2, lon2), 2)
    assert abs(distance - 5837.0) < 5.0


def test_ddm_pattern_is_built_once():
    assert ddm_pattern() is ddm_pattern()
