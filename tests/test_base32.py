import logging
import warnings

import pytest

import geohashlib
from geohashlib import BASE32, GeoLocation, decode, encode


@pytest.fixture
def pudong():
    return GeoLocation(latitude=31.16373922, longitude=121.62585927)


@pytest.fixture
def shanghai():
    return GeoLocation.from_coordinates(31.55, 121.46)


def test_encode(pudong, shanghai):
    assert encode(pudong, 7) == "wtw3r9j"
    assert encode(shanghai, 1) == "w"


@pytest.mark.parametrize("precision, expected", [
    (1, "w"), (2, "wt"), (3, "wtw"), (4, "wtw7"), (5, "wtw77"),
    (6, "wtw77z"), (7, "wtw77zs"), (8, "wtw77zs2"), (9, "wtw77zs2p"),
])
def test_encode_table(shanghai, precision, expected):
    assert encode(shanghai, precision) == expected


def test_encode_prefixes(pudong):
    full = "wtw3r9jjzyjc"
    for precision in range(len(full) + 1):
        assert encode(pudong, precision) == full[:precision]


def test_encode_agrees_with_binary_hash(pudong):
    bits = geohashlib.BinaryHash.encode(pudong, 60).to_string()
    chars = "".join(BASE32[int(bits[i:i + 5], 2)] for i in range(0, 60, 5))
    assert encode(pudong, 12) == chars


def test_decode(shanghai):
    for h in ("w", "wt", "wtw", "wtw7", "wtw77", "wtw77z", "wtw77zs",
              "wtw77zs2", "wtw77zs2p"):
        assert decode(h).contains(shanghai)

    assert decode("w").contains(GeoLocation(21., 113.))
    assert decode("wtw3r9").contains(GeoLocation(31.1655, 121.624))
    assert decode("wtw3r9jjz").contains(GeoLocation(31.163728, 121.625841))
    assert not decode("wtw3r9jjz").contains(
        GeoLocation(32.163728, 121.625841))
    assert decode("wtw3r9jjzyjc").contains(
        GeoLocation(31.16373922, 121.62585927))
    assert not decode("wtw3r9jjzyjc").contains(
        GeoLocation(31.16373922, 121.63585927))


def test_decode_is_case_insensitive():
    assert decode("WTW3R9J") == decode("wtw3r9j")
    assert decode("wTw3R9j") == decode("wtw3r9j")


@pytest.mark.parametrize("geohash", [
    "a", "i", "l", "o", "A", "O", "wtw3a", "wt w", "!", "w:", "{", "é",
])
def test_decode_rejects_invalid_characters(geohash):
    with pytest.raises(ValueError):
        decode(geohash)


def test_alphabet_bijection():
    assert len(BASE32) == 32
    for c in BASE32:
        assert encode(decode(c).center(), 1) == c
        assert encode(decode(c.upper()).center(), 1) == c


@pytest.mark.parametrize("lat, lon", [
    (31.55, 121.46), (-33.8688, 151.2093), (90., 180.), (-90., -180.),
    (0., 0.), (40.7127, -74.0059),
])
def test_round_trip_contains(lat, lon):
    loc = GeoLocation.from_coordinates(lat, lon)
    for precision in range(1, 13):
        assert decode(encode(loc, precision)).contains(loc)


def test_monotonic_refinement(pudong):
    for precision in range(1, 12):
        coarse = decode(encode(pudong, precision))
        fine = decode(encode(pudong, precision + 1))
        assert coarse.contains(fine.bottom_left())
        assert coarse.contains(fine.top_right())


def test_negative_precision(pudong):
    with pytest.raises(ValueError):
        encode(pudong, -1)


def test_precision_beyond_float_resolution_warns(pudong):
    with pytest.warns(UserWarning):
        encode(pudong, 22)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        encode(pudong, 12)


def test_decode_logs_bounds(caplog):
    caplog.set_level(logging.DEBUG, logger="geohashlib.core.base32")
    decode("w")
    assert "min_lat" in caplog.text


def test_resolution_warning_depends_on_magnitude():
    near_origin = GeoLocation(0.001, 0.001)
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        encode(near_origin, 22)
    with pytest.warns(UserWarning):
        encode(GeoLocation(0.001, 179.9), 22)
