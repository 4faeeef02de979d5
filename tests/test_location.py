import pytest

from geohashlib import GeoLocation


@pytest.fixture
def cities():
    return {
        'new_york': GeoLocation.from_coordinates(40.7127, -74.0059),
        'helsinki': GeoLocation.from_coordinates(60.1708, 24.9375),
        'munich': GeoLocation.from_coordinates(48.1333, 11.5667),
    }


def test_default_location():
    loc = GeoLocation()
    assert loc.latitude == 0.
    assert loc.longitude == 0.


def test_from_coordinates():
    loc = GeoLocation.from_coordinates(48.1333, 11.5667)
    assert loc.latitude == 48.1333
    assert loc.longitude == 11.5667
    assert loc == GeoLocation(48.1333, 11.5667)


@pytest.mark.parametrize("lat, lon", [
    (90., 180.), (-90., -180.), (0., 0.),
])
def test_from_coordinates_accepts_limits(lat, lon):
    assert GeoLocation.from_coordinates(lat, lon) == (lat, lon)


@pytest.mark.parametrize("lat, lon", [
    (90.0001, 0.), (-91., 0.), (0., 180.5), (0., -181.),
    (float("nan"), 0.), (0., float("nan")),
])
def test_from_coordinates_rejects_out_of_range(lat, lon):
    with pytest.raises(ValueError):
        GeoLocation.from_coordinates(lat, lon)


def test_raw_constructor_does_not_validate():
    loc = GeoLocation(100., 200.)
    assert loc.latitude == 100.


def test_distance(cities):
    assert round(cities['new_york'].distance_to(cities['helsinki'])) == 6618
    assert round(cities['munich'].distance_to(cities['helsinki'])) == 1590


def test_sub_distance(cities):
    assert round(cities['new_york'] - cities['helsinki']) == 6618
    assert round(cities['munich'] - cities['helsinki']) == 1590


def test_distance_is_symmetric(cities):
    ny, hel = cities['new_york'], cities['helsinki']
    assert ny.distance_to(hel) == pytest.approx(hel.distance_to(ny))
    assert ny.distance_to(ny) == 0.


def test_antipodal_distance():
    dist = GeoLocation(0., 0.).distance_to(GeoLocation(0., 180.))
    assert dist == pytest.approx(3.141592653589793 * 6371.009)
