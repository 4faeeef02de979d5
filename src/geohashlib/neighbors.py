# Copyright (C) 2018 DataStorm
#
# This file is part of geohashlib.
#
# geohashlib is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# geohashlib is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
"""
Adjacent geohash cells.

Neighbors are found geometrically: the center of a cell is moved by one cell
width or height and encoded again at the same length. Moving past the
antimeridian wraps around; moving past a pole stays on the polar row.
"""
from .core import base32
from .location import GeoLocation


# Row-major scan of the 3x3 neighbourhood, center excluded, as (d_lat, d_lon).
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def _wrap_longitude(lon):
    if lon > 180.:
        return lon - 360.
    if lon < -180.:
        return lon + 360.
    return lon


def _clamp_latitude(lat):
    return max(-90., min(90., lat))


def neighbor(geohash, direction):
    """
    Geohash of the cell next to `geohash` in `direction`.

    Parameters
    ----------
    geohash: str
        Base32 geohash.
    direction: (int, int)
        Steps in latitude and longitude, usually -1, 0 or 1.

    Returns
    -------
    str
        A geohash of the same length as `geohash`.
    """
    dlat, dlon = direction
    bbox = base32.decode(geohash)
    center = bbox.center()
    target = GeoLocation.from_coordinates(
        _clamp_latitude(center.latitude + bbox.latitude_range() * dlat),
        _wrap_longitude(center.longitude + bbox.longitude_range() * dlon),
    )
    return base32.encode(target, len(geohash))


def neighbors(geohash):
    """`geohash` itself followed by its 8 neighbors in :data:`DIRECTIONS`."""
    return [geohash] + [neighbor(geohash, d) for d in DIRECTIONS]
