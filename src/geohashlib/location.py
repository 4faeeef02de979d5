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
Geographic points.

A :class:`GeoLocation` is a plain (latitude, longitude) pair in degrees. The
default constructor takes the coordinates as given; use
:meth:`GeoLocation.from_coordinates` to have them range checked.
"""
import collections

import numpy


# The Earth's mean radius in kilometers.
EARTH_RADIUS = 6371.009

_BaseLocation = collections.namedtuple(
    "_BaseLocation", "latitude longitude", defaults=(0., 0.))


class GeoLocation(_BaseLocation):
    """
    Immutable point on the Earth's surface.

    Attributes
    ----------
    latitude: float
        Degrees north, within [-90, 90] for validated instances.
    longitude: float
        Degrees east, within [-180, 180] for validated instances.
    """
    __slots__ = ()

    @classmethod
    def from_coordinates(cls, latitude, longitude):
        """Returns a location after checking both coordinates are in range."""
        if not abs(latitude) <= 90.:
            raise ValueError(
                "Latitude {} is out of range [-90, 90]".format(latitude))
        if not abs(longitude) <= 180.:
            raise ValueError(
                "Longitude {} is out of range [-180, 180]".format(longitude))
        return cls(latitude, longitude)

    def __repr__(self):
        return "GeoLocation(latitude={}, longitude={})".format(*self)

    def distance_to(self, other):
        """
        Great-circle distance to `other` in kilometers.

        Uses the Haversine formula on a sphere of radius
        :data:`EARTH_RADIUS`.
        """
        lat1, lat2 = numpy.radians([self.latitude, other.latitude])
        dlat = numpy.radians(other.latitude - self.latitude)
        dlon = numpy.radians(other.longitude - self.longitude)
        a = (numpy.sin(dlat / 2.)**2
             + numpy.cos(lat1) * numpy.cos(lat2) * numpy.sin(dlon / 2.)**2)
        # Rounding can push a slightly above 1 for antipodal points.
        a = numpy.clip(a, 0., 1.)
        c = 2. * numpy.arctan2(numpy.sqrt(a), numpy.sqrt(1. - a))
        return float(EARTH_RADIUS * c)

    def __sub__(self, other):
        if not isinstance(other, GeoLocation):
            return NotImplemented
        return self.distance_to(other)
