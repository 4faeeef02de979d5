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
'''
Axis-aligned latitude/longitude rectangles.

Every geohash denotes a cell of the world, and cells are represented by
:class:`BoundingBox`. Constructors always normalize their inputs so that
``min_lat <= max_lat`` and ``min_lon <= max_lon``.

Corners follow a single naming convention: "top" is the maximum latitude and
"right" the maximum longitude.
'''
import numpy
import shapely.geometry

from .location import GeoLocation


class BoundingBox:
    '''Latitude/longitude rectangle, closed on all four edges.'''
    __slots__ = ('min_lat', 'max_lat', 'min_lon', 'max_lon')

    def __init__(self, min_lat=0., max_lat=0., min_lon=0., max_lon=0.):
        # Bounds are stored as given. Only from_coordinates, from_geolocations
        # and world guarantee min <= max on both axes.
        self.min_lat = min_lat
        self.max_lat = max_lat
        self.min_lon = min_lon
        self.max_lon = max_lon

    @classmethod
    def from_coordinates(cls, lat1, lat2, lon1, lon2):
        return cls(min(lat1, lat2), max(lat1, lat2),
                   min(lon1, lon2), max(lon1, lon2))

    @classmethod
    def from_geolocations(cls, p1, p2):
        '''Smallest box having `p1` and `p2` as opposite corners.'''
        return cls.from_coordinates(p1.latitude, p2.latitude,
                                    p1.longitude, p2.longitude)

    @classmethod
    def world(cls):
        '''The whole lat/lon domain, where every bisection starts.'''
        return cls(-90., 90., -180., 180.)

    @staticmethod
    def merged(one, other):
        '''Smallest box containing both `one` and `other`.'''
        return BoundingBox(
            min(one.min_lat, other.min_lat),
            max(one.max_lat, other.max_lat),
            min(one.min_lon, other.min_lon),
            max(one.max_lon, other.max_lon),
        )

    @staticmethod
    def merge(collection):
        '''Smallest box containing every box of a non-empty `collection`.'''
        arr = numpy.array([b.to_array() for b in collection])
        if arr.size == 0:
            raise ValueError("Cannot merge an empty collection of boxes")
        mins = arr.min(axis=0)
        maxs = arr.max(axis=0)
        return BoundingBox(float(mins[0]), float(maxs[1]),
                           float(mins[2]), float(maxs[3]))

    def merge_with(self, other):
        '''Grows `self` in place to contain `other`.'''
        if other.min_lat < self.min_lat:
            self.min_lat = other.min_lat
        if other.min_lon < self.min_lon:
            self.min_lon = other.min_lon
        if other.max_lat > self.max_lat:
            self.max_lat = other.max_lat
        if other.max_lon > self.max_lon:
            self.max_lon = other.max_lon

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    __hash__ = None

    def __repr__(self):
        return ("BoundingBox(min_lat={}, max_lat={}, min_lon={}, max_lon={})"
                .format(*self.to_tuple()))

    def center(self):
        return GeoLocation((self.min_lat + self.max_lat) / 2.,
                           (self.min_lon + self.max_lon) / 2.)

    def top_left(self):
        return GeoLocation(self.max_lat, self.min_lon)

    def top_right(self):
        return GeoLocation(self.max_lat, self.max_lon)

    def bottom_left(self):
        return GeoLocation(self.min_lat, self.min_lon)

    def bottom_right(self):
        return GeoLocation(self.min_lat, self.max_lon)

    def latitude_range(self):
        return self.max_lat - self.min_lat

    def longitude_range(self):
        return self.max_lon - self.min_lon

    def latitude_error(self):
        '''Half the latitude range: distance from the center to an edge.'''
        return self.latitude_range() / 2.

    def longitude_error(self):
        '''Half the longitude range: distance from the center to an edge.'''
        return self.longitude_range() / 2.

    def contains(self, point):
        '''True if `point` lies inside the box or on one of its edges.'''
        return (self.min_lat <= point.latitude <= self.max_lat
                and self.min_lon <= point.longitude <= self.max_lon)

    @property
    def bounds(self):
        '''(minx, miny, maxx, maxy) with x the longitude, as in shapely.'''
        return (self.min_lon, self.min_lat, self.max_lon, self.max_lat)

    def to_tuple(self):
        return (self.min_lat, self.max_lat, self.min_lon, self.max_lon)

    def to_array(self):
        return numpy.array(self.to_tuple(), dtype=float)

    def to_polygon(self):
        '''The box as a shapely polygon in (longitude, latitude) order.'''
        return shapely.geometry.box(*self.bounds)
