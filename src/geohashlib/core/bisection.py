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
Interleaved bisection of the world box.

A geohash is the path taken by a binary search over longitude and latitude,
alternating axes and starting with longitude. At every step the current cell
is halved along the active axis: a ``1`` keeps the upper half and a ``0`` the
lower half. Both the binary and the base32 representations are built on the
two functions of this module so that encoding and decoding stay in lock-step.
"""
from ..envelope import BoundingBox


def _halve(bbox, islon, bit):
    # Keeps the half of `bbox` selected by `bit` along the active axis.
    if islon:
        mid = (bbox.max_lon + bbox.min_lon) / 2.
        if bit:
            bbox.min_lon = mid
        else:
            bbox.max_lon = mid
    else:
        mid = (bbox.max_lat + bbox.min_lat) / 2.
        if bit:
            bbox.min_lat = mid
        else:
            bbox.max_lat = mid


def bisect(location, nbits):
    """
    Yields the first `nbits` bisection bits of `location`.

    A coordinate exactly on a midpoint falls in the lower half.

    Parameters
    ----------
    location: GeoLocation
    nbits: int
        Number of bits to generate.

    Yields
    ------
    int
        0 or 1, longitude first then alternating.
    """
    bbox = BoundingBox.world()
    islon = True
    for _ in range(nbits):
        if islon:
            bit = int(location.longitude
                      > (bbox.max_lon + bbox.min_lon) / 2.)
        else:
            bit = int(location.latitude
                      > (bbox.max_lat + bbox.min_lat) / 2.)
        _halve(bbox, islon, bit)
        yield bit
        islon = not islon


def narrow(bits):
    """Returns the cell reached by replaying `bits` from the world box."""
    bbox = BoundingBox.world()
    islon = True
    for bit in bits:
        _halve(bbox, islon, bit)
        islon = not islon
    return bbox
