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
Base32 geohash strings.

Each character packs 5 consecutive bisection bits, most significant first,
using the geohash alphabet, which leaves out ``a``, ``i``, ``l`` and ``o``.
Decoding is case-insensitive; encoding always produces lowercase.
"""
import logging
import warnings

import numpy
import toolz

from . import bisection


logger = logging.getLogger(__name__)

BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"
BITS_PER_CHAR = 5

# Characters outside the alphabet are absent from the map.
DECODE_MAP = toolz.merge(
    {c: i for i, c in enumerate(BASE32)},
    {c.upper(): i for i, c in enumerate(BASE32) if c.isalpha()},
)

# Cell side lengths of the world box.
_LAT_SPAN = 180.
_LON_SPAN = 360.


def _to_char(chunk):
    index = 0
    for bit in chunk:
        index = (index << 1) | bit
    return BASE32[index]


def _beyond_resolution(location, nbits):
    # True when the final cell is narrower than the spacing of doubles
    # around the location, on either axis.
    lon_width = numpy.ldexp(_LON_SPAN, -((nbits + 1) // 2))
    lat_width = numpy.ldexp(_LAT_SPAN, -(nbits // 2))
    return bool(lon_width < numpy.spacing(abs(location.longitude))
                or lat_width < numpy.spacing(abs(location.latitude)))


def _char_bits(pos, c):
    value = DECODE_MAP.get(c)
    if value is None:
        raise ValueError(
            "Invalid geohash character {!r} at position {}".format(c, pos))
    return ((value >> shift) & 1
            for shift in reversed(range(BITS_PER_CHAR)))


def encode(location, precision):
    """
    Base32 geohash of `location` with `precision` characters.

    Parameters
    ----------
    location: GeoLocation
    precision: int
        Number of characters, each worth 5 bisection bits.

    Returns
    -------
    str
    """
    if precision < 0:
        raise ValueError(
            "Precision must be non-negative, got {}".format(precision))
    nbits = precision * BITS_PER_CHAR
    if _beyond_resolution(location, nbits):
        warnings.warn("Precision {} exceeds the floating point resolution "
                      "around {}; trailing characters carry no information."
                      .format(precision, location))
    chunks = toolz.partition(BITS_PER_CHAR, bisection.bisect(location, nbits))
    return "".join(map(_to_char, chunks))


def decode(geohash):
    """
    Cell of a base32 geohash.

    Raises
    ------
    ValueError
        If `geohash` contains a character outside the alphabet.
    """
    bits = toolz.concat(
        _char_bits(pos, c) for pos, c in enumerate(geohash))
    bbox = bisection.narrow(bits)
    logger.debug("Decoded %r to min_lat:%s, max_lat:%s, min_lon:%s, "
                 "max_lon:%s", geohash, *bbox.to_tuple())
    return bbox
