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
Geohash encoding and decoding.

A geohash identifies a cell of the latitude/longitude world obtained by
recursively halving it, alternating longitude and latitude. Cells sharing a
prefix are nested, which makes geohashes sortable and prefix-matchable spatial
keys.

Two representations are provided: base32 strings (:func:`encode`,
:func:`decode`), 5 bits per character, and :class:`BinaryHash` at bit
granularity. :func:`neighbor` and :func:`neighbors` derive adjacent cells.
"""
import logging

from .location import GeoLocation, EARTH_RADIUS  # noqa: F401
from .envelope import BoundingBox  # noqa: F401
from .binary import BinaryHash, MAX_BITS  # noqa: F401
from .core.base32 import BASE32, encode, decode  # noqa: F401
from .neighbors import DIRECTIONS, neighbor, neighbors  # noqa: F401

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
