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
Geohashes at bit granularity.

:class:`BinaryHash` stores the bisection path of a location as an ordered
sequence of bits packed in an integer, the first pushed bit being the most
significant. Its capacity is bounded by :data:`MAX_BITS`.
"""
from .core import bisection


# Capacity of a BinaryHash, in bits.
MAX_BITS = 64


class BinaryHash:
    """
    Append-only sequence of at most :data:`MAX_BITS` bisection bits.

    Attributes
    ----------
    bits: int
        The `precision` pushed bits, first pushed in the highest position.
    precision: int
        Number of bits pushed so far.
    """
    __slots__ = ('bits', 'precision')

    def __init__(self):
        self.bits = 0
        self.precision = 0

    @classmethod
    def from_bits(cls, bits):
        """Builds a hash from an iterable of truthy/falsy values."""
        output = cls()
        for b in bits:
            output.push(b)
        return output

    @classmethod
    def from_string(cls, s):
        """Builds a hash from a string of '0' and '1' characters."""
        output = cls()
        for pos, c in enumerate(s):
            if c not in "01":
                raise ValueError(
                    "Invalid binary code {!r} at position {} in {!r}"
                    .format(c, pos, s))
            output.push(c == "1")
        return output

    @classmethod
    def encode(cls, location, precision):
        """
        Binary geohash of `location` with `precision` bits.

        Raises
        ------
        ValueError
            If `precision` is negative.
        OverflowError
            If `precision` exceeds :data:`MAX_BITS`.
        """
        if precision < 0:
            raise ValueError(
                "Precision must be non-negative, got {}".format(precision))
        if precision > MAX_BITS:
            raise OverflowError(
                "Precision {} exceeds the capacity of {} bits"
                .format(precision, MAX_BITS))
        return cls.from_bits(bisection.bisect(location, precision))

    @classmethod
    def decode_string(cls, s):
        return cls.from_string(s).decode()

    def decode(self):
        """Returns the cell :class:`BoundingBox` denoted by the bits."""
        return bisection.narrow(self)

    def push(self, b):
        if self.precision >= MAX_BITS:
            raise OverflowError(
                "BinaryHash is full ({} bits)".format(MAX_BITS))
        self.bits = (self.bits << 1) | (1 if b else 0)
        self.precision += 1

    def test(self, n):
        """Bit at position `n`, counted from the first pushed bit."""
        if not 0 <= n < self.precision:
            raise IndexError(
                "Bit {} out of range for a hash of {} bits"
                .format(n, self.precision))
        return bool((self.bits >> (self.precision - n - 1)) & 1)

    def __len__(self):
        return self.precision

    def empty(self):
        return self.precision == 0

    def __iter__(self):
        return (self.test(n) for n in range(self.precision))

    def to_bits(self):
        return list(self)

    def to_string(self):
        return "".join("1" if b else "0" for b in self)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "BinaryHash('{}')".format(self.to_string())

    def __eq__(self, other):
        if not isinstance(other, BinaryHash):
            return NotImplemented
        return (self.bits, self.precision) == (other.bits, other.precision)

    __hash__ = None
