"""
Signed genome-wide coordinates.

Positions are stored as plain integers: the sign gives the strand
(negative = reverse complement), the magnitude is the 1-based forward
coordinate, and 0 means no base is present.

Author: Kevin R. Roy
"""

from dataclasses import dataclass
from enum import Enum


class Strand(Enum):
    """Strand tag for a signed position."""
    FORWARD = 1
    REVERSE = -1
    ABSENT = 0

    @property
    def symbol(self) -> str:
        return {Strand.FORWARD: '+', Strand.REVERSE: '-', Strand.ABSENT: '.'}[self]


def strand_of(position: int) -> Strand:
    """Return the strand encoded by a signed position."""
    if position > 0:
        return Strand.FORWARD
    if position < 0:
        return Strand.REVERSE
    return Strand.ABSENT


def magnitude(position: int) -> int:
    """Return the unsigned forward-strand coordinate of a signed position."""
    return abs(position)


@dataclass(frozen=True)
class SignedPosition:
    """A signed position split into strand and forward coordinate."""
    strand: Strand
    coordinate: int = 0

    def __post_init__(self):
        if self.coordinate < 0:
            raise ValueError(f"Coordinate must be unsigned: {self.coordinate}")
        if (self.strand is Strand.ABSENT) != (self.coordinate == 0):
            raise ValueError(
                f"Inconsistent position: {self.strand.name} at {self.coordinate}"
            )

    @classmethod
    def from_int(cls, position: int) -> 'SignedPosition':
        return cls(strand=strand_of(position), coordinate=magnitude(position))

    def to_int(self) -> int:
        return self.strand.value * self.coordinate

    @property
    def is_reverse(self) -> bool:
        return self.strand is Strand.REVERSE

    def __str__(self) -> str:
        return str(self.to_int())
