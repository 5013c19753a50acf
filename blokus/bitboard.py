"""
Bitmask utilities for piece shapes.

Every Blokus shape fits into a 5x5 window, so its cells can be stored as
a 25-bit integer where bit ``y * 5 + x`` is set iff ``(x, y)`` belongs to
the shape:

    +---+---+---+---+----+
    | 0 | 1 | 2 | 3 |  4 |
    +---+---+---+---+----+
    | 5 | 6 |            |
    +---+---+    ...     |
    |                    |
    +               +----+
    |               | 24 |
    +---+---+---+---+----+
"""

from typing import Iterable, Iterator, List, Tuple

from .vec2 import Vec2

MAX_SIDE_LENGTH = 5
NUM_CELLS = MAX_SIDE_LENGTH * MAX_SIDE_LENGTH
FULL_MASK = (1 << NUM_CELLS) - 1


def is_in_window(x: int, y: int) -> bool:
    """Check whether a coordinate pair lies inside the 5x5 window."""
    return 0 <= x < MAX_SIDE_LENGTH and 0 <= y < MAX_SIDE_LENGTH


def coord_to_index(x: int, y: int) -> int:
    """
    Convert window coordinates to a bit index.

    Raises:
        ValueError: If the coordinates are outside the 5x5 window
    """
    if not is_in_window(x, y):
        raise ValueError(f"Coordinates ({x}, {y}) are outside the {MAX_SIDE_LENGTH}x{MAX_SIDE_LENGTH} window")
    return y * MAX_SIDE_LENGTH + x


def index_to_coord(index: int) -> Tuple[int, int]:
    """Convert a bit index back to window coordinates (x, y)."""
    return (index % MAX_SIDE_LENGTH, index // MAX_SIDE_LENGTH)


def coord_to_bit(x: int, y: int) -> int:
    """Convert window coordinates to a mask with a single bit set."""
    return 1 << coord_to_index(x, y)


def coords_to_mask(coords: Iterable[Tuple[int, int]]) -> int:
    """Convert a collection of (x, y) pairs to a bitmask."""
    mask = 0
    for x, y in coords:
        mask |= coord_to_bit(x, y)
    return mask


def mask_to_coords(mask: int) -> List[Tuple[int, int]]:
    """Convert a bitmask back into (x, y) pairs in row-major order."""
    coords = []
    index = 0
    while mask != 0:
        if mask & 1:
            coords.append(index_to_coord(index))
        mask >>= 1
        index += 1
    return coords


class CoordinateSet:
    """
    An immutable set of cells inside the 5x5 window, backed by a bitmask.

    Membership is a single bit test and iteration yields the cells in
    row-major order. The usual set operators work between two sets.
    """

    __slots__ = ("bits",)

    def __init__(self, bits: int = 0):
        if bits & ~FULL_MASK:
            raise ValueError(f"Mask {bits:#x} has bits outside the {MAX_SIDE_LENGTH}x{MAX_SIDE_LENGTH} window")
        self.bits = bits

    @classmethod
    def from_iter(cls, coordinates: Iterable[Vec2]) -> "CoordinateSet":
        return cls(coords_to_mask((c.x, c.y) for c in coordinates))

    def insert(self, coordinates: Vec2) -> "CoordinateSet":
        """Return a new set that additionally contains the given cell."""
        return CoordinateSet(self.bits | coord_to_bit(coordinates.x, coordinates.y))

    def __contains__(self, coordinates: Vec2) -> bool:
        return is_in_window(coordinates.x, coordinates.y) and bool(
            (self.bits >> coord_to_index(coordinates.x, coordinates.y)) & 1
        )

    def __iter__(self) -> Iterator[Vec2]:
        for x, y in mask_to_coords(self.bits):
            yield Vec2(x, y)

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __bool__(self) -> bool:
        return self.bits != 0

    def __or__(self, other: "CoordinateSet") -> "CoordinateSet":
        return CoordinateSet(self.bits | other.bits)

    def __and__(self, other: "CoordinateSet") -> "CoordinateSet":
        return CoordinateSet(self.bits & other.bits)

    def __sub__(self, other: "CoordinateSet") -> "CoordinateSet":
        return CoordinateSet(self.bits & ~other.bits)

    def __xor__(self, other: "CoordinateSet") -> "CoordinateSet":
        return CoordinateSet(self.bits ^ other.bits)

    def __le__(self, other: "CoordinateSet") -> bool:
        return self.bits & ~other.bits == 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoordinateSet):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self) -> int:
        return hash(self.bits)

    def __repr__(self) -> str:
        return f"CoordinateSet({self.bits:#09x})"

    def __str__(self) -> str:
        rows = []
        for y in range(MAX_SIDE_LENGTH):
            rows.append("".join(
                "#" if (self.bits >> (y * MAX_SIDE_LENGTH + x)) & 1 else "."
                for x in range(MAX_SIDE_LENGTH)
            ))
        return "\n".join(rows) + "\n"
