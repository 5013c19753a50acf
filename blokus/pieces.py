"""
Blokus piece shapes: the 21 polyominoes, their rotations and reflections.
"""

import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Dict, Iterable, Iterator, List, Tuple

from .bitboard import CoordinateSet, coords_to_mask, mask_to_coords
from .color import Color
from .rotation import ROTATIONS, Rotation
from .vec2 import Vec2

# Flip order used when walking through the transformations
FLIPS = (True, False)


def _align(coords: List[Tuple[int, int]]) -> List[Tuple[int, int]]:
    """Translate coordinates so that their component-wise minimum is (0, 0)."""
    min_x = min(x for x, _ in coords)
    min_y = min(y for _, y in coords)
    return [(x - min_x, y - min_y) for x, y in coords]


def _map_bits(bits: int, fn: Callable[[Vec2], Vec2]) -> int:
    mapped = [fn(Vec2(x, y)) for x, y in mask_to_coords(bits)]
    return coords_to_mask(_align([(v.x, v.y) for v in mapped]))


def _mirror_bits(bits: int) -> int:
    return _map_bits(bits, lambda v: -v)


def _turn_right_bits(bits: int) -> int:
    return _map_bits(bits, Vec2.turn_right)


def _turn_left_bits(bits: int) -> int:
    return _map_bits(bits, Vec2.turn_left)


def _flip_bits(bits: int) -> int:
    return _map_bits(bits, Vec2.flip)


_ROTATE_BITS = {
    Rotation.NONE: lambda bits: bits,
    Rotation.RIGHT: _turn_right_bits,
    Rotation.MIRROR: _mirror_bits,
    Rotation.LEFT: _turn_left_bits,
}


@lru_cache(maxsize=None)
def transform_bits(bits: int, rotation: Rotation, flip: bool) -> int:
    """
    Apply a rotation and an optional flip to a shape mask.

    The result is aligned to the top-left corner of the window. Results
    are memoized since there are only 21 * 8 distinct inputs in practice.
    """
    bits = _ROTATE_BITS[rotation](bits)
    if flip:
        bits = _flip_bits(bits)
    return bits


def transformations() -> Iterator[Tuple[Rotation, bool]]:
    """Yield the eight (rotation, flip) combinations in generation order."""
    for rotation in ROTATIONS:
        for flip in FLIPS:
            yield rotation, flip


class PieceShape:
    """
    One of the 21 Blokus shapes.

    Shapes are identified by name: a rotated or flipped shape keeps the
    name of the catalog entry it was derived from, so it compares equal
    to that entry even though its cells differ.
    """

    __slots__ = ("name", "coordinate_set")

    def __init__(self, name: str, coordinates):
        self.name = sys.intern(name)
        if isinstance(coordinates, CoordinateSet):
            self.coordinate_set = coordinates
        else:
            self.coordinate_set = CoordinateSet.from_iter(coordinates)

    def coordinates(self) -> Iterator[Vec2]:
        """
        The occupied cells with the upper left corner as origin, in
        row-major order.
        """
        return iter(self.coordinate_set)

    def contains(self, coordinates: Vec2) -> bool:
        return coordinates in self.coordinate_set

    @property
    def size(self) -> int:
        """Number of cells in the shape."""
        return len(self.coordinate_set)

    def ascii_art(self) -> str:
        """Render the 5x5 window, '#' for occupied cells and '.' otherwise."""
        return str(self.coordinate_set)

    def _with_bits(self, bits: int) -> "PieceShape":
        return PieceShape(self.name, CoordinateSet(bits))

    def mirror(self) -> "PieceShape":
        """Rotate by 180 degrees by negating all coordinates."""
        return self._with_bits(_mirror_bits(self.coordinate_set.bits))

    def turn_right(self) -> "PieceShape":
        return self._with_bits(_turn_right_bits(self.coordinate_set.bits))

    def turn_left(self) -> "PieceShape":
        return self._with_bits(_turn_left_bits(self.coordinate_set.bits))

    def flip(self) -> "PieceShape":
        """Flip along the y-axis."""
        return self._with_bits(_flip_bits(self.coordinate_set.bits))

    def rotate(self, rotation: Rotation) -> "PieceShape":
        if rotation is Rotation.NONE:
            return self
        return self._with_bits(transform_bits(self.coordinate_set.bits, rotation, False))

    def transform(self, rotation: Rotation, flip: bool) -> "PieceShape":
        """Apply the given rotation, then flip if requested."""
        if rotation is Rotation.NONE and not flip:
            return self
        return self._with_bits(transform_bits(self.coordinate_set.bits, rotation, flip))

    @staticmethod
    def transformations() -> Iterator[Tuple[Rotation, bool]]:
        return transformations()

    def variants(self) -> Iterator["PieceShape"]:
        """Yield the shape under each of the eight transformations."""
        for rotation, flip in transformations():
            yield self.transform(rotation, flip)

    def bounding_box(self) -> Vec2:
        """The extent of the shape as ``max - min`` over its cells."""
        minimum = Vec2.zero()
        maximum = Vec2.zero()
        for c in self.coordinate_set:
            minimum = minimum.min(c)
            maximum = maximum.max(c)
        return maximum - minimum

    def __eq__(self, other) -> bool:
        if not isinstance(other, PieceShape):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"PieceShape({self.name!r}, {self.coordinate_set!r})"

    def __str__(self) -> str:
        return self.name


def _shape(name: str, cells: Iterable[Tuple[int, int]]) -> PieceShape:
    return PieceShape(name, [Vec2(x, y) for x, y in cells])


PIECE_SHAPES: Tuple[PieceShape, ...] = (
    _shape("MONO", [(0, 0)]),
    _shape("DOMINO", [(0, 0), (1, 0)]),
    _shape("TRIO_L", [(0, 0), (0, 1), (1, 1)]),
    _shape("TRIO_I", [(0, 0), (0, 1), (0, 2)]),
    _shape("TETRO_O", [(0, 0), (1, 0), (0, 1), (1, 1)]),
    _shape("TETRO_T", [(0, 0), (1, 0), (2, 0), (1, 1)]),
    _shape("TETRO_I", [(0, 0), (0, 1), (0, 2), (0, 3)]),
    _shape("TETRO_L", [(0, 0), (0, 1), (0, 2), (1, 2)]),
    _shape("TETRO_Z", [(0, 0), (1, 0), (1, 1), (2, 1)]),
    _shape("PENTO_L", [(0, 0), (0, 1), (0, 2), (0, 3), (1, 3)]),
    _shape("PENTO_T", [(0, 0), (1, 0), (2, 0), (1, 1), (1, 2)]),
    _shape("PENTO_V", [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]),
    _shape("PENTO_S", [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1)]),
    _shape("PENTO_Z", [(0, 0), (1, 0), (1, 1), (1, 2), (2, 2)]),
    _shape("PENTO_I", [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]),
    _shape("PENTO_P", [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]),
    _shape("PENTO_W", [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2)]),
    _shape("PENTO_U", [(0, 0), (0, 1), (1, 1), (2, 1), (2, 0)]),
    _shape("PENTO_R", [(0, 1), (1, 1), (1, 2), (2, 1), (2, 0)]),
    _shape("PENTO_X", [(1, 0), (0, 1), (1, 1), (2, 1), (1, 2)]),
    _shape("PENTO_Y", [(0, 1), (1, 0), (1, 1), (1, 2), (1, 3)]),
)

PIECE_SHAPES_BY_NAME: Dict[str, PieceShape] = {shape.name: shape for shape in PIECE_SHAPES}

MONOMINO = PIECE_SHAPES_BY_NAME["MONO"]

# Total number of cells over the whole catalog
SUM_MAX_SQUARES = sum(shape.size for shape in PIECE_SHAPES)


def get_shape(name: str) -> PieceShape:
    """
    Look up a catalog shape by name.

    Raises:
        KeyError: If no shape with that name exists
    """
    try:
        return PIECE_SHAPES_BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown piece shape {name!r}") from None


@dataclass(frozen=True)
class Piece:
    """
    A placed (or to be placed) piece.

    Attributes:
        kind: The untransformed catalog shape
        rotation: How far the shape is rotated
        is_flipped: Whether the rotated shape is flipped along the y-axis
        color: The piece's color
        position: Top left corner of the transformed shape's bounding box
    """
    kind: PieceShape
    rotation: Rotation
    is_flipped: bool
    color: Color
    position: Vec2

    def shape(self) -> PieceShape:
        """The actual (transformed) shape."""
        return self.kind.transform(self.rotation, self.is_flipped)

    def coordinates(self) -> Iterator[Vec2]:
        """The board cells covered by this piece."""
        position = self.position
        return (c + position for c in self.shape().coordinates())

    def __str__(self) -> str:
        flipped = ", flipped" if self.is_flipped else ""
        return f"{self.color} {self.kind} ({self.rotation}{flipped}) at {self.position}"
