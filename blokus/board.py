"""
Blokus board: a 20x20 grid of colors.
"""

from enum import Enum
from typing import Iterator, Tuple

import numpy as np

from .color import Color
from .pieces import Piece
from .vec2 import Vec2

BOARD_SIZE = 20

EDGE_OFFSETS = (Vec2(1, 0), Vec2(0, 1), Vec2(-1, 0), Vec2(0, -1))
DIAGONAL_OFFSETS = (Vec2(1, 1), Vec2(-1, 1), Vec2(1, -1), Vec2(-1, -1))


class Corner(Enum):
    """The four board corners."""
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


# Order in which first moves are generated
CORNERS = (Corner.TOP_LEFT, Corner.TOP_RIGHT, Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT)

_CORNER_POSITIONS = {
    Corner.TOP_LEFT: Vec2(0, 0),
    Corner.TOP_RIGHT: Vec2(BOARD_SIZE - 1, 0),
    Corner.BOTTOM_LEFT: Vec2(0, BOARD_SIZE - 1),
    Corner.BOTTOM_RIGHT: Vec2(BOARD_SIZE - 1, BOARD_SIZE - 1),
}


class Board:
    """
    Blokus game board.

    The grid is indexed as ``grid[y, x]`` and stores ``Color.value``,
    so 0 means empty. Cells outside the board read as ``Color.NONE``.
    """

    SIZE = BOARD_SIZE

    def __init__(self):
        self.grid = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)

    @staticmethod
    def is_in_bounds(position: Vec2) -> bool:
        """Check whether the given coordinates are on the board."""
        return 0 <= position.x < BOARD_SIZE and 0 <= position.y < BOARD_SIZE

    @staticmethod
    def corner_position(corner: Corner) -> Vec2:
        return _CORNER_POSITIONS[corner]

    @staticmethod
    def corner_positions() -> Iterator[Vec2]:
        return (_CORNER_POSITIONS[corner] for corner in CORNERS)

    @staticmethod
    def is_on_corner(position: Vec2) -> bool:
        return position in _CORNER_POSITIONS.values()

    @staticmethod
    def align(area: Vec2, corner: Corner) -> Vec2:
        """
        Snap a bounding box of the given size to a board corner.

        Returns the top left anchor of the box.
        """
        position = _CORNER_POSITIONS[corner]
        if corner is Corner.TOP_LEFT:
            return position
        if corner is Corner.TOP_RIGHT:
            return Vec2(position.x - area.x, position.y)
        if corner is Corner.BOTTOM_LEFT:
            return Vec2(position.x, position.y - area.y)
        return position - area

    def get(self, position: Vec2) -> Color:
        """Fetch the color at a position; NONE if empty or off the board."""
        if not self.is_in_bounds(position):
            return Color.NONE
        return Color(int(self.grid[position.y, position.x]))

    def set(self, position: Vec2, color: Color) -> None:
        """
        Write a color at a position.

        Raises:
            ValueError: If the position is off the board
        """
        if not self.is_in_bounds(position):
            raise ValueError(f"Position {position} is not on the board")
        self.grid[position.y, position.x] = color.value

    def place(self, piece: Piece) -> None:
        """Place the piece on the board WITHOUT any rule checks."""
        for position in piece.coordinates():
            self.set(position, piece.color)

    def is_obstructed(self, position: Vec2) -> bool:
        return self.get(position) is not Color.NONE

    def borders_on_color(self, position: Vec2, color: Color) -> bool:
        """Check whether an edge neighbour of the position has the given color."""
        return any(self.get(position + offset) is color for offset in EDGE_OFFSETS)

    def corners_on_color(self, position: Vec2, color: Color) -> bool:
        """Check whether a diagonal neighbour of the position has the given color."""
        return any(self.get(position + offset) is color for offset in DIAGONAL_OFFSETS)

    def count_obstructed(self) -> int:
        """Number of occupied cells."""
        return int(np.count_nonzero(self.grid))

    def count_color(self, color: Color) -> int:
        return int(np.count_nonzero(self.grid == color.value))

    def fields(self) -> Iterator[Tuple[Vec2, Color]]:
        """Yield the occupied cells with their colors in row-major order."""
        ys, xs = np.nonzero(self.grid)
        for y, x in zip(ys.tolist(), xs.tolist()):
            yield Vec2(x, y), Color(int(self.grid[y, x]))

    def copy(self) -> "Board":
        new_board = Board()
        new_board.grid = self.grid.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __str__(self) -> str:
        """One line per row, '.' for empty cells, the color's initial otherwise."""
        symbols = {color.value: color.name[0] for color in Color}
        symbols[Color.NONE.value] = "."
        return "\n".join(
            "".join(symbols[int(value)] for value in row)
            for row in self.grid
        )
