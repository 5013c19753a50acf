"""
Exceptions raised by the game engine.

Every rule violation derives from InvalidMoveError, so callers that only
care whether a move was accepted can catch that single type.
"""

from typing import Optional

from .color import Color
from .vec2 import Vec2


class BlokusError(Exception):
    """Base class for all engine errors."""


class InvalidMoveError(BlokusError):
    """A move was rejected by the rules."""


class MoveColorMismatchError(InvalidMoveError):
    def __init__(self, move_color: Color, current_color: Color):
        self.move_color = move_color
        self.current_color = current_color
        super().__init__(
            f"Move color {move_color} does not match game state color {current_color}!"
        )


class NotStartShapeError(InvalidMoveError):
    def __init__(self, shape, start_piece):
        self.shape = shape
        self.start_piece = start_piece
        super().__init__(f"{shape} is not the requested first shape {start_piece}!")


class PieceAlreadyPlacedError(InvalidMoveError):
    def __init__(self, shape, color: Color):
        self.shape = shape
        self.color = color
        super().__init__(f"Piece {shape} of {color} has already been placed before!")


class PlacementError(InvalidMoveError):
    """A rule about the covered cells failed at a specific position."""

    def __init__(self, message: str, position: Optional[Vec2] = None):
        self.position = position
        super().__init__(message)


class OutOfBoundsError(PlacementError):
    def __init__(self, position: Vec2):
        super().__init__(
            f"Target position of the set move {position} is not in the board's bounds!", position
        )


class ObstructedError(PlacementError):
    def __init__(self, position: Vec2):
        super().__init__(f"Target position of the set move {position} is obstructed!", position)


class EdgeNeighborSameColorError(PlacementError):
    def __init__(self, position: Vec2, color: Color):
        self.color = color
        super().__init__(
            f"Target position of the set move {position} already borders on {color}!", position
        )


class MissingCornerAnchorError(PlacementError):
    def __init__(self, piece):
        self.piece = piece
        super().__init__(f"The piece {piece} from the first move is not located in a board corner!")


class MissingDiagonalTouchError(PlacementError):
    def __init__(self, piece):
        self.piece = piece
        super().__init__(f"The piece {piece} shares no corner with another piece of {piece.color}!")


class SkipInFirstMoveError(InvalidMoveError):
    def __init__(self, color: Color):
        self.color = color
        super().__init__(f"{color} cannot skip its first move!")


class GameOverError(BlokusError):
    """The turn queue is empty."""

    def __init__(self, message: str = "Game has already ended, cannot advance!"):
        super().__init__(message)


class ParseError(BlokusError):
    """A serialized entity could not be understood."""
