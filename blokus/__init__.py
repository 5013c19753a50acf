"""
Blokus game engine package.

This package contains the core game logic for four-color Blokus, including:
- Piece shapes and their rotations and reflections
- Board management and the placement rules
- Legal move generation
- Turn order and scoring
- Serialization of states and moves
"""

from .board import BOARD_SIZE, CORNERS, Board, Corner
from .color import PLAYING_COLORS, Color, Player, Team
from .config import EngineConfig
from .errors import (
    BlokusError,
    EdgeNeighborSameColorError,
    GameOverError,
    InvalidMoveError,
    MissingCornerAnchorError,
    MissingDiagonalTouchError,
    MoveColorMismatchError,
    NotStartShapeError,
    ObstructedError,
    OutOfBoundsError,
    ParseError,
    PieceAlreadyPlacedError,
    PlacementError,
    SkipInFirstMoveError,
)
from .game_state import GameState
from .move_generator import LegalMoveGenerator, Move, SetMove, SkipMove
from .pieces import MONOMINO, PIECE_SHAPES, Piece, PieceShape, get_shape
from .rotation import ROTATIONS, Rotation
from .vec2 import Vec2

__all__ = [
    'BOARD_SIZE', 'CORNERS', 'Board', 'Corner',
    'PLAYING_COLORS', 'Color', 'Player', 'Team',
    'EngineConfig',
    'BlokusError', 'InvalidMoveError', 'MoveColorMismatchError', 'NotStartShapeError',
    'PieceAlreadyPlacedError', 'PlacementError', 'OutOfBoundsError', 'ObstructedError',
    'EdgeNeighborSameColorError', 'MissingCornerAnchorError', 'MissingDiagonalTouchError',
    'SkipInFirstMoveError', 'GameOverError', 'ParseError',
    'GameState',
    'LegalMoveGenerator', 'Move', 'SetMove', 'SkipMove',
    'MONOMINO', 'PIECE_SHAPES', 'Piece', 'PieceShape', 'get_shape',
    'ROTATIONS', 'Rotation',
    'Vec2',
]
