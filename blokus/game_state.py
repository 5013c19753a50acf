"""
Blokus game state: the position, the placement rules and move commits.
"""

import logging
from typing import Dict, List, Optional, Set, Union

from .board import Board
from .color import PLAYING_COLORS, Color, Player, Team
from .config import EngineConfig
from .errors import (
    EdgeNeighborSameColorError,
    GameOverError,
    InvalidMoveError,
    MissingCornerAnchorError,
    MissingDiagonalTouchError,
    MoveColorMismatchError,
    NotStartShapeError,
    ObstructedError,
    OutOfBoundsError,
    PieceAlreadyPlacedError,
    SkipInFirstMoveError,
)
from .move_generator import LegalMoveGenerator, Move, SetMove, SkipMove
from .pieces import MONOMINO, PIECE_SHAPES, Piece, PieceShape, get_shape
from .scoring import points_from_undeployed

logger = logging.getLogger(__name__)

DEFAULT_FIRST_PLAYER = Player(Team.ONE, "Alice")
DEFAULT_SECOND_PLAYER = Player(Team.TWO, "Bob")


class GameState:
    """
    A snapshot of a four-color Blokus game.

    Attributes:
        turn: Number of committed moves
        round: Number of rounds, starting at 1
        first: Player of team one
        second: Player of team two
        board: The game board
        start_piece: Shape every color has to place first
        start_color: Color that began the game
        start_team: Team that began the game
        ordered_colors: Colors in the turn queue, in turn order
        current_color_index: Cursor into ordered_colors
        undeployed: Shapes each color has not placed yet
        last_move_mono: For each color that placed all its shapes, whether
            the final piece was the monomino
        config: Engine configuration; not part of the game position
    """

    def __init__(self, start_piece: Union[PieceShape, str], config: Optional[EngineConfig] = None):
        if isinstance(start_piece, str):
            start_piece = get_shape(start_piece)
        self.turn = 0
        self.round = 1
        self.first = DEFAULT_FIRST_PLAYER
        self.second = DEFAULT_SECOND_PLAYER
        self.board = Board()
        self.start_piece = get_shape(start_piece.name)
        self.start_color = Color.BLUE
        self.start_team = Team.ONE
        self.ordered_colors: List[Color] = list(PLAYING_COLORS)
        self.current_color_index = 0
        self.undeployed: Dict[Color, Set[PieceShape]] = {
            color: set(PIECE_SHAPES) for color in PLAYING_COLORS
        }
        self.last_move_mono: Dict[Color, bool] = {}
        self.config = config if config is not None else EngineConfig()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def current_color(self) -> Color:
        if not self.ordered_colors:
            raise GameOverError("Game has already ended, there is no current color!")
        return self.ordered_colors[self.current_color_index % len(self.ordered_colors)]

    @property
    def current_team(self) -> Team:
        return self.current_color.team

    @property
    def current_player(self) -> Player:
        team = self.current_team
        if team is Team.ONE:
            return self.first
        if team is Team.TWO:
            return self.second
        raise ValueError("Cannot fetch the current player with the team being NONE!")

    @property
    def is_game_over(self) -> bool:
        return not self.ordered_colors

    def _inventory(self, color: Color) -> Set[PieceShape]:
        try:
            return self.undeployed[color]
        except KeyError:
            raise ValueError(f"Color {color} has no shapes") from None

    def undeployed_shapes(self, color: Color) -> List[PieceShape]:
        """The shapes a color has not placed yet, in catalog order."""
        inventory = self._inventory(color)
        return [shape for shape in PIECE_SHAPES if shape in inventory]

    def is_first_move(self, color: Optional[Color] = None) -> bool:
        """Whether the color (default: the active one) has not placed anything yet."""
        if color is None:
            color = self.current_color
        return len(self._inventory(color)) == len(PIECE_SHAPES)

    def points(self, color: Color) -> int:
        return points_from_undeployed(self._inventory(color), self.last_move_mono.get(color, False))

    def team_points(self, team: Team) -> int:
        return sum(self.points(color) for color in PLAYING_COLORS if color.team is team)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _validate_move_color(self, move: Move) -> None:
        current_color = self.current_color
        if move.color is not current_color:
            raise MoveColorMismatchError(move.color, current_color)

    def _validate_shape(self, shape: PieceShape, color: Color) -> None:
        if self.is_first_move(color):
            if shape != self.start_piece:
                raise NotStartShapeError(shape, self.start_piece)
        elif shape not in self._inventory(color):
            raise PieceAlreadyPlacedError(shape, color)

    def _validate_set_move(self, piece: Piece) -> None:
        self._validate_shape(piece.kind, piece.color)

        coordinates = list(piece.coordinates())
        for position in coordinates:
            if not Board.is_in_bounds(position):
                raise OutOfBoundsError(position)
            if self.board.is_obstructed(position):
                raise ObstructedError(position)
            if self.board.borders_on_color(position, piece.color):
                raise EdgeNeighborSameColorError(position, piece.color)

        if self.is_first_move(piece.color):
            if not any(Board.is_on_corner(p) for p in coordinates):
                raise MissingCornerAnchorError(piece)
        elif not any(self.board.corners_on_color(p, piece.color) for p in coordinates):
            raise MissingDiagonalTouchError(piece)

    def _validate_skip_move(self) -> None:
        if not self.ordered_colors:
            raise GameOverError()
        if self.is_first_move():
            raise SkipInFirstMoveError(self.current_color)

    def validate_move(self, move: Move) -> None:
        """
        Check a move against every rule.

        Raises:
            InvalidMoveError: A subclass naming the violated rule
            GameOverError: If no color is left in the turn queue
        """
        self._validate_move_color(move)
        if isinstance(move, SkipMove):
            self._validate_skip_move()
        else:
            self._validate_set_move(move.piece)

    def is_valid_move(self, move: Move) -> bool:
        try:
            self.validate_move(move)
        except InvalidMoveError:
            return False
        return True

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------

    def _move_generator(self) -> LegalMoveGenerator:
        return LegalMoveGenerator(debug=self.config.movegen_debug)

    def possible_moves(self) -> List[Move]:
        """All legal moves for the active color."""
        return self._move_generator().get_legal_moves(self)

    def possible_first_moves(self) -> List[SetMove]:
        return list(self._move_generator().iter_first_moves(self))

    def possible_usual_set_moves(self) -> List[SetMove]:
        return list(self._move_generator().iter_usual_set_moves(self))

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def try_advance(self, turns: int) -> None:
        """
        Move the cursor forward by the given number of turns.

        The round counter increases each time the cursor wraps around
        the end of the turn queue, i.e. by ``(index + turns) // len``
        rather than ``turns // len``.

        Raises:
            GameOverError: If the turn queue is empty
        """
        if not self.ordered_colors:
            raise GameOverError()
        count = len(self.ordered_colors)
        target = self.current_color_index + turns
        self.current_color_index = target % count
        self.round += target // count
        self.turn += turns

    def _drop_color(self, color: Color) -> None:
        """Remove a finished color from the turn queue, counting it as a turn."""
        index = self.ordered_colors.index(color)
        current = self.current_color_index
        del self.ordered_colors[index]
        self.turn += 1

        if not self.ordered_colors:
            self.current_color_index = 0
            logger.info(f"{color} placed its last shape, no colors left in the turn queue")
            return

        count = len(self.ordered_colors)
        # Deleting at or before the cursor shifts the following color onto it
        target = current if index <= current else current + 1
        self.current_color_index = target % count
        self.round += target // count
        logger.debug(f"{color} placed its last shape and left the turn queue")

    def _perform_skip_move(self) -> None:
        self._validate_skip_move()
        self.try_advance(1)

    def _perform_set_move(self, piece: Piece) -> None:
        if self.config.validate_set_moves:
            self._validate_set_move(piece)

        self.board.place(piece)

        inventory = self._inventory(piece.color)
        inventory.discard(piece.kind)

        if not inventory:
            self.last_move_mono[piece.color] = piece.kind == MONOMINO
            if self.config.drop_finished_colors:
                self._drop_color(piece.color)
                return

        self.try_advance(1)

    def perform(self, move: Move) -> None:
        """
        Commit a move to this state.

        Nothing is changed if the move is rejected.

        Raises:
            InvalidMoveError: If the move breaks a rule
            GameOverError: If no color is left in the turn queue
        """
        if not self.ordered_colors:
            raise GameOverError()
        if self.config.validate_move_color:
            self._validate_move_color(move)

        if isinstance(move, SkipMove):
            self._perform_skip_move()
        elif isinstance(move, SetMove):
            self._perform_set_move(move.piece)
        else:
            raise TypeError(f"Unsupported move type: {type(move).__name__}")

        logger.debug(f"Performed {move}: turn={self.turn}, round={self.round}")

    def after_move(self, move: Move) -> "GameState":
        """Return the state after the move, leaving this state untouched."""
        state = self.copy()
        state.perform(move)
        return state

    # ------------------------------------------------------------------

    def copy(self) -> "GameState":
        """Create a deep copy of the position. The config is shared."""
        new_state = GameState.__new__(GameState)
        new_state.turn = self.turn
        new_state.round = self.round
        new_state.first = self.first
        new_state.second = self.second
        new_state.board = self.board.copy()
        new_state.start_piece = self.start_piece
        new_state.start_color = self.start_color
        new_state.start_team = self.start_team
        new_state.ordered_colors = list(self.ordered_colors)
        new_state.current_color_index = self.current_color_index
        new_state.undeployed = {color: set(shapes) for color, shapes in self.undeployed.items()}
        new_state.last_move_mono = dict(self.last_move_mono)
        new_state.config = self.config
        return new_state

    def _key(self) -> tuple:
        return (
            self.turn,
            self.round,
            self.first,
            self.second,
            self.start_piece,
            self.start_color,
            self.start_team,
            tuple(self.ordered_colors),
            self.current_color_index,
            {color: frozenset(shapes) for color, shapes in self.undeployed.items()},
            self.last_move_mono,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self._key() == other._key() and self.board == other.board

    __hash__ = None

    def __repr__(self) -> str:
        current = self.ordered_colors[self.current_color_index] if self.ordered_colors else None
        return (f"GameState(turn={self.turn}, round={self.round}, current_color={current}, "
                f"start_piece={self.start_piece})")
