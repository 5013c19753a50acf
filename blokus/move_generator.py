"""
Moves and legal move generation for Blokus.
"""

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Tuple, Union

import numpy as np

from .board import BOARD_SIZE, CORNERS, Board
from .color import Color
from .pieces import Piece, transformations
from .vec2 import Vec2

if TYPE_CHECKING:
    from .game_state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkipMove:
    """The active color passes without placing a piece."""
    color: Color

    def __str__(self) -> str:
        return f"Skip({self.color})"


@dataclass(frozen=True)
class SetMove:
    """The active color places a piece it has not placed yet."""
    piece: Piece

    @property
    def color(self) -> Color:
        return self.piece.color

    def __str__(self) -> str:
        return f"Set({self.piece})"


Move = Union[SkipMove, SetMove]


class LegalMoveGenerator:
    """Generates all legal moves for the active color of a game state."""

    def __init__(self, debug: bool = False):
        self.debug = debug

    def get_legal_moves(self, state: "GameState") -> List[Move]:
        """
        Get all legal moves for the active color.

        On a color's first move these are the placements of the start piece
        in the board corners; skipping is not allowed. Afterwards these are
        all placements of the undeployed shapes followed by a skip move.

        Args:
            state: Game state to generate moves for

        Returns:
            List of legal moves in deterministic order
        """
        start = time.perf_counter()
        color = state.current_color

        if state.is_first_move(color):
            mode = "first"
            legal_moves: List[Move] = list(self.iter_first_moves(state))
        else:
            mode = "usual"
            legal_moves = list(self.iter_usual_set_moves(state))
            if state.ordered_colors:
                legal_moves.append(SkipMove(color))

        elapsed = time.perf_counter() - start
        if self.debug:
            logger.info(f"MoveGen[{mode}]: color={color}, legal_moves={len(legal_moves)}, elapsed_ms={elapsed * 1000.0:.2f}")
        logger.debug(f"Legal move generation [{mode}]: {len(legal_moves)} moves in {elapsed:.4f}s for color={color}")

        return legal_moves

    def iter_first_moves(self, state: "GameState") -> Iterator[SetMove]:
        """
        Yield the start piece snapped to each board corner.

        Order is rotation, then flip, then corner.
        """
        color = state.current_color
        kind = state.start_piece
        for rotation, is_flipped in transformations():
            bounding_box = kind.transform(rotation, is_flipped).bounding_box()
            for corner in CORNERS:
                piece = Piece(kind, rotation, is_flipped, color, Board.align(bounding_box, corner))
                if state.is_valid_move(SetMove(piece)):
                    yield SetMove(piece)

    def iter_usual_set_moves(self, state: "GameState") -> Iterator[SetMove]:
        """
        Yield every placement of an undeployed shape that touches the own
        color diagonally and nowhere along an edge.

        Order is shape (catalog order), rotation, flip, then anchor in
        row-major order.
        """
        color = state.current_color
        blocked, touching = self._placement_masks(state.board, color)

        for kind in state.undeployed_shapes(color):
            for rotation, is_flipped in transformations():
                shape = kind.transform(rotation, is_flipped)
                bounding_box = shape.bounding_box()
                offsets = [c.y * BOARD_SIZE + c.x for c in shape.coordinates()]

                for y in range(BOARD_SIZE - bounding_box.y):
                    row = y * BOARD_SIZE
                    for x in range(BOARD_SIZE - bounding_box.x):
                        base = row + x
                        if any(blocked[base + o] for o in offsets):
                            continue
                        if any(touching[base + o] for o in offsets):
                            yield SetMove(Piece(kind, rotation, is_flipped, color, Vec2(x, y)))

    @staticmethod
    def _placement_masks(board: Board, color: Color) -> Tuple[List[bool], List[bool]]:
        """
        Precompute flat per-cell lookups for a color.

        Returns:
            (blocked, touching) where blocked marks cells that are occupied or
            share an edge with the color, and touching marks cells that share
            a corner with the color. Both are indexed by ``y * 20 + x``.
        """
        own = board.grid == color.value

        blocked = board.grid != Color.NONE.value
        blocked[1:, :] |= own[:-1, :]
        blocked[:-1, :] |= own[1:, :]
        blocked[:, 1:] |= own[:, :-1]
        blocked[:, :-1] |= own[:, 1:]

        touching = np.zeros_like(own)
        touching[1:, 1:] |= own[:-1, :-1]
        touching[1:, :-1] |= own[:-1, 1:]
        touching[:-1, 1:] |= own[1:, :-1]
        touching[:-1, :-1] |= own[1:, 1:]

        return blocked.ravel().tolist(), touching.ravel().tolist()
