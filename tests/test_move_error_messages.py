"""
Tests for rule violations and their error messages.
"""

import unittest

from blokus.color import Color
from blokus.errors import (
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
    PlacementError,
    SkipInFirstMoveError,
)
from blokus.game_state import GameState
from blokus.move_generator import SetMove, SkipMove
from blokus.pieces import Piece, get_shape
from blokus.rotation import Rotation
from blokus.vec2 import Vec2


def set_move(name: str, color: Color, x: int, y: int,
             rotation: Rotation = Rotation.NONE, is_flipped: bool = False) -> SetMove:
    return SetMove(Piece(get_shape(name), rotation, is_flipped, color, Vec2(x, y)))


class TestMoveErrorMessages(unittest.TestCase):
    """Test that each rule reports a descriptive error."""

    def setUp(self):
        self.state = GameState("TETRO_O")
        # Blue has placed its first piece in the top left corner
        self.state.perform(set_move("TETRO_O", Color.BLUE, 0, 0))
        self.state.try_advance(3)

    def assertRejected(self, move, error_type, fragment):
        before = self.state.copy()
        with self.assertRaises(error_type) as ctx:
            self.state.perform(move)
        self.assertIsInstance(ctx.exception, InvalidMoveError)
        self.assertIn(fragment, str(ctx.exception))
        # Failed moves leave no trace
        self.assertEqual(self.state, before)
        return ctx.exception

    def test_color_mismatch(self):
        error = self.assertRejected(SkipMove(Color.RED), MoveColorMismatchError,
                                    "Move color RED does not match game state color BLUE!")
        self.assertIs(error.move_color, Color.RED)
        self.assertIs(error.current_color, Color.BLUE)

    def test_not_start_shape(self):
        state = GameState("TETRO_O")
        with self.assertRaises(NotStartShapeError) as ctx:
            state.perform(set_move("MONO", Color.BLUE, 0, 0))
        self.assertIn("is not the requested first shape TETRO_O", str(ctx.exception))
        self.assertEqual(state.turn, 0)

    def test_rotated_start_shape_is_accepted(self):
        state = GameState("PENTO_Y")
        state.perform(set_move("PENTO_Y", Color.BLUE, 16, 0, Rotation.LEFT))
        self.assertEqual(state.turn, 1)

    def test_piece_already_placed(self):
        error = self.assertRejected(set_move("TETRO_O", Color.BLUE, 2, 2), PieceAlreadyPlacedError,
                                    "has already been placed before!")
        self.assertIs(error.color, Color.BLUE)

    def test_out_of_bounds(self):
        error = self.assertRejected(set_move("DOMINO", Color.BLUE, 19, 2), OutOfBoundsError,
                                    "(20, 2) is not in the board's bounds!")
        self.assertEqual(error.position, Vec2(20, 2))
        self.assertIsInstance(error, PlacementError)

    def test_obstructed(self):
        error = self.assertRejected(set_move("MONO", Color.BLUE, 1, 1), ObstructedError,
                                    "(1, 1) is obstructed!")
        self.assertEqual(error.position, Vec2(1, 1))

    def test_edge_neighbor_same_color(self):
        error = self.assertRejected(set_move("MONO", Color.BLUE, 2, 0), EdgeNeighborSameColorError,
                                    "(2, 0) already borders on BLUE!")
        self.assertIs(error.color, Color.BLUE)

    def test_missing_diagonal_touch(self):
        self.assertRejected(set_move("MONO", Color.BLUE, 5, 5), MissingDiagonalTouchError,
                            "shares no corner with another piece of BLUE!")

    def test_missing_corner_anchor(self):
        state = GameState("MONO")
        with self.assertRaises(MissingCornerAnchorError) as ctx:
            state.perform(set_move("MONO", Color.BLUE, 0, 1))
        self.assertIn("is not located in a board corner!", str(ctx.exception))

    def test_skip_in_first_move(self):
        state = GameState("MONO")
        with self.assertRaises(SkipInFirstMoveError) as ctx:
            state.perform(SkipMove(Color.BLUE))
        self.assertEqual(str(ctx.exception), "BLUE cannot skip its first move!")

    def test_valid_move_passes(self):
        move = set_move("MONO", Color.BLUE, 2, 2)
        self.state.validate_move(move)
        self.state.perform(move)
        self.assertIs(self.state.board.get(Vec2(2, 2)), Color.BLUE)

    def test_game_over(self):
        self.state.ordered_colors = []
        with self.assertRaises(GameOverError) as ctx:
            self.state.perform(SkipMove(Color.BLUE))
        self.assertEqual(str(ctx.exception), "Game has already ended, cannot advance!")
        self.assertNotIsInstance(ctx.exception, InvalidMoveError)


if __name__ == "__main__":
    unittest.main()
