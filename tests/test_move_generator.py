"""
Tests for legal move generation.

The fast generator is compared against a brute-force scan that validates
every candidate placement through the game state's rule checks.
"""

import logging
import unittest

from blokus.board import BOARD_SIZE
from blokus.color import Color
from blokus.game_state import GameState
from blokus.move_generator import LegalMoveGenerator, SetMove, SkipMove
from blokus.pieces import Piece, transformations
from blokus.rotation import Rotation
from blokus.vec2 import Vec2
from tests.utils_game_states import play_random_game


def brute_force_set_moves(state: GameState) -> list:
    """Validate every placement of every undeployed shape at every anchor."""
    color = state.current_color
    moves = []
    for kind in state.undeployed_shapes(color):
        for rotation, is_flipped in transformations():
            for y in range(BOARD_SIZE):
                for x in range(BOARD_SIZE):
                    move = SetMove(Piece(kind, rotation, is_flipped, color, Vec2(x, y)))
                    if state.is_valid_move(move):
                        moves.append(move)
    return moves


def move_key(move: SetMove) -> tuple:
    """Identify a placement by its shape name and covered cells."""
    return move.piece.kind.name, frozenset(move.piece.coordinates())


class TestMoveGeneration(unittest.TestCase):
    """Test generated moves against the rules."""

    def setUp(self):
        self.generator = LegalMoveGenerator()

    def test_first_moves_validate(self):
        state = GameState("PENTO_Y")
        moves = self.generator.get_legal_moves(state)
        self.assertEqual(len(moves), 16)
        for move in moves:
            self.assertTrue(state.is_valid_move(move), str(move))

    def test_first_moves_order(self):
        state = GameState("TETRO_O")
        moves = self.generator.get_legal_moves(state)
        # The square is symmetric, so each transform yields all four corners
        self.assertEqual(len(moves), 32)
        self.assertEqual(
            [m.piece.position for m in moves[:4]],
            [Vec2(0, 0), Vec2(18, 0), Vec2(0, 18), Vec2(18, 18)],
        )
        self.assertEqual([(m.piece.rotation, m.piece.is_flipped) for m in moves[::4]],
                         list(transformations()))

    def test_usual_moves_end_with_skip(self):
        state, _ = play_random_game(4, seed=0)
        moves = self.generator.get_legal_moves(state)
        self.assertIsInstance(moves[-1], SkipMove)
        self.assertEqual(moves[-1].color, state.current_color)
        self.assertEqual(sum(isinstance(m, SkipMove) for m in moves), 1)

    def test_usual_moves_validate(self):
        state, _ = play_random_game(10, seed=2)
        moves = self.generator.get_legal_moves(state)
        self.assertGreater(len(moves), 1)
        for move in moves:
            self.assertTrue(state.is_valid_move(move), str(move))

    def test_usual_moves_match_brute_force(self):
        for seed in (0, 6):
            state, _ = play_random_game(6, seed=seed)
            # Restrict the inventory to keep the brute-force scan short
            color = state.current_color
            state.undeployed[color] = set(state.undeployed_shapes(color)[:4])

            generated = list(self.generator.iter_usual_set_moves(state))
            expected = brute_force_set_moves(state)
            self.assertEqual({move_key(m) for m in generated}, {move_key(m) for m in expected})
            self.assertEqual(len(generated), len(expected))

    def test_full_inventory_matches_brute_force(self):
        state, _ = play_random_game(6, seed=11)
        self.assertEqual(len(state.undeployed[state.current_color]), 20)

        generated = list(self.generator.iter_usual_set_moves(state))
        expected = brute_force_set_moves(state)
        self.assertEqual({move_key(m) for m in generated}, {move_key(m) for m in expected})
        self.assertEqual(len(generated), len(expected))

    def test_usual_moves_order(self):
        state, _ = play_random_game(4, seed=5)
        moves = list(self.generator.iter_usual_set_moves(state))
        catalog_index = {shape.name: i for i, shape in enumerate(state.undeployed_shapes(state.current_color))}
        transform_index = {t: i for i, t in enumerate(transformations())}
        keys = [
            (
                catalog_index[m.piece.kind.name],
                transform_index[(m.piece.rotation, m.piece.is_flipped)],
                m.piece.position.y,
                m.piece.position.x,
            )
            for m in moves
        ]
        self.assertEqual(keys, sorted(keys))

    def test_generation_is_deterministic(self):
        state, _ = play_random_game(8, seed=9)
        self.assertEqual(self.generator.get_legal_moves(state), self.generator.get_legal_moves(state.copy()))

    def test_finished_color_can_only_skip(self):
        state = GameState("PENTO_Y")
        state.board.set(Vec2(0, 0), Color.BLUE)
        state.undeployed[Color.BLUE] = set()
        self.assertEqual(self.generator.get_legal_moves(state), [SkipMove(Color.BLUE)])

    def test_diagonal_touch_uses_all_four_diagonals(self):
        state = GameState("PENTO_Y")
        state.undeployed[Color.BLUE].discard(state.start_piece)
        state.board.set(Vec2(10, 10), Color.BLUE)
        monos = [
            m.piece.position for m in self.generator.iter_usual_set_moves(state)
            if m.piece.kind.name == "MONO" and m.piece.rotation is Rotation.NONE and not m.piece.is_flipped
        ]
        self.assertEqual(monos, [Vec2(9, 9), Vec2(11, 9), Vec2(9, 11), Vec2(11, 11)])

    def test_debug_logging(self):
        generator = LegalMoveGenerator(debug=True)
        with self.assertLogs("blokus.move_generator", level=logging.INFO) as captured:
            generator.get_legal_moves(GameState("PENTO_Y"))
        self.assertTrue(any("MoveGen[first]" in line for line in captured.output))


if __name__ == "__main__":
    unittest.main()
