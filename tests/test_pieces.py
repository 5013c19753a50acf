"""
Tests for the piece shape catalog and shape transformations.
"""

import unittest

from blokus.color import Color
from blokus.pieces import (
    MONOMINO,
    PIECE_SHAPES,
    PIECE_SHAPES_BY_NAME,
    SUM_MAX_SQUARES,
    Piece,
    PieceShape,
    get_shape,
    transformations,
)
from blokus.rotation import ROTATIONS, Rotation
from blokus.vec2 import Vec2

# Number of distinct cell patterns under the eight transformations
EXPECTED_VARIANTS = {
    "MONO": 1, "DOMINO": 2, "TRIO_L": 4, "TRIO_I": 2,
    "TETRO_O": 1, "TETRO_T": 4, "TETRO_I": 2, "TETRO_L": 8, "TETRO_Z": 4,
    "PENTO_L": 8, "PENTO_T": 4, "PENTO_V": 4, "PENTO_S": 8, "PENTO_Z": 4,
    "PENTO_I": 2, "PENTO_P": 8, "PENTO_W": 4, "PENTO_U": 4, "PENTO_R": 8,
    "PENTO_X": 1, "PENTO_Y": 8,
}


def cells(shape: PieceShape) -> frozenset:
    return frozenset(shape.coordinates())


class TestCatalog(unittest.TestCase):
    """Test the 21 catalog shapes."""

    def test_catalog_order_and_size(self):
        self.assertEqual(len(PIECE_SHAPES), 21)
        self.assertEqual(PIECE_SHAPES[0].name, "MONO")
        self.assertEqual(PIECE_SHAPES[-1].name, "PENTO_Y")
        self.assertEqual([s.name for s in PIECE_SHAPES], list(EXPECTED_VARIANTS))

    def test_square_total(self):
        self.assertEqual(SUM_MAX_SQUARES, 89)
        sizes = [s.size for s in PIECE_SHAPES]
        self.assertEqual(sizes.count(1), 1)
        self.assertEqual(sizes.count(2), 1)
        self.assertEqual(sizes.count(3), 2)
        self.assertEqual(sizes.count(4), 5)
        self.assertEqual(sizes.count(5), 12)

    def test_shapes_are_aligned(self):
        for shape in PIECE_SHAPES:
            xs = [c.x for c in shape.coordinates()]
            ys = [c.y for c in shape.coordinates()]
            self.assertEqual(min(xs), 0, shape.name)
            self.assertEqual(min(ys), 0, shape.name)

    def test_get_shape(self):
        self.assertIs(get_shape("MONO"), MONOMINO)
        self.assertIs(get_shape("PENTO_X"), PIECE_SHAPES_BY_NAME["PENTO_X"])
        with self.assertRaises(KeyError):
            get_shape("HEXO")


class TestTransformations(unittest.TestCase):
    """Test rotation and reflection laws."""

    def test_generation_order(self):
        expected = [(r, f) for r in ROTATIONS for f in (True, False)]
        self.assertEqual(list(transformations()), expected)
        self.assertEqual(ROTATIONS, (Rotation.NONE, Rotation.LEFT, Rotation.RIGHT, Rotation.MIRROR))

    def test_turns_cancel(self):
        for shape in PIECE_SHAPES:
            self.assertEqual(cells(shape.turn_right().turn_left()), cells(shape), shape.name)
            self.assertEqual(cells(shape.turn_left().turn_right()), cells(shape), shape.name)

    def test_four_turns_identity(self):
        for shape in PIECE_SHAPES:
            turned = shape.turn_right().turn_right().turn_right().turn_right()
            self.assertEqual(cells(turned), cells(shape), shape.name)

    def test_mirror_is_two_turns(self):
        for shape in PIECE_SHAPES:
            self.assertEqual(cells(shape.mirror()), cells(shape.turn_right().turn_right()), shape.name)

    def test_flip_is_involution(self):
        for shape in PIECE_SHAPES:
            self.assertEqual(cells(shape.flip().flip()), cells(shape), shape.name)

    def test_transform_matches_rotate_then_flip(self):
        for shape in PIECE_SHAPES:
            for rotation, flip in transformations():
                expected = shape.rotate(rotation)
                if flip:
                    expected = expected.flip()
                self.assertEqual(cells(shape.transform(rotation, flip)), cells(expected))

    def test_transform_preserves_size_and_name(self):
        for shape in PIECE_SHAPES:
            for variant in shape.variants():
                self.assertEqual(variant.size, shape.size)
                self.assertEqual(variant.name, shape.name)
                self.assertEqual(variant, shape)

    def test_distinct_variants(self):
        for shape in PIECE_SHAPES:
            distinct = {cells(v) for v in shape.variants()}
            self.assertEqual(len(distinct), EXPECTED_VARIANTS[shape.name], shape.name)

    def test_pento_y_ascii_art(self):
        y = get_shape("PENTO_Y")
        self.assertEqual(y.transform(Rotation.NONE, True).ascii_art(),
                         "#....\n##...\n#....\n#....\n.....\n")
        self.assertEqual(y.transform(Rotation.LEFT, True).ascii_art(),
                         "####.\n..#..\n.....\n.....\n.....\n")
        self.assertEqual(y.transform(Rotation.LEFT, False).ascii_art(),
                         "####.\n.#...\n.....\n.....\n.....\n")
        self.assertEqual(y.transform(Rotation.MIRROR, False).ascii_art(),
                         "#....\n#....\n##...\n#....\n.....\n")

    def test_bounding_box(self):
        y = get_shape("PENTO_Y")
        self.assertEqual(y.bounding_box(), Vec2(1, 3))
        self.assertEqual(y.turn_left().bounding_box(), Vec2(3, 1))
        self.assertEqual(MONOMINO.bounding_box(), Vec2(0, 0))
        self.assertEqual(get_shape("PENTO_I").bounding_box(), Vec2(0, 4))


class TestPiece(unittest.TestCase):
    """Test placed pieces."""

    def test_coordinates_are_offset(self):
        piece = Piece(get_shape("TRIO_L"), Rotation.NONE, False, Color.RED, Vec2(5, 7))
        self.assertEqual(set(piece.coordinates()), {Vec2(5, 7), Vec2(5, 8), Vec2(6, 8)})

    def test_shape_is_transformed(self):
        piece = Piece(get_shape("PENTO_Y"), Rotation.LEFT, False, Color.BLUE, Vec2(0, 0))
        self.assertEqual(piece.shape().ascii_art(), "####.\n.#...\n.....\n.....\n.....\n")
        self.assertEqual(piece.shape(), get_shape("PENTO_Y"))

    def test_value_semantics(self):
        a = Piece(get_shape("MONO"), Rotation.NONE, False, Color.RED, Vec2(1, 1))
        b = Piece(get_shape("MONO"), Rotation.NONE, False, Color.RED, Vec2(1, 1))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))


if __name__ == "__main__":
    unittest.main()
