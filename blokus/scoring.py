"""
Scoring from the shapes a color has not placed.
"""

from typing import Iterable

from .pieces import SUM_MAX_SQUARES, PieceShape

ALL_PLACED_BONUS = 15
MONO_LAST_BONUS = 5


def points_from_undeployed(undeployed: Iterable[PieceShape], mono_last: bool) -> int:
    """
    Compute the points of a color from its undeployed shapes.

    A color that placed every shape gets all 89 squares plus 15 bonus
    points, and another 5 if the monomino was its final piece. Otherwise
    it scores one point per square it placed.
    """
    undeployed = list(undeployed)
    if not undeployed:
        return SUM_MAX_SQUARES + ALL_PLACED_BONUS + (MONO_LAST_BONUS if mono_last else 0)
    return SUM_MAX_SQUARES - sum(shape.size for shape in undeployed)
