"""
Pydantic schemas for the serialized form of the Blokus game state.
"""

from .game_state import BoardRecord, FieldRecord, GameStateRecord, PlayerRecord
from .move import (
    SET_MOVE_CLASS,
    SKIP_MOVE_CLASS,
    Color,
    MoveRecord,
    PieceRecord,
    Position,
    Rotation,
    SetMoveRecord,
    ShapeName,
    SkipMoveRecord,
    Team,
    move_record_from_element,
)

__all__ = [
    "BoardRecord",
    "FieldRecord",
    "GameStateRecord",
    "PlayerRecord",
    "SET_MOVE_CLASS",
    "SKIP_MOVE_CLASS",
    "Color",
    "MoveRecord",
    "PieceRecord",
    "Position",
    "Rotation",
    "SetMoveRecord",
    "ShapeName",
    "SkipMoveRecord",
    "Team",
    "move_record_from_element",
]
