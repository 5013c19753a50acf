"""
Conversion of engine objects to and from their serialized tree form.

Objects are first mapped to the pydantic records in ``schemas`` and the
records render to ``xml.etree.ElementTree`` elements. Parsing goes the
other way; anything that does not validate raises ParseError.
"""

import xml.etree.ElementTree as ET
from typing import Callable, TypeVar

from pydantic import ValidationError

import schemas

from .board import Board
from .color import PLAYING_COLORS, Color, Player, Team
from .errors import ParseError
from .game_state import GameState
from .move_generator import Move, SetMove, SkipMove
from .pieces import Piece, get_shape
from .rotation import Rotation
from .vec2 import Vec2

T = TypeVar("T")


def _parsing(what: str, fn: Callable[[], T]) -> T:
    try:
        return fn()
    except (ValidationError, ValueError, KeyError) as e:
        raise ParseError(f"Could not parse {what}: {e}") from e


# ----------------------------------------------------------------------
# Pieces and moves
# ----------------------------------------------------------------------

def piece_to_record(piece: Piece) -> schemas.PieceRecord:
    return schemas.PieceRecord(
        color=schemas.Color(piece.color.name),
        kind=schemas.ShapeName(piece.kind.name),
        rotation=schemas.Rotation(piece.rotation.name),
        is_flipped=piece.is_flipped,
        position=schemas.Position(x=piece.position.x, y=piece.position.y),
    )


def piece_from_record(record: schemas.PieceRecord) -> Piece:
    return Piece(
        kind=get_shape(record.kind.value),
        rotation=Rotation[record.rotation.value],
        is_flipped=record.is_flipped,
        color=Color[record.color.value],
        position=Vec2(record.position.x, record.position.y),
    )


def piece_to_element(piece: Piece) -> ET.Element:
    return piece_to_record(piece).to_element()


def piece_from_element(element: ET.Element) -> Piece:
    return _parsing("piece", lambda: piece_from_record(schemas.PieceRecord.from_element(element)))


def move_to_element(move: Move) -> ET.Element:
    if isinstance(move, SetMove):
        return schemas.SetMoveRecord(piece=piece_to_record(move.piece)).to_element()
    return schemas.SkipMoveRecord(color=schemas.Color(move.color.name)).to_element()


def _move_from_record(record: schemas.MoveRecord) -> Move:
    if isinstance(record, schemas.SetMoveRecord):
        return SetMove(piece_from_record(record.piece))
    return SkipMove(Color[record.color.value])


def move_from_element(element: ET.Element) -> Move:
    return _parsing("move", lambda: _move_from_record(schemas.move_record_from_element(element)))


# ----------------------------------------------------------------------
# Board
# ----------------------------------------------------------------------

def board_to_record(board: Board) -> schemas.BoardRecord:
    return schemas.BoardRecord(cells=[
        schemas.FieldRecord(x=position.x, y=position.y, content=schemas.Color(color.name))
        for position, color in board.fields()
    ])


def board_from_record(record: schemas.BoardRecord) -> Board:
    board = Board()
    for field in record.cells:
        board.set(Vec2(field.x, field.y), Color[field.content.value])
    return board


def board_to_element(board: Board) -> ET.Element:
    return board_to_record(board).to_element()


def board_from_element(element: ET.Element) -> Board:
    return _parsing("board", lambda: board_from_record(schemas.BoardRecord.from_element(element)))


# ----------------------------------------------------------------------
# Game state
# ----------------------------------------------------------------------

def _player_to_record(player: Player) -> schemas.PlayerRecord:
    return schemas.PlayerRecord(team=schemas.Team(player.team.name), display_name=player.display_name)


def _player_from_record(record: schemas.PlayerRecord) -> Player:
    return Player(Team[record.team.value], record.display_name)


def state_to_record(state: GameState) -> schemas.GameStateRecord:
    return schemas.GameStateRecord(
        turn=state.turn,
        round=state.round,
        start_piece=schemas.ShapeName(state.start_piece.name),
        current_color_index=state.current_color_index,
        first=_player_to_record(state.first),
        second=_player_to_record(state.second),
        board=board_to_record(state.board),
        start_color=schemas.Color(state.start_color.name),
        start_team=schemas.Team(state.start_team.name),
        ordered_colors=[schemas.Color(color.name) for color in state.ordered_colors],
        shapes={
            schemas.Color(color.name): [schemas.ShapeName(s.name) for s in state.undeployed_shapes(color)]
            for color in PLAYING_COLORS
        },
        last_move_mono={
            schemas.Color(color.name): mono for color, mono in state.last_move_mono.items()
        },
    )


def state_from_record(record: schemas.GameStateRecord, config=None) -> GameState:
    state = GameState(get_shape(record.start_piece.value), config)
    state.turn = record.turn
    state.round = record.round
    state.first = _player_from_record(record.first)
    state.second = _player_from_record(record.second)
    state.board = board_from_record(record.board)
    state.start_color = Color[record.start_color.value]
    state.start_team = Team[record.start_team.value]
    state.ordered_colors = [Color[c.value] for c in record.ordered_colors]
    state.current_color_index = record.current_color_index
    for color in PLAYING_COLORS:
        names = record.shapes.get(schemas.Color(color.name), [])
        state.undeployed[color] = {get_shape(name.value) for name in names}
    state.last_move_mono = {Color[c.value]: mono for c, mono in record.last_move_mono.items()}
    return state


def state_to_element(state: GameState) -> ET.Element:
    return state_to_record(state).to_element()


def state_from_element(element: ET.Element, config=None) -> GameState:
    return _parsing("game state", lambda: state_from_record(schemas.GameStateRecord.from_element(element), config))


# ----------------------------------------------------------------------
# Text helpers
# ----------------------------------------------------------------------

def _parse_xml(text: str) -> ET.Element:
    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseError(f"Malformed XML: {e}") from e


def dumps_state(state: GameState) -> str:
    return ET.tostring(state_to_element(state), encoding="unicode")


def loads_state(text: str, config=None) -> GameState:
    return state_from_element(_parse_xml(text), config)


def dumps_move(move: Move) -> str:
    return ET.tostring(move_to_element(move), encoding="unicode")


def loads_move(text: str) -> Move:
    return move_from_element(_parse_xml(text))
