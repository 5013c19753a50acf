"""
Pydantic schemas for pieces and moves in their serialized tree form.
"""

import xml.etree.ElementTree as ET
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

SET_MOVE_CLASS = "sc.plugin2021.SetMove"
SKIP_MOVE_CLASS = "sc.plugin2021.SkipMove"


class Color(str, Enum):
    """Color enumeration."""
    NONE = "NONE"
    BLUE = "BLUE"
    YELLOW = "YELLOW"
    RED = "RED"
    GREEN = "GREEN"


class Team(str, Enum):
    """Team enumeration."""
    NONE = "NONE"
    ONE = "ONE"
    TWO = "TWO"


class Rotation(str, Enum):
    """Rotation enumeration."""
    NONE = "NONE"
    RIGHT = "RIGHT"
    MIRROR = "MIRROR"
    LEFT = "LEFT"


class ShapeName(str, Enum):
    """Names of the 21 piece shapes."""
    MONO = "MONO"
    DOMINO = "DOMINO"
    TRIO_L = "TRIO_L"
    TRIO_I = "TRIO_I"
    TETRO_O = "TETRO_O"
    TETRO_T = "TETRO_T"
    TETRO_I = "TETRO_I"
    TETRO_L = "TETRO_L"
    TETRO_Z = "TETRO_Z"
    PENTO_L = "PENTO_L"
    PENTO_T = "PENTO_T"
    PENTO_V = "PENTO_V"
    PENTO_S = "PENTO_S"
    PENTO_Z = "PENTO_Z"
    PENTO_I = "PENTO_I"
    PENTO_P = "PENTO_P"
    PENTO_W = "PENTO_W"
    PENTO_U = "PENTO_U"
    PENTO_R = "PENTO_R"
    PENTO_X = "PENTO_X"
    PENTO_Y = "PENTO_Y"


def child(element: ET.Element, tag: str) -> ET.Element:
    """
    Fetch a required child element.

    Raises:
        ValueError: If the element has no such child
    """
    found = element.find(tag)
    if found is None:
        raise ValueError(f"Missing child <{tag}> in <{element.tag}>")
    return found


def text_of(element: ET.Element) -> str:
    return (element.text or "").strip()


class Position(BaseModel):
    """Position of a piece or a field."""
    x: int
    y: int

    @classmethod
    def from_element(cls, element: ET.Element) -> "Position":
        return cls.model_validate(element.attrib)

    def to_element(self, tag: str = "position") -> ET.Element:
        return ET.Element(tag, {"x": str(self.x), "y": str(self.y)})


class PieceRecord(BaseModel):
    """A placed piece."""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "color": "BLUE",
                "kind": "PENTO_Y",
                "rotation": "LEFT",
                "isFlipped": False,
                "position": {"x": 0, "y": 0},
            }
        },
    )

    color: Color
    kind: ShapeName
    rotation: Rotation
    is_flipped: bool = Field(alias="isFlipped")
    position: Position

    @classmethod
    def from_element(cls, element: ET.Element) -> "PieceRecord":
        data = dict(element.attrib)
        data["position"] = Position.from_element(child(element, "position"))
        return cls.model_validate(data)

    def to_element(self) -> ET.Element:
        element = ET.Element("piece", {
            "color": self.color.value,
            "kind": self.kind.value,
            "rotation": self.rotation.value,
            "isFlipped": str(self.is_flipped).lower(),
        })
        element.append(self.position.to_element())
        return element


class SetMoveRecord(BaseModel):
    """A move placing a piece."""
    piece: PieceRecord

    def to_element(self) -> ET.Element:
        element = ET.Element("data", {"class": SET_MOVE_CLASS})
        element.append(self.piece.to_element())
        return element


class SkipMoveRecord(BaseModel):
    """A move skipping the turn."""
    color: Color

    def to_element(self) -> ET.Element:
        element = ET.Element("data", {"class": SKIP_MOVE_CLASS})
        ET.SubElement(element, "color").text = self.color.value
        return element


MoveRecord = Union[SetMoveRecord, SkipMoveRecord]


def move_record_from_element(element: ET.Element) -> MoveRecord:
    """
    Parse a ``<data class=...>`` move element.

    Raises:
        ValueError: If the element is not a known move
    """
    move_class = element.get("class")
    if move_class == SET_MOVE_CLASS:
        return SetMoveRecord(piece=PieceRecord.from_element(child(element, "piece")))
    if move_class == SKIP_MOVE_CLASS:
        return SkipMoveRecord.model_validate({"color": text_of(child(element, "color"))})
    raise ValueError(f"Unrecognized move class: {move_class}")
