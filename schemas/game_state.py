"""
Pydantic schemas for the board and the game state in their serialized tree form.
"""

import xml.etree.ElementTree as ET
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .move import Color, ShapeName, Team, child, text_of

# Tags of the per-color inventories
SHAPE_LIST_TAGS = {
    Color.BLUE: "blueShapes",
    Color.YELLOW: "yellowShapes",
    Color.RED: "redShapes",
    Color.GREEN: "greenShapes",
}


class FieldRecord(BaseModel):
    """A single board cell."""
    x: int = Field(ge=0, le=19)
    y: int = Field(ge=0, le=19)
    content: Color

    def to_element(self) -> ET.Element:
        return ET.Element("field", {"x": str(self.x), "y": str(self.y), "content": self.content.value})


class BoardRecord(BaseModel):
    """The board as its list of non-empty fields."""
    cells: List[FieldRecord] = Field(default_factory=list)

    @classmethod
    def from_element(cls, element: ET.Element) -> "BoardRecord":
        return cls(cells=[FieldRecord.model_validate(f.attrib) for f in element.findall("field")])

    def to_element(self) -> ET.Element:
        element = ET.Element("board")
        for field in self.cells:
            element.append(field.to_element())
        return element


class PlayerRecord(BaseModel):
    """Metadata about a player."""
    model_config = ConfigDict(populate_by_name=True)

    team: Team
    display_name: str = Field(alias="displayName")

    @classmethod
    def from_element(cls, element: ET.Element) -> "PlayerRecord":
        return cls.model_validate({
            "team": text_of(child(element, "color")),
            "displayName": element.get("displayName", ""),
        })

    def to_element(self, tag: str) -> ET.Element:
        element = ET.Element(tag, {"displayName": self.display_name})
        ET.SubElement(element, "color").text = self.team.value
        return element


class GameStateRecord(BaseModel):
    """Complete game state."""
    model_config = ConfigDict(populate_by_name=True)

    turn: int = Field(ge=0)
    round: int = Field(ge=0)
    start_piece: ShapeName = Field(alias="startPiece")
    current_color_index: int = Field(alias="currentColorIndex", ge=0)
    first: PlayerRecord
    second: PlayerRecord
    board: BoardRecord
    start_color: Color = Field(alias="startColor")
    start_team: Team = Field(alias="startTeam")
    ordered_colors: List[Color] = Field(alias="orderedColors")
    shapes: Dict[Color, List[ShapeName]] = Field(description="Undeployed shapes per color")
    last_move_mono: Dict[Color, bool] = Field(default_factory=dict, alias="lastMoveMono")

    @model_validator(mode="after")
    def check_cursor(self) -> "GameStateRecord":
        if self.ordered_colors and self.current_color_index >= len(self.ordered_colors):
            raise ValueError(
                f"currentColorIndex {self.current_color_index} is out of range "
                f"for {len(self.ordered_colors)} ordered colors"
            )
        return self

    @classmethod
    def from_element(cls, element: ET.Element) -> "GameStateRecord":
        data = {
            "turn": element.get("turn"),
            "round": element.get("round"),
            "startPiece": element.get("startPiece"),
            "currentColorIndex": element.get("currentColorIndex"),
            "first": PlayerRecord.from_element(child(element, "first")),
            "second": PlayerRecord.from_element(child(element, "second")),
            "board": BoardRecord.from_element(child(element, "board")),
            "startColor": text_of(child(element, "startColor")),
            "startTeam": text_of(child(element, "startTeam")),
            "orderedColors": [text_of(c) for c in child(element, "orderedColors").findall("color")],
            "shapes": {
                color: [text_of(s) for s in child(element, tag).findall("shape")]
                for color, tag in SHAPE_LIST_TAGS.items()
            },
        }
        last_move_mono = element.find("lastMoveMono")
        if last_move_mono is not None:
            data["lastMoveMono"] = {
                entry.get("color"): text_of(entry) for entry in last_move_mono.findall("entry")
            }
        return cls.model_validate(data)

    def to_element(self) -> ET.Element:
        element = ET.Element("state", {
            "turn": str(self.turn),
            "round": str(self.round),
            "startPiece": self.start_piece.value,
            "currentColorIndex": str(self.current_color_index),
        })
        element.append(self.first.to_element("first"))
        element.append(self.second.to_element("second"))
        element.append(self.board.to_element())
        ET.SubElement(element, "startColor").text = self.start_color.value
        ET.SubElement(element, "startTeam").text = self.start_team.value

        ordered_colors = ET.SubElement(element, "orderedColors")
        for color in self.ordered_colors:
            ET.SubElement(ordered_colors, "color").text = color.value

        for color, tag in SHAPE_LIST_TAGS.items():
            shape_list = ET.SubElement(element, tag)
            for shape in self.shapes.get(color, []):
                ET.SubElement(shape_list, "shape").text = shape.value

        if self.last_move_mono:
            last_move_mono = ET.SubElement(element, "lastMoveMono")
            for color, mono in self.last_move_mono.items():
                ET.SubElement(last_move_mono, "entry", {"color": color.value}).text = str(mono).lower()

        return element
