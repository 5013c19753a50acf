"""
Rotations of piece shapes.
"""

from enum import Enum


class Rotation(Enum):
    """
    Describes how a piece shape is rotated.

    MIRROR is a rotation by 180 degrees, not a reflection.
    """
    NONE = 0
    RIGHT = 1
    MIRROR = 2
    LEFT = 3

    @classmethod
    def parse(cls, raw) -> "Rotation":
        """Parse a rotation from its name or its integer code."""
        if isinstance(raw, int):
            try:
                return cls(raw)
            except ValueError:
                raise ValueError(f"Could not parse rotation {raw}") from None
        try:
            return cls[str(raw).strip().upper()]
        except KeyError:
            raise ValueError(f"Could not parse rotation {raw!r}") from None

    def __str__(self) -> str:
        return self.name


# Order in which move generation walks through the rotations
ROTATIONS = (Rotation.NONE, Rotation.LEFT, Rotation.RIGHT, Rotation.MIRROR)
