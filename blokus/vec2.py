"""
Integer 2D vectors used for board coordinates and shape cells.

The x-axis points to the right and the y-axis points downwards.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec2:
    """A vector in 2D space."""
    x: int
    y: int

    @classmethod
    def both(cls, value: int) -> "Vec2":
        """Create a vector with both components set to the given value."""
        return cls(value, value)

    @classmethod
    def zero(cls) -> "Vec2":
        """The origin."""
        return cls(0, 0)

    def turn_right(self) -> "Vec2":
        """Rotate this vector 90 degrees clockwise."""
        return Vec2(-self.y, self.x)

    def turn_left(self) -> "Vec2":
        """Rotate this vector 90 degrees counter-clockwise."""
        return Vec2(self.y, -self.x)

    def flip(self) -> "Vec2":
        """Flip the vector along the y-axis."""
        return Vec2(-self.x, self.y)

    def min(self, other: "Vec2") -> "Vec2":
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: "Vec2") -> "Vec2":
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def area(self) -> Iterator["Vec2"]:
        """
        Iterate over the inclusive rectangle from the origin to this vector.

        Vectors are yielded in row-major order, i.e. x varies fastest.

        Raises:
            ValueError: If either component is negative
        """
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Vectors with negative components cannot be iterated: {self}")
        for y in range(self.y + 1):
            for x in range(self.x + 1):
                yield Vec2(x, y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
