"""
Colors, teams and player metadata.
"""

from dataclasses import dataclass
from enum import Enum

COLOR_COUNT = 4


class Team(Enum):
    """A player's team."""
    NONE = 0
    ONE = 1
    TWO = 2

    def opponent(self) -> "Team":
        """Fetch the opposing team. NONE has no opponent."""
        if self is Team.ONE:
            return Team.TWO
        if self is Team.TWO:
            return Team.ONE
        return Team.NONE

    @classmethod
    def parse(cls, raw: str) -> "Team":
        """Parse a team from its (case-insensitive) name."""
        try:
            return cls[raw.strip().upper()]
        except KeyError:
            raise ValueError(f"Could not parse team {raw!r}") from None

    def __str__(self) -> str:
        return self.name


class Color(Enum):
    """
    A color in the game.

    The integer values double as the cell values of the board grid,
    0 meaning empty.
    """
    NONE = 0
    BLUE = 1
    YELLOW = 2
    RED = 3
    GREEN = 4

    @property
    def team(self) -> Team:
        """The team that plays this color."""
        if self in (Color.BLUE, Color.RED):
            return Team.ONE
        if self in (Color.YELLOW, Color.GREEN):
            return Team.TWO
        return Team.NONE

    @classmethod
    def parse(cls, raw: str) -> "Color":
        """Parse a color from its (case-insensitive) name."""
        try:
            return cls[raw.strip().upper()]
        except KeyError:
            raise ValueError(f"Could not parse color {raw!r}") from None

    def __str__(self) -> str:
        return self.name


# Colors in turn order
PLAYING_COLORS = (Color.BLUE, Color.YELLOW, Color.RED, Color.GREEN)


@dataclass(frozen=True)
class Player:
    """Metadata about a player."""
    team: Team
    display_name: str
