"""A chess player's pairing-relevant state in a Swiss tournament."""

# Swiss Pairing
# Copyright (C) 2025  Swiss Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from swisspairing.exceptions import InvalidPlayerDataException
from swisspairing.type_hints import BLACK, WHITE, Colour
from swisspairing.utils import generate_id, setup_logger

logger = setup_logger(__name__)

_COLOUR_ALIASES: Dict[str, Colour] = {
    "white": WHITE,
    "w": WHITE,
    "black": BLACK,
    "b": BLACK,
}


def normalize_colour(value: str) -> Colour:
    """Map ``"white"``, ``"W"``, ``"White"`` etc. onto the colour constants."""
    colour = _COLOUR_ALIASES.get(str(value).strip().lower())
    if colour is None:
        raise InvalidPlayerDataException(f"Unknown colour: {value!r}")
    return colour


@dataclass(frozen=True)
class Player:
    """Represents a player in the tournament.

    A player is an immutable snapshot. The engine only reads it; the
    result recorder builds the next snapshot with :meth:`after_game` and
    :meth:`after_bye`.

    Attributes:
        id: Unique identifier for the player
        name: Player's full name
        rating: Player's rating, a read-only seeding input
        points: Current tournament score
        opponents: Ids of opponents already faced, in round order
        colors: Colors held in played rounds, in round order
        bye_received: Whether player has received a bye
    """

    name: str
    rating: int = 0
    points: float = 0.0
    opponents: Tuple[str, ...] = ()
    colors: Tuple[Colour, ...] = ()
    bye_received: bool = False
    id: str = field(default_factory=lambda: generate_id("Player_"))

    def __post_init__(self) -> None:
        # accept lists from callers but store tuples
        if not isinstance(self.opponents, tuple):
            object.__setattr__(self, "opponents", tuple(self.opponents))
        if not isinstance(self.colors, tuple):
            object.__setattr__(self, "colors", tuple(self.colors))
        if len(self.colors) != len(self.opponents):
            logger.warning(
                "Player %s has %s colors for %s opponents",
                self.name,
                len(self.colors),
                len(self.opponents),
            )

    @property
    def white_count(self) -> int:
        return sum(1 for c in self.colors if c == WHITE)

    @property
    def black_count(self) -> int:
        return sum(1 for c in self.colors if c == BLACK)

    @property
    def color_balance(self) -> int:
        """Whites minus blacks. Negative means the player is owed a white."""
        return self.white_count - self.black_count

    @property
    def games_played(self) -> int:
        return len(self.opponents)

    def has_played(self, opponent_id: str) -> bool:
        """Check if this player has already faced ``opponent_id``."""
        return opponent_id in self.opponents

    def get_color_preference(self) -> Optional[Colour]:
        """Colour that would move this player back towards balance.

        Returns:
            "White", "Black", or None if perfectly balanced
        """
        if self.color_balance > 0:
            return BLACK
        if self.color_balance < 0:
            return WHITE
        return None

    def after_game(self, opponent_id: str, colour: Colour, score: float) -> Player:
        """Return the snapshot of this player after one played board."""
        return replace(
            self,
            points=self.points + score,
            opponents=self.opponents + (opponent_id,),
            colors=self.colors + (colour,),
        )

    def after_bye(self, bye_value: float) -> Player:
        """Return the snapshot of this player after receiving a bye."""
        logger.debug("Player %s received a bye worth %s", self.name, bye_value)
        return replace(self, points=self.points + bye_value, bye_received=True)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to dictionary format."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "points": self.points,
            "opponents": list(self.opponents),
            "colors": list(self.colors),
            "bye_received": self.bye_received,
        }

    @classmethod
    def from_dict(cls, player_data: Dict[str, Any]) -> Player:
        """Create a Player instance from serialized dictionary data.

        Accepts both ``bye_received`` and the camelCase ``byeReceived``,
        and lower case colour names such as ``"white"``.

        Raises:
            InvalidPlayerDataException: if ``name`` is missing or a colour is unknown
        """
        if "name" not in player_data:
            raise InvalidPlayerDataException(f"Player data without name: {player_data}")

        bye_received = player_data.get(
            "bye_received", player_data.get("byeReceived", False)
        )
        kwargs: Dict[str, Any] = dict(
            name=player_data["name"],
            rating=int(player_data.get("rating") or 0),
            points=float(player_data.get("points", 0.0)),
            opponents=tuple(str(o) for o in player_data.get("opponents", [])),
            colors=tuple(normalize_colour(c) for c in player_data.get("colors", [])),
            bye_received=bool(bye_received),
        )
        if player_data.get("id") is not None:
            kwargs["id"] = str(player_data["id"])
        return cls(**kwargs)

    def __str__(self) -> str:
        """Player name and rating."""
        return f"{self.name} ({self.rating})"
