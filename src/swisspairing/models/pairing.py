"""Pairing data class."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple, Union

from swisspairing.exceptions import InvalidPairingException
from swisspairing.models.game_result import GameResult
from swisspairing.player import Player


@dataclass
class Pairing:
    """One board assignment for a round.

    Attributes
    ----------
    id : str
        Unique within the round (``r{round}-p{n}`` or ``r{round}-bye``).
    round : int
        Round number, 1-indexed.
    white_player : Player
        Always populated. Holds the bye player on a bye.
    black_player : Player or None
        None exactly when the pairing is a bye.
    result : GameResult or None
        Written after the game is played, never by the pairing engine.
    """

    id: str
    round: int
    white_player: Player
    black_player: Optional[Player] = None
    result: Optional[GameResult] = None

    def __post_init__(self) -> None:
        if self.round < 1:
            raise InvalidPairingException(f"Round number must be >= 1: {self.round}")
        if self.result is not None and not isinstance(self.result, GameResult):
            self.result = GameResult.parse(self.result)

    @property
    def is_bye(self) -> bool:
        return self.black_player is None

    def player_ids(self) -> Tuple[str, ...]:
        """Ids of everyone seated on this board."""
        if self.black_player is None:
            return (self.white_player.id,)
        return (self.white_player.id, self.black_player.id)

    def with_result(self, result: Union[str, GameResult]) -> Pairing:
        """Copy of this pairing carrying ``result``.

        Raises:
            InvalidPairingException: when called on a bye
        """
        if self.is_bye:
            raise InvalidPairingException(f"Pairing {self.id} is a bye, it has no result")
        return replace(self, result=GameResult.parse(result))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "id": self.id,
            "round": self.round,
            "white_player": self.white_player.to_dict(),
            "black_player": self.black_player.to_dict() if self.black_player else None,
            "result": self.result.value if self.result else None,
            "is_bye": self.is_bye,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Pairing:
        """Deserialize pairing from dictionary."""
        black = data.get("black_player")
        result = data.get("result")
        return cls(
            id=data["id"],
            round=int(data["round"]),
            white_player=Player.from_dict(data["white_player"]),
            black_player=Player.from_dict(black) if black else None,
            result=GameResult.parse(result) if result else None,
        )

    def __str__(self) -> str:
        if self.black_player is None:
            return f"{self.id}: {self.white_player} - BYE"
        result = f" {self.result}" if self.result else ""
        return f"{self.id}: {self.white_player} - {self.black_player}{result}"
