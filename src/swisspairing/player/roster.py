"""Versioned roster snapshot handed to each round's computation."""

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

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from swisspairing.exceptions import DuplicatePlayerException, PlayerNotFoundException
from swisspairing.player.base_player import Player
from swisspairing.type_hints import PlayersLike


@dataclass(frozen=True)
class Roster:
    """Immutable snapshot of every player between two rounds.

    Attributes
    ----------
    players : tuple of Player
        Players in registration order.
    version : int
        Incremented each time results are applied.
    """

    players: Tuple[Player, ...] = ()
    version: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.players, tuple):
            object.__setattr__(self, "players", tuple(self.players))
        seen = set()
        for player in self.players:
            if player.id in seen:
                raise DuplicatePlayerException(
                    f"Player id {player.id} appears more than once in the roster"
                )
            seen.add(player.id)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)

    def __contains__(self, player_id: object) -> bool:
        return any(p.id == player_id for p in self.players)

    def by_id(self) -> Dict[str, Player]:
        return {p.id: p for p in self.players}

    def get(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def require(self, player_id: str) -> Player:
        """Like :meth:`get` but raises PlayerNotFoundException."""
        player = self.get(player_id)
        if player is None:
            raise PlayerNotFoundException(f"No player with id {player_id}")
        return player

    def replace_players(self, players: Iterable[Player]) -> Roster:
        """Next snapshot, with ``version`` bumped by one."""
        return Roster(players=tuple(players), version=self.version + 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "players": [p.to_dict() for p in self.players],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Roster:
        return cls(
            players=tuple(Player.from_dict(p) for p in data.get("players", [])),
            version=int(data.get("version", 0)),
        )


def as_player_list(players: PlayersLike) -> List[Player]:
    """Copy a Roster or any iterable of players into a fresh list."""
    if isinstance(players, Roster):
        return list(players.players)
    return list(players)
