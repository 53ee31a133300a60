"""Ranked standings."""

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

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List

from swisspairing.constants import TB_BUCHHOLZ, TB_SONNENBORN_BERGER
from swisspairing.models import Pairing
from swisspairing.player import Player, as_player_list
from swisspairing.tournament.tiebreak_calculator import TiebreakCalculator
from swisspairing.type_hints import PlayersLike


@dataclass(frozen=True)
class StandingsEntry:
    """One row of the standings table."""

    rank: int
    player: Player
    points: float
    buchholz: float
    sonnenborn_berger: float
    rating: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rank": self.rank,
            "player_id": self.player.id,
            "name": self.player.name,
            "points": self.points,
            "buchholz": self.buchholz,
            "sonnenborn_berger": self.sonnenborn_berger,
            "rating": self.rating,
        }


def calculate_standings_table(
    players: PlayersLike, pairings: Iterable[Pairing] = ()
) -> List[StandingsEntry]:
    """Standings with their tiebreak values.

    Order: points, Buchholz, Sonnenborn-Berger and rating, all descending,
    then player id so the order is total.
    """
    roster = as_player_list(players)
    tiebreaks = TiebreakCalculator().calculate_all_tiebreaks(roster, pairings)

    ranked = sorted(
        roster,
        key=lambda p: (
            -p.points,
            -tiebreaks[p.id][TB_BUCHHOLZ],
            -tiebreaks[p.id][TB_SONNENBORN_BERGER],
            -p.rating,
            p.id,
        ),
    )
    return [
        StandingsEntry(
            rank=index,
            player=player,
            points=player.points,
            buchholz=tiebreaks[player.id][TB_BUCHHOLZ],
            sonnenborn_berger=tiebreaks[player.id][TB_SONNENBORN_BERGER],
            rating=player.rating,
        )
        for index, player in enumerate(ranked, start=1)
    ]


def calculate_standings(
    players: PlayersLike, pairings: Iterable[Pairing] = ()
) -> List[Player]:
    """Players ranked by points and tiebreaks, best first."""
    return [entry.player for entry in calculate_standings_table(players, pairings)]
