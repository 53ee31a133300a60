"""Tiebreak calculation for tournaments.

This module handles the tiebreaks used to order players on equal points.
"""

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

from typing import Dict, Iterable, List, Tuple

from swisspairing.constants import TB_BUCHHOLZ, TB_RATING, TB_SONNENBORN_BERGER
from swisspairing.models import GameResult, Pairing
from swisspairing.player import Player
from swisspairing.type_hints import BLACK, WHITE, Colour, PlayerMap
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)

# (opponent id, colour held, result) for one finished board
GameRecord = Tuple[str, Colour, GameResult]


class TiebreakCalculator:
    """Calculates tiebreak scores for tournament standings.

    - Buchholz: sum of the current points of every opponent faced
    - Sonnenborn-Berger: sum of opponent points weighted by the result
      against them (full for a win, half for a draw)
    - Rating: the player's own rating, last resort
    """

    def calculate_all_tiebreaks(
        self, players: Iterable[Player], pairings: Iterable[Pairing] = ()
    ) -> Dict[str, Dict[str, float]]:
        """Calculate all tiebreaks for all players.

        Args:
            players: Every player in the current snapshot
            pairings: Pairings of past rounds carrying results, may be empty

        Returns:
            player id -> tiebreak key -> value
        """
        players_by_id: PlayerMap = {p.id: p for p in players}
        games = self._collect_games(pairings)

        tiebreaks = {}
        for player in players_by_id.values():
            tiebreaks[player.id] = {
                TB_BUCHHOLZ: self.buchholz(player, players_by_id),
                TB_SONNENBORN_BERGER: self.sonnenborn_berger(
                    games.get(player.id, []), players_by_id
                ),
                TB_RATING: float(player.rating),
            }
        return tiebreaks

    def buchholz(self, player: Player, players_by_id: PlayerMap) -> float:
        """Sum of opponents' current points.

        Opponents no longer in the roster are skipped.
        """
        total = 0.0
        for opponent_id in player.opponents:
            opponent = players_by_id.get(opponent_id)
            if opponent is None:
                logger.debug(
                    "Opponent %s of %s is not in the roster, skipped",
                    opponent_id,
                    player.name,
                )
                continue
            total += opponent.points
        return total

    def sonnenborn_berger(
        self, games: List[GameRecord], players_by_id: PlayerMap
    ) -> float:
        """Opponent points times the score made against that opponent.

        A player with no recorded results gets 0.
        """
        total = 0.0
        for opponent_id, colour, result in games:
            opponent = players_by_id.get(opponent_id)
            if opponent is None:
                continue
            total += result.score_for(colour) * opponent.points
        return total

    def _collect_games(self, pairings: Iterable[Pairing]) -> Dict[str, List[GameRecord]]:
        """Index finished boards by player id."""
        games: Dict[str, List[GameRecord]] = {}
        for pairing in pairings:
            if pairing.black_player is None or pairing.result is None:
                continue
            white_id = pairing.white_player.id
            black_id = pairing.black_player.id
            games.setdefault(white_id, []).append((black_id, WHITE, pairing.result))
            games.setdefault(black_id, []).append((white_id, BLACK, pairing.result))
        return games
