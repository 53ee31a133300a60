"""Result application between rounds.

This module turns a finished round into the next roster snapshot.
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

from typing import Dict, Iterable, List, Optional

from swisspairing.exceptions import InvalidResultException, PlayerNotFoundException
from swisspairing.models import Pairing, SwissPairingOptions
from swisspairing.player import Player, Roster
from swisspairing.type_hints import BLACK, WHITE
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Applies a round's results to a roster snapshot.

    This class is responsible for:
    - Checking every board has a result and every player exists
    - Crediting points, opponents and colors for played boards
    - Crediting the bye value and the bye flag for byes

    Forfeited boards still count as paired: both players get the opponent
    and the color, only the points differ.
    """

    def __init__(self, options: Optional[SwissPairingOptions] = None):
        self.options = options or SwissPairingOptions()

    def apply_round(self, roster: Roster, pairings: Iterable[Pairing]) -> Roster:
        """Build the next roster snapshot from a finished round.

        Args:
            roster: Snapshot the round was paired from
            pairings: The round's pairings, results filled in

        Returns:
            New Roster with version incremented; ``roster`` is untouched

        Raises:
            InvalidResultException: if a played board has no result
            PlayerNotFoundException: if a board references an unknown player
        """
        updated: Dict[str, Player] = roster.by_id()
        pairings = list(pairings)
        round_numbers = sorted({p.round for p in pairings})

        for pairing in pairings:
            self._validate_entry(pairing, updated)

        for pairing in pairings:
            if pairing.black_player is None:
                self._record_bye(pairing, updated)
            else:
                self._record_game(pairing, updated)

        logger.info(
            "Applied %s pairings from round(s) %s to roster version %s",
            len(pairings),
            ", ".join(str(r) for r in round_numbers) or "-",
            roster.version,
        )
        return roster.replace_players(updated[p.id] for p in roster)

    def apply_rounds(self, roster: Roster, rounds: Iterable[List[Pairing]]) -> Roster:
        """Apply several finished rounds in order."""
        for pairings in rounds:
            roster = self.apply_round(roster, pairings)
        return roster

    def _validate_entry(self, pairing: Pairing, players: Dict[str, Player]) -> None:
        for player_id in pairing.player_ids():
            if player_id not in players:
                logger.error("Cannot find player %s from %s", player_id, pairing.id)
                raise PlayerNotFoundException(
                    f"Pairing {pairing.id} references unknown player {player_id}"
                )
        if pairing.black_player is not None and pairing.result is None:
            logger.error("Pairing %s has no result", pairing.id)
            raise InvalidResultException(f"Pairing {pairing.id} has no result recorded")

    def _record_game(self, pairing: Pairing, players: Dict[str, Player]) -> None:
        result = pairing.result
        assert pairing.black_player is not None and result is not None
        white_id = pairing.white_player.id
        black_id = pairing.black_player.id

        white = players[white_id]
        black = players[black_id]
        players[white_id] = white.after_game(black_id, WHITE, result.white_score)
        players[black_id] = black.after_game(white_id, BLACK, result.black_score)

        logger.debug(
            "Recorded: %s (%s) vs %s (%s)",
            white.name,
            result.white_score,
            black.name,
            result.black_score,
        )

    def _record_bye(self, pairing: Pairing, players: Dict[str, Player]) -> None:
        player = players[pairing.white_player.id]
        if player.bye_received:
            logger.warning("%s already had a bye before round %s", player.name, pairing.round)
        players[player.id] = player.after_bye(self.options.bye_value)
