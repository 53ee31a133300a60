"""Swiss round pairing.

Round 1 is seeded by rating: top half against bottom half. Later rounds pair
inside score groups by rating proximity, send whoever is left to a single
cross-group pool, and give a bye to the last remaining player.
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

import random
from typing import List, Optional, Union

from swisspairing.exceptions import InvalidPairingException
from swisspairing.models import Pairing, SwissPairingOptions
from swisspairing.pairing.colors import assign_colors, coin_flip
from swisspairing.pairing.matcher import find_best_opponent
from swisspairing.pairing.score_groups import (
    iter_score_groups,
    sort_by_points_and_rating,
    sort_by_rating,
)
from swisspairing.player import Player, as_player_list
from swisspairing.type_hints import PlayersLike
from swisspairing.utils import setup_logger
from swisspairing.utils.ids import bye_pairing_id, pairing_id

logger = setup_logger(__name__)

RandomSource = Union[random.Random, int, None]


def resolve_rng(rng: RandomSource) -> random.Random:
    """Turn a seed, an existing Random or None into a Random instance."""
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


def generate_pairings(
    players: PlayersLike,
    round_number: int,
    options: Optional[SwissPairingOptions] = None,
    rng: RandomSource = None,
) -> List[Pairing]:
    """Create pairings for a Swiss-system round.

    Nothing passed in is modified, so calling this twice on the same roster
    with the same seed gives the same pairings.

    Parameters
    ----------
    players : Roster or iterable of Player
        Snapshot of every player to pair. May be empty.
    round_number : int
        1-based round being paired.
    options : SwissPairingOptions, optional
        Defaults to ``SwissPairingOptions()``.
    rng : random.Random, int or None
        Source of coin flips, or a seed for one.

    Returns
    -------
    list of Pairing
        Boards in order, with the bye (if any) last.

    Raises
    ------
    InvalidPairingException
        If ``round_number`` is below 1.
    """
    if round_number < 1:
        raise InvalidPairingException(f"Round number must be >= 1: {round_number}")

    options = options or SwissPairingOptions()
    rng = resolve_rng(rng)
    pool = as_player_list(players)

    if not pool:
        logger.info("Round %s: no players, nothing to pair", round_number)
        return []

    logger.info("Generating round %s pairings for %s players", round_number, len(pool))

    if round_number == 1:
        return _pair_first_round(pool, rng)
    return _pair_later_round(pool, round_number, options, rng)


def _pair_first_round(players: List[Player], rng: random.Random) -> List[Pairing]:
    """Seeded round: index i of the top half meets index i of the bottom half."""
    seeded = sort_by_rating(players)
    half = len(seeded) // 2
    top_half = seeded[:half]
    bottom_half = seeded[half:]

    pairings: List[Pairing] = []
    for board, (top, bottom) in enumerate(zip(top_half, bottom_half), start=1):
        white, black = coin_flip(top, bottom, rng)
        pairings.append(
            Pairing(
                id=pairing_id(1, board),
                round=1,
                white_player=white,
                black_player=black,
            )
        )

    if len(seeded) % 2 == 1:
        pairings.append(_make_bye(seeded[-1], 1))

    return pairings


def _pair_later_round(
    players: List[Player],
    round_number: int,
    options: SwissPairingOptions,
    rng: random.Random,
) -> List[Pairing]:
    """Score-group pairing with a cross-group pool for leftovers."""
    pairings: List[Pairing] = []
    leftovers: List[Player] = []

    for score, group in iter_score_groups(players):
        logger.debug("Round %s score group %s: %s players", round_number, score, len(group))
        remaining = sort_by_rating(group)
        while remaining:
            pivot = remaining.pop(0)
            # no rematch inside a group, the cross-group pool relaxes that
            opponent = find_best_opponent(
                pivot, remaining, options, allow_repeat_fallback=False
            )
            if opponent is None:
                leftovers.append(pivot)
                continue
            remaining = [p for p in remaining if p.id != opponent.id]
            pairings.append(
                _make_game(pivot, opponent, round_number, len(pairings) + 1, options, rng)
            )

    leftovers = sort_by_points_and_rating(leftovers)
    if len(leftovers) > 1:
        logger.info(
            "Round %s: %s players left for cross-group pairing",
            round_number,
            len(leftovers),
        )

    while len(leftovers) >= 2:
        pivot = leftovers.pop(0)
        opponent = find_best_opponent(pivot, leftovers, options)
        if opponent is None:
            # only possible for a pivot whose pool held nothing but itself
            leftovers.append(pivot)
            break
        leftovers = [p for p in leftovers if p.id != opponent.id]
        pairings.append(
            _make_game(pivot, opponent, round_number, len(pairings) + 1, options, rng)
        )

    if len(leftovers) == 1:
        bye_player = leftovers[0]
        if bye_player.bye_received:
            logger.warning(
                "Player %s receiving second bye - not ideal", bye_player.name
            )
        pairings.append(_make_bye(bye_player, round_number))
    elif leftovers:
        logger.warning(
            "Round %s: %s players could not be paired: %s",
            round_number,
            len(leftovers),
            ", ".join(p.name for p in leftovers),
        )

    return pairings


def _make_game(
    player1: Player,
    player2: Player,
    round_number: int,
    board: int,
    options: SwissPairingOptions,
    rng: random.Random,
) -> Pairing:
    white, black = assign_colors(player1, player2, options, rng)
    return Pairing(
        id=pairing_id(round_number, board),
        round=round_number,
        white_player=white,
        black_player=black,
    )


def _make_bye(player: Player, round_number: int) -> Pairing:
    logger.info("Round %s: bye for %s", round_number, player.name)
    return Pairing(id=bye_pairing_id(round_number), round=round_number, white_player=player)
