"""Color allocation for a matched pair."""

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
from typing import Tuple

from swisspairing.models import SwissPairingOptions
from swisspairing.player import Player


def coin_flip(player1: Player, player2: Player, rng: random.Random) -> Tuple[Player, Player]:
    """Random (white, black) order."""
    if rng.random() < 0.5:
        return player1, player2
    return player2, player1


def assign_colors(
    player1: Player,
    player2: Player,
    options: SwissPairingOptions,
    rng: random.Random,
) -> Tuple[Player, Player]:
    """Decide which of two matched players gets white.

    Rules, in order:

    1. ``alternate_colors`` off: coin flip from ``rng``.
    2. The player with the lower color balance (more blacks) gets white.
    3. Equal balance: the higher rated player gets white.
    4. Equal rating too: the lower player id gets white.

    Returns:
        Tuple of (white, black)
    """
    if not options.alternate_colors:
        return coin_flip(player1, player2, rng)

    if player1.color_balance != player2.color_balance:
        if player1.color_balance < player2.color_balance:
            return player1, player2
        return player2, player1

    if player1.rating != player2.rating:
        if player1.rating > player2.rating:
            return player1, player2
        return player2, player1

    if player1.id <= player2.id:
        return player1, player2
    return player2, player1
