"""Opponent selection for a single player."""

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

from typing import List, Optional, Sequence

from swisspairing.models import SwissPairingOptions
from swisspairing.player import Player
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def legal_opponents(
    pivot: Player, candidates: Sequence[Player], options: SwissPairingOptions
) -> List[Player]:
    """Candidates ``pivot`` may face without a rematch.

    With ``avoid_repeat_pairings`` off every candidate except the pivot is legal.
    """
    pool = [c for c in candidates if c.id != pivot.id]
    if not options.avoid_repeat_pairings:
        return pool
    return [c for c in pool if not pivot.has_played(c.id)]


def find_best_opponent(
    pivot: Player,
    candidates: Sequence[Player],
    options: SwissPairingOptions,
    allow_repeat_fallback: bool = True,
) -> Optional[Player]:
    """Find the best opponent for ``pivot`` among ``candidates``.

    Rematches are filtered out when ``options.avoid_repeat_pairings`` is set.
    If that leaves nobody and ``allow_repeat_fallback`` is true, the full pool
    is used again and a warning is logged, so a pairable player is never left
    out just to avoid a rematch.

    Among the remaining candidates the one with the closest rating wins.
    Ties keep pool order, which callers sort by rating descending.

    Parameters
    ----------
    pivot : Player
        Player looking for an opponent.
    candidates : sequence of Player
        Pool to choose from. Never modified.
    options : SwissPairingOptions
        Pairing options.
    allow_repeat_fallback : bool
        Whether to accept a rematch when no fresh opponent exists.

    Returns
    -------
    Player or None
        None when the pool is empty, or when only rematches remain and the
        fallback is disabled.
    """
    pool = [c for c in candidates if c.id != pivot.id]
    if not pool:
        return None

    available = legal_opponents(pivot, pool, options)
    if not available:
        if not allow_repeat_fallback:
            return None
        logger.warning("No new opponents for %s, allowing repeat pairing", pivot.name)
        available = pool

    # min() keeps the first of equal keys, preserving pool order on ties
    return min(available, key=lambda c: abs(pivot.rating - c.rating))
