"""Score-group partitioning for Swiss rounds."""

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

from typing import Iterable, Iterator, List, Tuple

from swisspairing.player import Player
from swisspairing.type_hints import ScoreGroups


def partition_by_score(players: Iterable[Player]) -> ScoreGroups:
    """Group players by their current points.

    The returned dict is keyed from the highest score to the lowest. Inside a
    group players keep the order they were given in.
    """
    groups: ScoreGroups = {}
    for player in players:
        groups.setdefault(player.points, []).append(player)
    return {score: groups[score] for score in sorted(groups, reverse=True)}


def iter_score_groups(players: Iterable[Player]) -> Iterator[Tuple[float, List[Player]]]:
    """Yield ``(score, group)`` from the highest score group to the lowest."""
    yield from partition_by_score(players).items()


def sort_by_rating(players: Iterable[Player]) -> List[Player]:
    """Rating descending, player id ascending among equal ratings."""
    return sorted(players, key=lambda p: (-p.rating, p.id))


def sort_by_points_and_rating(players: Iterable[Player]) -> List[Player]:
    """Points descending, then rating descending, then id."""
    return sorted(players, key=lambda p: (-p.points, -p.rating, p.id))
