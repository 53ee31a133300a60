"""Swiss pairing: score groups, opponent matching, colors and rounds."""

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

from swisspairing.pairing.colors import assign_colors
from swisspairing.pairing.matcher import find_best_opponent, legal_opponents
from swisspairing.pairing.score_groups import iter_score_groups, partition_by_score
from swisspairing.pairing.swiss import generate_pairings

__all__ = [
    "assign_colors",
    "find_best_opponent",
    "generate_pairings",
    "iter_score_groups",
    "legal_opponents",
    "partition_by_score",
]
