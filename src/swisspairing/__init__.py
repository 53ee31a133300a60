"""Swiss Pairing: Swiss-system pairing and standings engine."""

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

from swisspairing.models import GameResult, Pairing, SwissPairingOptions, ValidationResult
from swisspairing.pairing import generate_pairings
from swisspairing.player import Player, Roster
from swisspairing.tournament import (
    ResultRecorder,
    StandingsEntry,
    calculate_standings,
    calculate_standings_table,
    validate_pairings,
)

__version__ = "0.1.0"

__all__ = [
    "GameResult",
    "Pairing",
    "Player",
    "ResultRecorder",
    "Roster",
    "StandingsEntry",
    "SwissPairingOptions",
    "ValidationResult",
    "calculate_standings",
    "calculate_standings_table",
    "generate_pairings",
    "validate_pairings",
]
