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

from swisspairing.type_hints import OutcomeType

# --- Constants ---

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Bye scores (configurable per tournament)
FULL_POINT_BYE_SCORE = 1.0
HALF_POINT_BYE_SCORE = 0.5
ZERO_POINT_BYE_SCORE = 0.0
BYE_SCORE = FULL_POINT_BYE_SCORE

# Result strings (canonical wire form)
RESULT_WHITE_WIN = "1-0"
RESULT_BLACK_WIN = "0-1"
RESULT_DRAW = "1/2-1/2"
RESULT_WHITE_FORFEIT_WIN = "1F-0"  # White wins by forfeit (black didn't show)
RESULT_BLACK_FORFEIT_WIN = "0-1F"  # Black wins by forfeit (white didn't show)
RESULT_DOUBLE_FORFEIT = "0F-0F"  # Both players forfeited

# Display spellings accepted on input
RESULT_ALIASES = {
    "0.5-0.5": RESULT_DRAW,
    "½-½": RESULT_DRAW,
    "1-0 FF": RESULT_WHITE_FORFEIT_WIN,
    "0-1 FF": RESULT_BLACK_FORFEIT_WIN,
    "0-0 FF": RESULT_DOUBLE_FORFEIT,
}

# Outcome type categories (for internal logic)
OUTCOME_NORMAL_GAME: OutcomeType = "normal"  # Regular over-the-board game
OUTCOME_FORFEIT_WIN: OutcomeType = "forfeit_win"  # Win by opponent forfeit
OUTCOME_FORFEIT_LOSS: OutcomeType = "forfeit_loss"  # Loss by own forfeit
OUTCOME_DOUBLE_FORFEIT: OutcomeType = "double_forfeit"  # Both players forfeited

# Tiebreaker keys, in the order standings apply them after points
TB_BUCHHOLZ = "buchholz"
TB_SONNENBORN_BERGER = "sb"
TB_RATING = "rating"

TIEBREAK_NAMES = {
    TB_BUCHHOLZ: "Buchholz",
    TB_SONNENBORN_BERGER: "Sonnenborn-Berger",
    TB_RATING: "Rating",
}

DEFAULT_TIEBREAK_ORDER = [TB_BUCHHOLZ, TB_SONNENBORN_BERGER, TB_RATING]

# Pairing option defaults
DEFAULT_AVOID_REPEAT_PAIRINGS = True
DEFAULT_ALTERNATE_COLORS = True
DEFAULT_BYE_VALUE = FULL_POINT_BYE_SCORE
