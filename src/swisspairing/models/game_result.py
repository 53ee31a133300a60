"""Game result variants."""

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

from __future__ import annotations

from enum import Enum
from typing import Union

from swisspairing.constants import (
    DRAW_SCORE,
    LOSS_SCORE,
    OUTCOME_DOUBLE_FORFEIT,
    OUTCOME_FORFEIT_LOSS,
    OUTCOME_FORFEIT_WIN,
    OUTCOME_NORMAL_GAME,
    RESULT_ALIASES,
    RESULT_BLACK_FORFEIT_WIN,
    RESULT_BLACK_WIN,
    RESULT_DOUBLE_FORFEIT,
    RESULT_DRAW,
    RESULT_WHITE_FORFEIT_WIN,
    RESULT_WHITE_WIN,
    WIN_SCORE,
)
from swisspairing.exceptions import InvalidResultException
from swisspairing.type_hints import BLACK, WHITE, Colour, OutcomeType


class GameResult(Enum):
    """Outcome of one board, seen from white's side."""

    WHITE_WIN = RESULT_WHITE_WIN
    BLACK_WIN = RESULT_BLACK_WIN
    DRAW = RESULT_DRAW
    WHITE_FORFEIT_WIN = RESULT_WHITE_FORFEIT_WIN
    BLACK_FORFEIT_WIN = RESULT_BLACK_FORFEIT_WIN
    DOUBLE_FORFEIT = RESULT_DOUBLE_FORFEIT

    @property
    def white_score(self) -> float:
        return _SCORES[self][0]

    @property
    def black_score(self) -> float:
        return _SCORES[self][1]

    @property
    def is_forfeit(self) -> bool:
        return self in (
            GameResult.WHITE_FORFEIT_WIN,
            GameResult.BLACK_FORFEIT_WIN,
            GameResult.DOUBLE_FORFEIT,
        )

    @property
    def outcome(self) -> OutcomeType:
        """Outcome category from white's point of view."""
        if self is GameResult.WHITE_FORFEIT_WIN:
            return OUTCOME_FORFEIT_WIN
        if self is GameResult.BLACK_FORFEIT_WIN:
            return OUTCOME_FORFEIT_LOSS
        if self is GameResult.DOUBLE_FORFEIT:
            return OUTCOME_DOUBLE_FORFEIT
        return OUTCOME_NORMAL_GAME

    def score_for(self, colour: Colour) -> float:
        """Points earned by the player holding ``colour``."""
        return self.white_score if colour == WHITE else self.black_score

    @classmethod
    def parse(cls, value: Union[str, GameResult]) -> GameResult:
        """Parse a result string such as ``"1-0"`` or ``"0-1 FF"``.

        Raises:
            InvalidResultException: if the string is not a known result
        """
        if isinstance(value, GameResult):
            return value
        text = str(value).strip()
        text = RESULT_ALIASES.get(text, text)
        try:
            return cls(text)
        except ValueError:
            raise InvalidResultException(f"Unknown game result: {value!r}") from None

    def __str__(self) -> str:
        return self.value


_SCORES = {
    GameResult.WHITE_WIN: (WIN_SCORE, LOSS_SCORE),
    GameResult.BLACK_WIN: (LOSS_SCORE, WIN_SCORE),
    GameResult.DRAW: (DRAW_SCORE, DRAW_SCORE),
    GameResult.WHITE_FORFEIT_WIN: (WIN_SCORE, LOSS_SCORE),
    GameResult.BLACK_FORFEIT_WIN: (LOSS_SCORE, WIN_SCORE),
    GameResult.DOUBLE_FORFEIT: (LOSS_SCORE, LOSS_SCORE),
}

#  LocalWords:  GameResult
