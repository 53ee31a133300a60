"""Random Tournament Generator (RTG) - simulation harness for the Swiss engine.

This module plays out whole tournaments with seeded players and seeded
results: pair, validate, simulate results, apply them, repeat.
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

import json
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from swisspairing.exceptions import InvalidConfigurationException
from swisspairing.models import GameResult, Pairing, SwissPairingOptions
from swisspairing.pairing import generate_pairings
from swisspairing.player import Player, Roster
from swisspairing.tournament import (
    ResultRecorder,
    calculate_standings_table,
    validate_pairings,
)
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


class RatingDistribution(Enum):
    """Rating distribution patterns for realistic tournaments."""

    UNIFORM = "uniform"
    NORMAL = "normal"
    CLUB = "club"


class ResultPattern(Enum):
    """Result generation patterns for tournaments."""

    REALISTIC = "realistic"
    PREDICTABLE = "predictable"
    RANDOM = "random"


@dataclass
class RTGConfig:
    """Configuration for Random Tournament Generator."""

    num_players: int
    num_rounds: int
    rating_distribution: RatingDistribution = RatingDistribution.NORMAL
    rating_range: Tuple[int, int] = (800, 2800)
    result_pattern: ResultPattern = ResultPattern.REALISTIC
    seed: Optional[int] = None
    draw_percentage: int = 30
    # one board in forfeit_rate is forfeited; 0 disables forfeits
    forfeit_rate: float = 0.0
    options: SwissPairingOptions = field(default_factory=SwissPairingOptions)

    def __post_init__(self) -> None:
        if self.num_players < 0:
            raise InvalidConfigurationException("num_players must not be negative")
        if self.num_rounds < 1:
            raise InvalidConfigurationException("num_rounds must be at least 1")
        low, high = self.rating_range
        if low > high:
            raise InvalidConfigurationException(f"Bad rating range: {self.rating_range}")


class PlayerFactory:
    """Factory for creating realistic tournament players."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = random.Random(config.seed)

    def create_players(self) -> List[Player]:
        """Create players based on configuration."""
        players = []
        for i in range(self.config.num_players):
            rating = self._generate_rating()
            players.append(
                Player(
                    name=self._generate_name(i + 1, rating),
                    rating=rating,
                    id=f"P{i + 1:03d}",
                )
            )

        logger.info(
            "Created %s players with %s distribution",
            len(players),
            self.config.rating_distribution.value,
        )
        return players

    def _generate_rating(self) -> int:
        min_rating, max_rating = self.config.rating_range
        if self.config.rating_distribution == RatingDistribution.NORMAL:
            mean = (min_rating + max_rating) / 2
            std_dev = (max_rating - min_rating) / 6
            rating = int(self.random.gauss(mean, std_dev))
            return max(min_rating, min(max_rating, rating))
        if self.config.rating_distribution == RatingDistribution.CLUB:
            base = self.random.choice([1000, 1200, 1400, 1600, 1800])
            return self.random.randint(base - 100, base + 100)
        return self.random.randint(min_rating, max_rating)

    def _generate_name(self, number: int, rating: int) -> str:
        if rating < 1200:
            prefix = "Novice"
        elif rating < 1400:
            prefix = "ClassC"
        elif rating < 1600:
            prefix = "ClassB"
        elif rating < 1800:
            prefix = "ClassA"
        else:
            prefix = "Expert"
        return f"{prefix}-{number:03d}"


class ResultSimulator:
    """Simulates game results for tournaments."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = random.Random(config.seed)

    def simulate_result(self, white: Player, black: Player) -> GameResult:
        if self._forfeit_occurs():
            return self.random.choice(
                [
                    GameResult.WHITE_FORFEIT_WIN,
                    GameResult.BLACK_FORFEIT_WIN,
                    GameResult.DOUBLE_FORFEIT,
                ]
            )
        if self.config.result_pattern == ResultPattern.RANDOM:
            return self.random.choice(
                [GameResult.WHITE_WIN, GameResult.DRAW, GameResult.BLACK_WIN]
            )
        if self.config.result_pattern == ResultPattern.PREDICTABLE:
            if white.rating == black.rating:
                return GameResult.DRAW
            return GameResult.WHITE_WIN if white.rating > black.rating else GameResult.BLACK_WIN
        return self._realistic_result(white, black)

    def _forfeit_occurs(self) -> bool:
        if self.config.forfeit_rate <= 1:
            return False
        return self.random.random() < 1.0 / self.config.forfeit_rate

    def _realistic_result(self, white: Player, black: Player) -> GameResult:
        # Elo expectation for white
        expected = 1.0 / (1.0 + math.pow(10.0, (black.rating - white.rating) / 400.0))
        draw_probability = min(
            self.config.draw_percentage / 100.0, 2.0 * min(expected, 1.0 - expected)
        )
        value = self.random.random()
        if value < draw_probability:
            return GameResult.DRAW
        if value < draw_probability + (1.0 - draw_probability) * expected:
            return GameResult.WHITE_WIN
        return GameResult.BLACK_WIN


class RandomTournamentGenerator:
    """Main tournament generator orchestrating players, pairings and results."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.player_factory = PlayerFactory(config)
        self.result_simulator = ResultSimulator(config)
        self.random = random.Random(config.seed)
        self.recorder = ResultRecorder(config.options)

    def generate_complete_tournament(self) -> Dict[str, Any]:
        """Generate a complete tournament with players and round results.

        Returns:
            Dict with ``players`` (initial roster), ``rounds`` (one dict per
            round with its pairings and validation), ``roster`` (final
            snapshot) and ``standings``.
        """
        logger.info(
            "Generating tournament: %s players, %s rounds",
            self.config.num_players,
            self.config.num_rounds,
        )

        roster = Roster(players=tuple(self.player_factory.create_players()))
        tournament_data: Dict[str, Any] = {
            "config": self.config,
            "players": list(roster.players),
            "rounds": [],
        }
        all_pairings: List[Pairing] = []

        for round_num in range(1, self.config.num_rounds + 1):
            round_data = self._simulate_round(roster, round_num)
            tournament_data["rounds"].append(round_data)
            all_pairings.extend(round_data["pairings"])
            roster = round_data["roster_after"]

        tournament_data["roster"] = roster
        tournament_data["standings"] = calculate_standings_table(roster, all_pairings)
        logger.info("Tournament generation complete")
        return tournament_data

    def _simulate_round(self, roster: Roster, round_num: int) -> Dict[str, Any]:
        pairings = generate_pairings(roster, round_num, self.config.options, self.random)
        validation = validate_pairings(pairings)
        if not validation:
            logger.error("Round %s produced invalid pairings: %s", round_num, validation.errors)

        finished: List[Pairing] = []
        for pairing in pairings:
            if pairing.black_player is None:
                finished.append(pairing)
                continue
            result = self.result_simulator.simulate_result(
                pairing.white_player, pairing.black_player
            )
            finished.append(pairing.with_result(result))
        roster_after = self.recorder.apply_round(roster, finished)
        bye = next((p for p in finished if p.is_bye), None)
        return {
            "round_number": round_num,
            "pairings": finished,
            "bye_player_id": bye.white_player.id if bye else None,
            "validation": validation,
            "roster_after": roster_after,
        }

    def export_json_format(self, tournament_data: Dict[str, Any]) -> str:
        """Serialize a generated tournament to JSON."""
        config: RTGConfig = tournament_data["config"]
        payload = {
            "config": {
                "num_players": config.num_players,
                "num_rounds": config.num_rounds,
                "seed": config.seed,
                "options": config.options.to_dict(),
            },
            "players": [p.to_dict() for p in tournament_data["players"]],
            "rounds": [
                {
                    "round_number": r["round_number"],
                    "pairings": [p.to_dict() for p in r["pairings"]],
                    "bye_player_id": r["bye_player_id"],
                    "validation": r["validation"].to_dict(),
                }
                for r in tournament_data["rounds"]
            ],
            "standings": [entry.to_dict() for entry in tournament_data["standings"]],
        }
        return json.dumps(payload, indent=2)


def create_small_tournament(seed: Optional[int] = None) -> RandomTournamentGenerator:
    """Quick 9 player, 4 round tournament (odd count, so byes every round)."""
    return RandomTournamentGenerator(RTGConfig(num_players=9, num_rounds=4, seed=seed))
