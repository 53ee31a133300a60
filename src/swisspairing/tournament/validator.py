"""Structural checks on a round's pairing list."""

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

from typing import Iterable, Set

from swisspairing.models import Pairing, ValidationResult
from swisspairing.utils import setup_logger

logger = setup_logger(__name__)


def validate_pairings(pairings: Iterable[Pairing]) -> ValidationResult:
    """Check that nobody sits on two boards and nobody plays themselves.

    Every violation is collected; the check never stops at the first one.

    Returns:
        ValidationResult with ``valid`` False and one error string per violation
    """
    errors = []
    seen: Set[str] = set()

    for pairing in pairings:
        white = pairing.white_player
        black = pairing.black_player

        if black is not None and white.id == black.id:
            errors.append(f"Player {white.name} paired with themselves in {pairing.id}")
            if white.id in seen:
                errors.append(f"Player {white.name} appears in multiple pairings")
            seen.add(white.id)
            continue

        if white.id in seen:
            errors.append(f"Player {white.name} appears in multiple pairings")
        seen.add(white.id)

        if black is not None:
            if black.id in seen:
                errors.append(f"Player {black.name} appears in multiple pairings")
            seen.add(black.id)

    if errors:
        logger.warning("Pairing validation found %s problem(s)", len(errors))
    return ValidationResult(valid=not errors, errors=errors)
