"""Identifier helpers."""

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
import time


def generate_id(prefix: str = "item_") -> str:
    """Generate a simple unique ID."""
    return f"{prefix}{random.randint(100000, 999999)}_{time.time_ns() // 1_000_000}"


def pairing_id(round_number: int, board: int) -> str:
    """Board id within a round, e.g. ``r3-p2``."""
    return f"r{round_number}-p{board}"


def bye_pairing_id(round_number: int) -> str:
    """Id of the bye pairing of a round, e.g. ``r3-bye``."""
    return f"r{round_number}-bye"
