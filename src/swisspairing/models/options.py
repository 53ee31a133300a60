"""SwissPairingOptions data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from swisspairing.constants import (
    DEFAULT_ALTERNATE_COLORS,
    DEFAULT_AVOID_REPEAT_PAIRINGS,
    DEFAULT_BYE_VALUE,
)
from swisspairing.exceptions import InvalidConfigurationException


@dataclass(frozen=True)
class SwissPairingOptions:
    """Pairing configuration settings.

    Attributes
    ----------
    avoid_repeat_pairings : bool
        Forbid rematches, relaxing with a warning when no other opponent remains.
    alternate_colors : bool
        Use color balance to decide colors instead of a coin flip.
    bye_value : float
        Points a bye is worth. Consumed when results are applied, not while pairing.
    """

    avoid_repeat_pairings: bool = DEFAULT_AVOID_REPEAT_PAIRINGS
    alternate_colors: bool = DEFAULT_ALTERNATE_COLORS
    bye_value: float = DEFAULT_BYE_VALUE

    def __post_init__(self) -> None:
        if not 0.0 <= self.bye_value <= 1.0:
            raise InvalidConfigurationException(
                f"Bye value must be between 0.0 and 1.0, got {self.bye_value}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "avoid_repeat_pairings": self.avoid_repeat_pairings,
            "alternate_colors": self.alternate_colors,
            "bye_value": self.bye_value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SwissPairingOptions":
        """Deserialize configuration from dictionary.

        Both snake_case and camelCase keys are accepted.
        """
        try:
            bye_value = float(data.get("bye_value", data.get("byeValue", DEFAULT_BYE_VALUE)))
        except (TypeError, ValueError) as e:
            raise InvalidConfigurationException(f"Invalid bye value: {e}") from e
        return cls(
            avoid_repeat_pairings=bool(
                data.get(
                    "avoid_repeat_pairings",
                    data.get("avoidRepeatPairings", DEFAULT_AVOID_REPEAT_PAIRINGS),
                )
            ),
            alternate_colors=bool(
                data.get(
                    "alternate_colors",
                    data.get("alternateColors", DEFAULT_ALTERNATE_COLORS),
                )
            ),
            bye_value=bye_value,
        )
