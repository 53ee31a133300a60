"""Outcome of a structural pairing check."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class ValidationResult:
    """Result of a validation operation.

    Attributes:
        valid: Whether the validation passed
        errors: Every violation found, in pairing order
    """

    valid: bool = True
    errors: List[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.valid

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors)}

    def __repr__(self) -> str:
        if self.valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.errors!r})"
