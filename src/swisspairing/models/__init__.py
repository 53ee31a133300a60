from swisspairing.models.game_result import GameResult
from swisspairing.models.options import SwissPairingOptions
from swisspairing.models.pairing import Pairing
from swisspairing.models.validation_result import ValidationResult

__all__ = [
    "GameResult",
    "Pairing",
    "SwissPairingOptions",
    "ValidationResult",
]
