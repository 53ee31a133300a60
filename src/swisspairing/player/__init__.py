from swisspairing.player.base_player import Player, normalize_colour
from swisspairing.player.roster import Roster, as_player_list

__all__ = [
    "Player",
    "Roster",
    "as_player_list",
    "normalize_colour",
]
