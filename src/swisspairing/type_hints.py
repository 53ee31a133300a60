"""Type hints used in Swiss Pairing."""

from typing import Dict, Iterable, List, Literal, Optional, Tuple, Union

# Basically, white or black
Colour = Literal["White", "Black"]

# Chess color string constants (for runtime use)
WHITE: Colour = "White"
BLACK: Colour = "Black"

# Outcome type literals
OutcomeType = Literal["normal", "forfeit_win", "forfeit_loss", "double_forfeit"]

# A (white, black) pair of player ids
PairingIDs = Tuple[str, str]
# Player id -> Player
PlayerMap = Dict[str, "Player"]
# Anything generate_pairings and friends accept as a roster
PlayersLike = Union["Roster", Iterable["Player"]]
# score -> players holding exactly that score
ScoreGroups = Dict[float, List["Player"]]
MaybePlayer = Optional["Player"]

#  LocalWords:  PairingIDs ScoreGroups
