from .core import AttackTransferMove, GameState, PlaceArmiesMove, Region, RegionGraph
from .distance import compute_frontline_distances
from .engine import Strategy, TurnEngine

__version__ = "0.1.0"
