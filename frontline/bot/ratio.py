import random
from typing import List, Optional

from ..core import AttackTransferMove, GameState, PlaceArmiesMove
from ..distance import DistanceMap
from ..engine import Strategy
from ..planners import AttackTransferPlanner, PlacementPlanner


class RatioBot(Strategy):
    """
    Frontline strategy:
    - Pick a random starting region
    - Reinforce regions bordering foreign territory
    - Attack from the frontline when the force ratio is at least 2:1
    - Move interior armies toward the frontline
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 placement: Optional[PlacementPlanner] = None,
                 attack_transfer: Optional[AttackTransferPlanner] = None):
        self.rng = rng or random.Random()
        self.placement = placement or PlacementPlanner()
        self.attack_transfer = attack_transfer or AttackTransferPlanner()

    def pick_starting_region(self, state: GameState) -> Optional[int]:
        if not state.pickable_regions:
            return None
        return self.rng.choice(state.pickable_regions)

    def plan_placements(self, state: GameState, distances: DistanceMap,
                        deadline: Optional[float] = None) -> List[PlaceArmiesMove]:
        return self.placement.plan(state, deadline=deadline)

    def plan_attacks_and_transfers(self, state: GameState, distances: DistanceMap,
                                   deadline: Optional[float] = None) -> List[AttackTransferMove]:
        return self.attack_transfer.plan(state, distances, deadline)
