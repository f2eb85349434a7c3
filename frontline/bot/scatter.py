import random
from typing import List, Optional

from ..config import BotConfig
from ..core import AttackTransferMove, GameState, PlaceArmiesMove
from ..distance import DistanceMap
from ..engine import Strategy
from ..planners import deadline_passed


class ScatterBot(Strategy):
    """
    Random strategy, ignores frontline distances:
    - Place armies on random owned regions
    - Attack a random foreign neighbor when holding more than 6 armies
    - Otherwise transfer to a random friendly neighbor, up to 10 transfers a turn
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def pick_starting_region(self, state: GameState) -> Optional[int]:
        if not state.pickable_regions:
            return None
        return self.rng.choice(state.pickable_regions)

    def plan_placements(self, state: GameState, distances: DistanceMap,
                        deadline: Optional[float] = None) -> List[PlaceArmiesMove]:
        moves = []
        my_regions = state.my_regions
        if not my_regions:
            return moves

        armies_left = state.starting_armies
        while armies_left > 0 and not deadline_passed(deadline):
            region = self.rng.choice(my_regions)
            amount = min(BotConfig.SCATTER_PLACEMENT_ARMIES, armies_left)
            moves.append(PlaceArmiesMove(state.my_player_name, region.id, amount))
            armies_left -= amount

        return moves

    def plan_attacks_and_transfers(self, state: GameState, distances: DistanceMap,
                                   deadline: Optional[float] = None) -> List[AttackTransferMove]:
        moves = []
        transfers = 0
        player = state.my_player_name

        for region in state.my_regions:
            if deadline_passed(deadline):
                break

            candidates = state.graph.get_neighbors(region.id)
            self.rng.shuffle(candidates)

            for target in candidates:
                if not target.owned_by(player) and region.armies > BotConfig.SCATTER_ATTACK_MIN:
                    moves.append(AttackTransferMove(player, region.id, target.id,
                                                    BotConfig.SCATTER_MOVE_ARMIES))
                    break
                if (target.owned_by(player) and region.armies > 1
                        and transfers < BotConfig.SCATTER_MAX_TRANSFERS):
                    armies = min(BotConfig.SCATTER_MOVE_ARMIES, region.armies - 1)
                    moves.append(AttackTransferMove(player, region.id, target.id, armies))
                    transfers += 1
                    break

        return moves
