"""
Placement and attack/transfer planners for the ratio strategy.

Both planners read a GameState and a frontline DistanceMap and return a list
of moves in decision order. They never modify the regions they look at.
"""

import logging
import math
import time
from typing import List, Optional

from .config import PlannerConfig
from .core import AttackTransferMove, GameState, PlaceArmiesMove, Region
from .distance import DistanceMap, distance_of

logger = logging.getLogger(__name__)


def deadline_passed(deadline: Optional[float]) -> bool:
    """Check a ``time.monotonic()`` deadline; None never expires."""
    return deadline is not None and time.monotonic() >= deadline


class PlacementPlanner:
    """Spreads the turn's armies over the frontline in fixed increments."""

    def __init__(self, increment: int = PlannerConfig.PLACEMENT_INCREMENT):
        if increment <= 0:
            raise ValueError("Placement increment must be positive")
        self.increment = increment

    def plan(self, state: GameState, armies: Optional[int] = None,
             deadline: Optional[float] = None) -> List[PlaceArmiesMove]:
        """
        Place ``armies`` (the turn's starting armies by default) on frontline regions.

        Regions are visited in snapshot order, one increment each, pass after
        pass until the pool is empty. The final move is clamped to what is
        left. A pass that finds no frontline region ends planning.
        """
        player = state.my_player_name
        armies_left = state.starting_armies if armies is None else armies
        moves: List[PlaceArmiesMove] = []

        while armies_left > 0:
            placed_this_pass = False
            for region in state.regions:
                if armies_left <= 0:
                    break
                if deadline_passed(deadline):
                    logger.warning(f"[{player}] Placement stopped at deadline with {armies_left} armies left")
                    return moves
                if not state.graph.is_frontline(region.id, player):
                    continue

                amount = min(self.increment, armies_left)
                moves.append(PlaceArmiesMove(player, region.id, amount))
                armies_left -= amount
                placed_this_pass = True

            # no frontline region, later passes would place nothing either
            if not placed_this_pass:
                break

        if armies_left > 0:
            logger.debug(f"[{player}] {armies_left} armies left unplaced")
        return moves


class AttackTransferPlanner:
    """
    Attacks from the frontline when the force ratio is favorable and moves
    interior armies one hop closer to the frontline.
    """

    def __init__(self, ratio_threshold: float = PlannerConfig.ATTACK_RATIO_THRESHOLD,
                 min_attack_armies: int = PlannerConfig.MIN_ATTACK_ARMIES):
        self.ratio_threshold = ratio_threshold
        self.min_attack_armies = min_attack_armies

    def plan(self, state: GameState, distances: DistanceMap,
             deadline: Optional[float] = None) -> List[AttackTransferMove]:
        """Decide at most one attack or transfer for every region the player holds."""
        player = state.my_player_name
        moves: List[AttackTransferMove] = []

        for region in state.regions:
            if not state.is_mine(region):
                continue
            if deadline_passed(deadline):
                logger.warning(f"[{player}] Attack/transfer planning stopped at deadline")
                break

            if distances.get(region.id) == 1:
                move = self._attack(state, region)
            else:
                move = self._transfer(state, region, distances)

            if move is not None:
                moves.append(move)

        return moves

    def force_ratio(self, attackers: int, defenders: int) -> float:
        """Attacker armies over defender armies; an empty region gives infinity."""
        if defenders <= 0:
            return math.inf
        return attackers / defenders

    def _attack(self, state: GameState, region: Region) -> Optional[AttackTransferMove]:
        """Attack the first foreign neighbor that meets the ratio threshold."""
        player = state.my_player_name
        armies_left = region.armies
        if armies_left < self.min_attack_armies:
            return None

        for target in state.graph.hostile_neighbors(region.id, player):
            if self.force_ratio(armies_left, target.armies) >= self.ratio_threshold:
                # always keep one army home
                return AttackTransferMove(player, region.id, target.id, armies_left - 1)

        return None

    def _transfer(self, state: GameState, region: Region,
                  distances: DistanceMap) -> Optional[AttackTransferMove]:
        """Move all but one army to the first friendly neighbor closer to the frontline."""
        player = state.my_player_name
        if region.armies <= 1:
            return None

        my_distance = distance_of(distances, region.id)
        for neighbor in state.graph.friendly_neighbors(region.id, player):
            if distance_of(distances, neighbor.id) < my_distance:
                return AttackTransferMove(player, region.id, neighbor.id, region.armies - 1)

        return None
