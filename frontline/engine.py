"""
Turn engine: runs a strategy against one snapshot.

The engine computes frontline distances once per turn, then asks the
strategy for placements and attack/transfer orders, in that order, under
the snapshot's time budget.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from .config import ClientConfig
from .core import AttackTransferMove, GameState, PlaceArmiesMove
from .distance import DistanceMap, compute_frontline_distances

logger = logging.getLogger(__name__)


class Strategy(ABC):
    """The three decisions a bot has to make. Implement these to add a strategy."""

    @abstractmethod
    def pick_starting_region(self, state: GameState) -> Optional[int]:
        """
        Choose one region from ``state.pickable_regions``.

        Returns:
            Region ID, or None if nothing can be picked
        """
        pass

    @abstractmethod
    def plan_placements(self, state: GameState, distances: DistanceMap,
                        deadline: Optional[float] = None) -> List[PlaceArmiesMove]:
        """Place this turn's starting armies."""
        pass

    @abstractmethod
    def plan_attacks_and_transfers(self, state: GameState, distances: DistanceMap,
                                   deadline: Optional[float] = None) -> List[AttackTransferMove]:
        """Decide the attack and transfer orders."""
        pass


class TurnEngine:
    """Sequences one planning pass per turn for a single strategy."""

    def __init__(self, strategy: Strategy, default_timeout_ms: int = ClientConfig.DEFAULT_TIMEOUT_MS):
        self.strategy = strategy
        self.default_timeout_ms = default_timeout_ms

    def deadline_for(self, state: GameState) -> float:
        """Monotonic deadline from the snapshot's budget in milliseconds."""
        timeout_ms = state.timeout if state.timeout is not None else self.default_timeout_ms
        return time.monotonic() + timeout_ms / 1000.0

    def pick_starting_region(self, state: GameState) -> Optional[int]:
        region_id = self.strategy.pick_starting_region(state)
        logger.debug(f"[{state.my_player_name}] Picked starting region {region_id}")
        return region_id

    def play_turn(self, state: GameState) -> Tuple[List[PlaceArmiesMove], List[AttackTransferMove]]:
        """
        Plan a full turn.

        Returns:
            Tuple of (placement moves, attack/transfer moves), possibly empty
        """
        deadline = self.deadline_for(state)
        distances = compute_frontline_distances(state.graph, state.my_player_name)

        placements = self.strategy.plan_placements(state, distances, deadline)
        attack_transfers = self.strategy.plan_attacks_and_transfers(state, distances, deadline)

        logger.debug(f"[{state.my_player_name}] Round {state.round}: "
                     f"{len(placements)} placements, {len(attack_transfers)} attacks/transfers")
        return placements, attack_transfers
