"""
Frontline distance flood fill.

A region's frontline distance is the number of hops, through regions the
player holds, to the nearest held region that borders foreign territory.
Frontline regions themselves have distance 1.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional

from .config import PlannerConfig
from .core import Region, RegionGraph

logger = logging.getLogger(__name__)

DistanceMap = Dict[int, int]

UNKNOWN_DISTANCE = math.inf


def compute_frontline_distances(graph: RegionGraph, player: str,
                                 max_rounds: Optional[int] = None) -> DistanceMap:
    """
    Compute the frontline distance of every region the player holds.

    Regions bordering foreign territory are seeded with distance 1. Each round
    then assigns ``distance + 1`` to the unassigned friendly neighbors of the
    regions assigned in the previous round, so the frontier is replaced rather
    than merged. Filling stops when a round assigns nothing, every held region
    is covered, or ``max_rounds`` rounds have run.

    Regions the fill does not reach are left out of the map; use
    ``distance_of`` to read them as unknown.

    Args:
        graph: Visible regions
        player: Name of the player whose territory is measured
        max_rounds: Propagation round cap, defaults to PlannerConfig

    Returns:
        Mapping of region ID to frontline distance
    """
    if max_rounds is None:
        max_rounds = PlannerConfig.MAX_PROPAGATION_ROUNDS

    owned = graph.owned_regions(player)
    distances: DistanceMap = {}

    frontier = []
    for region in owned:
        if not graph.has_all_friendly_neighbors(region.id, player):
            distances[region.id] = 1
            frontier.append(region)

    rounds = 0
    while frontier and len(distances) < len(owned) and rounds < max_rounds:
        frontier = _propagate(graph, player, frontier, distances)
        rounds += 1

    if len(distances) < len(owned):
        logger.debug(f"Frontline fill left {len(owned) - len(distances)} regions unknown after {rounds} rounds")

    return distances


def _propagate(graph: RegionGraph, player: str, frontier: Iterable[Region],
               distances: DistanceMap) -> List[Region]:
    """Run one round of the fill and return the newly assigned regions."""
    newly_known = []
    for region in frontier:
        for neighbor in graph.friendly_neighbors(region.id, player):
            # don't overwrite an existing value
            if neighbor.id in distances:
                continue
            distances[neighbor.id] = distances[region.id] + 1
            newly_known.append(neighbor)
    return newly_known


def distance_of(distances: DistanceMap, region_id: int) -> float:
    """Frontline distance of a region, or infinity if it is unknown."""
    return distances.get(region_id, UNKNOWN_DISTANCE)
