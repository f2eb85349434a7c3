"""
Territory Conquest Bot - Core Data Structures

This module contains the region graph a bot plans against and the moves it
sends back. A turn snapshot arrives as a plain dictionary and is wrapped into
a GameState, which owns a RegionGraph for the visible part of the map.
"""

from typing import Any, Dict, Iterable, List, Optional
from dataclasses import dataclass, field

NEUTRAL = "neutral"


@dataclass
class Region:
    """
    Represents a region on the map.

    Attributes:
        id: Unique identifier for the region
        owner: Player name, or "neutral"/"unknown"/None when no player holds it
        armies: Number of armies currently on the region
        neighbors: Adjacent region IDs, in the order the server listed them
        super_region: ID of the super region this region belongs to, if known
    """
    id: int
    owner: Optional[str] = NEUTRAL
    armies: int = 0
    neighbors: List[int] = field(default_factory=list)
    super_region: Optional[int] = None

    def __post_init__(self):
        """Validate region data after initialization."""
        if self.armies < 0:
            raise ValueError("Army count cannot be negative")
        if self.id in self.neighbors:
            raise ValueError("Region cannot neighbor itself")

    def owned_by(self, player: str) -> bool:
        """Check if this region is held by the given player."""
        return self.owner == player


@dataclass
class PlaceArmiesMove:
    """
    Order to place new armies on an owned region.

    Attributes:
        player: Name of the player issuing the order
        region: Region ID receiving the armies
        armies: Number of armies to place
    """
    player: str
    region: int
    armies: int

    def __post_init__(self):
        if self.armies <= 0:
            raise ValueError("Army count must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for JSON serialization."""
        return {
            "player": self.player,
            "region": self.region,
            "armies": self.armies
        }


@dataclass
class AttackTransferMove:
    """
    Order to move armies from one region to a neighbor.

    Moving into a region the player holds is a transfer; moving into any
    other region is an attack.

    Attributes:
        player: Name of the player issuing the order
        source: Source region ID
        target: Destination region ID
        armies: Number of armies to move
    """
    player: str
    source: int
    target: int
    armies: int

    def __post_init__(self):
        if self.armies <= 0:
            raise ValueError("Army count must be positive")
        if self.source == self.target:
            raise ValueError("Cannot move armies to the same region")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for JSON serialization."""
        return {
            "player": self.player,
            "from": self.source,
            "to": self.target,
            "armies": self.armies
        }


class RegionGraph:
    """
    Undirected graph of regions with ordered adjacency.

    Regions keep the order they were added in, and each region keeps its
    neighbors in the order they were linked. Planners rely on both orders
    for tie-breaking.
    """

    def __init__(self, regions: Iterable[Region] = ()):
        self.regions: Dict[int, Region] = {}
        for region in regions:
            self.add_region(region)

    def add_region(self, region: Region) -> None:
        """
        Add a region to the graph.

        Neighbor IDs already listed on the region are kept as they are; they
        may point at regions that are not (yet) part of the graph.

        Raises:
            ValueError: If region ID already exists
        """
        if region.id in self.regions:
            raise ValueError(f"Region with ID {region.id} already exists")

        self.regions[region.id] = region

    def add_edge(self, first: int, second: int) -> None:
        """
        Link two regions in both directions. Linking twice is a no-op.

        Raises:
            ValueError: If either region doesn't exist or both IDs are equal
        """
        if first not in self.regions:
            raise ValueError(f"Region {first} doesn't exist")
        if second not in self.regions:
            raise ValueError(f"Region {second} doesn't exist")
        if first == second:
            raise ValueError("Self-loops are not allowed")

        if second not in self.regions[first].neighbors:
            self.regions[first].neighbors.append(second)
        if first not in self.regions[second].neighbors:
            self.regions[second].neighbors.append(first)

    def symmetrize(self) -> None:
        """Add the reverse of every edge whose both ends are in the graph."""
        for region in list(self.regions.values()):
            for neighbor_id in list(region.neighbors):
                if neighbor_id in self.regions:
                    self.add_edge(region.id, neighbor_id)

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self):
        return iter(self.regions.values())

    def __contains__(self, region_id: int) -> bool:
        return region_id in self.regions

    def get_region(self, region_id: int) -> Optional[Region]:
        """Get region by ID."""
        return self.regions.get(region_id)

    def get_neighbors(self, region_id: int) -> List[Region]:
        """Get all neighboring regions that are part of the graph."""
        region = self.regions.get(region_id)
        if region is None:
            return []
        return [self.regions[rid] for rid in region.neighbors if rid in self.regions]

    def owned_regions(self, player: str) -> List[Region]:
        """Get all regions held by a player, in graph order."""
        return [r for r in self.regions.values() if r.owned_by(player)]

    def friendly_neighbors(self, region_id: int, player: str) -> List[Region]:
        """Get neighbors held by the player."""
        return [r for r in self.get_neighbors(region_id) if r.owned_by(player)]

    def hostile_neighbors(self, region_id: int, player: str) -> List[Region]:
        """Get neighbors not held by the player (enemy, neutral or unknown)."""
        return [r for r in self.get_neighbors(region_id) if not r.owned_by(player)]

    def has_all_friendly_neighbors(self, region_id: int, player: str) -> bool:
        """True if every neighbor is held by the player (vacuously true with no neighbors)."""
        return all(r.owned_by(player) for r in self.get_neighbors(region_id))

    def is_frontline(self, region_id: int, player: str) -> bool:
        """True if the region is held by the player and borders a region it does not hold."""
        region = self.regions.get(region_id)
        if region is None or not region.owned_by(player):
            return False
        return not self.has_all_friendly_neighbors(region_id, player)

    @classmethod
    def from_dict(cls, regions_data: List[Dict[str, Any]]) -> "RegionGraph":
        """
        Build a graph from a list of region dictionaries.

        Each entry needs "id"; "owner", "armies", "neighbors" and
        "super_region" are optional. Adjacency is made symmetric.
        """
        graph = cls()
        for r_data in regions_data:
            graph.add_region(Region(
                id=r_data["id"],
                owner=r_data.get("owner", NEUTRAL),
                armies=r_data.get("armies", 0),
                neighbors=list(r_data.get("neighbors", [])),
                super_region=r_data.get("super_region")
            ))
        graph.symmetrize()
        return graph


class GameState:
    """
    Convenient wrapper around the raw turn snapshot that provides
    easy access to the visible map and the turn settings.
    """

    def __init__(self, raw_state: Dict[str, Any], my_player_name: Optional[str] = None):
        self.raw = raw_state
        self.my_player_name = my_player_name or raw_state.get("player", "")
        self.round = raw_state.get("round", 0)
        self.starting_armies = raw_state.get("starting_armies", 0)
        self.timeout = raw_state.get("timeout")  # milliseconds, may be absent

        self.graph = RegionGraph.from_dict(raw_state.get("regions", []))
        self.pickable_regions: List[int] = list(raw_state.get("pickable_regions", []))

    @property
    def regions(self) -> List[Region]:
        """Visible regions in the order the server sent them."""
        return list(self.graph)

    @property
    def my_regions(self) -> List[Region]:
        return self.graph.owned_regions(self.my_player_name)

    def is_mine(self, region: Region) -> bool:
        return region.owned_by(self.my_player_name)
