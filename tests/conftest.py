"""Shared test fixtures and helpers."""

import random

import pytest

from frontline.core import GameState

ME = "me"
ENEMY = "enemy"


# --- Helper functions ---


def region(region_id, owner, armies, *neighbors):
    """Raw region entry as it appears in a snapshot."""
    return {"id": region_id, "owner": owner, "armies": armies, "neighbors": list(neighbors)}


def make_state(regions, starting_armies=0, player=ME, **extra):
    """Wrap raw region entries into a GameState for ``player``."""
    raw = {"player": player, "starting_armies": starting_armies, "regions": regions}
    raw.update(extra)
    return GameState(raw)


def make_chain(owned, tail_owner=ENEMY, armies=3):
    """Regions 1..owned held by ME in a line, ending in one region held by ``tail_owner``."""
    regions = []
    for i in range(1, owned + 2):
        neighbors = [n for n in (i - 1, i + 1) if 1 <= n <= owned + 1]
        owner = ME if i <= owned else tail_owner
        regions.append(region(i, owner, armies, *neighbors))
    return regions


# --- Fixtures ---


@pytest.fixture
def rng():
    """Deterministic RNG seeded at 42."""
    return random.Random(42)


@pytest.fixture
def line_state():
    """Four held regions in a line (1-2-3-4) bordering an enemy region 5."""
    return make_state(make_chain(4), starting_armies=5)


@pytest.fixture
def whole_map_state():
    """Triangle of regions all held by ME."""
    return make_state([
        region(1, ME, 4, 2, 3),
        region(2, ME, 4, 1, 3),
        region(3, ME, 4, 1, 2),
    ], starting_armies=5)


@pytest.fixture
def contested_state():
    """
    Small contested map:

        1(me,10) - 2(enemy,3)
        |
        3(me,6) - 4(me,1) - 5(neutral,2)
        |
        6(me,4) - 7(enemy,3)
    """
    return make_state([
        region(1, ME, 10, 2, 3),
        region(2, ENEMY, 3, 1),
        region(3, ME, 6, 1, 4, 6),
        region(4, ME, 1, 3, 5),
        region(5, "neutral", 2, 4),
        region(6, ME, 4, 3, 7),
        region(7, ENEMY, 3, 6),
    ], starting_armies=6, pickable_regions=[1, 3, 6])
