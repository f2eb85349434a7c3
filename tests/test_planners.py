"""Tests for the placement and attack/transfer planners."""

import time
from collections import Counter

import pytest

from frontline.core import AttackTransferMove, PlaceArmiesMove
from frontline.distance import compute_frontline_distances
from frontline.planners import AttackTransferPlanner, PlacementPlanner, deadline_passed

from conftest import ME, ENEMY, make_state, region


def _plan_attacks(state, planner=None):
    planner = planner or AttackTransferPlanner()
    distances = compute_frontline_distances(state.graph, ME)
    return planner.plan(state, distances)


class TestDeadline:
    def test_none_never_expires(self):
        assert not deadline_passed(None)

    def test_past_deadline(self):
        assert deadline_passed(time.monotonic() - 1)

    def test_future_deadline(self):
        assert not deadline_passed(time.monotonic() + 60)


class TestPlacementPlanner:
    def test_spreads_increments_over_frontline(self, contested_state):
        moves = PlacementPlanner().plan(contested_state)
        assert moves == [
            PlaceArmiesMove(ME, 1, 2),
            PlaceArmiesMove(ME, 4, 2),
            PlaceArmiesMove(ME, 6, 2),
        ]

    def test_repeats_passes_and_clamps_last_move(self, line_state):
        moves = PlacementPlanner().plan(line_state)
        assert [m.region for m in moves] == [4, 4, 4]
        assert [m.armies for m in moves] == [2, 2, 1]

    def test_exhausts_budget_without_exceeding(self, contested_state):
        for budget in range(0, 12):
            moves = PlacementPlanner().plan(contested_state, armies=budget)
            assert sum(m.armies for m in moves) == budget

    def test_only_frontline_regions(self, contested_state):
        moves = PlacementPlanner().plan(contested_state, armies=20)
        assert {m.region for m in moves} == {1, 4, 6}

    def test_no_frontline_terminates_empty(self, whole_map_state):
        assert PlacementPlanner().plan(whole_map_state) == []

    def test_empty_pool(self, contested_state):
        assert PlacementPlanner().plan(contested_state, armies=0) == []

    def test_empty_region_list(self):
        assert PlacementPlanner().plan(make_state([], starting_armies=5)) == []

    def test_large_budget_fully_placed(self, line_state):
        moves = PlacementPlanner().plan(line_state, armies=2001)
        assert sum(m.armies for m in moves) == 2001
        assert len(moves) == 1001
        assert moves[-1] == PlaceArmiesMove(ME, 4, 1)

    def test_custom_increment(self, contested_state):
        moves = PlacementPlanner(increment=5).plan(contested_state)
        assert [m.armies for m in moves] == [5, 1]

    def test_invalid_increment(self):
        with pytest.raises(ValueError):
            PlacementPlanner(increment=0)

    def test_stops_at_deadline(self, contested_state):
        assert PlacementPlanner().plan(contested_state, deadline=time.monotonic() - 1) == []


class TestAttackTransferPlanner:
    def test_attacks_weak_neighbor(self):
        state = make_state([region(1, ME, 10, 2), region(2, ENEMY, 3, 1)])
        assert _plan_attacks(state) == [AttackTransferMove(ME, 1, 2, 9)]

    def test_holds_on_low_ratio(self):
        state = make_state([region(1, ME, 4, 2), region(2, ENEMY, 3, 1)])
        assert _plan_attacks(state) == []

    def test_holds_below_minimum_armies(self):
        # ratio 4.0 but only 4 armies
        state = make_state([region(1, ME, 4, 2), region(2, ENEMY, 1, 1)])
        assert _plan_attacks(state) == []

    def test_ratio_exactly_at_threshold(self):
        state = make_state([region(1, ME, 6, 2), region(2, ENEMY, 3, 1)])
        assert _plan_attacks(state) == [AttackTransferMove(ME, 1, 2, 5)]

    def test_first_qualifying_target_in_order(self):
        state = make_state([
            region(1, ME, 10, 2, 3, 4),
            region(2, ENEMY, 6, 1),
            region(3, "neutral", 2, 1),
            region(4, ENEMY, 1, 1),
        ])
        assert _plan_attacks(state) == [AttackTransferMove(ME, 1, 3, 9)]

    def test_empty_defender_is_attacked(self):
        state = make_state([region(1, ME, 5, 2), region(2, "neutral", 0, 1)])
        assert _plan_attacks(state) == [AttackTransferMove(ME, 1, 2, 4)]

    def test_interior_transfers_toward_frontline(self):
        # C(6) - D(1) - E(1) - F(enemy): distances C=3, D=2, E=1
        state = make_state([
            region(1, ME, 6, 2),
            region(2, ME, 1, 1, 3),
            region(3, ME, 1, 2, 4),
            region(4, ENEMY, 5, 3),
        ])
        assert _plan_attacks(state) == [AttackTransferMove(ME, 1, 2, 5)]

    def test_transfer_skips_neighbors_not_closer(self):
        state = make_state([
            region(1, ME, 6, 2, 3),
            region(2, ME, 1, 1),
            region(3, ME, 1, 1, 4),
            region(4, ENEMY, 5, 3),
        ])
        distances = {1: 2, 2: 3, 3: 1}
        assert AttackTransferPlanner().plan(state, distances) == [AttackTransferMove(ME, 1, 3, 5)]

    def test_transfer_requires_strictly_closer(self):
        state = make_state([region(1, ME, 6, 2), region(2, ME, 6, 1)])
        assert AttackTransferPlanner().plan(state, {1: 2, 2: 2}) == []

    def test_unknown_distance_moves_to_known_neighbor(self):
        state = make_state([region(1, ME, 6, 2), region(2, ME, 1, 1)])
        assert AttackTransferPlanner().plan(state, {2: 5}) == [AttackTransferMove(ME, 1, 2, 5)]

    def test_unknown_to_unknown_holds(self, whole_map_state):
        assert _plan_attacks(whole_map_state) == []

    def test_single_army_holds(self):
        state = make_state([region(1, ME, 1, 2), region(2, ME, 1, 1)])
        assert AttackTransferPlanner().plan(state, {2: 1}) == []

    def test_contested_map(self, contested_state):
        moves = _plan_attacks(contested_state)
        assert moves == [
            AttackTransferMove(ME, 1, 2, 9),
            AttackTransferMove(ME, 3, 1, 5),
        ]

    def test_at_most_one_move_per_region(self, contested_state):
        moves = _plan_attacks(contested_state)
        counts = Counter(m.source for m in moves)
        assert all(c == 1 for c in counts.values())

    def test_attack_and_transfer_invariants(self, contested_state):
        graph = contested_state.graph
        for move in _plan_attacks(contested_state):
            source = graph.get_region(move.source)
            target = graph.get_region(move.target)
            assert move.armies == source.armies - 1
            if not target.owned_by(ME):
                assert source.armies >= 5
                assert source.armies / target.armies >= 2.0

    def test_custom_thresholds(self):
        state = make_state([region(1, ME, 4, 2), region(2, ENEMY, 3, 1)])
        planner = AttackTransferPlanner(ratio_threshold=1.2, min_attack_armies=2)
        assert _plan_attacks(state, planner) == [AttackTransferMove(ME, 1, 2, 3)]

    def test_force_ratio(self):
        planner = AttackTransferPlanner()
        assert planner.force_ratio(10, 3) == pytest.approx(3.333, rel=1e-3)
        assert planner.force_ratio(3, 0) == float("inf")

    def test_stops_at_deadline(self, contested_state):
        distances = compute_frontline_distances(contested_state.graph, ME)
        planner = AttackTransferPlanner()
        assert planner.plan(contested_state, distances, deadline=time.monotonic() - 1) == []
