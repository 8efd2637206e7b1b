"""
ComboService Unit Tests

Tests the best-discount combo search without any external collaborators.

Run with:
    pytest tests/combo/unit/test_combo_service.py -v
    pytest tests/combo/unit/test_combo_service.py --cov=services.combo  # with coverage
"""

import itertools
import time
import random

import pytest

from models.cartItem import CartItemDTO
from models.combo import ComboDefinitionDTO
from services.combo import ComboService


def item(item_id, unit_price, quantity=1):
    return CartItemDTO(item_id=item_id, name=f"Item {item_id}", unit_price=unit_price, quantity=quantity)


def combo(combo_id, required_items, discount):
    return ComboDefinitionDTO(combo_id=combo_id, name=combo_id, required_items=required_items, discount=discount)


def brute_force_best_discount(quantities, catalog):
    """Try every count assignment (0..max per combo) and return the best feasible discount."""
    ranges = [range(ComboService.max_applications(c, quantities) + 1) for c in catalog]
    best = 0.0
    for counts in itertools.product(*ranges):
        used = {}
        for c, count in zip(catalog, counts):
            for item_id, qty in c.required_quantities.items():
                used[item_id] = used.get(item_id, 0) + qty * count
        if all(used[i] <= quantities.get(i, 0) for i in used):
            best = max(best, sum(c.discount * count for c, count in zip(catalog, counts)))
    return best


class TestAggregateQuantities:
    """Test ComboService.aggregate_quantities()"""

    def test_sums_lines_with_same_item_id(self):
        """Two lines of the same item are merged"""
        quantities = ComboService.aggregate_quantities([item(3, 10, 1), item(3, 10, 2), item(4, 5, 1)])
        assert quantities == {3: 3, 4: 1}

    def test_lines_without_item_id_are_skipped(self):
        """Lines without item_id don't take part in combo matching"""
        no_id = CartItemDTO(item_id=None, name="Custom engraving", unit_price=500, quantity=1)
        quantities = ComboService.aggregate_quantities([no_id, item(1, 10)])
        assert quantities == {1: 1}

    def test_empty_cart(self):
        assert ComboService.aggregate_quantities([]) == {}


class TestMaxApplications:
    """Test ComboService.max_applications()"""

    def test_limited_by_scarcest_item(self):
        """Combo needing {3: 2, 5: 1} fits twice into {3: 5, 5: 4}"""
        c = combo("c", [3, 3, 5], 10)
        assert ComboService.max_applications(c, {3: 5, 5: 4}) == 2

    def test_missing_item_gives_zero(self):
        c = combo("c", [1, 2], 10)
        assert ComboService.max_applications(c, {1: 3}) == 0

    def test_required_quantities_counts_repeats(self):
        c = combo("c", [3, 3, 4], 150)
        assert c.required_quantities == {3: 2, 4: 1}


class TestFilterCandidates:
    """Test ComboService.filter_candidates()"""

    def test_keeps_catalog_order(self, catalog):
        """Only applicable combos are kept, in catalog order"""
        quantities = {1: 1, 2: 1, 5: 1, 7: 1}
        candidates = ComboService.filter_candidates(catalog, quantities)
        assert [c.combo_id for c in candidates] == ["combo1", "combo3"]

    def test_multiplicity_is_respected(self, catalog):
        """combo2 needs two units of item 3"""
        candidates = ComboService.filter_candidates(catalog, {3: 1, 4: 1})
        assert candidates == []


class TestResolve:
    """Test ComboService.resolve()"""

    def test_empty_catalog(self):
        """No catalog → zero discount, quantities unchanged"""
        resolution = ComboService.resolve([item(1, 1200)], [])
        assert resolution.total_discount == 0
        assert resolution.applied_combos == []
        assert resolution.remaining_items == {1: 1}

    def test_empty_cart(self, catalog):
        resolution = ComboService.resolve([], catalog)
        assert resolution.total_discount == 0
        assert resolution.applied_combos == []
        assert resolution.remaining_items == {}

    def test_single_combo_applied_once(self):
        """Cart with items 1 and 2 matches a {1: 1, 2: 1} combo worth 100"""
        catalog = [combo("combo1", [1, 2], 100)]
        resolution = ComboService.resolve([item(1, 300), item(2, 200)], catalog)

        assert len(resolution.applied_combos) == 1
        assert resolution.applied_combos[0].combo_id == "combo1"
        assert resolution.applied_combos[0].applicable_count == 1
        assert resolution.total_discount == 100
        assert resolution.remaining_items == {1: 0, 2: 0}

    def test_combo_applied_multiple_times(self):
        """A combo is applied as often as stock allows when that maximizes discount"""
        catalog = [combo("combo1", [1, 2], 100)]
        resolution = ComboService.resolve([item(1, 300, 3), item(2, 200, 2)], catalog)

        assert resolution.applied_combos[0].applicable_count == 2
        assert resolution.applied_combos[0].line_discount == 200
        assert resolution.total_discount == 200
        assert resolution.remaining_items == {1: 1, 2: 0}

    def test_beats_greedy_choice(self, catalog):
        """
        combo4 (220) alone is the single biggest discount, but combo1 + combo2
        (100 + 150) on the same items is better.
        """
        cart = [item(1, 100), item(2, 100), item(3, 50, 2), item(4, 80), item(6, 60)]
        resolution = ComboService.resolve(cart, catalog)

        assert [a.combo_id for a in resolution.applied_combos] == ["combo1", "combo2"]
        assert resolution.total_discount == 250
        assert resolution.remaining_items == {1: 0, 2: 0, 3: 0, 4: 0, 6: 1}

    def test_tie_keeps_catalog_order(self):
        """Two equal combos competing for one unit → the earlier one wins"""
        catalog = [combo("first", [1], 50), combo("second", [1], 50)]
        resolution = ComboService.resolve([item(1, 100)], catalog)

        assert [a.combo_id for a in resolution.applied_combos] == ["first"]
        assert resolution.total_discount == 50

    def test_tie_prefers_higher_count(self):
        """
        "single" x2 and "double" x1 both give 20 on two units of item 1.
        "single" comes first in the catalog and its highest count is tried first.
        """
        catalog = [combo("single", [1], 10), combo("double", [1, 1], 20)]
        resolution = ComboService.resolve([item(1, 100, 2)], catalog)

        assert len(resolution.applied_combos) == 1
        assert resolution.applied_combos[0].combo_id == "single"
        assert resolution.applied_combos[0].applicable_count == 2
        assert resolution.total_discount == 20

    def test_lower_count_can_win(self):
        """Using a combo fewer times than possible can leave room for a better one"""
        catalog = [combo("small", [1], 10), combo("big", [1, 2], 100)]
        resolution = ComboService.resolve([item(1, 50, 2), item(2, 50, 1)], catalog)

        applied = {a.combo_id: a.applicable_count for a in resolution.applied_combos}
        assert applied == {"small": 1, "big": 1}
        assert resolution.total_discount == 110

    def test_combo_used_at_most_once_per_solution(self, catalog):
        """appliedCombos never lists the same combo twice"""
        cart = [item(1, 10, 4), item(2, 10, 4), item(3, 10, 6), item(4, 10, 3), item(6, 10, 2)]
        resolution = ComboService.resolve(cart, catalog)

        combo_ids = [a.combo_id for a in resolution.applied_combos]
        assert len(combo_ids) == len(set(combo_ids))

    def test_input_quantities_not_mutated(self, catalog):
        """Search works on copies, cart lines stay untouched"""
        cart = [item(1, 100, 2), item(2, 100, 2)]
        ComboService.resolve(cart, catalog)
        assert [line.quantity for line in cart] == [2, 2]

    def test_idempotent(self, catalog):
        """Same cart and catalog → identical resolution"""
        cart = [item(1, 100, 2), item(2, 100, 1), item(3, 50, 3), item(4, 80), item(5, 30), item(7, 50)]
        assert ComboService.resolve(cart, catalog) == ComboService.resolve(cart, catalog)


class TestResolveProperties:
    """Optimality and conservation over random carts"""

    @pytest.mark.parametrize("seed", range(15))
    def test_optimal_and_conserving(self, seed, catalog):
        rng = random.Random(seed)
        cart = [item(item_id, 100, rng.randint(1, 4)) for item_id in range(1, 8) if rng.random() < 0.8]
        quantities = ComboService.aggregate_quantities(cart)

        resolution = ComboService.resolve(cart, catalog)

        # Optimality: no feasible assignment is strictly better
        assert resolution.total_discount == brute_force_best_discount(quantities, catalog)

        # Conservation: remaining = original - consumed
        by_id = {c.combo_id: c for c in catalog}
        for item_id, original_qty in quantities.items():
            consumed = sum(
                by_id[a.combo_id].required_quantities.get(item_id, 0) * a.applicable_count
                for a in resolution.applied_combos
            )
            assert resolution.remaining_items[item_id] == original_qty - consumed
            assert resolution.remaining_items[item_id] >= 0


class TestResolveScaling:
    """Search time stays bounded for catalogs of realistic size"""

    def test_twelve_disjoint_combos(self):
        """
        12 independent combos, each applicable once: every one is applied.
        Without memoized search steps this walks every ordering (12! branches).
        """
        catalog = [combo(f"combo{i}", [i], i * 10) for i in range(1, 13)]
        cart = [item(i, 100) for i in range(1, 13)]

        start = time.perf_counter()
        resolution = ComboService.resolve(cart, catalog)
        elapsed = time.perf_counter() - start

        assert elapsed < 5.0
        assert [a.combo_id for a in resolution.applied_combos] == [f"combo{i}" for i in range(1, 13)]
        assert resolution.total_discount == sum(i * 10 for i in range(1, 13))
        assert all(qty == 0 for qty in resolution.remaining_items.values())

    def test_repeated_resolve_does_not_share_search_state(self):
        """Each resolve() call searches from scratch"""
        catalog = [combo("a", [1], 10), combo("b", [1, 2], 30)]

        first = ComboService.resolve([item(1, 50), item(2, 50)], catalog)
        second = ComboService.resolve([item(1, 50)], catalog)

        assert [a.combo_id for a in first.applied_combos] == ["b"]
        assert [a.combo_id for a in second.applied_combos] == ["a"]
        assert second.remaining_items == {1: 0}
