import logging
from collections.abc import Iterable, Mapping, Sequence

from models.cartItem import CartItemDTO
from models.combo import AppliedComboDTO, ComboDefinitionDTO, ComboResolutionDTO


class ComboService:
    """Finds the combo assignment with the highest total discount for a cart."""

    @staticmethod
    def aggregate_quantities(cart_items: Iterable[CartItemDTO]) -> dict[int, int]:
        """
        Sum quantities per item ID.

        Lines without an item ID cannot match a combo and are left out here;
        they are still counted in the subtotal by PricingService.
        """
        quantities: dict[int, int] = {}
        for item in cart_items:
            if item.item_id is None:
                logging.warning(f"Cart line '{item.name}' has no item id, skipped for combo matching")
                continue
            quantities[item.item_id] = quantities.get(item.item_id, 0) + item.quantity
        return quantities

    @staticmethod
    def max_applications(combo: ComboDefinitionDTO, quantities: Mapping[int, int]) -> int:
        """
        How many times the combo fits into the available quantities (0 if it doesn't).

        Example: combo needs {3: 2, 5: 1}, cart holds {3: 5, 5: 4}
            → min(5 // 2, 4 // 1) = 2
        """
        return min(
            quantities.get(item_id, 0) // required_qty
            for item_id, required_qty in combo.required_quantities.items()
        )

    @staticmethod
    def filter_candidates(
        catalog: Sequence[ComboDefinitionDTO],
        quantities: Mapping[int, int]
    ) -> list[ComboDefinitionDTO]:
        """Combos whose required items are all present in sufficient quantity, in catalog order."""
        return [
            combo for combo in catalog
            if ComboService.max_applications(combo, quantities) >= 1
        ]

    @staticmethod
    def resolve(
        cart_items: Sequence[CartItemDTO],
        catalog: Sequence[ComboDefinitionDTO]
    ) -> ComboResolutionDTO:
        """
        Resolve the best combo assignment for a cart.

        Algorithm (exhaustive branch search):
        1. Aggregate cart quantities per item ID
        2. Keep only combos that can be applied at least once
        3. For each candidate in catalog order, for each count from its maximum
           down to 1: deduct the items, drop the combo from the candidate list
           and recurse on the rest
        4. Keep the branch with the highest total discount

        Each combo is used at most once per solution (with any count from 1
        to its maximum). A branch replaces the current best only when its
        discount is strictly greater, so among equal solutions the first one
        found wins: catalog order first, then higher application count.

        Search steps are memoized per call, so cost grows with the number of
        distinct (remaining combos, remaining quantities) states rather than
        with every ordering of the combos. For N combos that each fit once
        that is at most 2^N states. Catalog size is capped upstream by the
        catalog loader.

        Args:
            cart_items: Cart lines (lines without item_id are ignored)
            catalog: Static combo catalog in its defined order

        Returns:
            ComboResolutionDTO with applied combos, remaining quantities and total discount.
            No applicable combo is a normal outcome: zero discount, quantities unchanged.
        """
        quantities = ComboService.aggregate_quantities(cart_items)
        candidates = ComboService.filter_candidates(catalog, quantities)

        if not candidates:
            logging.debug(f"No applicable combos for quantities {quantities}")
            return ComboResolutionDTO(
                applied_combos=[],
                remaining_items=quantities,
                total_discount=0.0
            )

        logging.debug(f"Searching best combo assignment over {len(candidates)} candidates")
        total_discount, applied, remaining = ComboService._find_best(tuple(candidates), quantities, {})

        return ComboResolutionDTO(
            applied_combos=[
                AppliedComboDTO(
                    combo_id=combo.combo_id,
                    name=combo.name,
                    discount=combo.discount,
                    applicable_count=count
                )
                for combo, count in applied
            ],
            remaining_items=dict(remaining),
            total_discount=total_discount
        )

    @staticmethod
    def _find_best(
        candidates: tuple[ComboDefinitionDTO, ...],
        quantities: Mapping[int, int],
        memo: dict
    ) -> tuple[float, tuple[tuple[ComboDefinitionDTO, int], ...], Mapping[int, int]]:
        """
        Recursive search step.

        `quantities` is never mutated: every branch works on its own copy, so
        sibling branches can't see each other's deductions.

        The result depends only on the still-applicable candidates (in order)
        and the quantities, so it is memoized per resolve() call under that
        key. Quantities only shrink along a branch, so a combo that no longer
        fits never fits again deeper down and can be dropped from the key.
        This bounds the search by the number of distinct (candidate subset,
        quantities) states instead of every ordering of the combos.

        Returns:
            (total discount, ((combo, count), ...), remaining quantities)
        """
        applicable = tuple(c for c in candidates if ComboService.max_applications(c, quantities) >= 1)
        key = (tuple(c.combo_id for c in applicable), tuple(sorted(quantities.items())))
        if key in memo:
            return memo[key]

        # Initial best is the "apply nothing here" branch
        best_discount = 0.0
        best_applied: tuple[tuple[ComboDefinitionDTO, int], ...] = ()
        best_remaining = quantities

        for combo in applicable:
            max_count = ComboService.max_applications(combo, quantities)
            remaining_candidates = tuple(c for c in applicable if c.combo_id != combo.combo_id)
            required = combo.required_quantities

            for count in range(max_count, 0, -1):
                branch_quantities = dict(quantities)
                for item_id, required_qty in required.items():
                    branch_quantities[item_id] -= required_qty * count

                if remaining_candidates:
                    sub_discount, sub_applied, sub_remaining = ComboService._find_best(
                        remaining_candidates, branch_quantities, memo
                    )
                else:
                    sub_discount, sub_applied, sub_remaining = 0.0, (), branch_quantities

                branch_discount = combo.discount * count + sub_discount
                if branch_discount > best_discount:
                    best_discount = branch_discount
                    best_applied = ((combo, count),) + sub_applied
                    best_remaining = sub_remaining

        memo[key] = (best_discount, best_applied, best_remaining)
        return memo[key]
