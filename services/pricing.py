import logging
from collections.abc import Sequence

from models.cartItem import CartItemDTO
from models.combo import ComboDefinitionDTO, ComboResolutionDTO
from models.pricing import PricingResultDTO, PromotionSettingsDTO
from services.combo import ComboService


class PricingService:
    """Service for cart totals, combo discounts and the spend-threshold gift."""

    @staticmethod
    def calculate_pricing(
        cart_items: Sequence[CartItemDTO],
        catalog: Sequence[ComboDefinitionDTO],
        settings: PromotionSettingsDTO | None = None
    ) -> PricingResultDTO:
        """
        Price a cart end to end: resolve combos, then aggregate totals and the gift deduction.

        Args:
            cart_items: Cart lines (possibly empty)
            catalog: Static, already validated combo catalog
            settings: Gift promotion rules (defaults to the values from config)

        Returns:
            PricingResultDTO
        """
        if settings is None:
            settings = PromotionSettingsDTO.from_config()

        resolution = ComboService.resolve(cart_items, catalog)
        return PricingService.build_pricing_result(cart_items, resolution, settings)

    @staticmethod
    def build_pricing_result(
        cart_items: Sequence[CartItemDTO],
        resolution: ComboResolutionDTO,
        settings: PromotionSettingsDTO
    ) -> PricingResultDTO:
        """
        Aggregate a combo resolution into the final pricing breakdown.

        Gift rule:
        1. Gift units = quantity of all cart lines carrying a reserved gift SKU
        2. Units consumed by the gift-consuming combo (its applicable_count) are
           not available as a free gift
        3. If a gift is available, the price of the FIRST gift line in cart order
           is deducted, provided the total after combos minus that price still
           reaches the threshold (>=)

        Example with threshold 1000, one gift line at 50:
            - 1060 after combos → 1010 >= 1000 → gift deducted, final 1010
            - 1040 after combos →  990 <  1000 → no deduction, final 1040

        reached_threshold only looks at the total after combos, without the
        gift deduction.

        Args:
            cart_items: The same cart lines the resolution was computed from
            resolution: Output of ComboService.resolve()
            settings: Gift promotion rules

        Returns:
            PricingResultDTO
        """
        subtotal = sum(item.unit_price * item.quantity for item in cart_items)

        gift_items = [item for item in cart_items if item.item_id in settings.gift_item_ids]
        total_gift_quantity = sum(item.quantity for item in gift_items)

        gift_combo = None
        if settings.gift_consuming_combo_id:
            gift_combo = resolution.get_applied(settings.gift_consuming_combo_id)
        gift_used_in_combo = gift_combo.applicable_count if gift_combo else 0

        available_gift_count = total_gift_quantity - gift_used_in_combo
        has_available_gift = available_gift_count > 0

        # Threshold checks use the unrounded amounts; only output fields are rounded
        total_after_combo = subtotal - resolution.total_discount

        gift_discount = 0.0
        qualifies_for_gift = False
        if has_available_gift and gift_items:
            first_gift_item = gift_items[0]
            if total_after_combo - first_gift_item.unit_price >= settings.gift_threshold:
                qualifies_for_gift = True
                gift_discount = first_gift_item.unit_price
            else:
                logging.debug(
                    f"Gift item {first_gift_item.item_id} not deducted: "
                    f"{total_after_combo} - {first_gift_item.unit_price} < {settings.gift_threshold}"
                )

        reached_threshold = total_after_combo >= settings.gift_threshold
        final_total = round(total_after_combo - gift_discount, 2)

        return PricingResultDTO(
            original_total=round(subtotal, 2),
            final_total=final_total,
            total_discount=resolution.total_discount,
            applied_combos=resolution.applied_combos,
            qualifies_for_gift=qualifies_for_gift,
            gift_discount=gift_discount,
            has_available_gift=has_available_gift,
            total_gift_quantity=total_gift_quantity,
            gift_used_in_combo=gift_used_in_combo,
            available_gift_count=available_gift_count,
            reached_threshold=reached_threshold,
            amount_to_threshold=round(max(0.0, settings.gift_threshold - total_after_combo), 2)
        )
