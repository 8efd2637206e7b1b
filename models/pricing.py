from pydantic import BaseModel, ConfigDict, Field, computed_field

import config
from enums.gift_status import GiftStatus
from models.combo import AppliedComboDTO


class PromotionSettingsDTO(BaseModel):
    """
    Business rules of the spend-threshold gift promotion.

    Passed explicitly into pricing so that the reserved gift SKUs and the
    combo that consumes gift stock are named configuration, not literals.
    """
    model_config = ConfigDict(frozen=True)

    gift_item_ids: tuple[int, ...] = (7, 8)
    gift_consuming_combo_id: str | None = "combo3"
    gift_threshold: float = Field(default=1000.0, ge=0)

    @classmethod
    def from_config(cls) -> "PromotionSettingsDTO":
        return cls(
            gift_item_ids=tuple(config.GIFT_ITEM_IDS),
            gift_consuming_combo_id=config.GIFT_CONSUMING_COMBO_ID,
            gift_threshold=config.GIFT_THRESHOLD,
        )


class PricingResultDTO(BaseModel):
    """Complete pricing breakdown of a cart."""
    original_total: float
    final_total: float
    total_discount: float
    applied_combos: list[AppliedComboDTO]
    qualifies_for_gift: bool
    gift_discount: float
    has_available_gift: bool
    total_gift_quantity: int
    gift_used_in_combo: int
    available_gift_count: int
    reached_threshold: bool
    amount_to_threshold: float = 0.0

    @computed_field
    @property
    def total_savings(self) -> float:
        return self.total_discount + self.gift_discount

    @computed_field
    @property
    def gift_status(self) -> GiftStatus:
        """Which gift promotion message applies to this cart."""
        if self.qualifies_for_gift and self.has_available_gift:
            return GiftStatus.GIFT_APPLIED
        if self.reached_threshold:
            if self.has_available_gift:
                return GiftStatus.THRESHOLD_REACHED_GIFT_NOT_ELIGIBLE
            return GiftStatus.THRESHOLD_REACHED_NO_GIFT
        return GiftStatus.BELOW_THRESHOLD
