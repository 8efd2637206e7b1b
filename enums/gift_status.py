from enum import Enum


class GiftStatus(str, Enum):
    """
    Display state of the spend-threshold gift promotion.

    - GIFT_APPLIED: a gift item is in the cart and its price was deducted
    - THRESHOLD_REACHED_GIFT_NOT_ELIGIBLE: spend threshold reached, but not
      once the gift item's price is taken off
    - THRESHOLD_REACHED_NO_GIFT: spend threshold reached, no gift item added yet
    - BELOW_THRESHOLD: spend threshold not reached
    """

    GIFT_APPLIED = "GIFT_APPLIED"
    THRESHOLD_REACHED_GIFT_NOT_ELIGIBLE = "THRESHOLD_REACHED_GIFT_NOT_ELIGIBLE"
    THRESHOLD_REACHED_NO_GIFT = "THRESHOLD_REACHED_NO_GIFT"
    BELOW_THRESHOLD = "BELOW_THRESHOLD"
