"""
Cart-related exceptions.
"""

from .base import PricingEngineException


class CartException(PricingEngineException):
    """Base exception for cart-related errors."""
    pass


class InvalidCartItemException(CartException):
    """Raised when a raw cart line cannot be turned into a cart item."""

    def __init__(self, index: int, reason: str):
        super().__init__(
            f"Invalid cart item at position {index}: {reason}",
            details={'index': index, 'reason': reason}
        )
        self.index = index
        self.reason = reason
