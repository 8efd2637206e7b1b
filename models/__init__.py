"""
Models Package

Pydantic DTOs passed between the combo resolver and the pricing aggregator.
All of them are created fresh per pricing request.
"""

from models.cartItem import CartItemDTO
from models.combo import ComboDefinitionDTO, AppliedComboDTO, ComboResolutionDTO
from models.pricing import PromotionSettingsDTO, PricingResultDTO

__all__ = [
    'CartItemDTO',
    'ComboDefinitionDTO',
    'AppliedComboDTO',
    'ComboResolutionDTO',
    'PromotionSettingsDTO',
    'PricingResultDTO',
]
