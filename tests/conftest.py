"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import sys
import os
import pytest

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.cartItem import CartItemDTO
from models.combo import ComboDefinitionDTO
from models.pricing import PromotionSettingsDTO


def make_item(item_id, unit_price, quantity=1, name=None) -> CartItemDTO:
    """Build a cart line with a readable default name."""
    return CartItemDTO(
        item_id=item_id,
        name=name or f"Item {item_id}",
        unit_price=unit_price,
        quantity=quantity
    )


def make_combo(combo_id, required_items, discount, name=None) -> ComboDefinitionDTO:
    return ComboDefinitionDTO(
        combo_id=combo_id,
        name=name or combo_id,
        required_items=required_items,
        discount=discount
    )


# ============================================================================
# Promotion Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Gift SKUs 7 and 8, combo3 consumes gift stock, threshold 1000."""
    return PromotionSettingsDTO(
        gift_item_ids=(7, 8),
        gift_consuming_combo_id="combo3",
        gift_threshold=1000
    )


@pytest.fixture
def catalog():
    """Small catalog mirroring combo_catalogs/default.json."""
    return [
        make_combo("combo1", [1, 2], 100, name="Breakfast Set"),
        make_combo("combo2", [3, 3, 4], 150, name="Double Dessert"),
        make_combo("combo3", [5, 7], 80, name="Gift Box Bundle"),
        make_combo("combo4", [1, 2, 3, 6], 220, name="Family Feast"),
    ]
