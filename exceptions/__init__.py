"""
Custom exceptions for the combo pricing engine.

The pricing core (combo resolution and price aggregation) never raises:
empty carts, empty catalogs and carts without any qualifying combo all
produce valid zero-discount results. Exceptions exist only at the glue
boundary, where raw catalog files and cart payloads are turned into DTOs.

Exception Hierarchy:
--------------------
PricingEngineException (base)
├── CatalogException
│   ├── CatalogNotFoundException
│   ├── InvalidComboDefinitionException
│   ├── DuplicateComboException
│   └── CatalogTooLargeException
└── CartException
    └── InvalidCartItemException

Usage:
------
Loaders raise specific exceptions:
    raise DuplicateComboException(combo_id="combo1")

The entry point catches the base class:
    try:
        catalog = load_combo_catalog(path)
    except PricingEngineException as e:
        logging.error(repr(e))
"""

from .base import PricingEngineException
from .cart import CartException, InvalidCartItemException
from .catalog import (
    CatalogException,
    CatalogNotFoundException,
    InvalidComboDefinitionException,
    DuplicateComboException,
    CatalogTooLargeException
)

__all__ = [
    # Base
    'PricingEngineException',

    # Cart
    'CartException',
    'InvalidCartItemException',

    # Catalog
    'CatalogException',
    'CatalogNotFoundException',
    'InvalidComboDefinitionException',
    'DuplicateComboException',
    'CatalogTooLargeException',
]
