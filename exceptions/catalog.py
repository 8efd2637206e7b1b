"""
Combo catalog exceptions.
"""

from pathlib import Path

from .base import PricingEngineException


class CatalogException(PricingEngineException):
    """Base exception for combo catalog errors."""
    pass


class CatalogNotFoundException(CatalogException):
    """Raised when the combo catalog file does not exist."""

    def __init__(self, path: str | Path):
        super().__init__(
            f"Combo catalog file not found: {path}",
            details={'path': str(path)}
        )
        self.path = str(path)


class InvalidComboDefinitionException(CatalogException):
    """Raised when a combo definition breaks the catalog contract."""

    def __init__(self, combo_id: str | None, reason: str):
        label = combo_id if combo_id else "<unknown>"
        super().__init__(
            f"Invalid combo definition {label}: {reason}",
            details={'combo_id': combo_id, 'reason': reason}
        )
        self.combo_id = combo_id
        self.reason = reason


class DuplicateComboException(CatalogException):
    """Raised when two combos in one catalog share an identifier."""

    def __init__(self, combo_id: str):
        super().__init__(
            f"Duplicate combo id {combo_id} in catalog",
            details={'combo_id': combo_id}
        )
        self.combo_id = combo_id


class CatalogTooLargeException(CatalogException):
    """Raised when a catalog exceeds the configured size limit."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Combo catalog has {size} entries, limit is {limit}",
            details={'size': size, 'limit': limit}
        )
        self.size = size
        self.limit = limit
