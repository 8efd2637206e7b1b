"""
Combo Catalog Loader

Loads the static combo catalog from a JSON file and validates it against
the catalog contract (unique combo IDs, non-negative discounts, non-empty
required item lists). The resulting list keeps file order, which is the
order the combo search uses for tie-breaking.

Usage:
    from utils.combo_catalog_loader import load_combo_catalog

    catalog = load_combo_catalog("combo_catalogs/default.json")
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

import config
from exceptions.catalog import (
    CatalogException,
    CatalogNotFoundException,
    CatalogTooLargeException,
    DuplicateComboException,
    InvalidComboDefinitionException
)
from models.combo import ComboDefinitionDTO


def parse_combo_catalog(raw_combos: list, max_size: int | None = None) -> list[ComboDefinitionDTO]:
    """
    Validate raw combo entries and convert them to DTOs.

    Entries may use the storefront field names (id, items) or the DTO
    field names (combo_id, required_items).

    Args:
        raw_combos: List of combo objects as decoded from JSON
        max_size: Maximum number of combos allowed (defaults to config.COMBO_CATALOG_MAX_SIZE)

    Returns:
        list[ComboDefinitionDTO] in input order

    Raises:
        CatalogTooLargeException: If there are more combos than allowed
        InvalidComboDefinitionException: If an entry is malformed
        DuplicateComboException: If two entries share a combo ID
    """
    if not isinstance(raw_combos, list):
        raise CatalogException(
            f"Combo catalog must be a JSON list, got {type(raw_combos).__name__}",
            details={'type': type(raw_combos).__name__}
        )

    if max_size is None:
        max_size = config.COMBO_CATALOG_MAX_SIZE
    if len(raw_combos) > max_size:
        raise CatalogTooLargeException(size=len(raw_combos), limit=max_size)

    catalog = []
    seen_ids = set()
    for raw in raw_combos:
        if not isinstance(raw, dict):
            raise InvalidComboDefinitionException(None, f"expected an object, got {type(raw).__name__}")

        combo_id = raw.get("combo_id", raw.get("id"))
        try:
            combo = ComboDefinitionDTO(
                combo_id=combo_id,
                name=raw.get("name", combo_id),
                required_items=raw.get("required_items", raw.get("items")),
                discount=raw.get("discount")
            )
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise InvalidComboDefinitionException(combo_id, errors) from e

        if combo.combo_id in seen_ids:
            raise DuplicateComboException(combo.combo_id)
        seen_ids.add(combo.combo_id)
        catalog.append(combo)

    return catalog


def load_combo_catalog(path: str | Path | None = None, max_size: int | None = None) -> list[ComboDefinitionDTO]:
    """
    Load and validate a combo catalog JSON file.

    Args:
        path: Catalog file (defaults to config.COMBO_CATALOG_PATH).
              Relative paths are resolved against the project root.
        max_size: Maximum number of combos allowed

    Returns:
        list[ComboDefinitionDTO] in file order

    Raises:
        CatalogNotFoundException: If the file doesn't exist
        CatalogException: If the JSON is malformed
        InvalidComboDefinitionException, DuplicateComboException, CatalogTooLargeException

    Example:
        >>> catalog = load_combo_catalog()
        >>> catalog[0].combo_id
        'combo1'
    """
    catalog_path = Path(path if path is not None else config.COMBO_CATALOG_PATH)
    if not catalog_path.is_absolute():
        catalog_path = config.PROJECT_ROOT / catalog_path

    if not catalog_path.exists():
        raise CatalogNotFoundException(catalog_path)

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            raw_combos = json.load(f)
    except json.JSONDecodeError as e:
        logging.error(f"❌ Failed to parse {catalog_path}: {e}")
        raise CatalogException(
            f"Combo catalog {catalog_path} is not valid JSON: {e}",
            details={'path': str(catalog_path)}
        ) from e

    catalog = parse_combo_catalog(raw_combos, max_size)
    logging.info(f"✅ Loaded {len(catalog)} combos from {catalog_path.name}")
    return catalog


def get_combo(catalog: list[ComboDefinitionDTO], combo_id: str) -> ComboDefinitionDTO | None:
    """
    Get a specific combo by ID.

    Returns:
        ComboDefinitionDTO or None if not found
    """
    for combo in catalog:
        if combo.combo_id == combo_id:
            return combo
    return None
