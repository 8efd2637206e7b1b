"""
Configuration Validation Module

Validates promotion configuration values at startup to fail-fast
with clear error messages instead of silently mispricing carts.
"""

import sys
from typing import Optional


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def validate_gift_item_ids(gift_item_ids) -> None:
    """
    Validate the reserved free-gift SKUs.

    Args:
        gift_item_ids: GIFT_ITEM_IDS value from config

    Raises:
        ConfigValidationError: If no gift IDs are configured or any ID is not positive
    """
    if not gift_item_ids:
        raise ConfigValidationError(
            "GIFT_ITEM_IDS must contain at least one item ID!\n"
            "Add to .env: GIFT_ITEM_IDS=7,8"
        )

    invalid = [item_id for item_id in gift_item_ids if item_id <= 0]
    if invalid:
        raise ConfigValidationError(
            f"GIFT_ITEM_IDS must only contain positive item IDs (invalid: {invalid})"
        )


def validate_gift_threshold(threshold: float) -> None:
    """
    Validate the spend threshold of the gift promotion.

    Args:
        threshold: GIFT_THRESHOLD value from config

    Raises:
        ConfigValidationError: If threshold is negative
    """
    if threshold < 0:
        raise ConfigValidationError(
            f"GIFT_THRESHOLD must not be negative (currently: {threshold})"
        )


def validate_gift_consuming_combo_id(combo_id: Optional[str]) -> None:
    """
    Validate the combo that also consumes gift-item stock.

    None means no combo consumes gift stock, so every gift unit in the cart
    counts as available.

    Raises:
        ConfigValidationError: If the ID is set but blank or padded with whitespace
    """
    if combo_id is None:
        return

    if not combo_id.strip() or combo_id != combo_id.strip():
        raise ConfigValidationError(
            f"GIFT_CONSUMING_COMBO_ID must be a combo ID or empty (currently: {combo_id!r})\n"
            "Add to .env: GIFT_CONSUMING_COMBO_ID=combo3"
        )


def validate_catalog_max_size(max_size: int) -> None:
    """
    Validate the upstream combo catalog size limit.

    Raises:
        ConfigValidationError: If limit is not positive
    """
    if max_size <= 0:
        raise ConfigValidationError(
            f"COMBO_CATALOG_MAX_SIZE must be positive (currently: {max_size})"
        )


def validate_required_config(value: Optional[str], name: str, example: str = "") -> None:
    """
    Validate that a required config value is set.

    Args:
        value: The config value to check
        name: Name of the config variable
        example: Optional example value to show in error message

    Raises:
        ConfigValidationError: If value is missing
    """
    if not value:
        error_msg = f"{name} is required but not set!"
        if example:
            error_msg += f"\nAdd to .env: {name}={example}"
        raise ConfigValidationError(error_msg)


def validate_startup_config(config_module) -> None:
    """
    Validate all promotion configuration at startup.

    Args:
        config_module: The config module to validate

    Raises:
        ConfigValidationError: If any validation fails
    """
    validate_gift_item_ids(getattr(config_module, 'GIFT_ITEM_IDS', ()))
    validate_gift_threshold(getattr(config_module, 'GIFT_THRESHOLD', 0))
    validate_catalog_max_size(getattr(config_module, 'COMBO_CATALOG_MAX_SIZE', 0))

    validate_gift_consuming_combo_id(getattr(config_module, 'GIFT_CONSUMING_COMBO_ID', None))

    catalog_path = getattr(config_module, 'COMBO_CATALOG_PATH', None)
    validate_required_config(catalog_path, 'COMBO_CATALOG_PATH', 'combo_catalogs/default.json')


def validate_or_exit(config_module) -> None:
    """
    Validate configuration and exit with error code 1 if validation fails.

    This is the main entry point for startup validation.

    Args:
        config_module: The config module to validate
    """
    try:
        validate_startup_config(config_module)
    except ConfigValidationError as e:
        print(f"\n ERROR: Configuration Validation Failed\n", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print("\nStartup aborted. Please fix configuration and try again.\n", file=sys.stderr)
        sys.exit(1)
