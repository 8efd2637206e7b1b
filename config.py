import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env but don't override existing environment variables
# This allows test scripts to set values before import
load_dotenv(".env", override=False)

PROJECT_ROOT = Path(__file__).parent

# Gift promotion: reserved free-gift SKUs and the combo that also consumes their stock
try:
    _gift_item_ids_str = os.environ.get("GIFT_ITEM_IDS", "7,8")
    GIFT_ITEM_IDS = tuple(int(item_id.strip()) for item_id in _gift_item_ids_str.split(',') if item_id.strip())
except ValueError as e:
    print(f"\n ERROR: Invalid GIFT_ITEM_IDS configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected format: comma-separated list of item IDs", file=sys.stderr)
    print(f"Example: GIFT_ITEM_IDS=7,8", file=sys.stderr)
    print(f"Current value: {os.environ.get('GIFT_ITEM_IDS', '(not set)')}\n", file=sys.stderr)
    sys.exit(1)

# Empty value disables gift-consumption accounting (None)
GIFT_CONSUMING_COMBO_ID = os.environ.get("GIFT_CONSUMING_COMBO_ID", "combo3").strip() or None

# Spend threshold (after combo discount and one gift item's price)
try:
    GIFT_THRESHOLD = float(os.environ.get("GIFT_THRESHOLD", "1000"))
except ValueError as e:
    print(f"\n ERROR: Invalid GIFT_THRESHOLD configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Current value: {os.environ.get('GIFT_THRESHOLD')}\n", file=sys.stderr)
    sys.exit(1)

# Combo catalog
COMBO_CATALOG_PATH = os.environ.get("COMBO_CATALOG_PATH", "combo_catalogs/default.json")
# Memoized search still grows as 2^N for N single-use combos, so catalogs are capped at load time
COMBO_CATALOG_MAX_SIZE = int(os.environ.get("COMBO_CATALOG_MAX_SIZE", "16"))

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "7"))
LOG_DIR = os.environ.get("LOG_DIR", "logs")
