from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Static position/role/duty requirement data
CATALOG_DIR = PROJECT_ROOT / "data" / "catalog"
CATALOG_FILE = CATALOG_DIR / "position_requirements.json"

# Slot codes used on the tactics screen that share requirement data
# with a base position
POSITION_ALIASES = {
    "CD": "DC",
    "DCL": "DC",
    "DCR": "DC",
    "DML": "DM",
    "DMR": "DM",
    "MCL": "MC",
    "MCR": "MC",
    "STC": "ST",
    "WBL": "DL",
    "WBR": "DR",
}
