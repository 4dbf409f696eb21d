"""Import a squad attribute export into a processed squad file.

Usage:
    python -m src.squad_data.run_import <squad.csv> [squad_name]

Examples:
    python -m src.squad_data.run_import arsenal.csv            # from data/raw/
    python -m src.squad_data.run_import exports/squad.csv arsenal_2026
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from src.logging_config import setup_logging
from src.squad_data.cleaning import AttributeCleaner
from src.squad_data.config import (
    LATEST_SQUAD_LINK,
    PROCESSED_SQUAD_DIR,
    RAW_SQUAD_DIR,
    SQUAD_FILE_PATTERN,
)
from src.squad_data.ingestion import SquadIngester
from src.squad_data.snapshots import SnapshotBuilder

logger = logging.getLogger(__name__)


def run_import(
    squad_path: Path,
    output_dir: Optional[Path] = None,
    squad_name: Optional[str] = None,
) -> Path:
    """Run the squad import: ingest -> clean -> snapshots -> JSON.

    Args:
        squad_path: CSV (or ``.json``) squad export. A relative path that
            doesn't exist is looked up in ``data/raw/``.
        output_dir: Directory for JSON output.
            Defaults to ``data/processed/``.
        squad_name: Name used in the output file name.
            Defaults to the export's file stem.

    Returns:
        Path to the generated JSON file.

    Raises:
        FileNotFoundError: If the export doesn't exist.
        SquadIngestionError: If the export can't be parsed.
    """
    squad_path = Path(squad_path)
    if not squad_path.is_absolute() and not squad_path.exists():
        squad_path = RAW_SQUAD_DIR / squad_path
    if output_dir is None:
        output_dir = PROCESSED_SQUAD_DIR
    if squad_name is None:
        squad_name = squad_path.stem

    logger.info("Starting squad import from %s", squad_path)

    # 1. Ingest
    logger.info("Step 1/3: Reading squad export...")
    ingester = SquadIngester(squad_path)
    if squad_path.suffix.lower() == ".json":
        raw = ingester.read_json()
    else:
        raw = ingester.read_squad()

    # 2. Clean
    logger.info("Step 2/3: Cleaning attributes...")
    cleaned = AttributeCleaner().clean_squad(raw)

    # 3. Snapshots + output
    logger.info("Step 3/3: Building snapshots and writing JSON...")
    snapshots = SnapshotBuilder().build(cleaned)
    players = [s.to_dict() for s in snapshots]

    attribute_names = sorted({a for p in players for a in p["attributes"]})
    output_data = {
        "metadata": {
            "version": "1.0",
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "source": squad_path.name,
            "squad_name": squad_name,
            "total_players": len(players),
            "attributes": attribute_names,
        },
        "players": players,
    }

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / SQUAD_FILE_PATTERN.format(name=squad_name)

    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2)

    # Update latest symlink
    latest_link = output_dir / LATEST_SQUAD_LINK
    if latest_link.exists() or latest_link.is_symlink():
        latest_link.unlink()
    latest_link.symlink_to(output_file.name)

    unscouted = sum(1 for p in players if not p["attributes"])
    logger.info("Import complete! Output: %s", output_file)
    logger.info("  Total players: %d", len(players))
    logger.info("  Attributes recorded: %d", len(attribute_names))
    if unscouted:
        logger.warning("  %d players have no attributes recorded", unscouted)

    return output_file


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    squad_path = Path(sys.argv[1])
    squad_name = sys.argv[2] if len(sys.argv) > 2 else None

    try:
        output = run_import(squad_path, squad_name=squad_name)
        print(f"Import complete: {output}")
    except Exception:
        logger.exception("Squad import failed")
        sys.exit(1)
