"""Analyse a processed squad against a tactic file.

Usage:
    python -m src.tactics.run_analysis <squad.json> <tactic.json> [output_dir]

Examples:
    python -m src.tactics.run_analysis data/processed/squad_latest.json tactics/gegenpress.json
"""

import json
import logging
import re
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from src.logging_config import setup_logging
from src.position_catalog.catalog import AttributeRequirementCatalog
from src.squad_data.config import PROCESSED_SQUAD_DIR
from src.squad_data.snapshots import load_squad
from src.tactics.tactic import Tactic
from src.tactics.tactic_analyzer import TacticAnalyzer
from src.tactics.tactic_validator import TacticValidator

logger = logging.getLogger(__name__)

ANALYSIS_FILE_PATTERN = "analysis_{name}.json"


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_") or "tactic"


def load_tactic(path: Path) -> Tactic:
    """Load a tactic definition from JSON.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        TacticValidationError: If the tactic has no name or no positions.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Tactic file not found: {path}")
    with open(path, encoding="utf-8") as f:
        return Tactic.from_dict(json.load(f))


def run_analysis(
    squad_path: Path,
    tactic_path: Path,
    output_dir: Optional[Path] = None,
    catalog: Optional[AttributeRequirementCatalog] = None,
) -> Path:
    """Score a squad against every slot of a tactic and write the report.

    Returns:
        Path to the generated JSON report.
    """
    if output_dir is None:
        output_dir = PROCESSED_SQUAD_DIR
    if catalog is None:
        catalog = AttributeRequirementCatalog.from_file()

    players = load_squad(Path(squad_path))
    tactic = load_tactic(Path(tactic_path))

    valid, errors = TacticValidator(catalog).validate_tactic(tactic)
    if not valid:
        for error in errors:
            logger.warning("Tactic %r: %s", tactic.name, error)

    analysis = TacticAnalyzer(catalog).analyze_tactic(tactic, players)

    output_data = {
        "metadata": {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "squad": Path(squad_path).name,
            "total_players": len(players),
            "validation_errors": errors,
        },
        "analysis": analysis.to_dict(),
    }

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / ANALYSIS_FILE_PATTERN.format(name=_slug(tactic.name))
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2)

    logger.info("Analysis complete! Output: %s", output_file)
    logger.info("  Overall fitness: %.1f", analysis.overall_fitness)
    for gap in analysis.squad_gaps:
        logger.info("  Gap: %s", gap)

    return output_file


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(2)

    output_dir = Path(sys.argv[3]) if len(sys.argv) > 3 else None

    try:
        output = run_analysis(Path(sys.argv[1]), Path(sys.argv[2]), output_dir)
        print(f"Analysis complete: {output}")
    except Exception:
        logger.exception("Tactic analysis failed")
        sys.exit(1)
