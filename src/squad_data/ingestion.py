"""Ingestion of squad attribute exports.

Reads a flat table with one row per player: identity columns (Name, Age,
CA, PA, Position, optional UID) followed by one column per attribute.
Handles the quirks of spreadsheet exports:
- Quoted values and stray whitespace
- Blank rows between squad sections
- Duplicate header rows repeated mid-file
"""

import json
import logging
from pathlib import Path

import pandas as pd

from src.squad_data.config import REQUIRED_COLUMNS

logger = logging.getLogger(__name__)


class SquadIngestionError(Exception):
    """Raised when a squad file cannot be read."""


class SquadIngester:
    """Reads a squad export into a pandas DataFrame.

    The returned DataFrame has:
    - Stripped column names and string values
    - Rows without a player name removed
    - Raw (unparsed) attribute values; see :class:`AttributeCleaner`
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _check_exists(self) -> None:
        if not self.path.exists():
            raise FileNotFoundError(f"Squad file not found: {self.path}")

    # ------------------------------------------------------------------
    # CSV exports
    # ------------------------------------------------------------------
    def read_squad(self) -> pd.DataFrame:
        """Read a CSV squad export.

        Raises:
            FileNotFoundError: if the file does not exist.
            SquadIngestionError: if the file cannot be parsed or lacks
                the required columns.
        """
        self._check_exists()
        logger.info("Reading squad export: %s", self.path.name)

        try:
            df = pd.read_csv(self.path, quotechar='"', dtype=str, skipinitialspace=True)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise SquadIngestionError(f"Failed to read {self.path}: {e}") from e

        df = self._clean_frame(df)
        logger.info("Loaded %d players from %s", len(df), self.path.name)
        return df

    # ------------------------------------------------------------------
    # JSON squad files (list of player dicts)
    # ------------------------------------------------------------------
    def read_json(self) -> pd.DataFrame:
        """Read a JSON list of flat player records.

        Each record holds identity keys plus attribute keys, or a nested
        ``"attributes"`` mapping which is flattened into columns.
        """
        self._check_exists()
        logger.info("Reading squad JSON: %s", self.path.name)

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SquadIngestionError(f"Invalid JSON in {self.path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("players", [])
        if not isinstance(data, list):
            raise SquadIngestionError(
                f"Expected a list of players in {self.path}, got {type(data).__name__}"
            )

        rows = []
        for record in data:
            row = {k: v for k, v in record.items() if k != "attributes"}
            row.update(record.get("attributes") or {})
            rows.append(row)

        df = pd.DataFrame(rows).astype(object)
        df = self._clean_frame(df)
        logger.info("Loaded %d players from %s", len(df), self.path.name)
        return df

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _clean_frame(self, df: pd.DataFrame) -> pd.DataFrame:
        """Common cleanup shared by CSV and JSON input.

        - Strips whitespace/quotes from headers and string values
        - Drops repeated header rows and rows with no player name
        - Validates the required columns are present
        """
        df.columns = [str(c).strip().strip('"').strip() for c in df.columns]

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise SquadIngestionError(
                f"Missing required columns in {self.path.name}: {', '.join(missing)}"
            )

        for col in df.columns:
            df[col] = df[col].map(
                lambda v: v.strip().strip('"').strip() if isinstance(v, str) else v
            )

        # Exports split into sections repeat the header row
        df = df[df["Name"] != "Name"]

        df = df[df["Name"].notna() & (df["Name"] != "")]
        return df.reset_index(drop=True)
