"""Cleaning for squad attribute exports.

Handles standardization of the raw DataFrame from SquadIngester:
- Expand abbreviated attribute headers (Acc -> Acceleration)
- Parse attribute cells ("14", "-", "12-15" scouting ranges)
- Coerce age and ability columns to integers
- Normalize player names
"""

import logging
import math
import re
from typing import Optional

import pandas as pd

from src.squad_data.config import (
    ATTRIBUTE_ABBREVIATIONS,
    ATTRIBUTE_MAX,
    ATTRIBUTE_MIN,
    IDENTITY_COLUMNS,
)

logger = logging.getLogger(__name__)

# Leading integer of a cell, e.g. "12-15" -> 12
_LEADING_INT = re.compile(r"^\s*(\d+)")

# Values the game shows for unknown attributes
_UNKNOWN_VALUES = {"", "-", "?"}


class AttributeCleaner:
    """Cleans and standardizes squad exports for snapshot building."""

    # ------------------------------------------------------------------
    # Header helpers
    # ------------------------------------------------------------------
    @staticmethod
    def normalize_attribute_name(header: str) -> str:
        """Map an attribute header to its full attribute name.

        Examples:
            "Acc"          -> "Acceleration"
            "OtB"          -> "Off the Ball"
            "Acceleration" -> "Acceleration"
            "Custom"       -> "Custom"
        """
        header = " ".join(str(header).split())
        return ATTRIBUTE_ABBREVIATIONS.get(header, header)

    # ------------------------------------------------------------------
    # Value helpers
    # ------------------------------------------------------------------
    @staticmethod
    def parse_attribute_value(value) -> Optional[int]:
        """Parse one attribute cell.

        Examples:
            "14"    -> 14
            14.0    -> 14
            "12-15" -> 12   (scouting range: lower bound)
            "-"     -> None (unknown)
            ""      -> None
        """
        if value is None or value is pd.NA:
            return None
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return None if math.isnan(value) else int(value)

        text = str(value).strip().strip('"')
        if text in _UNKNOWN_VALUES:
            return None
        m = _LEADING_INT.match(text)
        return int(m.group(1)) if m else None

    @staticmethod
    def normalize_player_name(name: str) -> Optional[str]:
        """Normalize a player name.

        - Strips quotes and extra whitespace
        - Standardizes apostrophe and dash variants
        """
        if name is None or (isinstance(name, float) and math.isnan(name)):
            return None

        name = str(name).strip().strip('"')
        if name == "":
            return None

        name = name.replace("\u2019", "'")   # right single curly quote
        name = name.replace("\u2018", "'")   # left single curly quote
        name = name.replace("\u2013", "-")   # en dash
        name = name.replace("\u2014", "-")   # em dash
        return " ".join(name.split())

    # ------------------------------------------------------------------
    # DataFrame-level cleaning
    # ------------------------------------------------------------------
    def attribute_columns(self, df: pd.DataFrame) -> list:
        """Columns of *df* that hold attributes (not identity data)."""
        return [c for c in df.columns if c not in IDENTITY_COLUMNS]

    def clean_squad(self, df: pd.DataFrame) -> pd.DataFrame:
        """Clean a raw squad DataFrame.

        Returns a copy where:
            - attribute headers are full names (duplicates keep the first)
            - attribute columns are nullable ``Int64`` (missing = <NA>)
            - ``Age``, ``CA`` and ``PA`` are nullable ``Int64``
            - rows with an unparseable name or age are dropped
        """
        out = df.copy()

        renamed = {}
        seen = set()
        drop = []
        for col in self.attribute_columns(out):
            full = self.normalize_attribute_name(col)
            if full in seen:
                logger.warning("Duplicate attribute column %r (as %r), keeping first", col, full)
                drop.append(col)
                continue
            seen.add(full)
            renamed[col] = full
        out = out.drop(columns=drop).rename(columns=renamed)

        for col in renamed.values():
            out[col] = out[col].map(self.parse_attribute_value).astype("Int64")
            out_of_range = out[col].notna() & (
                (out[col] < ATTRIBUTE_MIN) | (out[col] > ATTRIBUTE_MAX)
            )
            if out_of_range.any():
                logger.warning(
                    "%d values of %s outside %d-%d",
                    int(out_of_range.sum()), col, ATTRIBUTE_MIN, ATTRIBUTE_MAX,
                )

        out["Name"] = out["Name"].map(self.normalize_player_name)
        for col in ("Age", "CA", "PA"):
            if col in out.columns:
                out[col] = out[col].map(self.parse_attribute_value).astype("Int64")

        bad = out["Name"].isna() | out["Age"].isna()
        if bad.any():
            logger.warning(
                "Skipping %d rows with missing name or invalid age: %s",
                int(bad.sum()), df.loc[bad, "Name"].tolist(),
            )
            out = out[~bad].reset_index(drop=True)

        logger.info(
            "Cleaned squad: %d players, %d attribute columns",
            len(out), len(renamed),
        )
        return out
