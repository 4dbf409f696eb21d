"""Player snapshots - one immutable attribute reading per player."""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import pandas as pd

from src.squad_data.config import IDENTITY_COLUMNS

logger = logging.getLogger(__name__)

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class PlayerSnapshot:
    """A player's identity plus one snapshot of attribute values.

    ``attributes`` is exposed as a read-only mapping; an attribute that was
    not recorded is simply absent (scored as 0).
    """

    player_id: str
    name: str
    age: int
    attributes: Mapping[str, int] = field(default_factory=dict)
    current_ability: Optional[int] = None
    potential_ability: Optional[int] = None
    positions: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self, "attributes", MappingProxyType(dict(self.attributes))
        )

    @classmethod
    def from_dict(cls, data: Dict) -> "PlayerSnapshot":
        """Build from ``{"id"|"player_id", "name", "age", "attributes", ...}``."""
        player_id = data.get("player_id", data.get("id"))
        if player_id is None:
            player_id = make_player_id(data["name"], data["age"])
        return cls(
            player_id=str(player_id),
            name=data["name"],
            age=int(data["age"]),
            attributes={
                k: int(v)
                for k, v in (data.get("attributes") or {}).items()
                if v is not None
            },
            current_ability=data.get("current_ability"),
            potential_ability=data.get("potential_ability"),
            positions=data.get("positions"),
        )

    def to_dict(self) -> Dict:
        return {
            "player_id": self.player_id,
            "name": self.name,
            "age": self.age,
            "current_ability": self.current_ability,
            "potential_ability": self.potential_ability,
            "positions": self.positions,
            "attributes": dict(self.attributes),
        }


def make_player_id(name: str, age) -> str:
    """Stable id from name and age, e.g. ("Bukayo Saka", 22) -> "bukayo_saka_22"."""
    slug = _SLUG_PATTERN.sub("_", str(name).lower()).strip("_")
    return f"{slug}_{age}"


def _optional_int(value) -> Optional[int]:
    if value is None or value is pd.NA:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return int(value)


class SnapshotBuilder:
    """Turns a cleaned squad DataFrame into PlayerSnapshot objects."""

    def build(self, df: pd.DataFrame) -> List[PlayerSnapshot]:
        """Build one snapshot per row of *df* (output of ``clean_squad``).

        Player ids come from a ``UID`` or ``ID`` column when present,
        otherwise from the player's name and age. Duplicate ids are
        disambiguated with a numeric suffix.
        """
        attribute_cols = [c for c in df.columns if c not in IDENTITY_COLUMNS]
        id_col = next((c for c in ("UID", "ID") if c in df.columns), None)

        snapshots: List[PlayerSnapshot] = []
        seen_ids: Dict[str, int] = {}

        for _, row in df.iterrows():
            age = int(row["Age"])
            raw_id = row[id_col] if id_col else None
            if raw_id is None or pd.isna(raw_id) or str(raw_id).strip() == "":
                player_id = make_player_id(row["Name"], age)
            else:
                player_id = str(raw_id).strip()

            if player_id in seen_ids:
                seen_ids[player_id] += 1
                logger.warning(
                    "Duplicate player id %s (%s), renaming", player_id, row["Name"]
                )
                player_id = f"{player_id}_{seen_ids[player_id]}"
            else:
                seen_ids[player_id] = 1

            attributes = {
                col: int(row[col]) for col in attribute_cols if not pd.isna(row[col])
            }

            positions = row.get("Position")
            snapshots.append(
                PlayerSnapshot(
                    player_id=player_id,
                    name=row["Name"],
                    age=age,
                    attributes=attributes,
                    current_ability=_optional_int(row.get("CA")),
                    potential_ability=_optional_int(row.get("PA")),
                    positions=None if positions is None or pd.isna(positions) else str(positions),
                )
            )

        logger.info("Built %d player snapshots", len(snapshots))
        return snapshots


def load_squad(path: Path) -> List[PlayerSnapshot]:
    """Load snapshots from a processed squad JSON file (see run_import)."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"No squad file at {path}. "
            "Run the import first: python -m src.squad_data.run_import <csv>"
        )

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    try:
        players = [PlayerSnapshot.from_dict(p) for p in data["players"]]
    except KeyError as e:
        raise ValueError(
            f"Malformed squad file {path}: missing key {e}. Re-run the import."
        ) from e

    logger.info("Loaded %d players from %s", len(players), path.name)
    return players
