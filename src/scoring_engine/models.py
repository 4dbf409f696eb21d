"""Data models for the scoring engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from src.position_catalog.models import PositionRequirement


class CoverageLevel(Enum):
    """How well the squad is stocked for one position."""

    EXCELLENT = "excellent"
    GOOD = "good"
    ADEQUATE = "adequate"
    POOR = "poor"
    CRITICAL = "critical"

    @property
    def needs_recruitment(self) -> bool:
        return self in (CoverageLevel.POOR, CoverageLevel.CRITICAL)


@dataclass(frozen=True)
class MissingAttribute:
    """A required attribute where the player is below the recommended value."""

    attribute: str
    current: int
    recommended: int

    def to_dict(self) -> Dict:
        return {
            "attribute": self.attribute,
            "current": self.current,
            "recommended": self.recommended,
        }


@dataclass(frozen=True)
class PlayerPositionScore:
    """Suitability of one player for one position requirement."""

    player_id: str
    player_name: str
    score: int                      # 0-100 overall
    key_attribute_score: int        # 0-100
    preferred_attribute_score: int  # 0-100
    missing_key_attributes: Tuple[MissingAttribute, ...] = ()
    missing_preferred_attributes: Tuple[MissingAttribute, ...] = ()
    # Required attributes with no recorded value (scored as 0)
    unscouted_attributes: Tuple[str, ...] = ()

    @property
    def has_complete_data(self) -> bool:
        return not self.unscouted_attributes

    def to_dict(self) -> Dict:
        return {
            "player_id": self.player_id,
            "player_name": self.player_name,
            "score": self.score,
            "key_attribute_score": self.key_attribute_score,
            "preferred_attribute_score": self.preferred_attribute_score,
            "missing_key_attributes": [m.to_dict() for m in self.missing_key_attributes],
            "missing_preferred_attributes": [
                m.to_dict() for m in self.missing_preferred_attributes
            ],
            "unscouted_attributes": list(self.unscouted_attributes),
        }


@dataclass(frozen=True)
class PositionAnalysis:
    """Ranked scores and coverage for one position requirement."""

    requirement: PositionRequirement
    ranked_scores: Tuple[PlayerPositionScore, ...]  # top N only
    average_score: float                             # over all players
    coverage_level: CoverageLevel
    player_count: int
    # Tactic slot the analysis was run for (e.g. "DCL"); None when scored
    # directly against a requirement
    slot_code: Optional[str] = None
    slot_id: Optional[str] = None

    @property
    def position_code(self) -> str:
        return self.slot_code or self.requirement.position_code

    @property
    def label(self) -> str:
        if self.slot_code is None:
            return self.requirement.label
        return (
            f"{self.slot_code} - {self.requirement.role_code} "
            f"({self.requirement.duty.value})"
        )

    @property
    def best(self):
        """Top-ranked score, or None when no players were scored."""
        return self.ranked_scores[0] if self.ranked_scores else None

    def to_dict(self) -> Dict:
        return {
            "position_code": self.position_code,
            "slot_id": self.slot_id,
            "role": self.requirement.role_code,
            "duty": self.requirement.duty.value,
            "player_scores": [s.to_dict() for s in self.ranked_scores],
            "average_score": self.average_score,
            "coverage_level": self.coverage_level.value,
            "player_count": self.player_count,
        }


@dataclass
class RecruitmentSuggestion:
    """Recruitment targets for one position."""

    position: str
    targets: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {"position": self.position, "targets": list(self.targets)}
