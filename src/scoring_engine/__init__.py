from src.scoring_engine.models import (
    CoverageLevel,
    MissingAttribute,
    PlayerPositionScore,
    PositionAnalysis,
    RecruitmentSuggestion,
)
from src.scoring_engine.position_scorer import PositionScorer, round_half_up
from src.scoring_engine.recruitment import RecruitmentAdvisor

__all__ = [
    "CoverageLevel",
    "MissingAttribute",
    "PlayerPositionScore",
    "PositionAnalysis",
    "PositionScorer",
    "RecruitmentAdvisor",
    "RecruitmentSuggestion",
    "round_half_up",
]
