"""Recruitment target suggestions for poorly covered positions."""

import logging
from typing import Optional, Sequence

from src.position_catalog.models import PositionRequirement
from src.scoring_engine.config import (
    PREFERRED_TARGET_COUNT,
    PREFERRED_TARGET_VALUE,
    PRIORITY_TARGET_COUNT,
    PRIORITY_TARGET_VALUE,
)
from src.scoring_engine.models import (
    CoverageLevel,
    MissingAttribute,
    PositionAnalysis,
    RecruitmentSuggestion,
)

logger = logging.getLogger(__name__)


class RecruitmentAdvisor:
    """Turns coverage classifications into human-readable transfer targets."""

    def suggest_targets(
        self,
        position_label: str,
        requirement: PositionRequirement,
        coverage_level: CoverageLevel,
        missing_key_attributes: Optional[Sequence[MissingAttribute]] = None,
        missing_preferred_attributes: Optional[Sequence[MissingAttribute]] = None,
    ) -> RecruitmentSuggestion:
        """Suggest targets for one position.

        Only ``poor`` and ``critical`` coverage produce targets::

            Priority: <key1> 14+, <key2> 14+, <key3> 14+
            Preferred: <pref1> 12+, <pref2> 12+

        The second line is omitted when the requirement has no preferred
        attributes.
        """
        suggestion = RecruitmentSuggestion(position=position_label)
        if not coverage_level.needs_recruitment:
            return suggestion

        key_targets = [
            f"{attr} {PRIORITY_TARGET_VALUE}+"
            for attr in requirement.key_attributes[:PRIORITY_TARGET_COUNT]
        ]
        preferred_targets = [
            f"{attr} {PREFERRED_TARGET_VALUE}+"
            for attr in requirement.preferred_attributes[:PREFERRED_TARGET_COUNT]
        ]

        suggestion.targets.append(f"Priority: {', '.join(key_targets)}")
        if preferred_targets:
            suggestion.targets.append(f"Preferred: {', '.join(preferred_targets)}")

        logger.debug(
            "%s coverage %s: best player short on %d key / %d preferred attributes",
            position_label, coverage_level.value,
            len(missing_key_attributes or ()), len(missing_preferred_attributes or ()),
        )
        return suggestion

    def suggest_for_analysis(self, analysis: PositionAnalysis) -> RecruitmentSuggestion:
        """Suggest targets from a position analysis, using its best player's gaps."""
        best = analysis.best
        return self.suggest_targets(
            analysis.label,
            analysis.requirement,
            analysis.coverage_level,
            best.missing_key_attributes if best else (),
            best.missing_preferred_attributes if best else (),
        )
