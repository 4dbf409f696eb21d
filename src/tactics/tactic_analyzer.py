"""Batch analysis of a whole tactic against a squad.

Every slot of a tactic is resolved against the catalog, scored with
:class:`PositionScorer` and classified. Slots whose position/role/duty has
no requirement are reported as unconfigured instead of being scored.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

from src.position_catalog.catalog import AttributeRequirementCatalog, RequirementNotFound
from src.scoring_engine.config import ANALYSIS_MAX_WORKERS, WEAK_DEPTH_THRESHOLD
from src.scoring_engine.models import PositionAnalysis, RecruitmentSuggestion
from src.scoring_engine.position_scorer import PlayerInput, PositionScorer
from src.scoring_engine.recruitment import RecruitmentAdvisor
from src.tactics.tactic import AnalysisContext, Tactic, TacticSlot

logger = logging.getLogger(__name__)


@dataclass
class TacticAnalysis:
    """Result of analysing every slot of one tactic."""

    tactic_name: str
    formation: str
    position_analyses: List[PositionAnalysis] = field(default_factory=list)
    unconfigured_slots: List[TacticSlot] = field(default_factory=list)
    recruitment_targets: List[RecruitmentSuggestion] = field(default_factory=list)
    squad_gaps: List[str] = field(default_factory=list)
    overall_fitness: float = 0.0

    def to_dict(self) -> Dict:
        return {
            "tactic": self.tactic_name,
            "formation": self.formation,
            "overall_fitness": self.overall_fitness,
            "position_analyses": [a.to_dict() for a in self.position_analyses],
            "unconfigured_slots": [s.to_dict() for s in self.unconfigured_slots],
            "recruitment_targets": [r.to_dict() for r in self.recruitment_targets],
            "squad_gaps": list(self.squad_gaps),
        }


class TacticAnalyzer:
    """Analyse each slot of a tactic and summarise squad fitness."""

    def __init__(
        self,
        catalog: AttributeRequirementCatalog,
        scorer: Optional[PositionScorer] = None,
        advisor: Optional[RecruitmentAdvisor] = None,
        max_workers: int = ANALYSIS_MAX_WORKERS,
    ):
        self.catalog = catalog
        self.scorer = scorer or PositionScorer()
        self.advisor = advisor or RecruitmentAdvisor()
        self.max_workers = max_workers

    def analyze_tactic(self, tactic: Tactic, players: Sequence[PlayerInput]) -> TacticAnalysis:
        """Analyse every slot of *tactic* for *players*.

        Position analyses come back in slot order regardless of worker count.
        """
        players = list(players)
        logger.info(
            "Analysing tactic %r (%s): %d slots, %d players",
            tactic.name, tactic.formation, len(tactic.slots), len(players),
        )

        if self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(lambda s: self._analyze_slot(s, players), tactic.slots))
        else:
            results = [self._analyze_slot(s, players) for s in tactic.slots]

        analysis = TacticAnalysis(tactic_name=tactic.name, formation=tactic.formation)
        for slot, position_analysis in results:
            if position_analysis is None:
                analysis.unconfigured_slots.append(slot)
                analysis.squad_gaps.append(f"No requirement defined for {slot.label}")
                continue

            analysis.position_analyses.append(position_analysis)

            suggestion = self.advisor.suggest_for_analysis(position_analysis)
            if suggestion.targets:
                analysis.recruitment_targets.append(suggestion)

            if position_analysis.player_count == 0:
                analysis.squad_gaps.append(f"No players evaluated for {position_analysis.label}")
            elif position_analysis.average_score < WEAK_DEPTH_THRESHOLD:
                analysis.squad_gaps.append(
                    f"Weak depth at {position_analysis.label} "
                    f"({position_analysis.average_score:.1f}% avg)"
                )

        if analysis.position_analyses:
            analysis.overall_fitness = sum(
                a.average_score for a in analysis.position_analyses
            ) / len(analysis.position_analyses)

        logger.info(
            "Tactic %r: fitness %.1f, %d gaps, %d positions need recruitment",
            tactic.name, analysis.overall_fitness,
            len(analysis.squad_gaps), len(analysis.recruitment_targets),
        )
        return analysis

    def analyze_context(
        self, context: AnalysisContext, players: Sequence[PlayerInput]
    ) -> TacticAnalysis:
        """Analyse the active tactic of *context*.

        Raises:
            NoActiveTacticError: if no tactic is active.
        """
        return self.analyze_tactic(context.require_active(), players)

    def _analyze_slot(
        self, slot: TacticSlot, players: List[PlayerInput]
    ) -> Tuple[TacticSlot, Optional[PositionAnalysis]]:
        try:
            requirement = self.catalog.get_requirement(slot.position_code, slot.role, slot.duty)
        except RequirementNotFound as e:
            logger.warning("Skipping slot %s: %s", slot.label, e.reason)
            return slot, None
        position_analysis = self.scorer.analyze_position(requirement, players)
        # Aliased slots (DCL, DCR) share a requirement; keep the slot's own code
        return slot, replace(
            position_analysis,
            slot_code=str(slot.position_code).strip().upper(),
            slot_id=slot.slot_id,
        )
