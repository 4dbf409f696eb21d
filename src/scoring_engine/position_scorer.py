"""Position suitability scoring.

Scores a player's attributes against a position requirement using a
point-weighted normalization: key attributes count double, preferred
attributes single, and the overall score is the combined weighted sum
divided by the combined weighted maximum.
"""

import logging
import math
from typing import Iterable, List, Mapping, Sequence, Tuple, Union

from src.position_catalog.models import PositionRequirement
from src.scoring_engine.config import (
    ATTRIBUTE_MAX,
    BACKUP_MIN_SCORE,
    COVERAGE_ADEQUATE_MIN,
    COVERAGE_EXCELLENT_MIN,
    COVERAGE_GOOD_MIN,
    COVERAGE_POOR_MIN,
    KEY_WEIGHT,
    MIN_RECOMMENDED,
    PREFERRED_WEIGHT,
    TOP_PLAYERS_DISPLAYED,
)
from src.scoring_engine.models import (
    CoverageLevel,
    MissingAttribute,
    PlayerPositionScore,
    PositionAnalysis,
)
from src.squad_data.snapshots import PlayerSnapshot

logger = logging.getLogger(__name__)

PlayerInput = Union[PlayerSnapshot, Mapping]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _percentage(raw: float, maximum: float) -> int:
    return round_half_up(raw / maximum * 100) if maximum > 0 else 0


class PositionScorer:
    """Score players against position requirements.

    The scorer holds no state; every method depends only on its
    arguments, so one instance can be shared across threads.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def score_player(
        self,
        player: PlayerInput,
        requirement: PositionRequirement,
    ) -> PlayerPositionScore:
        """Score one player for one requirement.

        Args:
            player: A :class:`PlayerSnapshot`, a provider dict
                ``{"id", "name", "age", "attributes"}``, or a bare
                ``attribute -> value`` mapping.
            requirement: The position/role/duty requirement.

        Returns:
            :class:`PlayerPositionScore` with the overall score, the key
            and preferred sub-scores, and the attributes below
            ``MIN_RECOMMENDED``.
        """
        player_id, player_name, attributes = self._unpack_player(player)

        if requirement.is_degenerate:
            logger.warning(
                "Requirement %s has no key or preferred attributes; scoring 0",
                requirement.label,
            )

        key_raw, key_max, missing_key, unscouted_key = self._accumulate(
            requirement.key_attributes, attributes, KEY_WEIGHT
        )
        pref_raw, pref_max, missing_pref, unscouted_pref = self._accumulate(
            requirement.preferred_attributes, attributes, PREFERRED_WEIGHT
        )

        # Combined sums, not an average of the two sub-scores
        score = _percentage(key_raw + pref_raw, key_max + pref_max)

        return PlayerPositionScore(
            player_id=player_id,
            player_name=player_name,
            score=score,
            key_attribute_score=_percentage(key_raw, key_max),
            preferred_attribute_score=_percentage(pref_raw, pref_max),
            missing_key_attributes=tuple(missing_key),
            missing_preferred_attributes=tuple(missing_pref),
            unscouted_attributes=tuple(unscouted_key + unscouted_pref),
        )

    def analyze_position(
        self,
        requirement: PositionRequirement,
        players: Iterable[PlayerInput],
    ) -> PositionAnalysis:
        """Score, rank and classify every player for one requirement.

        Ranking is by score descending; ties keep input order. Only the
        top ``TOP_PLAYERS_DISPLAYED`` scores are returned, but the average
        covers every player.
        """
        scores = self.rank_scores(self.score_player(p, requirement) for p in players)

        average = sum(s.score for s in scores) / len(scores) if scores else 0.0
        coverage = self.determine_coverage_level(scores)

        logger.debug(
            "%s: %d players, top=%s, avg=%.1f, coverage=%s",
            requirement.label, len(scores),
            scores[0].score if scores else None, average, coverage.value,
        )

        return PositionAnalysis(
            requirement=requirement,
            ranked_scores=tuple(scores[:TOP_PLAYERS_DISPLAYED]),
            average_score=average,
            coverage_level=coverage,
            player_count=len(scores),
        )

    @staticmethod
    def rank_scores(
        scores: Iterable[PlayerPositionScore],
    ) -> List[PlayerPositionScore]:
        """Sort scores descending (stable, so ties keep input order)."""
        return sorted(scores, key=lambda s: s.score, reverse=True)

    @staticmethod
    def determine_coverage_level(
        sorted_scores: Sequence[Union[PlayerPositionScore, int]],
    ) -> CoverageLevel:
        """Classify coverage from scores sorted best-first.

        The ladder is evaluated top-down and the first match wins. The
        backup condition only gates the excellent and good tiers::

            no players                       -> critical
            top >= 80 and second >= 60       -> excellent
            top >= 70 and second >= 60       -> good
            top >= 60                        -> adequate
            top >= 40                        -> poor
            otherwise                        -> critical

        Accepts score records or plain integer scores.
        """
        values = [getattr(s, "score", s) for s in sorted_scores]
        if not values:
            return CoverageLevel.CRITICAL

        top = values[0]
        has_backup = len(values) > 1 and values[1] >= BACKUP_MIN_SCORE

        if top >= COVERAGE_EXCELLENT_MIN and has_backup:
            return CoverageLevel.EXCELLENT
        if top >= COVERAGE_GOOD_MIN and has_backup:
            return CoverageLevel.GOOD
        if top >= COVERAGE_ADEQUATE_MIN:
            return CoverageLevel.ADEQUATE
        if top >= COVERAGE_POOR_MIN:
            return CoverageLevel.POOR
        return CoverageLevel.CRITICAL

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _unpack_player(player: PlayerInput) -> Tuple[str, str, Mapping]:
        """Return ``(player_id, player_name, attributes)`` for any input form."""
        if isinstance(player, PlayerSnapshot):
            return player.player_id, player.name, player.attributes

        if isinstance(player.get("attributes"), Mapping):
            player_id = player.get("player_id", player.get("id", ""))
            return str(player_id), str(player.get("name", "")), player["attributes"]

        return "", "", player

    @staticmethod
    def _accumulate(
        attribute_names: Sequence[str],
        attributes: Mapping,
        weight: int,
    ) -> Tuple[int, int, List[MissingAttribute], List[str]]:
        """Weighted raw sum, weighted maximum and shortfalls for one set.

        An attribute the player has no value for counts as 0.
        """
        raw = 0
        maximum = 0
        missing: List[MissingAttribute] = []
        unscouted: List[str] = []

        for name in attribute_names:
            value = attributes.get(name)
            if value is None:
                unscouted.append(name)
                value = 0

            raw += value * weight
            maximum += ATTRIBUTE_MAX * weight

            if value < MIN_RECOMMENDED:
                missing.append(
                    MissingAttribute(attribute=name, current=value, recommended=MIN_RECOMMENDED)
                )

        return raw, maximum, missing, unscouted
