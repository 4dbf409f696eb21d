"""Tests for recruitment target suggestions.

Fixtures ``advisor`` and ``scorer`` are provided by conftest.py.
"""

import pytest

from src.position_catalog.models import Duty, PositionRequirement
from src.scoring_engine.models import CoverageLevel, MissingAttribute


def _make_requirement(key=("Tackling", "Marking", "Strength"),
                      preferred=("Positioning", "Concentration", "Heading")):
    return PositionRequirement(
        position_code="DM",
        role_code="BWM",
        duty=Duty.DEFEND,
        key_attributes=tuple(key),
        preferred_attributes=tuple(preferred),
    )


class TestSuggestTargets:
    def test_poor_coverage_priority_line(self, advisor):
        suggestion = advisor.suggest_targets(
            "DM - BWM (defend)", _make_requirement(), CoverageLevel.POOR
        )
        assert suggestion.targets[0] == "Priority: Tackling 14+, Marking 14+, Strength 14+"

    def test_poor_coverage_preferred_line(self, advisor):
        suggestion = advisor.suggest_targets(
            "DM - BWM (defend)", _make_requirement(), CoverageLevel.POOR
        )
        assert suggestion.targets == [
            "Priority: Tackling 14+, Marking 14+, Strength 14+",
            "Preferred: Positioning 12+, Concentration 12+",
        ]

    def test_critical_produces_targets(self, advisor):
        suggestion = advisor.suggest_targets(
            "DM - BWM (defend)", _make_requirement(), CoverageLevel.CRITICAL
        )
        assert len(suggestion.targets) == 2

    @pytest.mark.parametrize("level", [
        CoverageLevel.EXCELLENT, CoverageLevel.GOOD, CoverageLevel.ADEQUATE,
    ])
    def test_covered_positions_get_no_targets(self, advisor, level):
        suggestion = advisor.suggest_targets("DM - BWM (defend)", _make_requirement(), level)
        assert suggestion.targets == []

    def test_position_label_kept(self, advisor):
        suggestion = advisor.suggest_targets(
            "DM - BWM (defend)", _make_requirement(), CoverageLevel.GOOD
        )
        assert suggestion.position == "DM - BWM (defend)"

    def test_only_first_three_key_attributes(self, advisor):
        requirement = _make_requirement(
            key=("Tackling", "Marking", "Strength", "Aggression"), preferred=()
        )
        suggestion = advisor.suggest_targets("x", requirement, CoverageLevel.POOR)
        assert "Aggression" not in suggestion.targets[0]

    def test_no_preferred_line_without_preferred_attributes(self, advisor):
        requirement = _make_requirement(preferred=())
        suggestion = advisor.suggest_targets("x", requirement, CoverageLevel.CRITICAL)
        assert suggestion.targets == ["Priority: Tackling 14+, Marking 14+, Strength 14+"]

    def test_short_key_list(self, advisor):
        requirement = _make_requirement(key=("Pace",), preferred=("Stamina",))
        suggestion = advisor.suggest_targets("x", requirement, CoverageLevel.POOR)
        assert suggestion.targets == ["Priority: Pace 14+", "Preferred: Stamina 12+"]

    def test_missing_attributes_do_not_change_targets(self, advisor):
        missing = [MissingAttribute("Tackling", 8, 12)]
        with_missing = advisor.suggest_targets(
            "x", _make_requirement(), CoverageLevel.POOR, missing, []
        )
        without = advisor.suggest_targets("x", _make_requirement(), CoverageLevel.POOR)
        assert with_missing.targets == without.targets

    def test_to_dict(self, advisor):
        suggestion = advisor.suggest_targets("x", _make_requirement(), CoverageLevel.GOOD)
        assert suggestion.to_dict() == {"position": "x", "targets": []}


class TestSuggestForAnalysis:
    def test_empty_squad_is_critical(self, advisor, scorer):
        analysis = scorer.analyze_position(_make_requirement(), [])
        suggestion = advisor.suggest_for_analysis(analysis)

        assert suggestion.position == "DM - BWM (defend)"
        assert suggestion.targets[0].startswith("Priority: Tackling 14+")

    def test_well_covered_position(self, advisor, scorer):
        attrs = {a: 18 for a in ("Tackling", "Marking", "Strength",
                                 "Positioning", "Concentration", "Heading")}
        analysis = scorer.analyze_position(_make_requirement(), [attrs, dict(attrs)])
        assert analysis.coverage_level == CoverageLevel.EXCELLENT
        assert advisor.suggest_for_analysis(analysis).targets == []
