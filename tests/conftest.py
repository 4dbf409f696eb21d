"""Shared fixtures for the squad analyzer test suite."""

import pytest

from src.position_catalog.catalog import AttributeRequirementCatalog
from src.scoring_engine.position_scorer import PositionScorer
from src.scoring_engine.recruitment import RecruitmentAdvisor
from src.squad_data.cleaning import AttributeCleaner

# Small hand-written catalog: one position with two roles, one of them
# with no attributes at all.
SYNTHETIC_POSITIONS = {
    "DC": {
        "name": "Defender (Centre)",
        "roles": {
            "CD": {
                "name": "Central Defender",
                "duties": {
                    "defend": {
                        "key_attributes": ["Marking", "Heading", "Positioning"],
                        "preferred_attributes": ["Tackling", "Strength"],
                    },
                },
            },
            "XX": {
                "name": "Empty Role",
                "duties": {
                    "support": {"key_attributes": [], "preferred_attributes": []},
                },
            },
        },
    },
}


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def scorer():
    return PositionScorer()


@pytest.fixture(scope="module")
def advisor():
    return RecruitmentAdvisor()


@pytest.fixture(scope="module")
def cleaner():
    return AttributeCleaner()


@pytest.fixture(scope="module")
def synthetic_catalog():
    return AttributeRequirementCatalog(SYNTHETIC_POSITIONS)


# ------------------------------------------------------------------
# Data-reading fixtures – reused across an entire module
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def catalog():
    """Catalog loaded from the shipped requirement data."""
    return AttributeRequirementCatalog.from_file()
