from src.tactics.tactic import (
    AnalysisContext,
    NoActiveTacticError,
    Tactic,
    TacticSlot,
    TacticValidationError,
)
from src.tactics.tactic_analyzer import TacticAnalysis, TacticAnalyzer
from src.tactics.tactic_validator import TacticValidator

__all__ = [
    "AnalysisContext",
    "NoActiveTacticError",
    "Tactic",
    "TacticAnalysis",
    "TacticAnalyzer",
    "TacticSlot",
    "TacticValidationError",
    "TacticValidator",
]
