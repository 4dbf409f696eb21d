"""Tactic data models and the explicit analysis context."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


class TacticValidationError(ValueError):
    """Raised when a tactic is structurally invalid."""


class NoActiveTacticError(LookupError):
    """Raised when an analysis needs a tactic but none is active."""


@dataclass(frozen=True)
class TacticSlot:
    """One position in a formation with its role and duty."""

    position_code: str
    role: str
    duty: str
    slot_id: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.position_code} - {self.role} ({self.duty})"

    @classmethod
    def from_dict(cls, data: Dict) -> "TacticSlot":
        position_code = data.get("position_code", data.get("positionCode"))
        if position_code is None or "role" not in data or "duty" not in data:
            raise TacticValidationError(
                f"Tactic slot needs position_code, role and duty: {data}"
            )
        slot_id = data.get("slot_id", data.get("id"))
        return cls(
            position_code=str(position_code),
            role=str(data["role"]),
            duty=str(data["duty"]),
            slot_id=None if slot_id is None else str(slot_id),
        )

    def to_dict(self) -> Dict:
        return {
            "slot_id": self.slot_id,
            "position_code": self.position_code,
            "role": self.role,
            "duty": self.duty,
        }


@dataclass
class Tactic:
    """A named formation: an ordered list of slots."""

    name: str
    formation: str
    slots: List[TacticSlot] = field(default_factory=list)

    def __post_init__(self):
        if not self.name or not str(self.name).strip():
            raise TacticValidationError("Tactic name cannot be empty")
        if not self.slots:
            raise TacticValidationError(f"Tactic {self.name!r} has no positions")

    @classmethod
    def from_dict(cls, data: Dict) -> "Tactic":
        slots = data.get("slots", data.get("positions", []))
        return cls(
            name=data.get("name", ""),
            formation=data.get("formation", ""),
            slots=[TacticSlot.from_dict(s) for s in slots],
        )

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "formation": self.formation,
            "slots": [s.to_dict() for s in self.slots],
        }

    def update_slot(self, index: int, role: str, duty: str) -> TacticSlot:
        """Replace the role/duty of the slot at *index* and return the new slot."""
        old = self.slots[index]
        new = TacticSlot(
            position_code=old.position_code, role=role, duty=duty, slot_id=old.slot_id
        )
        self.slots[index] = new
        return new


class AnalysisContext:
    """Holds which tactic the caller is currently analysing.

    The active tactic is an explicit reference owned by the caller, so two
    contexts never interfere with each other.
    """

    def __init__(self, tactic: Optional[Tactic] = None):
        self._tactic = tactic

    @property
    def active_tactic(self) -> Optional[Tactic]:
        return self._tactic

    def activate(self, tactic: Tactic) -> None:
        self._tactic = tactic

    def clear(self) -> None:
        self._tactic = None

    def require_active(self) -> Tactic:
        if self._tactic is None:
            raise NoActiveTacticError("No active tactic selected")
        return self._tactic
