"""Tactic validation against the requirement catalog."""

from typing import List, Optional, Tuple

from src.position_catalog.catalog import AttributeRequirementCatalog
from src.tactics.tactic import Tactic, TacticSlot


class TacticValidator:
    """Checks that every slot of a tactic has a defined requirement."""

    def __init__(self, catalog: AttributeRequirementCatalog):
        self.catalog = catalog

    def validate_slot(self, slot: TacticSlot) -> Tuple[bool, Optional[str]]:
        """
        Validate one slot: position, then role for position, then duty for role.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        if not self.catalog.is_valid_position(slot.position_code):
            return False, f"Unknown position code {slot.position_code}"

        if not self.catalog.is_valid_role(slot.position_code, slot.role):
            return False, (
                f"Role {slot.role} is not available at {slot.position_code} "
                f"(available: {', '.join(self.catalog.roles_for(slot.position_code))})"
            )

        if not self.catalog.is_valid_duty(slot.position_code, slot.role, slot.duty):
            duties = [d.value for d in self.catalog.duties_for(slot.position_code, slot.role)]
            return False, (
                f"Duty {slot.duty} is not defined for {slot.position_code} {slot.role} "
                f"(available: {', '.join(duties)})"
            )

        return True, None

    def validate_tactic(self, tactic: Tactic) -> Tuple[bool, List[str]]:
        """
        Validate every slot of a tactic.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []
        for index, slot in enumerate(tactic.slots, start=1):
            valid, error = self.validate_slot(slot)
            if not valid:
                errors.append(f"Slot {index} ({slot.label}): {error}")
        return (len(errors) == 0, errors)
