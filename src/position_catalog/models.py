"""Data models for the position requirement catalog."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Duty(Enum):
    """Tactical duty refining a role's attribute priorities."""

    DEFEND = "defend"
    SUPPORT = "support"
    ATTACK = "attack"

    @classmethod
    def parse(cls, value) -> Optional["Duty"]:
        """Parse a duty case-insensitively ("Support" -> Duty.SUPPORT).

        Returns None for unknown values so lookups can report a miss.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class PositionRequirement:
    """Key and preferred attributes for one (position, role, duty) triple."""

    position_code: str
    role_code: str
    duty: Duty
    key_attributes: Tuple[str, ...]
    preferred_attributes: Tuple[str, ...]

    @property
    def label(self) -> str:
        """Display label, e.g. ``"DC - CD (defend)"``."""
        return f"{self.position_code} - {self.role_code} ({self.duty.value})"

    @property
    def is_degenerate(self) -> bool:
        """True when the requirement names no attributes at all."""
        return not self.key_attributes and not self.preferred_attributes

    def overlapping_attributes(self) -> Tuple[str, ...]:
        """Attributes listed as both key and preferred (malformed data)."""
        preferred = set(self.preferred_attributes)
        return tuple(a for a in self.key_attributes if a in preferred)
