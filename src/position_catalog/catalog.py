"""Attribute requirement catalog.

Maps (position, role, duty) to the ordered key and preferred attribute
lists used by the scoring engine. The catalog is built once from a parsed
data blob and never mutated afterwards, so it can be shared freely between
threads.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from src.position_catalog.config import CATALOG_FILE, POSITION_ALIASES
from src.position_catalog.models import Duty, PositionRequirement
from src.position_catalog.roles import RoleIdentifier, resolve_role_code

logger = logging.getLogger(__name__)

RoleArg = Union[str, RoleIdentifier]


class CatalogError(Exception):
    """Raised when catalog data is malformed."""


class RequirementNotFound(LookupError):
    """Raised when no requirement is defined for a position/role/duty.

    This is a configuration gap, not a zero score.
    """

    def __init__(self, position_code, role, duty, reason: str):
        self.position_code = position_code
        self.role = role
        self.duty = duty
        self.reason = reason
        super().__init__(
            f"No requirement defined for {position_code} / {role} / {duty}: {reason}"
        )


class AttributeRequirementCatalog:
    """Read-only (position -> role -> duty) requirement lookup.

    Args:
        positions: Mapping of position code to
            ``{"name": ..., "roles": {role_code: {"name": ..., "duties":
            {duty: {"key_attributes": [...], "preferred_attributes": [...]}}}}}``.
        position_aliases: Slot codes mapped to the base position whose
            requirements they share (``DCR -> DC``).
    """

    def __init__(
        self,
        positions: Mapping[str, Mapping],
        position_aliases: Optional[Mapping[str, str]] = None,
    ):
        aliases = POSITION_ALIASES if position_aliases is None else position_aliases

        requirements: Dict[str, Dict[str, Dict[Duty, PositionRequirement]]] = {}
        position_names: Dict[str, str] = {}
        role_names: Dict[Tuple[str, str], str] = {}

        for position_code, position in positions.items():
            if not isinstance(position, Mapping) or "roles" not in position:
                raise CatalogError(f"Position {position_code!r} has no 'roles' mapping")
            position_names[position_code] = position.get("name", position_code)

            by_role: Dict[str, Dict[Duty, PositionRequirement]] = {}
            for role_code, role in position["roles"].items():
                if not isinstance(role, Mapping) or "duties" not in role:
                    raise CatalogError(
                        f"Role {position_code}/{role_code} has no 'duties' mapping"
                    )
                role_names[(position_code, role_code)] = role.get("name", role_code)

                by_duty: Dict[Duty, PositionRequirement] = {}
                for duty_key, attrs in role["duties"].items():
                    duty = Duty.parse(duty_key)
                    if duty is None:
                        raise CatalogError(
                            f"Unknown duty {duty_key!r} for {position_code}/{role_code}"
                        )
                    requirement = PositionRequirement(
                        position_code=position_code,
                        role_code=role_code,
                        duty=duty,
                        key_attributes=self._attribute_list(
                            attrs, "key_attributes", position_code, role_code, duty
                        ),
                        preferred_attributes=self._attribute_list(
                            attrs, "preferred_attributes", position_code, role_code, duty
                        ),
                    )
                    overlap = requirement.overlapping_attributes()
                    if overlap:
                        logger.warning(
                            "%s lists %s as both key and preferred",
                            requirement.label, ", ".join(overlap),
                        )
                    by_duty[duty] = requirement
                by_role[role_code] = MappingProxyType(by_duty)
            requirements[position_code] = MappingProxyType(by_role)

        self._requirements = MappingProxyType(requirements)
        self._position_names = MappingProxyType(position_names)
        self._role_names = MappingProxyType(role_names)
        self._role_codes_by_name = MappingProxyType(
            {name: code for (_, code), name in role_names.items()}
        )
        self._aliases = MappingProxyType(dict(aliases))

        logger.debug(
            "Catalog built: %d positions, %d requirements",
            len(self._requirements), len(self),
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> "AttributeRequirementCatalog":
        """Load the catalog from a JSON file (defaults to the shipped data)."""
        path = Path(path) if path is not None else CATALOG_FILE
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Catalog file {path} is not valid JSON: {e}") from e

        if not isinstance(data, dict) or "positions" not in data:
            raise CatalogError(f"Catalog file {path} has no 'positions' key")

        catalog = cls(data["positions"])
        logger.info(
            "Loaded requirement catalog %s (version %s): %d requirements",
            path.name, data.get("version", "unknown"), len(catalog),
        )
        return catalog

    @staticmethod
    def _attribute_list(attrs, key, position_code, role_code, duty) -> Tuple[str, ...]:
        if not isinstance(attrs, Mapping):
            raise CatalogError(
                f"Duty {position_code}/{role_code}/{duty.value} must be a mapping"
            )
        values = attrs.get(key, [])
        if not isinstance(values, (list, tuple)) or not all(
            isinstance(v, str) for v in values
        ):
            raise CatalogError(
                f"{key} for {position_code}/{role_code}/{duty.value} "
                "must be a list of attribute names"
            )
        return tuple(values)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve_position(self, position_code: str) -> str:
        """Map a slot code to the position holding its requirements."""
        code = str(position_code).strip().upper()
        return self._aliases.get(code, code)

    def resolve_role(self, role: RoleArg) -> Optional[str]:
        """Resolve a role code or full name to the canonical role code."""
        return resolve_role_code(role, extra_names=self._role_codes_by_name)

    def get_requirement(
        self, position_code: str, role: RoleArg, duty
    ) -> PositionRequirement:
        """Look up the requirement for a position/role/duty.

        Raises:
            RequirementNotFound: if any of the three levels is missing.
        """
        position = self.resolve_position(position_code)
        roles = self._requirements.get(position)
        if roles is None:
            raise RequirementNotFound(position_code, role, duty, "unknown position")

        role_code = self.resolve_role(role)
        duties = roles.get(role_code) if role_code else None
        if duties is None:
            raise RequirementNotFound(
                position_code, role, duty, f"role not defined for {position}"
            )

        parsed_duty = Duty.parse(duty)
        requirement = duties.get(parsed_duty) if parsed_duty else None
        if requirement is None:
            raise RequirementNotFound(
                position_code, role, duty, f"duty not defined for {position}/{role_code}"
            )
        return requirement

    def find_requirement(
        self, position_code: str, role: RoleArg, duty
    ) -> Optional[PositionRequirement]:
        """Like :meth:`get_requirement` but returns None on a miss."""
        try:
            return self.get_requirement(position_code, role, duty)
        except RequirementNotFound:
            return None

    # ------------------------------------------------------------------
    # Browsing / validation
    # ------------------------------------------------------------------

    def position_codes(self) -> List[str]:
        return list(self._requirements)

    def position_name(self, position_code: str) -> str:
        position = self.resolve_position(position_code)
        return self._position_names.get(position, position_code)

    def roles_for(self, position_code: str) -> List[str]:
        """Role codes defined for a position (empty for unknown positions)."""
        return list(self._requirements.get(self.resolve_position(position_code), {}))

    def role_name(self, position_code: str, role: RoleArg) -> Optional[str]:
        role_code = self.resolve_role(role)
        return self._role_names.get((self.resolve_position(position_code), role_code))

    def duties_for(self, position_code: str, role: RoleArg) -> List[Duty]:
        roles = self._requirements.get(self.resolve_position(position_code), {})
        return list(roles.get(self.resolve_role(role), {}))

    def is_valid_position(self, position_code: str) -> bool:
        return self.resolve_position(position_code) in self._requirements

    def is_valid_role(self, position_code: str, role: RoleArg) -> bool:
        roles = self._requirements.get(self.resolve_position(position_code), {})
        return self.resolve_role(role) in roles

    def is_valid_duty(self, position_code: str, role: RoleArg, duty) -> bool:
        return self.find_requirement(position_code, role, duty) is not None

    def requirements(self) -> List[PositionRequirement]:
        """Every requirement in the catalog, in definition order."""
        return [
            requirement
            for roles in self._requirements.values()
            for duties in roles.values()
            for requirement in duties.values()
        ]

    def __len__(self) -> int:
        return sum(
            len(duties)
            for roles in self._requirements.values()
            for duties in roles.values()
        )

    def __contains__(self, key) -> bool:
        try:
            position_code, role, duty = key
        except (TypeError, ValueError):
            return False
        return self.find_requirement(position_code, role, duty) is not None
