"""Role code <-> role name mapping.

The tactics screen stores short role codes (``FB``, ``CD``, ``W``) while the
attribute definitions screen stores full names (``Full Back``). Requirement
lookups are keyed by role code; names are resolved to codes here before any
catalog access.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Union

# Canonical role code -> role name
ROLE_NAMES: Dict[str, str] = {
    # Goalkeepers
    "GK": "Goalkeeper",
    "SK": "Sweeper Keeper",
    # Defenders
    "FB": "Full Back",
    "NFB": "No-Nonsense Full Back",
    "WB": "Wing Back",
    "IWB": "Inverted Wing Back",
    "CWB": "Complete Wing Back",
    "CD": "Central Defender",
    "BPD": "Ball Playing Defender",
    "NCB": "No-Nonsense Centre Back",
    "WCB": "Wide Centre Back",
    "L": "Libero",
    # Defensive midfield
    "DM": "Defensive Midfielder",
    "BWM": "Ball Winning Midfielder",
    "A": "Anchor",
    "HB": "Half Back",
    "DLP": "Deep Lying Playmaker",
    "RGA": "Regista",
    # Central midfield
    "CM": "Central Midfielder",
    "BBM": "Box to Box Midfielder",
    "AP": "Advanced Playmaker",
    "CAR": "Carrilero",
    "MEZ": "Mezzala",
    # Wide midfield
    "W": "Winger",
    "WM": "Wide Midfielder",
    "IW": "Inverted Winger",
    "WP": "Wide Playmaker",
    "DW": "Defensive Winger",
    # Attacking midfield
    "AM": "Attacking Midfielder",
    "IF": "Inside Forward",
    "T": "Trequartista",
    "SS": "Shadow Striker",
    "EG": "Enganche",
    # Strikers
    "AF": "Advanced Forward",
    "DLF": "Deep Lying Forward",
    "CF": "Complete Forward",
    "TM": "Target Man",
    "P": "Poacher",
    "F9": "False Nine",
    "PF": "Pressing Forward",
}

# Legacy names seen in older tactic data
ROLE_NAME_ALIASES: Dict[str, str] = {
    "Anchor Man": "A",
}


@dataclass(frozen=True)
class RoleCode:
    """A role given by its short code, e.g. ``RoleCode("FB")``."""

    value: str


@dataclass(frozen=True)
class RoleName:
    """A role given by its full name, e.g. ``RoleName("Full Back")``."""

    value: str


RoleIdentifier = Union[RoleCode, RoleName]


def _name_key(name: str) -> str:
    """Normalize a role name for matching ("No-Nonsense" == "No Nonsense")."""
    return " ".join(str(name).replace("-", " ").split()).lower()


_CODES_BY_NAME: Dict[str, str] = {
    _name_key(name): code for code, name in ROLE_NAMES.items()
}
_CODES_BY_NAME.update(
    {_name_key(name): code for name, code in ROLE_NAME_ALIASES.items()}
)


def identify_role(role: Union[str, RoleIdentifier]) -> RoleIdentifier:
    """Tag a raw role string as a code or a name.

    Strings matching a known code (case-insensitively, "fb" is "FB") are
    codes, strings matching a known name are names. Anything else is
    treated as an (unknown) code so the lookup fails explicitly instead of
    guessing.
    """
    if isinstance(role, (RoleCode, RoleName)):
        return role
    text = str(role).strip()
    if text.upper() in ROLE_NAMES:
        return RoleCode(text.upper())
    if _name_key(text) in _CODES_BY_NAME:
        return RoleName(text)
    return RoleCode(text)


def resolve_role_code(
    role: Union[str, RoleIdentifier],
    extra_names: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    """Resolve a role code or name to its canonical code.

    Args:
        role: Raw string or tagged identifier.
        extra_names: Additional ``name -> code`` pairs, e.g. names defined
            in a loaded catalog file.

    Returns:
        The role code, or None when a role name is not recognised.
    """
    ident = identify_role(role)
    if isinstance(ident, RoleCode):
        code = ident.value.strip().upper()
        if code in ROLE_NAMES:
            return code

    key = _name_key(ident.value)
    if extra_names:
        for name, code in extra_names.items():
            if _name_key(name) == key:
                return code

    if isinstance(ident, RoleCode):
        # Unknown code; catalogs may define their own codes
        return ident.value
    return _CODES_BY_NAME.get(key)


def role_name_for(role_code: str) -> Optional[str]:
    """Full name for a role code, or None if the code is unknown."""
    return ROLE_NAMES.get(role_code)
