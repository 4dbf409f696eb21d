from src.position_catalog.catalog import (
    AttributeRequirementCatalog,
    CatalogError,
    RequirementNotFound,
)
from src.position_catalog.models import Duty, PositionRequirement
from src.position_catalog.roles import (
    RoleCode,
    RoleIdentifier,
    RoleName,
    resolve_role_code,
    role_name_for,
)

__all__ = [
    "AttributeRequirementCatalog",
    "CatalogError",
    "Duty",
    "PositionRequirement",
    "RequirementNotFound",
    "RoleCode",
    "RoleIdentifier",
    "RoleName",
    "resolve_role_code",
    "role_name_for",
]
