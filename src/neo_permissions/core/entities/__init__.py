"""Permission domain entities."""

from .principal import Principal, PrincipalType
from .role_definition import RoleDefinition
from .role_assignment import RoleAssignment

__all__ = [
    "Principal",
    "PrincipalType",
    "RoleDefinition",
    "RoleAssignment",
]
