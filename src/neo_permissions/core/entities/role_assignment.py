"""Role assignment entity.

ONLY role assignment - binds one principal to a set of role definitions
on one securable resource.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from ..value_objects import BasePermissions
from .principal import Principal
from .role_definition import RoleDefinition


@dataclass
class RoleAssignment:
    """Binding of a principal to role definitions.

    Bindings keep insertion order and never hold the same role twice
    (roles are matched by case-insensitive name).
    """

    member: Principal
    role_definition_bindings: List[RoleDefinition] = field(default_factory=list)

    def __post_init__(self):
        bindings = self.role_definition_bindings
        self.role_definition_bindings = []
        self.add_bindings(bindings)

    def add_binding(self, role: RoleDefinition) -> bool:
        """Bind a role definition; returns False if already bound."""
        if self.is_bound(role.name):
            return False
        self.role_definition_bindings.append(role)
        return True

    def add_bindings(self, roles: Iterable[RoleDefinition]) -> None:
        for role in roles:
            self.add_binding(role)

    def is_bound(self, role_name: str) -> bool:
        """Check if a role with the given name is bound."""
        key = role_name.casefold()
        return any(role.name.casefold() == key for role in self.role_definition_bindings)

    @property
    def base_permissions(self) -> BasePermissions:
        """Union of the base permissions of all bound roles."""
        return BasePermissions.union(
            role.base_permissions for role in self.role_definition_bindings
        )

    @property
    def role_names(self) -> List[str]:
        return [role.name for role in self.role_definition_bindings]

    def copy(self) -> 'RoleAssignment':
        """Create an independent copy with the same bindings."""
        return RoleAssignment(self.member, list(self.role_definition_bindings))
