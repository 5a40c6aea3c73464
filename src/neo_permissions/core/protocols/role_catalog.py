"""Role catalog protocol contract."""

from typing import Optional, Protocol, runtime_checkable

from ..entities import RoleDefinition


@runtime_checkable
class RoleCatalog(Protocol):
    """Protocol for role-definition lookup within a permission scope.

    Defines ONLY the lookup contract. Role-definition management belongs
    to the host platform.
    """

    def lookup(self, scope_id: str, name: str) -> Optional[RoleDefinition]:
        """Look up a role definition by name.

        Args:
            scope_id: Permission scope (site) identifier
            name: Role display name

        Returns:
            The role definition, or None when the name does not resolve
        """
        ...
