"""Securable resource protocol contract."""

from typing import Protocol, Sequence, runtime_checkable

from ..entities import RoleAssignment
from ..value_objects import BasePermissions


@runtime_checkable
class SecurableResource(Protocol):
    """Protocol for a site, list or list item that carries role assignments.

    Concrete resource kinds satisfy this structurally; no base class is
    required. Failures raised by the mutating calls propagate to the
    caller.
    """

    @property
    def resource_id(self) -> str:
        """Identifier of the resource, used in diagnostics."""
        ...

    @property
    def scope_id(self) -> str:
        """Identifier of the permission scope whose role catalog applies."""
        ...

    @property
    def has_unique_role_assignments(self) -> bool:
        """True when the resource no longer inherits from its parent."""
        ...

    @property
    def role_assignments(self) -> Sequence[RoleAssignment]:
        """Role assignments currently in force on the resource."""
        ...

    def break_role_inheritance(self, copy_role_assignments: bool) -> None:
        """Stop inheriting; optionally clone inherited assignments locally.

        Calling this on a resource that already has unique assignments is
        a no-op.
        """
        ...

    def get_effective_permissions(self, login_name: str) -> BasePermissions:
        """Permissions in force for a user, including group membership."""
        ...

    def add_role_assignment(self, assignment: RoleAssignment) -> None:
        """Persist a role assignment on the resource.

        A resource holds at most one assignment per member; adding one for
        a member that already has an assignment extends its bindings.
        """
        ...
