"""In-memory securable resource.

ONLY in-memory resource behavior - a site, list or list item with a
parent chain, permission inheritance and role assignments held in memory.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ...core.entities import Principal, RoleAssignment
from ...core.value_objects import BasePermissions, LoginName

logger = logging.getLogger(__name__)


class InMemorySecurableResource:
    """Securable resource that inherits from its parent until broken.

    A resource without a parent (a root site) always holds unique
    assignments. ``mutation_count`` counts inheritance breaks, resets and
    added assignments.
    """

    def __init__(
        self,
        resource_id: str,
        parent: Optional['InMemorySecurableResource'] = None,
        scope_id: Optional[str] = None
    ):
        self._resource_id = resource_id
        self._parent = parent
        self._scope_id = scope_id or (parent.scope_id if parent else resource_id)
        self._has_unique = parent is None
        self._assignments: List[RoleAssignment] = []
        self._groups: Dict[LoginName, Principal] = {}
        self.mutation_count = 0

    @property
    def resource_id(self) -> str:
        return self._resource_id

    @property
    def scope_id(self) -> str:
        return self._scope_id

    @property
    def parent(self) -> Optional['InMemorySecurableResource']:
        return self._parent

    @property
    def has_unique_role_assignments(self) -> bool:
        return self._has_unique

    @property
    def role_assignments(self) -> Sequence[RoleAssignment]:
        if not self._has_unique:
            return self._parent.role_assignments
        return tuple(self._assignments)

    def register_group(self, group: Principal) -> None:
        """Make a group's membership known for effective-permission checks."""
        if not group.is_group:
            raise ValueError(f"{group} is not a group")
        root = self._root()
        root._groups[group.login_name] = group

    def break_role_inheritance(self, copy_role_assignments: bool) -> None:
        if self._has_unique:
            return

        inherited = self._parent.role_assignments
        self._assignments = [a.copy() for a in inherited] if copy_role_assignments else []
        self._has_unique = True
        self.mutation_count += 1
        logger.debug(
            f"Broke inheritance on {self._resource_id} "
            f"(copied {len(self._assignments)} assignments)"
        )

    def reset_role_inheritance(self) -> None:
        """Drop unique assignments and inherit from the parent again."""
        if self._parent is None:
            raise ValueError("A root resource cannot inherit permissions")
        if not self._has_unique:
            return
        self._assignments = []
        self._has_unique = False
        self.mutation_count += 1

    def add_role_assignment(self, assignment: RoleAssignment) -> None:
        if not self._has_unique:
            raise ValueError(
                f"Cannot add role assignment to {self._resource_id} while it inherits permissions"
            )

        # One assignment per member; later grants extend its bindings
        for existing in self._assignments:
            if existing.member.login_name == assignment.member.login_name:
                existing.add_bindings(assignment.role_definition_bindings)
                break
        else:
            self._assignments.append(assignment.copy())
        self.mutation_count += 1

    def get_effective_permissions(self, login_name: str) -> BasePermissions:
        user = LoginName(login_name)
        groups = self._root()._groups

        permissions = BasePermissions.EMPTY_MASK
        for assignment in self.role_assignments:
            member = assignment.member
            if member.login_name == user:
                permissions |= assignment.base_permissions
            elif member.is_group:
                group = groups.get(member.login_name, member)
                if group.has_member(user):
                    permissions |= assignment.base_permissions
        return permissions

    def assignments_for(self, principal: Principal) -> List[RoleAssignment]:
        """All assignments in force whose member is the principal."""
        return [
            a for a in self.role_assignments
            if a.member.login_name == principal.login_name
        ]

    def _root(self) -> 'InMemorySecurableResource':
        resource = self
        while resource._parent is not None:
            resource = resource._parent
        return resource

    def __repr__(self) -> str:
        return f"InMemorySecurableResource('{self._resource_id}', unique={self._has_unique})"
