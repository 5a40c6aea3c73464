"""Effective permission inspector service.

ONLY permission inspection - determines what a principal currently holds
on a securable resource.
"""

import logging
from typing import Optional

from ...core.entities import Principal, RoleAssignment
from ...core.protocols import SecurableResource
from ...core.value_objects import BasePermissions

logger = logging.getLogger(__name__)


class EffectivePermissionInspector:
    """Computes a principal's current permissions on a resource.

    Users are checked through the resource's effective-permission query,
    which accounts for group membership and inheritance. Groups are checked
    against their direct role assignment only; nested group membership is
    not resolved.
    """

    def current_permissions(
        self,
        resource: SecurableResource,
        principal: Principal
    ) -> BasePermissions:
        if principal.is_user:
            return BasePermissions(
                resource.get_effective_permissions(principal.login_name.value)
            )

        assignment = self.find_assignment(resource, principal)
        if assignment is None:
            logger.debug(
                f"No direct assignment for {principal} on {resource.resource_id}"
            )
            return BasePermissions.EMPTY_MASK

        return assignment.base_permissions

    @staticmethod
    def find_assignment(
        resource: SecurableResource,
        principal: Principal
    ) -> Optional[RoleAssignment]:
        """Find the assignment whose member matches the principal's login name."""
        for assignment in resource.role_assignments:
            if assignment.member.login_name == principal.login_name:
                return assignment
        return None
