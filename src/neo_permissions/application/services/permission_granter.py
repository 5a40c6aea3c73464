"""Permission granter service.

ONLY permission granting - grants named roles to a user or group on a
securable resource, breaking inheritance only when a grant is required.
"""

import logging
from enum import Enum
from collections.abc import Sequence as SequenceABC
from typing import Optional, Sequence

from ...core.entities import Principal, RoleAssignment
from ...core.exceptions import InvalidArgumentError, NeoPermissionsError, StoreError
from ...core.protocols import RoleCatalog, SecurableResource
from .permission_inspector import EffectivePermissionInspector
from .role_resolver import ResolvedRoles, RoleResolver

logger = logging.getLogger(__name__)


class GrantOutcome(Enum):
    """What a grant call did."""
    SKIPPED_INHERITED = "skipped_inherited"  # Resource inherits and may not be broken
    ALREADY_GRANTED = "already_granted"      # Principal already holds the permissions
    GRANTED = "granted"                      # New assignment added


class PermissionGranter:
    """Idempotent role grants on securable resources.

    A grant reads the principal's current permissions and then writes,
    without a transaction. Grants touching the same resource must be
    serialized by the caller; concurrent callers can both observe a
    missing permission and each add an assignment.
    """

    def __init__(
        self,
        catalog: RoleCatalog,
        inspector: Optional[EffectivePermissionInspector] = None
    ):
        self._resolver = RoleResolver(catalog)
        self._inspector = inspector or EffectivePermissionInspector()

    def grant(
        self,
        resource: SecurableResource,
        principal: Principal,
        role_names: Sequence[str],
        break_inheritance: bool
    ) -> GrantOutcome:
        """Grant roles to a principal unless it already holds them.

        Args:
            resource: Site, list or list item to grant on
            principal: User or group receiving the roles
            role_names: Display names of the roles, at least one
            break_inheritance: Allow breaking inheritance on an inheriting resource

        Returns:
            The outcome of the call

        Raises:
            InvalidArgumentError: If an argument is missing or malformed
            RoleNotFoundError: If a role name does not resolve; nothing is changed
            StoreError: If the store fails while breaking inheritance or committing
        """
        self._validate(resource, principal, role_names)

        if not resource.has_unique_role_assignments and not break_inheritance:
            logger.debug(
                f"Skipping grant on {resource.resource_id}: inherits permissions "
                f"and breaking inheritance is not allowed"
            )
            return GrantOutcome.SKIPPED_INHERITED

        resolved = self._resolver.resolve(resource.scope_id, role_names)
        current = self._inspector.current_permissions(resource, principal)

        if current.contains(resolved.base_permissions):
            logger.debug(
                f"{principal} already has {resolved.names} on {resource.resource_id}"
            )
            return GrantOutcome.ALREADY_GRANTED

        self._commit(resource, principal, resolved)
        logger.info(f"Granted {resolved.names} to {principal} on {resource.resource_id}")
        return GrantOutcome.GRANTED

    def _commit(
        self,
        resource: SecurableResource,
        principal: Principal,
        resolved: ResolvedRoles
    ) -> None:
        """Break inheritance with inherited assignments copied, then add one assignment."""
        try:
            resource.break_role_inheritance(copy_role_assignments=True)
        except NeoPermissionsError:
            raise
        except Exception as e:
            raise StoreError.from_exception(
                "break_role_inheritance", e, resource.resource_id
            ) from e

        assignment = RoleAssignment(principal, list(resolved.definitions))

        try:
            resource.add_role_assignment(assignment)
        except NeoPermissionsError:
            raise
        except Exception as e:
            raise StoreError.from_exception(
                "add_role_assignment", e, resource.resource_id
            ) from e

    @staticmethod
    def _validate(
        resource: SecurableResource,
        principal: Principal,
        role_names: Sequence[str]
    ) -> None:
        if resource is None:
            raise InvalidArgumentError.required("resource")
        if principal is None:
            raise InvalidArgumentError.required("principal")
        if role_names is None:
            raise InvalidArgumentError.required("role_names")
        if isinstance(role_names, str):
            raise InvalidArgumentError(
                "role_names must be a sequence of role names, not a string",
                argument="role_names"
            )
        if not isinstance(role_names, SequenceABC):
            raise InvalidArgumentError(
                f"role_names must be a sequence, got {type(role_names).__name__}",
                argument="role_names"
            )
        if len(role_names) == 0:
            raise InvalidArgumentError("roles can not be empty", argument="role_names")
        for name in role_names:
            if not isinstance(name, str) or not name.strip():
                raise InvalidArgumentError(
                    f"Invalid role name: {name!r}",
                    argument="role_names"
                )


def grant_permissions(
    resource: SecurableResource,
    principal: Principal,
    role_names: Sequence[str],
    break_inheritance: bool,
    *,
    catalog: RoleCatalog
) -> GrantOutcome:
    """Grant roles to a principal on a resource in one call."""
    return PermissionGranter(catalog).grant(
        resource, principal, role_names, break_inheritance
    )
