"""Role resolver service.

ONLY role resolution - turns role names into role definitions and their
aggregate base permissions for one permission scope.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ...core.entities import RoleDefinition
from ...core.exceptions import RoleNotFoundError
from ...core.protocols import RoleCatalog
from ...core.value_objects import BasePermissions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedRoles:
    """Role definitions resolved for a grant, in request order."""

    definitions: List[RoleDefinition]
    base_permissions: BasePermissions

    @property
    def names(self) -> List[str]:
        return [role.name for role in self.definitions]


class RoleResolver:
    """Resolves role names against a role catalog."""

    def __init__(self, catalog: RoleCatalog):
        self._catalog = catalog

    def resolve(self, scope_id: str, role_names: Sequence[str]) -> ResolvedRoles:
        """Resolve every name, failing on the first one that is missing.

        Names that resolve to an already collected definition are bound
        once.

        Raises:
            RoleNotFoundError: If a name does not resolve in the scope
        """
        definitions: List[RoleDefinition] = []
        seen = set()
        permissions = BasePermissions.EMPTY_MASK

        for name in role_names:
            role = self._catalog.lookup(scope_id, name)
            if role is None:
                logger.debug(f"Role '{name}' not found in scope {scope_id}")
                raise RoleNotFoundError(name, scope_id)

            permissions |= role.base_permissions
            key = role.name.casefold()
            if key not in seen:
                seen.add(key)
                definitions.append(role)

        return ResolvedRoles(definitions=definitions, base_permissions=permissions)
