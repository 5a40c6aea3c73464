"""Neo-Permissions - idempotent role grants on securable resources.

Grants named roles to users and groups on sites, lists and list items
inside a permission-inheritance hierarchy, breaking inheritance only when
a grant is actually needed.
"""

from .__version__ import __version__

from .config import PermissionSettings, get_settings, setup_logging

from .core.exceptions import (
    NeoPermissionsError,
    InvalidArgumentError,
    RoleNotFoundError,
    StoreError,
)

from .core.value_objects import BasePermissions, LoginName
from .core.entities import Principal, PrincipalType, RoleDefinition, RoleAssignment
from .core.protocols import RoleCatalog, SecurableResource

from .application.services import (
    EffectivePermissionInspector,
    GrantOutcome,
    PermissionGranter,
    ResolvedRoles,
    RoleResolver,
    grant_permissions,
)

from .infrastructure import InMemoryRoleCatalog, InMemorySecurableResource

__all__ = [
    "__version__",

    # Configuration
    "PermissionSettings",
    "get_settings",
    "setup_logging",

    # Exceptions
    "NeoPermissionsError",
    "InvalidArgumentError",
    "RoleNotFoundError",
    "StoreError",

    # Domain
    "BasePermissions",
    "LoginName",
    "Principal",
    "PrincipalType",
    "RoleDefinition",
    "RoleAssignment",
    "RoleCatalog",
    "SecurableResource",

    # Services
    "EffectivePermissionInspector",
    "GrantOutcome",
    "PermissionGranter",
    "ResolvedRoles",
    "RoleResolver",
    "grant_permissions",

    # In-memory store
    "InMemoryRoleCatalog",
    "InMemorySecurableResource",
]
