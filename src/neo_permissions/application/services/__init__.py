"""Permission application services."""

from .role_resolver import ResolvedRoles, RoleResolver
from .permission_inspector import EffectivePermissionInspector
from .permission_granter import GrantOutcome, PermissionGranter, grant_permissions

__all__ = [
    "ResolvedRoles",
    "RoleResolver",
    "EffectivePermissionInspector",
    "GrantOutcome",
    "PermissionGranter",
    "grant_permissions",
]
