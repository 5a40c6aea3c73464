"""Role not found exception."""

from typing import Any, Dict, Optional

from .base import NeoPermissionsError


class RoleNotFoundError(NeoPermissionsError):
    """Raised when a role name does not resolve in a permission scope.

    Indicates a configuration mismatch between the caller and the scope's
    role-definition catalog rather than an infrastructure failure.
    """

    def __init__(
        self,
        role_name: str,
        scope_id: Optional[str] = None,
        *,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize role not found exception.

        Args:
            role_name: Role name that failed to resolve
            scope_id: Identifier of the scope that was searched
            details: Additional details for diagnostics
        """
        message = f"Role '{role_name}' not found"
        if scope_id:
            message += f" in scope '{scope_id}'"

        enhanced_details = details or {}
        enhanced_details["role_name"] = role_name
        enhanced_details["scope_id"] = scope_id

        super().__init__(
            message=message,
            error_code="ROLE_NOT_FOUND",
            details=enhanced_details
        )
        self.role_name = role_name
        self.scope_id = scope_id
