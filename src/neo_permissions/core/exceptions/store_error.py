"""Permission store failure exception."""

from typing import Any, Dict, Optional

from .base import NeoPermissionsError


class StoreError(NeoPermissionsError):
    """Raised when the underlying permission store fails.

    Wraps collaborator failures during inheritance breaking or assignment
    commit. The original exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        enhanced_details = details or {}
        if operation:
            enhanced_details["operation"] = operation
        if resource_id:
            enhanced_details["resource_id"] = resource_id

        super().__init__(
            message=message,
            error_code="STORE_ERROR",
            details=enhanced_details
        )
        self.operation = operation
        self.resource_id = resource_id

    @classmethod
    def from_exception(
        cls,
        operation: str,
        error: Exception,
        resource_id: Optional[str] = None
    ) -> 'StoreError':
        """Create a store error describing a failed collaborator call."""
        return cls(
            f"Permission store failed during {operation}: {error}",
            operation=operation,
            resource_id=resource_id,
            details={"error_type": type(error).__name__}
        )
