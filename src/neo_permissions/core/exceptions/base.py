"""Base exceptions for neo-permissions.

All exceptions inherit from NeoPermissionsError and carry an error code
and structured details for diagnostics.
"""

from typing import Any, Dict, Optional


class NeoPermissionsError(Exception):
    """Base exception for all neo-permissions errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Create a standardized error payload."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "type": self.__class__.__name__,
            }
        }
