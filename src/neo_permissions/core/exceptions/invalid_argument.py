"""Invalid argument exception.

Raised when a grant is called with missing or malformed input.
"""

from typing import Any, Dict, Optional

from .base import NeoPermissionsError


class InvalidArgumentError(NeoPermissionsError, ValueError):
    """Raised when a caller passes a null, empty or malformed argument."""

    def __init__(
        self,
        message: str,
        *,
        argument: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        enhanced_details = details or {}
        if argument:
            enhanced_details["argument"] = argument

        super().__init__(
            message=message,
            error_code="INVALID_ARGUMENT",
            details=enhanced_details
        )
        self.argument = argument

    @classmethod
    def required(cls, argument: str) -> 'InvalidArgumentError':
        """Create exception for a missing required argument."""
        return cls(f"Argument '{argument}' is required", argument=argument)
