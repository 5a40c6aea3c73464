"""Permission domain exceptions.

Each exception handles exactly one failure category: bad input,
configuration mismatch, or infrastructure failure.
"""

from .base import NeoPermissionsError
from .invalid_argument import InvalidArgumentError
from .role_not_found import RoleNotFoundError
from .store_error import StoreError

__all__ = [
    "NeoPermissionsError",
    "InvalidArgumentError",
    "RoleNotFoundError",
    "StoreError",
]
