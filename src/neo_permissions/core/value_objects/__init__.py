"""Permission value objects."""

from .base_permissions import BasePermissions
from .login_name import LoginName

__all__ = [
    "BasePermissions",
    "LoginName",
]
