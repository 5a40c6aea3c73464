"""Collaborator protocols for the permission store."""

from .role_catalog import RoleCatalog
from .securable_resource import SecurableResource

__all__ = [
    "RoleCatalog",
    "SecurableResource",
]
