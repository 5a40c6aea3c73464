"""Infrastructure implementations of the permission store protocols."""

from .repositories import InMemoryRoleCatalog, InMemorySecurableResource

__all__ = [
    "InMemoryRoleCatalog",
    "InMemorySecurableResource",
]
