"""In-memory permission store implementations."""

from .memory_role_catalog import InMemoryRoleCatalog
from .memory_securable_resource import InMemorySecurableResource

__all__ = [
    "InMemoryRoleCatalog",
    "InMemorySecurableResource",
]
