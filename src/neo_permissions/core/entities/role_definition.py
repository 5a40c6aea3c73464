"""Role definition entity."""

from dataclasses import dataclass
from typing import Optional

from ..value_objects import BasePermissions


@dataclass(frozen=True)
class RoleDefinition:
    """Named permission template with its base-permission bitset.

    Examples: "Read", "Contribute", "Full Control".
    """

    name: str
    base_permissions: BasePermissions = BasePermissions.EMPTY_MASK
    description: Optional[str] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Role definition name cannot be empty")
