"""Principal entities.

ONLY principals - users and groups that can be bound to role
definitions on a securable resource.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Union

from ..value_objects import LoginName


class PrincipalType(Enum):
    """Kind of principal."""
    USER = "user"
    GROUP = "group"


@dataclass(frozen=True)
class Principal:
    """A user or group identified by a unique login name.

    Group principals may list their direct members' login names, which
    in-memory stores use to compute effective permissions.
    """

    login_name: LoginName
    principal_type: PrincipalType = PrincipalType.USER
    members: FrozenSet[LoginName] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.principal_type == PrincipalType.USER and self.members:
            raise ValueError("User principals cannot have members")

    @property
    def is_user(self) -> bool:
        return self.principal_type == PrincipalType.USER

    @property
    def is_group(self) -> bool:
        return self.principal_type == PrincipalType.GROUP

    def has_member(self, login_name: Union[LoginName, str]) -> bool:
        """Check direct membership of a login name in this group."""
        if isinstance(login_name, str):
            login_name = LoginName(login_name)
        return login_name in self.members

    @classmethod
    def user(cls, login_name: str) -> 'Principal':
        """Create a user principal."""
        return cls(login_name=LoginName(login_name), principal_type=PrincipalType.USER)

    @classmethod
    def group(cls, login_name: str, members: tuple = ()) -> 'Principal':
        """Create a group principal with optional direct members."""
        return cls(
            login_name=LoginName(login_name),
            principal_type=PrincipalType.GROUP,
            members=frozenset(LoginName(member) for member in members)
        )

    def __str__(self) -> str:
        return f"{self.principal_type.value}:{self.login_name}"
