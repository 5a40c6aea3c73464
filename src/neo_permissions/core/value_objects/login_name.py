"""Login name value object.

ONLY login name - the unique identifier of a user or group, compared
case-insensitively the way the host directory compares accounts.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoginName:
    """Principal login name value object.

    Immutable and hashable; equality ignores case so that
    ``LoginName("DOMAIN\\Alice") == LoginName("domain\\alice")``.
    """

    value: str

    def __post_init__(self):
        """Validate login name."""
        if not isinstance(self.value, str):
            raise ValueError(f"LoginName must be a string, got {type(self.value).__name__}")
        if not self.value.strip():
            raise ValueError("LoginName cannot be empty")

    @property
    def normalized(self) -> str:
        """Case-folded form used for comparison."""
        return self.value.casefold()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LoginName):
            return self.normalized == other.normalized
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"LoginName('{self.value}')"
