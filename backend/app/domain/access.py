"""Access decisions returned by the access-control port."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.entities import Account


@dataclass(frozen=True)
class AccessResult:
    """A yes/no access decision, optionally explaining a denial."""

    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> "AccessResult":
        return cls(allowed=True)

    @classmethod
    def forbid(cls, reason: str | None = None) -> "AccessResult":
        return cls(allowed=False, reason=reason)

    @classmethod
    def allow_if_has_permission(cls, account: "Account", permission: str) -> "AccessResult":
        if account.has_permission(permission):
            return cls.allow()
        return cls.forbid(f"The '{permission}' permission is required.")
