"""Field-level access decisions for writes to an article.

Pure functions over field snapshots and a capability query, independent of
transport and storage so they can be tested on their own.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from app.domain.access import AccessResult
from app.domain.entities import FieldSnapshot


class FieldCapabilities(Protocol):
    """What the current caller may do with the fields of one article."""

    def can_view(self, field_name: str) -> bool: ...

    def edit_access(self, field_name: str) -> AccessResult: ...


class FieldAccessOutcome(str, Enum):
    APPLY = "apply"
    SKIP = "skip"
    DENY = "deny"


@dataclass(frozen=True)
class FieldAccessDecision:
    outcome: FieldAccessOutcome
    message: str | None = None

    @property
    def should_apply(self) -> bool:
        return self.outcome is FieldAccessOutcome.APPLY

    @property
    def denied(self) -> bool:
        return self.outcome is FieldAccessOutcome.DENY


_APPLY = FieldAccessDecision(FieldAccessOutcome.APPLY)
_SKIP = FieldAccessDecision(FieldAccessOutcome.SKIP)


def check_patch_field_access(
    stored: FieldSnapshot,
    received: FieldSnapshot,
    capabilities: FieldCapabilities,
) -> FieldAccessDecision:
    """Decide whether a received field value should overwrite the stored one.

    Clients may resubmit the current value of a field they cannot edit
    (entity keys, for instance), so an unchanged value is skipped. That
    shortcut only applies to fields the caller can view: otherwise the
    difference between a 403 and a 200 would reveal the stored value.
    """
    if capabilities.can_view(stored.name) and stored.equals(received):
        return _SKIP

    edit_access = capabilities.edit_access(stored.name)
    if edit_access.allowed:
        return _APPLY

    return _deny("updating", received.name, edit_access)


def check_create_field_access(
    received: FieldSnapshot,
    capabilities: FieldCapabilities,
) -> FieldAccessDecision:
    """Decide whether a field submitted on creation may be set by the caller."""
    edit_access = capabilities.edit_access(received.name)
    if edit_access.allowed:
        return _APPLY
    return _deny("creating", received.name, edit_access)


def _deny(verb: str, field_name: str, access: AccessResult) -> FieldAccessDecision:
    message = f"Access denied on {verb} field '{field_name}'."
    if access.reason:
        message += f" {access.reason}"
    return FieldAccessDecision(FieldAccessOutcome.DENY, message)
