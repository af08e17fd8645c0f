"""Abstract access-control interface (port)."""

from abc import ABC, abstractmethod

from app.domain.access import AccessResult
from app.domain.entities import Account, Article


class AccessControlHandler(ABC):
    """Answers view/create/update/delete questions for articles and their fields."""

    @abstractmethod
    def entity_access(
        self, operation: str, account: Account, article: Article | None = None
    ) -> AccessResult:
        """Decide an entity-level operation.

        For 'create' the article is the unsaved candidate, or None when only
        the bundle matters.
        """
        ...

    @abstractmethod
    def field_access(
        self, operation: str, field_name: str, account: Account, article: Article | None = None
    ) -> AccessResult:
        """Decide 'view' or 'edit' on a single field."""
        ...
