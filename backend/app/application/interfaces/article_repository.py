"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import Article


class ArticleRepository(ABC):
    """Port for the content entity store — implemented in the infrastructure layer.

    The store holds typed content records; callers filter by ``type``.
    """

    @abstractmethod
    async def count(self, bundle: str, *, published_only: bool = False) -> int:
        """Count records of the given type."""
        ...

    @abstractmethod
    async def query_ids(
        self,
        bundle: str,
        *,
        limit: int,
        offset: int = 0,
        published_only: bool = False,
    ) -> list[int]:
        """Return record IDs of the given type, newest first."""
        ...

    @abstractmethod
    async def load_multiple(self, ids: list[int]) -> list[Article]:
        """Load records by ID, preserving the order of ``ids``."""
        ...

    @abstractmethod
    async def load_by_properties(self, **properties: Any) -> list[Article]:
        """Load every record whose fields equal the given values."""
        ...

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Insert a new record (assigning id and uuid) or overwrite an existing one.

        Raises EntityStorageError on failure.
        """
        ...

    @abstractmethod
    async def delete(self, article: Article) -> None:
        """Remove a record. Raises EntityStorageError on failure."""
        ...
