"""Abstract validator interface (port)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.domain.entities import Article


@dataclass(frozen=True)
class Violation:
    """A single failed constraint. ``field`` is empty for entity-level violations."""

    field: str
    message: str


class ArticleValidator(ABC):

    @abstractmethod
    def validate(self, article: Article) -> list[Violation]:
        """Check every constraint and return the violations found."""
        ...
