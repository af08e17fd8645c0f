"""Domain entity — the article content record, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

ARTICLE_BUNDLE = "article"

# Public field names, in serialization order.
ARTICLE_FIELDS: tuple[str, ...] = (
    "id",
    "uuid",
    "type",
    "langcode",
    "title",
    "body",
    "status",
    "author_id",
    "created_at",
    "updated_at",
)

LANGCODE_FIELD = "langcode"


@dataclass(frozen=True)
class FieldSnapshot:
    """The value of one named field at a point in time."""

    name: str
    value: Any

    def is_empty(self) -> bool:
        return self.value is None or self.value == ""

    def equals(self, other: "FieldSnapshot") -> bool:
        return self.value == other.value


@dataclass
class Article:
    """A content record of type 'article'.

    ``id`` and ``uuid`` are assigned by the entity store on first save;
    an article without an ``id`` is new.
    """

    title: str | None = None
    body: str | None = None
    type: str = ARTICLE_BUNDLE
    langcode: str = "en"
    status: bool = True
    author_id: int | None = None
    id: int | None = None
    uuid: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def label(self) -> str:
        return self.title or ""

    def field(self, name: str) -> FieldSnapshot:
        """Return a snapshot of the named field."""
        if name not in ARTICLE_FIELDS:
            raise KeyError(f"Unknown article field '{name}'")
        return FieldSnapshot(name=name, value=getattr(self, name))

    def set(self, name: str, value: Any) -> None:
        if name not in ARTICLE_FIELDS:
            raise KeyError(f"Unknown article field '{name}'")
        setattr(self, name, value)

    def touch(self) -> None:
        """Refresh the updated_at timestamp."""
        self.updated_at = datetime.now(timezone.utc)
