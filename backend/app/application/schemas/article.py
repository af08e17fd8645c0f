"""Pydantic DTOs (Data Transfer Objects) for the article resource."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.entities import ARTICLE_FIELDS


class ArticlePayload(BaseModel):
    """Request body for POST and PATCH.

    Every field is optional; the keys the client actually sent are the
    submitted fields. Only those are applied on PATCH.
    """

    model_config = ConfigDict(extra="forbid")

    id: int | None = None
    uuid: str | None = None
    type: str | None = Field(None, examples=["article"])
    langcode: str | None = Field(None, examples=["en"])
    title: str | None = Field(None, examples=["Getting Started"])
    body: str | None = None
    status: bool | None = None
    author_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def submitted_fields(self) -> list[str]:
        """Names of the fields present in the request, in declaration order."""
        return [name for name in ARTICLE_FIELDS if name in self.model_fields_set]

    def submitted_values(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.submitted_fields()}


class ArticleResponse(BaseModel):
    """Full article returned by POST and PATCH."""

    id: int
    uuid: str
    type: str
    langcode: str
    title: str | None
    body: str | None
    status: bool
    author_id: int | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ArticleListItem(BaseModel):
    uuid: str
    label: str
    created: str = Field(..., examples=["2026-01-31 09:15"])


class ArticleListResponse(BaseModel):
    items: list[ArticleListItem]
