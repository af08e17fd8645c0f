"""Concrete content-store repository backed by SQLAlchemy."""

import logging
from datetime import timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ArticleRepository
from app.domain.entities import Article
from app.domain.exceptions import EntityStorageError
from app.infrastructure.database.models import ContentModel

logger = logging.getLogger(__name__)

_PROPERTY_COLUMNS = {
    "id": ContentModel.id,
    "uuid": ContentModel.uuid,
    "type": ContentModel.type,
    "langcode": ContentModel.langcode,
    "title": ContentModel.title,
    "status": ContentModel.status,
    "author_id": ContentModel.author_id,
}

_WRITABLE_FIELDS = ("type", "langcode", "title", "body", "status", "author_id", "created_at", "updated_at")


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ContentModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            uuid=model.uuid,
            type=model.type,
            langcode=model.langcode,
            title=model.title,
            body=model.body,
            status=model.status,
            author_id=model.author_id,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _filtered(self, stmt, bundle: str, published_only: bool):
        stmt = stmt.where(ContentModel.type == bundle)
        if published_only:
            stmt = stmt.where(ContentModel.status.is_(True))
        return stmt

    async def count(self, bundle: str, *, published_only: bool = False) -> int:
        stmt = self._filtered(select(func.count()).select_from(ContentModel), bundle, published_only)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def query_ids(
        self,
        bundle: str,
        *,
        limit: int,
        offset: int = 0,
        published_only: bool = False,
    ) -> list[int]:
        stmt = (
            self._filtered(select(ContentModel.id), bundle, published_only)
            .order_by(ContentModel.created_at.desc(), ContentModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def load_multiple(self, ids: list[int]) -> list[Article]:
        if not ids:
            return []
        stmt = select(ContentModel).where(ContentModel.id.in_(ids))
        result = await self._session.execute(stmt)
        by_id = {model.id: model for model in result.scalars().all()}
        return [self._to_entity(by_id[i]) for i in ids if i in by_id]

    async def load_by_properties(self, **properties: Any) -> list[Article]:
        stmt = select(ContentModel)
        for name, value in properties.items():
            column = _PROPERTY_COLUMNS.get(name)
            if column is None:
                raise ValueError(f"Cannot filter content by '{name}'")
            stmt = stmt.where(column == value)
        result = await self._session.execute(stmt.order_by(ContentModel.id))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def save(self, article: Article) -> Article:
        operation = "create" if article.is_new else "update"
        try:
            if article.is_new:
                model = ContentModel(uuid=str(uuid4()))
                self._session.add(model)
            else:
                model = await self._session.get(ContentModel, article.id)
                if model is None:
                    raise EntityStorageError(operation, article.type, article.id)
            for name in _WRITABLE_FIELDS:
                setattr(model, name, getattr(article, name))
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.error("Content %s failed for %s %s: %s", operation, article.type, article.id, exc)
            raise EntityStorageError(operation, article.type, article.id) from exc

        saved = self._to_entity(model)
        article.id = saved.id
        article.uuid = saved.uuid
        return saved

    async def delete(self, article: Article) -> None:
        try:
            model = await self._session.get(ContentModel, article.id)
            if model is None:
                return
            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            logger.error("Content delete failed for %s %s: %s", article.type, article.id, exc)
            raise EntityStorageError("delete", article.type, article.id) from exc


def _as_utc(value):
    """SQLite drops tzinfo; stored values are always UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
