"""Shared fakes and fixtures for the article resource tests."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

import pytest

from app.application.interfaces import AccountRepository, ArticleRepository, ArticleValidator, Violation
from app.application.services import ArticleConstraintValidator, ArticleResourceService
from app.domain.entities import (
    ACCESS_CONTENT,
    ALL_PERMISSIONS,
    CREATE_ARTICLE_CONTENT,
    DELETE_ANY_ARTICLE_CONTENT,
    EDIT_ANY_ARTICLE_CONTENT,
    Account,
    Article,
)
from app.domain.exceptions import EntityStorageError
from app.infrastructure.access import PermissionAccessControlHandler


class FakeArticleRepository(ArticleRepository):
    """In-memory content store. Loads return copies, as a real store would."""

    def __init__(self):
        self._records: dict[int, Article] = {}
        self._next_id = 1
        self.save_calls = 0
        self.delete_calls = 0
        self.fail_writes = False

    def add(self, article: Article) -> Article:
        """Store a record directly, bypassing save() bookkeeping."""
        article.id = self._next_id
        article.uuid = article.uuid or str(uuid4())
        self._next_id += 1
        self._records[article.id] = replace(article)
        return replace(article)

    def _matching(self, bundle: str, published_only: bool) -> list[Article]:
        return [
            a for a in self._records.values()
            if a.type == bundle and (a.status or not published_only)
        ]

    async def count(self, bundle: str, *, published_only: bool = False) -> int:
        return len(self._matching(bundle, published_only))

    async def query_ids(
        self,
        bundle: str,
        *,
        limit: int,
        offset: int = 0,
        published_only: bool = False,
    ) -> list[int]:
        ordered = sorted(
            self._matching(bundle, published_only),
            key=lambda a: (a.created_at, a.id),
            reverse=True,
        )
        return [a.id for a in ordered[offset : offset + limit]]

    async def load_multiple(self, ids: list[int]) -> list[Article]:
        return [replace(self._records[i]) for i in ids if i in self._records]

    async def load_by_properties(self, **properties: Any) -> list[Article]:
        return [
            replace(a) for a in self._records.values()
            if all(getattr(a, name) == value for name, value in properties.items())
        ]

    async def save(self, article: Article) -> Article:
        self.save_calls += 1
        if self.fail_writes:
            raise EntityStorageError("save", article.type, article.id)
        if article.is_new:
            article.id = self._next_id
            article.uuid = str(uuid4())
            self._next_id += 1
        self._records[article.id] = replace(article)
        return replace(article)

    async def delete(self, article: Article) -> None:
        self.delete_calls += 1
        if self.fail_writes:
            raise EntityStorageError("delete", article.type, article.id)
        self._records.pop(article.id, None)


class FakeAccountRepository(AccountRepository):

    def __init__(self):
        self._by_token: dict[str, Account] = {}
        self._next_id = 1

    async def get_by_token(self, api_token: str) -> Account | None:
        return self._by_token.get(api_token)

    async def get_by_name(self, name: str) -> Account | None:
        return next((a for a in self._by_token.values() if a.name == name), None)

    async def create(self, account: Account, api_token: str) -> Account:
        stored = replace(account, id=self._next_id)
        self._next_id += 1
        self._by_token[api_token] = stored
        return stored


class SpyValidator(ArticleValidator):
    """Delegates to the real constraints and counts calls."""

    def __init__(self):
        self._inner = ArticleConstraintValidator()
        self.calls = 0

    def validate(self, article: Article) -> list[Violation]:
        self.calls += 1
        return self._inner.validate(article)


def make_article(title: str = "Stored", minutes_ago: int = 0, **overrides: Any) -> Article:
    created = datetime(2020, 3, 1, 12, 0, tzinfo=timezone.utc) - timedelta(minutes=minutes_ago)
    values = {"title": title, "body": "Body", "author_id": 1, "created_at": created, "updated_at": created}
    values.update(overrides)
    return Article(**values)


@pytest.fixture
def article_repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def account_repository() -> FakeAccountRepository:
    return FakeAccountRepository()


@pytest.fixture
def validator() -> SpyValidator:
    return SpyValidator()


@pytest.fixture
def service(article_repository: FakeArticleRepository, validator: SpyValidator) -> ArticleResourceService:
    return ArticleResourceService(
        article_repository,
        PermissionAccessControlHandler(),
        validator,
    )


@pytest.fixture
def viewer() -> Account:
    return Account(id=2, name="viewer", permissions=frozenset({ACCESS_CONTENT}))


@pytest.fixture
def editor() -> Account:
    return Account(
        id=3,
        name="editor",
        permissions=frozenset({
            ACCESS_CONTENT,
            CREATE_ARTICLE_CONTENT,
            EDIT_ANY_ARTICLE_CONTENT,
            DELETE_ANY_ARTICLE_CONTENT,
        }),
    )


@pytest.fixture
def admin() -> Account:
    return Account(id=1, name="admin", permissions=ALL_PERMISSIONS)


@pytest.fixture
def stored_article(article_repository: FakeArticleRepository):
    """Factory that puts an article straight into the fake store."""

    def _store(title: str = "Stored", minutes_ago: int = 0, **overrides: Any) -> Article:
        return article_repository.add(make_article(title, minutes_ago, **overrides))

    return _store
