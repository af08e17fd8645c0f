"""Unit tests for the permission-based access-control handler."""

from app.domain.entities import (
    ACCESS_CONTENT,
    ADMINISTER_NODES,
    CREATE_ARTICLE_CONTENT,
    DELETE_ANY_ARTICLE_CONTENT,
    EDIT_OWN_ARTICLE_CONTENT,
    Account,
    Article,
)
from app.infrastructure.access import PermissionAccessControlHandler

handler = PermissionAccessControlHandler()


def _account(*permissions: str, account_id: int = 5) -> Account:
    return Account(id=account_id, name="someone", permissions=frozenset(permissions))


def test_create_requires_permission_and_explains_denial():
    assert handler.entity_access("create", _account(CREATE_ARTICLE_CONTENT)).allowed

    denied = handler.entity_access("create", _account(ACCESS_CONTENT))
    assert not denied.allowed
    assert denied.reason == "The 'create article content' permission is required."


def test_update_own_article_with_edit_own_permission():
    account = _account(EDIT_OWN_ARTICLE_CONTENT)
    own = Article(title="Mine", id=1, author_id=5)
    other = Article(title="Theirs", id=2, author_id=6)

    assert handler.entity_access("update", account, own).allowed
    assert not handler.entity_access("update", account, other).allowed


def test_unpublished_article_visible_to_author_only():
    article = Article(title="Draft", id=1, author_id=5, status=False)

    assert handler.field_access("view", "title", _account(ACCESS_CONTENT), article).allowed
    assert not handler.field_access(
        "view", "title", _account(ACCESS_CONTENT, account_id=6), article
    ).allowed
    assert handler.field_access(
        "view", "title", _account(ACCESS_CONTENT, ADMINISTER_NODES, account_id=6), article
    ).allowed


def test_read_only_fields_cannot_be_edited_by_anyone():
    account = _account(CREATE_ARTICLE_CONTENT, ADMINISTER_NODES)
    result = handler.field_access("edit", "uuid", account, Article(title="New"))
    assert not result.allowed
    assert result.reason == "The 'uuid' field is read-only."


def test_admin_fields_need_administer_nodes():
    article = Article(title="New")
    creator = _account(CREATE_ARTICLE_CONTENT)

    assert handler.field_access("edit", "title", creator, article).allowed
    result = handler.field_access("edit", "status", creator, article)
    assert not result.allowed
    assert result.reason == "The 'administer nodes' permission is required."
    assert handler.field_access(
        "edit", "status", _account(CREATE_ARTICLE_CONTENT, ADMINISTER_NODES), article
    ).allowed


def test_field_edit_requires_entity_update_access():
    stored = Article(title="Stored", id=1, author_id=9)
    result = handler.field_access("edit", "title", _account(ACCESS_CONTENT), stored)
    assert not result.allowed
    assert result.reason == "The 'edit any article content' permission is required."


def test_delete_requires_delete_any_even_for_the_author():
    own = Article(title="Mine", id=1, author_id=5)

    assert handler.entity_access("delete", _account(DELETE_ANY_ARTICLE_CONTENT), own).allowed
    denied = handler.entity_access("delete", _account(ACCESS_CONTENT, EDIT_OWN_ARTICLE_CONTENT), own)
    assert not denied.allowed
    assert denied.reason == "The 'delete any article content' permission is required."
