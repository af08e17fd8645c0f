"""Unit tests for the article constraint validator."""

from app.application.services import ArticleConstraintValidator
from app.domain.entities import Article


def _fields(article: Article) -> set[str]:
    return {v.field for v in ArticleConstraintValidator().validate(article)}


def test_valid_article_has_no_violations():
    assert _fields(Article(title="Hello", langcode="pt-br")) == set()


def test_blank_title_is_rejected():
    assert _fields(Article(title="   ")) == {"title"}
    assert _fields(Article(title=None)) == {"title"}


def test_overlong_title_is_rejected():
    assert _fields(Article(title="x" * 256)) == {"title"}


def test_langcode_must_be_a_language_tag():
    assert _fields(Article(title="Hello", langcode="")) == {"langcode"}
    assert _fields(Article(title="Hello", langcode="not a code")) == {"langcode"}
    assert _fields(Article(title="Hello", langcode="und")) == set()


def test_other_bundles_are_rejected():
    assert _fields(Article(title="Hello", type="page")) == {"type"}


def test_status_and_created_at_cannot_be_null():
    assert _fields(Article(title="Hello", status=None, created_at=None)) == {"status", "created_at"}
