"""Constraint checks for articles."""

import re

from app.application.interfaces import ArticleValidator, Violation
from app.domain.entities import ARTICLE_BUNDLE, Article

TITLE_MAX_LENGTH = 255
LANGCODE_MAX_LENGTH = 12

_LANGCODE_PATTERN = re.compile(r"^[a-z]{2,3}(-[a-z0-9]{2,8})*$", re.IGNORECASE)


class ArticleConstraintValidator(ArticleValidator):
    """Validates an article against its field constraints."""

    def validate(self, article: Article) -> list[Violation]:
        violations: list[Violation] = []

        if article.title is None or not article.title.strip():
            violations.append(Violation("title", "This value should not be null."))
        elif len(article.title) > TITLE_MAX_LENGTH:
            violations.append(
                Violation("title", f"This value is too long. It should have {TITLE_MAX_LENGTH} characters or less.")
            )

        langcode = article.langcode or ""
        if not langcode:
            violations.append(Violation("langcode", "This value should not be null."))
        elif len(langcode) > LANGCODE_MAX_LENGTH or not _LANGCODE_PATTERN.match(langcode):
            violations.append(Violation("langcode", f"'{langcode}' is not a valid language code."))

        for name in ("status", "created_at"):
            if getattr(article, name) is None:
                violations.append(Violation(name, "This value should not be null."))

        if article.type != ARTICLE_BUNDLE:
            violations.append(Violation("type", f"The content type must be '{ARTICLE_BUNDLE}'."))

        return violations
