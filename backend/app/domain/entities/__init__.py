from .account import (
    ACCESS_CONTENT,
    ADMINISTER_NODES,
    ALL_PERMISSIONS,
    ANONYMOUS_ACCOUNT_ID,
    BYPASS_NODE_ACCESS,
    CREATE_ARTICLE_CONTENT,
    DELETE_ANY_ARTICLE_CONTENT,
    EDIT_ANY_ARTICLE_CONTENT,
    EDIT_OWN_ARTICLE_CONTENT,
    Account,
)
from .article import ARTICLE_BUNDLE, ARTICLE_FIELDS, LANGCODE_FIELD, Article, FieldSnapshot

__all__ = [
    "ACCESS_CONTENT",
    "ADMINISTER_NODES",
    "ALL_PERMISSIONS",
    "ANONYMOUS_ACCOUNT_ID",
    "BYPASS_NODE_ACCESS",
    "CREATE_ARTICLE_CONTENT",
    "DELETE_ANY_ARTICLE_CONTENT",
    "EDIT_ANY_ARTICLE_CONTENT",
    "EDIT_OWN_ARTICLE_CONTENT",
    "Account",
    "ARTICLE_BUNDLE",
    "ARTICLE_FIELDS",
    "LANGCODE_FIELD",
    "Article",
    "FieldSnapshot",
]
