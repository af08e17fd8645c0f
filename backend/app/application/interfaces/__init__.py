from .access_control import AccessControlHandler
from .account_repository import AccountRepository
from .article_repository import ArticleRepository
from .article_validator import ArticleValidator, Violation

__all__ = [
    "AccessControlHandler",
    "AccountRepository",
    "ArticleRepository",
    "ArticleValidator",
    "Violation",
]
