from .account_repository import SQLAlchemyAccountRepository
from .article_repository import SQLAlchemyArticleRepository

__all__ = [
    "SQLAlchemyAccountRepository",
    "SQLAlchemyArticleRepository",
]
