from .article import ArticleListItem, ArticleListResponse, ArticlePayload, ArticleResponse

__all__ = [
    "ArticleListItem",
    "ArticleListResponse",
    "ArticlePayload",
    "ArticleResponse",
]
