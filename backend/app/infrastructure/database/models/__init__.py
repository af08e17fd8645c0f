from .account import AccountModel
from .content import ContentModel

__all__ = [
    "AccountModel",
    "ContentModel",
]
