"""Domain entity — the acting caller and the permission names it can hold."""

from dataclasses import dataclass, field

ANONYMOUS_ACCOUNT_ID = 0

ACCESS_CONTENT = "access content"
CREATE_ARTICLE_CONTENT = "create article content"
EDIT_ANY_ARTICLE_CONTENT = "edit any article content"
EDIT_OWN_ARTICLE_CONTENT = "edit own article content"
DELETE_ANY_ARTICLE_CONTENT = "delete any article content"
ADMINISTER_NODES = "administer nodes"
BYPASS_NODE_ACCESS = "bypass node access"

ALL_PERMISSIONS: frozenset[str] = frozenset({
    ACCESS_CONTENT,
    CREATE_ARTICLE_CONTENT,
    EDIT_ANY_ARTICLE_CONTENT,
    EDIT_OWN_ARTICLE_CONTENT,
    DELETE_ANY_ARTICLE_CONTENT,
    ADMINISTER_NODES,
    BYPASS_NODE_ACCESS,
})


@dataclass(frozen=True)
class Account:
    """Caller identity supplied per request. Never persisted by the article resource."""

    id: int
    name: str
    permissions: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_anonymous(self) -> bool:
        return self.id == ANONYMOUS_ACCOUNT_ID

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions

    @classmethod
    def anonymous(cls, permissions: frozenset[str] | set[str] | list[str] = ()) -> "Account":
        return cls(id=ANONYMOUS_ACCOUNT_ID, name="anonymous", permissions=frozenset(permissions))
