"""Permission-based access control for articles and their fields."""

from app.application.interfaces import AccessControlHandler
from app.domain.access import AccessResult
from app.domain.entities import (
    ACCESS_CONTENT,
    ADMINISTER_NODES,
    BYPASS_NODE_ACCESS,
    CREATE_ARTICLE_CONTENT,
    DELETE_ANY_ARTICLE_CONTENT,
    EDIT_ANY_ARTICLE_CONTENT,
    EDIT_OWN_ARTICLE_CONTENT,
    Account,
    Article,
)

# Maintained by the store; nobody edits these.
READ_ONLY_FIELDS = frozenset({"id", "uuid", "updated_at"})

# Publishing and authorship metadata.
ADMIN_FIELDS = frozenset({"status", "author_id", "created_at"})


class PermissionAccessControlHandler(AccessControlHandler):
    """Decides access from the permission names an account holds."""

    def entity_access(
        self, operation: str, account: Account, article: Article | None = None
    ) -> AccessResult:
        if account.has_permission(BYPASS_NODE_ACCESS):
            return AccessResult.allow()

        if operation == "view":
            return self._view_access(account, article)
        if operation == "create":
            return AccessResult.allow_if_has_permission(account, CREATE_ARTICLE_CONTENT)
        if operation == "update":
            if account.has_permission(EDIT_ANY_ARTICLE_CONTENT):
                return AccessResult.allow()
            if _is_author(account, article):
                return AccessResult.allow_if_has_permission(account, EDIT_OWN_ARTICLE_CONTENT)
            return AccessResult.forbid(f"The '{EDIT_ANY_ARTICLE_CONTENT}' permission is required.")
        if operation == "delete":
            return AccessResult.allow_if_has_permission(account, DELETE_ANY_ARTICLE_CONTENT)

        return AccessResult.forbid(f"Unknown operation '{operation}'.")

    def field_access(
        self, operation: str, field_name: str, account: Account, article: Article | None = None
    ) -> AccessResult:
        if operation == "view":
            return self._view_access(account, article)
        if operation != "edit":
            return AccessResult.forbid(f"Unknown field operation '{operation}'.")

        if field_name in READ_ONLY_FIELDS:
            return AccessResult.forbid(f"The '{field_name}' field is read-only.")

        # Editing a field requires being able to write the entity itself.
        entity_operation = "create" if article is None or article.is_new else "update"
        entity_access = self.entity_access(entity_operation, account, article)
        if not entity_access.allowed:
            return entity_access

        if account.has_permission(BYPASS_NODE_ACCESS):
            return AccessResult.allow()
        if field_name in ADMIN_FIELDS:
            return AccessResult.allow_if_has_permission(account, ADMINISTER_NODES)
        return AccessResult.allow()

    def _view_access(self, account: Account, article: Article | None) -> AccessResult:
        if account.has_permission(BYPASS_NODE_ACCESS):
            return AccessResult.allow()
        access = AccessResult.allow_if_has_permission(account, ACCESS_CONTENT)
        if not access.allowed or article is None or article.status:
            return access
        if _is_author(account, article) or account.has_permission(ADMINISTER_NODES):
            return AccessResult.allow()
        return AccessResult.forbid("The article is not published.")


def _is_author(account: Account, article: Article | None) -> bool:
    return (
        article is not None
        and not account.is_anonymous
        and article.author_id == account.id
    )
