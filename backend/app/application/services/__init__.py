from .article_resource_service import (
    ArticleResourceService,
    ClientAddressPolicy,
    format_created,
    lenient_int,
    resolve_pager,
)
from .article_validator import ArticleConstraintValidator
from .field_access import (
    FieldAccessDecision,
    FieldAccessOutcome,
    FieldCapabilities,
    check_create_field_access,
    check_patch_field_access,
)

__all__ = [
    "ArticleResourceService",
    "ClientAddressPolicy",
    "format_created",
    "lenient_int",
    "resolve_pager",
    "ArticleConstraintValidator",
    "FieldAccessDecision",
    "FieldAccessOutcome",
    "FieldCapabilities",
    "check_create_field_access",
    "check_patch_field_access",
]
