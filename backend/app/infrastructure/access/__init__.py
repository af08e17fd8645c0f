from .permission_access_control import (
    ADMIN_FIELDS,
    READ_ONLY_FIELDS,
    PermissionAccessControlHandler,
)

__all__ = ["ADMIN_FIELDS", "READ_ONLY_FIELDS", "PermissionAccessControlHandler"]
