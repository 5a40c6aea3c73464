"""Base permission flags value object.

ONLY base permissions - the elementary permission flags that role
definitions bundle and that effective-permission checks return.
"""

from enum import IntFlag
from typing import Iterable


class BasePermissions(IntFlag):
    """Elementary permission flags combined by bitwise union.

    Values follow the host platform's base permission mask layout so
    bitsets read from a real store can be wrapped without translation.
    """

    EMPTY_MASK = 0

    # List and document permissions
    VIEW_LIST_ITEMS = 0x1
    ADD_LIST_ITEMS = 0x2
    EDIT_LIST_ITEMS = 0x4
    DELETE_LIST_ITEMS = 0x8
    APPROVE_ITEMS = 0x10
    OPEN_ITEMS = 0x20
    VIEW_VERSIONS = 0x40
    DELETE_VERSIONS = 0x80
    CANCEL_CHECKOUT = 0x100
    MANAGE_PERSONAL_VIEWS = 0x200
    MANAGE_LISTS = 0x800
    VIEW_FORM_PAGES = 0x1000

    # Site permissions
    OPEN = 0x10000
    VIEW_PAGES = 0x20000
    ADD_AND_CUSTOMIZE_PAGES = 0x40000
    APPLY_THEME_AND_BORDER = 0x80000
    APPLY_STYLE_SHEETS = 0x100000
    VIEW_USAGE_DATA = 0x200000
    CREATE_SSC_SITE = 0x400000
    MANAGE_SUBWEBS = 0x800000
    CREATE_GROUPS = 0x1000000
    MANAGE_PERMISSIONS = 0x2000000
    BROWSE_DIRECTORIES = 0x4000000
    BROWSE_USER_INFO = 0x8000000
    ADD_DEL_PRIVATE_WEB_PARTS = 0x10000000
    UPDATE_PERSONAL_WEB_PARTS = 0x20000000
    MANAGE_WEB = 0x40000000
    USE_CLIENT_INTEGRATION = 0x1000000000
    USE_REMOTE_APIS = 0x2000000000
    MANAGE_ALERTS = 0x4000000000
    CREATE_ALERTS = 0x8000000000
    EDIT_MY_USER_INFO = 0x10000000000

    # Personal permissions
    ENUMERATE_PERMISSIONS = 0x4000000000000000

    FULL_MASK = 0x7FFFFFFFFFFFFFFF

    @classmethod
    def union(cls, permissions: Iterable['BasePermissions']) -> 'BasePermissions':
        """Combine permission sets by bitwise union."""
        result = cls.EMPTY_MASK
        for permission in permissions:
            result |= permission
        return result

    def contains(self, requested: 'BasePermissions') -> bool:
        """Check whether every flag in ``requested`` is present."""
        return (requested & self) == requested
