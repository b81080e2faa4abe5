from __future__ import annotations

from enum import IntEnum, unique
from typing import Dict


@unique
class EventCode(IntEnum):
    """Integer discriminators consumers route and deserialize on.

    Append-only: once a value is published it must never be bound to a
    different kind.
    """

    # Menus
    MENU_CREATED = 101
    MENU_UPDATED = 102
    MENU_DELETED = 103

    # Categories
    CATEGORY_CREATED = 201
    CATEGORY_UPDATED = 202
    CATEGORY_DELETED = 203

    # Menu items
    MENU_ITEM_CREATED = 301
    MENU_ITEM_UPDATED = 302
    MENU_ITEM_DELETED = 303

    # Generic
    NOTIFY = 123
    GENERAL_EXCEPTION = 999999


def describe_codes() -> Dict[str, int]:
    """Return the name -> value table, in declaration order."""
    return {code.name: int(code) for code in EventCode}
