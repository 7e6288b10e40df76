"""
Enums used across the application.
"""

from enum import Enum


class ComponentCategory(str, Enum):
    """
    Fixed set of component categories.

    Every component belongs to exactly one category, chosen at upload time.
    """

    BUTTONS = "buttons"
    CARDS = "cards"
    FORMS = "forms"
    NAVIGATION = "navigation"
    OTHER = "other"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class SortKey(str, Enum):
    """Ordering applied to component listings."""

    NEWEST = "newest"
    NAME = "name"
    POPULAR = "popular"
