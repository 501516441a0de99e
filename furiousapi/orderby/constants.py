from __future__ import annotations

from enum import Enum
from typing import Dict

from beanie.odm.enums import SortDirection

DEFAULT_SOURCE_SEPARATOR = ","
DEFAULT_TARGET_SEPARATOR = ", "

ASCENDING_SUFFIX = "ASC"
DESCENDING_SUFFIX = "DESC"


class SortingDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"

    def __invert__(self) -> SortingDirection:
        if self is SortingDirection.ASCENDING:
            return SortingDirection.DESCENDING
        return SortingDirection.ASCENDING

    @classmethod
    def from_ascending(cls, ascending: bool) -> SortingDirection:  # noqa: FBT001
        return ascending and cls.ASCENDING or cls.DESCENDING


SORTING_DIRECTION_MAPPING: Dict[SortingDirection, SortDirection] = {
    SortingDirection.ASCENDING: SortDirection.ASCENDING,
    SortingDirection.DESCENDING: SortDirection.DESCENDING,
}
