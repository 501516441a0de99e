from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

from furiousapi.orderby.constants import SORTING_DIRECTION_MAPPING, SortingDirection
from furiousapi.orderby.translator import TOption, iter_order_by_targets

if TYPE_CHECKING:
    from beanie.odm.enums import SortDirection

    from furiousapi.orderby.models import MappingDict


def convert_sort(
    query_source: Optional[str], mapping: Optional[MappingDict], *options: TOption, invert: bool = False
) -> Tuple[Tuple[str, SortDirection], ...]:
    """
    Converts a client directive into beanie sort pairs, ready for ``FindMany.sort(*pairs)``.

    ``invert`` flips every direction, which is what a backwards cursor page needs.
    """
    result = []
    for destination, ascending in iter_order_by_targets(query_source, mapping, *options):
        direction = SortingDirection.from_ascending(ascending)
        direction = invert and ~direction or direction
        result.append((destination, SORTING_DIRECTION_MAPPING[direction]))

    return tuple(result)
