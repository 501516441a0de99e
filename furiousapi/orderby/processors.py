from __future__ import annotations

from typing import Callable, Mapping, Optional, Tuple

from furiousapi.orderby.constants import ASCENDING_SUFFIX, DESCENDING_SUFFIX, SortingDirection

SourceProcessor = Callable[[str], Tuple[str, bool]]
TargetProcessor = Callable[[str, bool], str]


def default_source_processor(source: str) -> Tuple[str, bool]:
    """
    Extracts the field name and ascending flag from ``field``, ``field asc`` or ``field desc``.

    The direction is case-insensitive, anything that is not ``desc`` is ascending
    and tokens after the direction are ignored.
    """
    tokens = source.split(" ")
    descending = len(tokens) >= 2 and tokens[1].strip().lower() == SortingDirection.DESCENDING.value  # noqa: PLR2004
    return tokens[0], not descending


def default_target_processor(destination: str, ascending: bool) -> str:  # noqa: FBT001
    return f"{destination} {ascending and ASCENDING_SUFFIX or DESCENDING_SUFFIX}"


def cypher_target_processor(variable: str, variables: Optional[Mapping[str, str]] = None) -> TargetProcessor:
    """
    Builds a target processor that qualifies every destination with a cypher variable,
    e.g. ``cypher_target_processor("n")`` renders ``n.firstname DESC``.

    :param variable: variable used for destinations missing from ``variables``.
    :param variables: per destination variable, for expressions that return several nodes,
        e.g. ``{"birthday": "u"}`` renders ``u.birthday ASC`` next to ``n.firstname ASC``.
    """
    variable = (variable or "").strip()
    variables = {k: (v or "").strip() for k, v in (variables or {}).items()}
    if not variable and not any(variables.values()):
        return default_target_processor

    def processor(destination: str, ascending: bool) -> str:  # noqa: FBT001
        if qualifier := variables.get(destination) or variable:
            destination = f"{qualifier}.{destination}"
        return default_target_processor(destination, ascending)

    return processor
