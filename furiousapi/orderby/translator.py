from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional, Tuple, Union

from furiousapi.orderby.config import OrderByOption, TranslationConfig, build_translation_config
from furiousapi.orderby.models import MappingDict

logger = logging.getLogger(__name__)

TOption = Union[OrderByOption, TranslationConfig, None]


def _split_sources(query_source: str, separator: str) -> List[str]:
    # an empty separator splits between every character
    if not separator:
        return list(query_source)
    return query_source.split(separator)


def _parse(query_source: str, config: TranslationConfig) -> Iterator[Tuple[str, bool]]:
    for source in _split_sources(query_source, config.source_separator):
        source = source.strip()  # noqa: PLW2901
        if not source:
            continue

        yield config.source_processor(source)


def parse_order_by(query_source: Optional[str], *options: TOption) -> List[Tuple[str, bool]]:
    """
    Splits a client directive into ``(field, ascending)`` pairs without resolving them against a dictionary.

    >>> parse_order_by("username desc, age")
    [('username', False), ('age', True)]
    """
    query_source = (query_source or "").strip()
    if not query_source:
        return []

    return list(_parse(query_source, build_translation_config(*options)))


def _iter_targets(
    query_source: Optional[str], mapping: Optional[MappingDict], config: TranslationConfig
) -> Iterator[Tuple[str, bool]]:
    query_source = (query_source or "").strip()
    if not query_source or not mapping:
        return

    for field, ascending in _parse(query_source, config):
        rule = mapping.get(field)
        if rule is None or rule.is_empty:
            logger.debug(f"order by field {field!r} is not orderable, skipping", extra={"field": field})
            continue

        resolved = not ascending if rule.reverse else ascending
        for destination in rule.destinations:
            yield destination, resolved


def iter_order_by_targets(
    query_source: Optional[str], mapping: Optional[MappingDict], *options: TOption
) -> Iterator[Tuple[str, bool]]:
    """
    Yields ``(destination, ascending)`` for every orderable field in the directive,
    with the rule's reverse flag already applied.
    """
    return _iter_targets(query_source, mapping, build_translation_config(*options))


def _render(query_source: Optional[str], mapping: Optional[MappingDict], config: TranslationConfig) -> str:
    targets = []
    for destination, ascending in _iter_targets(query_source, mapping, config):
        target = (config.target_processor(destination, ascending) or "").strip()
        if target:
            targets.append(target)

    result = config.target_separator.join(targets)
    logger.debug("generated order by expression", extra={"source": query_source, "order_by": result})
    return result


def generate_order_by_expr(query_source: Optional[str], mapping: Optional[MappingDict], *options: TOption) -> str:
    """
    Generates an order-by expression from a client directive such as ``"name desc, age asc"``.

    Fields missing from ``mapping`` (or mapped to a rule without destinations) are dropped,
    so the result only ever contains destinations the caller whitelisted. Nothing here
    escapes destinations, they are used as given.

    SQL::

        mapping = {
            "uid": new_mapping_rule(False, "uid"),
            "username": new_mapping_rule(False, "firstname", "lastname"),
            "age": new_mapping_rule(True, "birthday"),
        }
        generate_order_by_expr("uid, age desc", mapping)  # uid ASC, birthday ASC
        generate_order_by_expr("age, username desc", mapping)  # birthday DESC, firstname DESC, lastname DESC

    Cypher::

        generate_order_by_expr("username desc", mapping, with_target_processor(cypher_target_processor("n")))
        # n.firstname DESC, n.lastname DESC

    :param query_source: untrusted directive, ``None`` is treated as empty.
    :param mapping: DTO field to :class:`~furiousapi.orderby.models.MappingRule` dictionary.
    :param options: ``with_*`` options or a prepared :class:`~furiousapi.orderby.config.TranslationConfig`.
    :return: the expression, or ``""`` when nothing could be ordered by.
    """
    return _render(query_source, mapping, build_translation_config(*options))


def order_by_func(mapping: Optional[MappingDict], *options: TOption) -> Callable[[Optional[str]], str]:
    config = build_translation_config(*options)

    def generate(query_source: Optional[str]) -> str:
        return _render(query_source, mapping, config)

    return generate
