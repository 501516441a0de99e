from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Query, params

from furiousapi.orderby.config import build_translation_config
from furiousapi.orderby.exceptions import InvalidSortFieldError
from furiousapi.orderby.models import MappingDict
from furiousapi.orderby.translator import TOption, generate_order_by_expr, parse_order_by

logger = logging.getLogger(__name__)


def order_by_query(
    mapping: Optional[MappingDict], *options: TOption, alias: str = "order_by", strict: bool = False
) -> params.Depends:
    """
    Creates a dependency that turns the ``alias`` query parameter into an order-by expression.

    By default fields that cannot be ordered by are dropped. With ``strict`` they are
    rejected with :class:`~furiousapi.orderby.exceptions.InvalidSortFieldError` (HTTP 400).
    A ``None`` mapping orders by nothing, in strict mode every requested field is rejected.
    """
    config = build_translation_config(*options)

    def dependency(order_by: Optional[str] = Query(None, alias=alias)) -> str:
        if strict:
            invalid = [
                field
                for field, _ in parse_order_by(order_by, config)
                if (rule := (mapping or {}).get(field)) is None or rule.is_empty
            ]
            if invalid:
                logger.info("rejected order by fields", extra={"fields": invalid, "source": order_by})
                raise InvalidSortFieldError(invalid)

        return generate_order_by_expr(order_by, mapping, config)

    return Depends(dependency)
