from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator


class MappingRule(BaseModel):
    """
    How a single DTO sort field maps onto storage.

    :param destinations: storage expressions the field expands to, in render order.
        Use ``column`` for sql and ``variable.property`` for cypher.
    :param reverse: invert whatever direction the client asked for.
    """

    model_config = ConfigDict(frozen=True)

    destinations: Tuple[str, ...] = ()
    reverse: bool = False

    @field_validator("destinations", mode="before")
    @classmethod
    def _strip_destinations(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            value = (value,)
        if not isinstance(value, Iterable):
            return value

        value = tuple(value)

        # non-string items are left for pydantic to reject
        return tuple(d.strip() if isinstance(d, str) else d for d in value if not isinstance(d, str) or d.strip())

    @property
    def is_empty(self) -> bool:
        return not self.destinations


MappingDict = Mapping[str, Optional[MappingRule]]


def new_mapping_rule(reverse: bool, *destinations: str) -> MappingRule:  # noqa: FBT001
    return MappingRule(destinations=destinations, reverse=reverse)
