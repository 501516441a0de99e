from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from furiousapi.orderby.constants import DEFAULT_SOURCE_SEPARATOR, DEFAULT_TARGET_SEPARATOR
from furiousapi.orderby.processors import (
    SourceProcessor,
    TargetProcessor,
    default_source_processor,
    default_target_processor,
)

OrderByOption = Callable[[Dict[str, Any]], None]


class TranslationConfig(BaseModel):
    """
    Resolved settings for :func:`furiousapi.orderby.translator.generate_order_by_expr`.

    Separators are used verbatim, an empty string stays empty. A ``None`` processor
    falls back to the default one rather than to a no-op.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    source_separator: str = DEFAULT_SOURCE_SEPARATOR
    target_separator: str = DEFAULT_TARGET_SEPARATOR
    source_processor: SourceProcessor = default_source_processor
    target_processor: TargetProcessor = default_target_processor

    @field_validator("source_processor", mode="before")
    @classmethod
    def _default_source_processor(cls, value: Optional[SourceProcessor]) -> SourceProcessor:
        return default_source_processor if value is None else value

    @field_validator("target_processor", mode="before")
    @classmethod
    def _default_target_processor(cls, value: Optional[TargetProcessor]) -> TargetProcessor:
        return default_target_processor if value is None else value


def with_source_separator(separator: str) -> OrderByOption:
    """Separator between the fields of the client directive, defaults to ``","``."""

    def option(overrides: Dict[str, Any]) -> None:
        overrides["source_separator"] = separator

    return option


def with_target_separator(separator: str) -> OrderByOption:
    """Separator between the rendered fragments, defaults to ``", "``."""

    def option(overrides: Dict[str, Any]) -> None:
        overrides["target_separator"] = separator

    return option


def with_source_processor(processor: Optional[SourceProcessor]) -> OrderByOption:
    def option(overrides: Dict[str, Any]) -> None:
        overrides["source_processor"] = processor

    return option


def with_target_processor(processor: Optional[TargetProcessor]) -> OrderByOption:
    def option(overrides: Dict[str, Any]) -> None:
        overrides["target_processor"] = processor

    return option


def build_translation_config(*options: Union[OrderByOption, TranslationConfig, None]) -> TranslationConfig:
    """
    Applies options over the defaults, in order.

    ``None`` entries are skipped. A :class:`TranslationConfig` replaces everything
    accumulated before it, options after it still override its fields.
    """
    overrides: Dict[str, Any] = {}
    for option in options:
        if option is None:
            continue
        if isinstance(option, TranslationConfig):
            overrides = dict(option)
            continue
        option(overrides)

    return TranslationConfig(**overrides)

