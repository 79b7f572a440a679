"""
Discriminated unions over FormModel variants.

TAGGED resolution reads the discriminator first and validates only the
matching variant. ORDERED resolution tries every variant in turn and keeps
the first success; when all fail, the last variant's errors are reported.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError

from .errors import ErrorKind, FieldError, SchemaValidationError, collect_errors

logger = logging.getLogger("club-schemas")


class Resolution(str, Enum):
    TAGGED = "tagged"
    ORDERED = "ordered"


class TaggedUnion:
    def __init__(
        self,
        discriminator: str,
        variants: Mapping[str, type[BaseModel]],
        resolution: Resolution = Resolution.TAGGED,
    ) -> None:
        if not variants:
            raise ValueError("TaggedUnion needs at least one variant")
        self.discriminator = discriminator
        self.variants = dict(variants)
        self.resolution = resolution

    @property
    def expected(self) -> str:
        return " | ".join(repr(tag) for tag in self.variants)

    def parse(self, raw: Any) -> BaseModel:
        if self.resolution is Resolution.ORDERED:
            return self._parse_ordered(raw)
        return self._parse_tagged(raw)

    def _validate(self, model: type[BaseModel], raw: Any) -> BaseModel:
        try:
            return model.model_validate(raw)
        except ValidationError as exc:
            raise SchemaValidationError(collect_errors(exc, discriminator=self.discriminator)) from exc

    def _parse_tagged(self, raw: Any) -> BaseModel:
        if not isinstance(raw, Mapping):
            raise SchemaValidationError([FieldError(
                ErrorKind.TYPE_MISMATCH, (), "Input should be a valid dictionary", "dict_type",
            )])

        path = (self.discriminator,)
        if self.discriminator not in raw:
            raise SchemaValidationError([FieldError(
                ErrorKind.MISSING_FIELD, path, "Field required", "missing",
            )])

        tag = raw[self.discriminator]
        model = self.variants.get(tag) if isinstance(tag, str) else None
        if model is None:
            raise SchemaValidationError([FieldError(
                ErrorKind.UNKNOWN_DISCRIMINANT,
                path,
                f"Invalid discriminator value. Expected {self.expected}",
                "union_tag_invalid",
            )])
        return self._validate(model, raw)

    def _parse_ordered(self, raw: Any) -> BaseModel:
        last: SchemaValidationError | None = None
        for tag, model in self.variants.items():
            try:
                return self._validate(model, raw)
            except SchemaValidationError as exc:
                logger.debug("variant %s rejected (%d error(s))", tag, len(exc.errors))
                last = exc
        raise last
