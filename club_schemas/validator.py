"""
validate(schema_id, raw) -> ValidationResult

The entry point for form handlers and API procedures. It never raises for
bad input: every payload yields either a validated model or an ordered
tuple of FieldErrors. Only an unknown schema id raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

from .errors import FieldError, SchemaValidationError, UnknownSchemaError
from .registry import Schema, SchemaId, get_registry

logger = logging.getLogger("club-schemas")


@dataclass(frozen=True)
class ValidationResult:
    schema_id: SchemaId
    value: Optional[BaseModel] = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> Optional[BaseModel]:
        if self.errors:
            raise SchemaValidationError(self.errors, schema_id=self.schema_id.value)
        return self.value

    def error_map(self) -> dict[str, list[str]]:
        """Messages keyed by dotted field path ("" for the payload itself)."""
        out: dict[str, list[str]] = {}
        for e in self.errors:
            out.setdefault(e.dotted_path, []).append(e.message)
        return out

    def error_report(self) -> list[dict[str, Any]]:
        return [e.as_dict() for e in self.errors]


def dump(value: Optional[BaseModel]) -> Optional[dict[str, Any]]:
    """Canonical wire form of a validated value: camelCase keys, unset optional fields left out."""
    if value is None:
        return None
    return value.model_dump(by_alias=True, exclude_defaults=True)


def resolve_schema_id(schema_id: Union[SchemaId, str]) -> SchemaId:
    try:
        return SchemaId(schema_id)
    except ValueError:
        raise UnknownSchemaError(schema_id) from None


def _resolve(schema_id: Union[SchemaId, str], registry: Mapping[SchemaId, Schema]) -> tuple[SchemaId, Schema]:
    sid = resolve_schema_id(schema_id)
    if sid not in registry:
        raise UnknownSchemaError(schema_id)
    return sid, registry[sid]


def validate(
    schema_id: Union[SchemaId, str],
    raw: Any,
    *,
    registry: Optional[Mapping[SchemaId, Schema]] = None,
) -> ValidationResult:
    sid, schema = _resolve(schema_id, get_registry() if registry is None else registry)

    if isinstance(raw, BaseModel):
        raw = dump(raw)

    try:
        value = schema.parse(raw)
    except SchemaValidationError as exc:
        logger.debug("schema=%s rejected with %d error(s)", sid.value, len(exc.errors))
        return ValidationResult(schema_id=sid, errors=exc.errors)

    return ValidationResult(schema_id=sid, value=value)


def validate_or_raise(schema_id: Union[SchemaId, str], raw: Any) -> Optional[BaseModel]:
    return validate(schema_id, raw).unwrap()
