"""
Error taxonomy for schema validation.

Validation failures are returned as data (a tuple of FieldError); the
exceptions here are raised only by the opt-in unwrap paths and for
programming mistakes such as an unknown schema id.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from pydantic import ValidationError


class ErrorKind(str, Enum):
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    CONSTRAINT_VIOLATION = "constraint_violation"
    UNKNOWN_DISCRIMINANT = "unknown_discriminant"


@dataclass(frozen=True)
class FieldError:
    kind: ErrorKind
    path: tuple[str | int, ...]
    message: str
    code: str = ""

    @property
    def dotted_path(self) -> str:
        return ".".join(str(p) for p in self.path)

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": list(self.path),
            "message": self.message,
            "kind": self.kind.value,
            "code": self.code,
        }


class SchemaValidationError(ValueError):
    """Raised when a caller asks for a value that failed validation."""

    def __init__(self, errors: Iterable[FieldError], *, schema_id: str | None = None) -> None:
        self.errors = tuple(errors)
        self.schema_id = schema_id
        where = f" for {schema_id}" if schema_id else ""
        super().__init__(f"{len(self.errors)} validation error(s){where}")


class UnknownSchemaError(KeyError):
    pass


def _kind_for(error_type: str, loc: tuple, discriminator: str | None) -> ErrorKind:
    if error_type == "missing":
        return ErrorKind.MISSING_FIELD
    if error_type == "literal_error" and discriminator and loc == (discriminator,):
        return ErrorKind.UNKNOWN_DISCRIMINANT
    if error_type.endswith("_type"):
        return ErrorKind.TYPE_MISMATCH
    return ErrorKind.CONSTRAINT_VIOLATION


def collect_errors(exc: ValidationError, *, discriminator: str | None = None) -> list[FieldError]:
    """Translate a pydantic ValidationError into FieldErrors, keeping pydantic's order."""
    out: list[FieldError] = []
    for err in exc.errors(include_url=False):
        loc = tuple(err["loc"])
        out.append(FieldError(
            kind=_kind_for(err["type"], loc, discriminator),
            path=loc,
            message=err["msg"],
            code=err["type"],
        ))
    return out
