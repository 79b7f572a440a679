from .errors import ErrorKind, FieldError, SchemaValidationError, UnknownSchemaError
from .registry import SchemaId, build_registry, get_registry
from .schemas import QuestionType
from .unions import Resolution, TaggedUnion
from .validator import ValidationResult, dump, resolve_schema_id, validate, validate_or_raise

__all__ = [
    "ErrorKind",
    "FieldError",
    "SchemaValidationError",
    "UnknownSchemaError",
    "SchemaId",
    "build_registry",
    "get_registry",
    "QuestionType",
    "Resolution",
    "TaggedUnion",
    "ValidationResult",
    "dump",
    "resolve_schema_id",
    "validate",
    "validate_or_raise",
]
