"""Reusable field types shared by the form schemas."""

from __future__ import annotations

import math
from typing import Annotated, Any, Optional, Union

from pydantic import AfterValidator, AnyUrl, BeforeValidator, Field, PlainValidator, StrictInt, StrictStr, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

_url_adapter = TypeAdapter(AnyUrl)


def min_length(limit: int, message: str) -> AfterValidator:
    def check(value):
        if len(value) < limit:
            raise PydanticCustomError("too_short", message, {"min_length": limit, "actual_length": len(value)})
        return value
    return AfterValidator(check)


def item_count(minimum: int, maximum: int | None, message: str) -> AfterValidator:
    """Bound the number of items in a list; maximum=None leaves it unbounded."""
    def check(items: list) -> list:
        n = len(items)
        if n < minimum or (maximum is not None and n > maximum):
            raise PydanticCustomError(
                "options_count",
                message,
                {"min_items": minimum, "max_items": maximum, "actual_items": n},
            )
        return items
    return AfterValidator(check)


def _check_url(value: str) -> str:
    # validated through AnyUrl but returned as given, so "https://x.io" stays "https://x.io"
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise PydanticCustomError("url_invalid", "Invalid url") from None
    return value


def _empty_to_none(value: str) -> str | None:
    # A plain string is always accepted, so the URL alternative never changes the outcome.
    return value or None


def _nan_to_none(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _positive_int_or_text(value: Any) -> int | str:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        if value > 0:
            return value
        raise PydanticCustomError("greater_than", "Input should be greater than 0", {"gt": 0})
    raise PydanticCustomError("int_or_str_type", "Input should be a positive integer or a string")


Url = Annotated[StrictStr, AfterValidator(_check_url)]

# Quiz images: "" means "no image", any other string is kept.
PermissiveImage = Annotated[StrictStr, AfterValidator(_empty_to_none)]

PositiveInt = Annotated[StrictInt, Field(gt=0)]
PositiveNumber = Annotated[float, Field(strict=True, gt=0, allow_inf_nan=False)]

AnswerValue = Annotated[Union[int, str], PlainValidator(_positive_int_or_text)]

OptionalIntOrNaN = Annotated[Optional[StrictInt], BeforeValidator(_nan_to_none)]
