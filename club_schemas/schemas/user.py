from typing import Annotated, Any, Optional

from pydantic import EmailStr, StrictInt, StrictStr, ValidationError, ValidatorFunctionWrapHandler, field_validator
from pydantic_core import PydanticCustomError

from .base import FormModel
from ..fields import OptionalIntOrNaN, Url, min_length


class GetUser(FormModel):
    # NaN comes from an unparsable numeric route param and means "current user"
    user_id: OptionalIntOrNaN


class EditUser(FormModel):
    id: StrictInt
    name: StrictStr
    email: EmailStr
    branch_id: Annotated[StrictStr, min_length(1, "Please select a branch")]
    bio: Optional[StrictStr] = None
    phone: StrictStr

    @field_validator("email", mode="wrap")
    @classmethod
    def email_message(cls, v: Any, handler: ValidatorFunctionWrapHandler) -> str:
        if not isinstance(v, str):
            return handler(v)
        try:
            handler(v)
        except ValidationError:
            raise PydanticCustomError("email_invalid", "Email is required") from None
        return v  # checked, not normalized


class EditUserImage(FormModel):
    image: StrictStr


class AddUserLink(FormModel):
    link_name: Annotated[StrictStr, min_length(3, "Name must be at least 3 characters")]
    url: Url


class DeleteUserLink(FormModel):
    link_id: StrictStr
