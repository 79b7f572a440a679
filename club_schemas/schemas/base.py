from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FormModel(BaseModel):
    """Base for form payloads: camelCase on the wire, unknown keys dropped."""

    model_config = ConfigDict(alias_generator=to_camel, extra="ignore", frozen=True)
