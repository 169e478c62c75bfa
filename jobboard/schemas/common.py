# jobboard/schemas/common.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# All request and response bodies use camelCase on the wire
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str


def require_text(value, message: str) -> str:
    """Shared check for required free-text fields: present and not blank."""
    if value is None or not str(value).strip():
        raise ValueError(message)
    return str(value).strip()
