from datetime import datetime
from pydantic import AfterValidator, BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Annotated
from models.helper import as_utc

# Stored timestamps come back naive; the wire always carries UTC.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class ApiModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""

    model_config = {
        "from_attributes": True,  # Allows Pydantic to work with SQLModel objects
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class OkResponse(ApiModel):
    """Schema for bare acknowledgements."""
    ok: bool = Field(default=True, description="Whether the operation succeeded")


class ErrorResponse(ApiModel):
    """Schema for every 4xx response body."""
    error: str = Field(..., description="Human readable error message")


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Request body failed validation"},
    404: {"model": ErrorResponse, "description": "Referenced task, user or board does not exist"},
}
