"""Pydantic models for API request/response."""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserDto(CamelModel):
    """Transfer object for a user.

    id and the timestamps are assigned by the service; on input they are
    ignored except for the id check on update.
    """
    id: Optional[int] = Field(None, description="User ID, absent for new users")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")
    login_name: str = Field(..., min_length=1, max_length=255, pattern=r"^\w+$",
                            description="Unique login name (letters, digits, underscore)")
    email_address: EmailStr = Field(..., description="Unique email address")
    first_name: str = Field(..., min_length=1, max_length=255, description="First name")
    last_name: str = Field(..., min_length=1, max_length=255, description="Last name")

    @field_validator('first_name', 'last_name')
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class FieldError(CamelModel):
    """Single field-level validation failure."""
    field: str
    message: str


class ErrorResponse(CamelModel):
    """Error payload returned for every non-2xx response."""
    error_code: str = Field(..., description="Error category, e.g. NOT_FOUND")
    message: str
    status_code: int
    status_message: str = Field(..., description="HTTP reason phrase")
    timestamp: datetime
    path: str
    errors: Optional[list[FieldError]] = Field(None, description="Field errors for invalid input")
