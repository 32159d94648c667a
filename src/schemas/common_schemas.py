"""Common schemas used across API endpoints.

JSON bodies use camelCase keys (``refreshToken``, ``expiresAt``) while
Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases.

    Accepts either the alias or the field name on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(CamelModel):
    """Generic success response carrying a message."""

    success: bool = Field(default=True, description="Always true on success")
    message: str = Field(..., description="Human-readable outcome")
