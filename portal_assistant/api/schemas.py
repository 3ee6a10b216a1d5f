"""
Chat API request schemas.

The response body is the processor's ChatResponse (camelCase JSON).
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ChatMessageRequest(BaseModel):
    """Incoming chat message."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = Field(..., description="Free-text customer message")
    user_id: str | None = Field(None, description="Authenticated portal user id")

