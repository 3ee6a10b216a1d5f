"""
Assistant Application DTOs

Data Transfer Objects passed between handlers, the chat processor and the API.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ActionType(str, Enum):
    """Side-channel action types surfaced to the UI."""

    PRODUCT_ADDED = "product_added"
    ITEMS_REORDERED = "items_reordered"
    CART_UPDATED = "cart_updated"


# ==================== Handler DTOs ====================


@dataclass(frozen=True)
class SideEffect:
    """Structured payload recorded by a handler for its action."""

    type: ActionType
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HandlerOutcome:
    """Reply fragment of one handler plus its optional side effect."""

    reply_fragment: str = ""
    side_effect: SideEffect | None = None

    @classmethod
    def empty(cls) -> "HandlerOutcome":
        return cls()

    @property
    def has_reply(self) -> bool:
        return bool(self.reply_fragment.strip())


# ==================== Chat response DTOs ====================


class ChatAction(BaseModel):
    """Side-channel action, e.g. a toast after a product was added."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    type: str
    message: str
    data: dict[str, Any] | None = None


class ChatResponse(BaseModel):
    """Response of one processed chat message."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    is_success: bool = True
    error_message: str | None = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    actions: list[ChatAction] = Field(default_factory=list)

    @classmethod
    def failure(cls, message: str, error_message: str) -> "ChatResponse":
        return cls(message=message, is_success=False, error_message=error_message)


__all__ = [
    "ActionType",
    "SideEffect",
    "HandlerOutcome",
    "ChatAction",
    "ChatResponse",
]
