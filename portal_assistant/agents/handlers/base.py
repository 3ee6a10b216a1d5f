# ============================================================================
# SCOPE: AGENTS LAYER
# Description: Base class for intent action handlers.
#              Implements Strategy Pattern, one handler per intent.
# ============================================================================
"""
Action Handler Base - Shared interface for all intent handlers.

Each handler turns one detected intent into a reply fragment and an optional
side effect. Handlers never keep per-request state on the instance; everything
request scoped travels in the ChatContext.

Usage:
    class MyHandler(ActionHandler):
        intent = Intent.SEARCH
        action_description = "search the catalog"

        async def handle(self, context) -> HandlerOutcome:
            return HandlerOutcome("🔍 ...")
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, TypeVar

from portal_assistant.application.dto import HandlerOutcome
from portal_assistant.core.exceptions import CollaboratorUnavailableException
from portal_assistant.domain import as_utc

if TYPE_CHECKING:
    from portal_assistant.agents.context import ChatContext
    from portal_assistant.agents.intent import Intent

logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_CUSTOMER_MESSAGE = "I couldn't find a customer account linked to your user. Please sign in and try again."


class ActionHandler(ABC):
    """
    Base class for intent handlers with common functionality.

    Subclasses set `intent` and `action_description` and implement `handle`.
    """

    intent: Intent
    # Completes "Sorry, I couldn't ... right now."
    action_description: str = "complete that request"

    @abstractmethod
    async def handle(self, context: ChatContext) -> HandlerOutcome:
        """
        Handle the intent for one message.

        Args:
            context: Per-call chat context

        Returns:
            HandlerOutcome with the reply fragment and optional side effect

        Raises:
            CollaboratorUnavailableException: A required service is not configured
        """
        ...

    def failure_outcome(self, error: Exception) -> HandlerOutcome:
        """Fragment reported when a collaborator raised."""
        logger.error(f"{self.__class__.__name__} failed: {error}", exc_info=True)
        return HandlerOutcome(self.failure_fragment())

    def failure_fragment(self) -> str:
        return f"❌ Sorry, I couldn't {self.action_description} right now. Please try again later."

    @staticmethod
    def _require(service: T | None, name: str) -> T:
        if service is None:
            raise CollaboratorUnavailableException(name)
        return service

    @staticmethod
    def _format_date(value: datetime | None) -> str:
        return as_utc(value).strftime("%Y-%m-%d") if value else "N/A"


__all__ = ["ActionHandler", "NO_CUSTOMER_MESSAGE"]
