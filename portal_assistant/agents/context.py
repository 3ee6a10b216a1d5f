"""
Chat Context

Per-call state of one processed message. A new context is built for every
message, so nothing here outlives the request.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from portal_assistant.application.dto import HandlerOutcome, SideEffect
from portal_assistant.application.ports import ICustomerResolver

logger = logging.getLogger(__name__)

_UNRESOLVED = object()


@dataclass
class ChatContext:
    """
    Incoming message plus the scratch state of its processing.

    Attributes:
        message: Raw message text (original casing, stripped)
        user_id: Authenticated principal, if any
        request_time: Reference "now" for time-window arithmetic
        customer_resolver: Resolves user_id to a customer id on first use
        outcomes: Handler outcomes collected during this call
    """

    message: str
    user_id: str | None = None
    request_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    customer_resolver: ICustomerResolver | None = None
    outcomes: list[HandlerOutcome] = field(default_factory=list)
    _customer_id: object = field(default=_UNRESOLVED, init=False, repr=False)

    @property
    def text(self) -> str:
        """Lower-cased message used by the trigger predicates."""
        return self.message.lower()

    async def get_customer_id(self) -> str | None:
        """Resolve the customer id once per call; None when unknown."""
        if self._customer_id is _UNRESOLVED:
            if self.customer_resolver is None:
                self._customer_id = None
            else:
                self._customer_id = await self.customer_resolver.resolve_customer_id(self.user_id)
                logger.debug(f"Resolved customer {self._customer_id} for user {self.user_id}")
        return self._customer_id  # type: ignore[return-value]

    def record(self, outcome: HandlerOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def fragments(self) -> list[str]:
        return [outcome.reply_fragment.strip() for outcome in self.outcomes if outcome.has_reply]

    @property
    def side_effects(self) -> list[SideEffect]:
        return [outcome.side_effect for outcome in self.outcomes if outcome.side_effect is not None]


__all__ = ["ChatContext"]
