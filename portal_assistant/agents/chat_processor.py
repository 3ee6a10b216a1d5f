# ============================================================================
# SCOPE: AGENTS LAYER
# Description: Conversation orchestrator. Runs every matching handler for a
#              message and composes the reply and its UI actions.
# ============================================================================
"""
Chat Processor

Pipeline for one message:
    1. optional free-text reply from the upstream chat service
    2. intent detection (all matching triggers, fixed order)
    3. matching handlers, awaited one after another
    4. reply = upstream text + handler fragments, separated by blank lines
    5. actions extracted from the reply and enriched with handler side effects

The processor holds only collaborators and configuration; all per-message
state lives in a ChatContext, so one instance can serve concurrent requests.
"""

import logging
from typing import Any

from portal_assistant.agents.action_extractor import ActionExtractor
from portal_assistant.agents.context import ChatContext
from portal_assistant.agents.handlers import (
    ActionHandler,
    AddToCartHandler,
    CartModifyHandler,
    OrderHistoryHandler,
    ReorderHandler,
    SearchHandler,
    ShippingEstimateHandler,
    SmartSuggestHandler,
)
from portal_assistant.agents.intent import Intent, IntentDetector, create_default_detector
from portal_assistant.application.dto import ChatResponse, HandlerOutcome
from portal_assistant.application.ports import (
    ICartService,
    ICatalogService,
    IChatService,
    ICustomerResolver,
    IOrderService,
    IProductEmbeddingService,
)
from portal_assistant.application.use_cases import AddToCartUseCase, SearchProductsUseCase
from portal_assistant.config import get_settings
from portal_assistant.core.exceptions import CollaboratorUnavailableException

logger = logging.getLogger(__name__)

EMPTY_MESSAGE_REPLY = "Please provide a message."
EMPTY_MESSAGE_ERROR = "Message cannot be empty"
ERROR_REPLY = "I'm sorry, I encountered an error processing your message. Please try again."
FALLBACK_REPLY = (
    'Thank you for your message: "{message}". '
    "I'm here to help with your portal questions. How can I assist you today?"
)


class ChatProcessor:
    """
    Interprets free-text customer messages and dispatches portal actions.

    Every collaborator is optional; a handler whose collaborators are missing
    contributes nothing to the reply.
    """

    def __init__(
        self,
        chat_service: IChatService | None = None,
        catalog_service: ICatalogService | None = None,
        cart_service: ICartService | None = None,
        order_service: IOrderService | None = None,
        customer_resolver: ICustomerResolver | None = None,
        embedding_service: IProductEmbeddingService | None = None,
        config: dict[str, Any] | None = None,
        detector: IntentDetector | None = None,
        action_extractor: ActionExtractor | None = None,
    ):
        """
        Args:
            chat_service: Upstream free-text responder
            catalog_service: Product catalog
            cart_service: Cart reads and mutations
            order_service: Order history
            customer_resolver: Maps user ids to customer ids
            embedding_service: Vector search tried before the catalog search
            config: Handler tuning values (see Settings.assistant_config)
            detector: Intent detector, defaults to the standard trigger set
            action_extractor: Reply scanner for UI actions
        """
        self.config = config if config is not None else get_settings().assistant_config()
        self.chat_service = chat_service
        self.customer_resolver = customer_resolver
        self.detector = detector or create_default_detector()
        self.action_extractor = action_extractor or ActionExtractor()

        search_products = SearchProductsUseCase(catalog_service, embedding_service)
        add_to_cart = AddToCartUseCase(cart_service, catalog_service)

        handlers: list[ActionHandler] = [
            AddToCartHandler(add_to_cart, search_products),
            SearchHandler(search_products, result_limit=self.config.get("search_result_limit", 5)),
            OrderHistoryHandler(
                order_service,
                default_limit=self.config.get("order_history_default_limit", 5),
                max_limit=self.config.get("order_history_max_limit", 20),
            ),
            ReorderHandler(
                order_service,
                cart_service,
                add_to_cart,
                max_failed_display=self.config.get("reorder_max_failed_display", 3),
            ),
            CartModifyHandler(cart_service),
            ShippingEstimateHandler(order_service),
            SmartSuggestHandler(
                catalog_service,
                search_products,
                cart_service,
                candidate_limit=self.config.get("suggestion_candidate_limit", 5),
                display_limit=self.config.get("suggestion_display_limit", 3),
            ),
        ]
        self._handlers: dict[Intent, ActionHandler] = {handler.intent: handler for handler in handlers}

    async def process_message(self, message: str, user_id: str | None = None) -> ChatResponse:
        """
        Process one chat message.

        Args:
            message: Raw user message
            user_id: Authenticated principal, used to resolve the customer

        Returns:
            ChatResponse; never raises except on task cancellation
        """
        if not message or not message.strip():
            return ChatResponse.failure(EMPTY_MESSAGE_REPLY, EMPTY_MESSAGE_ERROR)

        try:
            context = ChatContext(
                message=message.strip(),
                user_id=user_id,
                customer_resolver=self.customer_resolver,
            )

            upstream = await self._upstream_reply(context)

            intents = self.detector.detect_all(context.message)
            logger.info(f"Processing message for user {user_id}: intents={[intent.value for intent in intents]}")

            for intent in intents:
                handler = self._handlers.get(intent)
                if handler is not None:
                    context.record(await self._run_handler(handler, context))

            reply = self._compose_reply(upstream, context)
            actions = self.action_extractor.extract(reply, context.side_effects)
            return ChatResponse(message=reply, actions=actions)

        except Exception as e:
            logger.error(f"Error processing chat message: {e}", exc_info=True)
            return ChatResponse.failure(ERROR_REPLY, str(e))

    async def _run_handler(self, handler: ActionHandler, context: ChatContext) -> HandlerOutcome:
        try:
            return await handler.handle(context)
        except CollaboratorUnavailableException as e:
            logger.debug(f"{handler.__class__.__name__} skipped: {e.message}")
            return HandlerOutcome.empty()
        except Exception as e:
            return handler.failure_outcome(e)

    async def _upstream_reply(self, context: ChatContext) -> str | None:
        if self.chat_service is None:
            return None
        try:
            reply = await self.chat_service.chat(context.message, self.config.get("system_prompt"))
        except Exception as e:
            logger.warning(f"Upstream chat service failed, continuing without it: {e}")
            return None
        return reply.strip() if reply and reply.strip() else None

    @staticmethod
    def _compose_reply(upstream: str | None, context: ChatContext) -> str:
        parts = ([upstream] if upstream else []) + context.fragments
        if not parts:
            return FALLBACK_REPLY.format(message=context.message)
        return "\n\n".join(parts)


__all__ = ["ChatProcessor"]
