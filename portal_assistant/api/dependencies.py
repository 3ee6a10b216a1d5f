"""
FastAPI dependencies for the chat API.
"""

import logging

from fastapi import Request

from portal_assistant.agents import ChatProcessor
from portal_assistant.config import Settings
from portal_assistant.integrations.llm import OllamaChatService

logger = logging.getLogger(__name__)


def build_chat_processor(settings: Settings) -> ChatProcessor:
    """
    Build the default processor from settings.

    Only the upstream chat service is configured here; catalog, cart, order and
    identity collaborators belong to the host portal and are wired by passing a
    ready ChatProcessor to create_app.
    """
    chat_service = OllamaChatService(settings=settings) if settings.CHAT_LLM_ENABLED else None
    logger.info(f"Building ChatProcessor (upstream LLM {'enabled' if chat_service else 'disabled'})")
    return ChatProcessor(chat_service=chat_service, config=settings.assistant_config())


def get_chat_processor(request: Request) -> ChatProcessor:
    """Processor attached to the application at creation time."""
    return request.app.state.chat_processor
