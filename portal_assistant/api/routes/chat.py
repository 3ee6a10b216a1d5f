"""
Chat endpoint.

Hands each message to the ChatProcessor, which always answers with a
well-formed ChatResponse.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from portal_assistant.agents import ChatProcessor
from portal_assistant.api.dependencies import get_chat_processor
from portal_assistant.api.schemas import ChatMessageRequest
from portal_assistant.application.dto import ChatResponse
from portal_assistant.config import Settings, get_settings

router = APIRouter(tags=["chat"])
logger = logging.getLogger(__name__)


@router.post(
    "/message",
    response_model=ChatResponse,
    responses={413: {"model": ChatResponse}, 422: {"model": ChatResponse}},
)
async def process_chat_message(
    request: ChatMessageRequest,
    processor: ChatProcessor = Depends(get_chat_processor),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> ChatResponse:
    """
    Process one chat message.

    Args:
        request: Message text and optional user id
        processor: ChatProcessor (injected)

    Returns:
        Reply text, success flag and side-channel actions
    """
    if len(request.message) > settings.MAX_MESSAGE_CHARS:
        logger.warning(f"Rejected chat message of {len(request.message)} chars from user {request.user_id}")
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Message exceeds {settings.MAX_MESSAGE_CHARS} characters",
        )

    logger.info(f"Processing chat message from user {request.user_id}")
    return await processor.process_message(request.message, user_id=request.user_id)
