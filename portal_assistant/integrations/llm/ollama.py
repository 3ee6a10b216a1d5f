# ============================================================================
# SCOPE: GLOBAL
# Description: Ollama implementation of the upstream chat service port.
# ============================================================================
"""
Ollama chat service

Provides the optional free-text reply prepended to handler fragments.

Features:
- System + user message per call, no conversation memory
- Automatic <think> tag cleaning for reasoning models
- Lazily created, cached ChatOllama instance
"""

import logging
import re

import httpx
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_ollama import ChatOllama

from portal_assistant.config import Settings, get_settings
from portal_assistant.core.exceptions import LLMConnectionError, LLMGenerationError

logger = logging.getLogger(__name__)

# Regex pattern for cleaning reasoning model think tags
THINK_TAG_PATTERN = re.compile(r"<think>.*?</think>", re.DOTALL)


class OllamaChatService:
    """
    Ollama implementation of IChatService.

    A ChatOllama instance is NOT created in __init__, but on first use.
    """

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        temperature: float | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self._model_name = model_name or self.settings.OLLAMA_API_MODEL
        self._base_url = base_url or self.settings.OLLAMA_API_URL
        self._temperature = temperature if temperature is not None else self.settings.OLLAMA_TEMPERATURE
        self._llm: ChatOllama | None = None
        logger.info(f"Initialized OllamaChatService: model={self._model_name}, base_url={self._base_url}")

    @property
    def model_name(self) -> str:
        return self._model_name

    async def chat(self, message: str, system_prompt: str | None = None) -> str:
        """
        Generate a free-text reply.

        Raises:
            LLMConnectionError: Ollama could not be reached
            LLMGenerationError: The model call failed
        """
        messages = []
        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))
        messages.append(HumanMessage(content=message))

        try:
            response = await self.get_llm().ainvoke(messages)
        except httpx.ConnectError as e:
            logger.error(f"Connection error to Ollama: {e}")
            raise LLMConnectionError(f"Could not connect to Ollama at {self._base_url}") from e
        except Exception as e:
            logger.error(f"Error in chat generation: {e}")
            raise LLMGenerationError(f"Failed to generate chat response: {e}") from e

        content = response.content if isinstance(response.content, str) else str(response.content)
        return self.clean_think_tags(content)

    @staticmethod
    def clean_think_tags(response: str) -> str:
        """
        Remove <think> blocks from a reasoning model response.

        Args:
            response: Raw model response

        Returns:
            Cleaned response without think tags
        """
        if not response:
            return response
        return THINK_TAG_PATTERN.sub("", response).strip()

    def get_llm(self) -> ChatOllama:
        if self._llm is None:
            self._llm = ChatOllama(
                model=self._model_name,
                base_url=self._base_url,
                temperature=self._temperature,
                client_kwargs={"timeout": self.settings.OLLAMA_REQUEST_TIMEOUT},
            )
            logger.info(f"Created ChatOllama instance: model={self._model_name}, temp={self._temperature}")
        return self._llm


__all__ = ["OllamaChatService"]
