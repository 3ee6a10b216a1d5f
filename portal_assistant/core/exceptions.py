"""
Assistant Exceptions

Errors raised by collaborators and adapters. Handlers turn them into reply
fragments; only the chat processor's top-level catch sees anything else.
"""

from typing import Any


class AssistantException(Exception):
    """
    Base exception for all assistant errors.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "CART_UNAVAILABLE")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}


class CollaboratorUnavailableException(AssistantException):
    """
    Raised when an optional external service is not configured.
    """

    def __init__(self, collaborator: str, message: str | None = None):
        self.collaborator = collaborator
        super().__init__(
            message or f"{collaborator} unavailable",
            "COLLABORATOR_UNAVAILABLE",
            {"collaborator": collaborator},
        )


class LLMError(AssistantException):
    """Base error for the upstream language model."""


class LLMConnectionError(LLMError):
    """The language model service could not be reached."""


class LLMGenerationError(LLMError):
    """The language model failed to produce a reply."""


__all__ = [
    "AssistantException",
    "CollaboratorUnavailableException",
    "LLMError",
    "LLMConnectionError",
    "LLMGenerationError",
]
