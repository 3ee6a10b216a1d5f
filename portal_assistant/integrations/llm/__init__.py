"""
LLM Integrations

Upstream free-text responder backed by a local Ollama model.
"""

from portal_assistant.integrations.llm.ollama import OllamaChatService

__all__ = ["OllamaChatService"]
