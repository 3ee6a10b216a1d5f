from portal_assistant.agents.action_extractor import ActionExtractor
from portal_assistant.agents.chat_processor import ChatProcessor
from portal_assistant.agents.context import ChatContext

__all__ = [
    "ActionExtractor",
    "ChatContext",
    "ChatProcessor",
]
