""" OpenAI Vendor Package... """

# Services
from .openai_client import OpenAIClient, OpenAIConfig
from .chat_service import ChatService

__all__ = ['OpenAIClient', 'OpenAIConfig', 'ChatService']
