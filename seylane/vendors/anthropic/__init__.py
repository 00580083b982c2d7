""" Anthropic Vendor Package... """

from .anthropic_client import AnthropicClient, AnthropicConfig
from .chat_service import ChatService

__all__ = ['AnthropicClient', 'AnthropicConfig', 'ChatService']
