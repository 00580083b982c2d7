"""
vendors/factory.py — AI Provider Factory
==========================================
Single place that decides which AI provider to use for chat/LLM calls.

How to switch providers
------------------------
Set AI_PROVIDER in .env (default) or the "ai_provider" key in the settings
store (runtime override, see bot/services/settings_service.py):

    AI_PROVIDER=openai       ← use GPT models (default)
    AI_PROVIDER=anthropic    ← use Claude

Both ChatService implementations return Outcome values, so no bot service
needs to know which provider answered.
"""

# Python Packages
from typing import Optional

# Constants
from ..base import constants

# Utils
from ..util.logger import get_logger


logger = get_logger(__name__)

SUPPORTED_PROVIDERS = ("openai", "anthropic")





def get_chat_service(
    provider: Optional[str] = None,
    openai_config = None,
    anthropic_config = None
):
    """
    Return the correct ChatService instance for *provider*.

    Args:
        provider:         "openai" or "anthropic"; defaults to AI_PROVIDER.
        openai_config:    OpenAIConfig used when provider is openai.
        anthropic_config: AnthropicConfig used when provider is anthropic.

    Returns:
        ChatService with a generate_response(messages, temperature, max_tokens) method.

    Raises:
        ValueError: If provider is set to an unsupported value.
    """

    provider = (provider or constants.AI_PROVIDER).lower().strip()

    if provider == "anthropic":
        from .anthropic.chat_service import ChatService
        service = ChatService(anthropic_config)
        logger.debug(f"🤖 LLM Provider: Anthropic ({service.default_model})")
        return service

    elif provider == "openai":
        from .openai.chat_service import ChatService
        service = ChatService(openai_config)
        logger.debug(f"🤖 LLM Provider: OpenAI ({service.default_model})")
        return service

    else:
        raise ValueError(
            f"Unsupported AI_PROVIDER='{provider}'. "
            f"Allowed values: {', '.join(SUPPORTED_PROVIDERS)}."
        )
