"""
vendors/anthropic/anthropic_client.py
======================================
Anthropic client built from an immutable AnthropicConfig.
Reads ANTHROPIC_API_KEY from base/constants.py unless a config is passed.
"""

# Python Packages
from dataclasses import dataclass, replace
from typing import Optional
from anthropic import Anthropic

# Constants
from ...base import constants





@dataclass(frozen=True)
class AnthropicConfig:

    api_key: str = ""
    model: str = constants.ANTHROPIC_DEFAULT_MODEL
    timeout: float = constants.LLM_TIMEOUT_SECONDS


    @classmethod
    def from_constants(cls) -> "AnthropicConfig":
        return cls(api_key = constants.ANTHROPIC_API_KEY)





class AnthropicClient:
    """
    One Anthropic SDK client per config. No retries, bounded timeout.
    """

    def __init__(self, config: Optional[AnthropicConfig] = None):
        self.config  = config or AnthropicConfig.from_constants()
        self._client = None

        if self.config.api_key:
            self._client = Anthropic(
                api_key     = self.config.api_key,
                timeout     = self.config.timeout,
                max_retries = 0
            )


    @property
    def is_configured(self) -> bool:
        return self._client is not None


    def get_client(self) -> Anthropic:
        if self._client is None:
            raise RuntimeError(
                "Anthropic client not initialized. "
                "Set ANTHROPIC_API_KEY in your .env file."
            )
        return self._client


    def reconfigure(self, **changes) -> "AnthropicClient":
        return AnthropicClient(replace(self.config, **changes))
