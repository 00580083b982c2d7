""" OpenAI Client Configuration... """

# Python Packages
from dataclasses import dataclass, replace
from typing import Optional
from openai import OpenAI

# Constants
from ...base import constants





@dataclass(frozen=True)
class OpenAIConfig:
    """ Immutable OpenAI credentials and call limits... """

    api_key: str = ""
    model: str = constants.OPENAI_DEFAULT_MODEL
    timeout: float = constants.LLM_TIMEOUT_SECONDS


    @classmethod
    def from_constants(cls) -> "OpenAIConfig":
        return cls(api_key = constants.OPENAI_API_KEY)





class OpenAIClient:
    """
    Owns one OpenAI SDK client built from an OpenAIConfig.
    SDK retries are disabled: every call is attempted exactly once.
    """

    def __init__(self, config: Optional[OpenAIConfig] = None):
        self.config  = config or OpenAIConfig.from_constants()
        self._client = None

        if self.config.api_key:
            self._client = OpenAI(
                api_key     = self.config.api_key,
                timeout     = self.config.timeout,
                max_retries = 0
            )


    @property
    def is_configured(self) -> bool:
        return self._client is not None


    def get_client(self) -> OpenAI:
        """ Get the OpenAI SDK client... """

        if self._client is None:
            raise RuntimeError("OpenAI client not initialized. Set OPENAI_API_KEY.")

        return self._client


    def reconfigure(self, **changes) -> "OpenAIClient":
        """ Return a new client with *changes* applied to the config... """

        return OpenAIClient(replace(self.config, **changes))
