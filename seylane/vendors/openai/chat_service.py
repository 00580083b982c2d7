"""OpenAI Chat/Completion Service"""

# Python Packages
from dataclasses import replace
from typing import List, Dict, Optional
import openai

# Client
from .openai_client import OpenAIClient, OpenAIConfig

# Utils
from ...util.outcome import Outcome, ErrorKind
from ...util.logger import get_logger


logger = get_logger(__name__)


class ChatService:
    """Service for chat completions using OpenAI"""

    provider = "openai"

    def __init__(self, config: Optional[OpenAIConfig] = None):
        """Initialize chat service"""
        self.openai_client = OpenAIClient(config)
        self.config = self.openai_client.config
        self.default_model = self.config.model

    def reconfigure(self, **changes) -> "ChatService":
        """Return a new ChatService with *changes* applied; self is untouched."""
        return ChatService(replace(self.config, **changes))

    def generate_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.7,
        max_tokens: int = 1000
    ) -> Outcome:
        """
        Generate a chat completion response

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: OpenAI model to use
            temperature: Sampling temperature (0-2)
            max_tokens: Maximum tokens in response

        Returns:
            Outcome whose value is the completion text. Failure kinds:
            not_configured, auth, transport, parse (empty completion).
        """
        if not self.openai_client.is_configured:
            return Outcome.failure(ErrorKind.NOT_CONFIGURED, "OPENAI_API_KEY is not set")

        try:
            response = self.openai_client.get_client().chat.completions.create(
                model=model or self.default_model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens
            )
        except openai.AuthenticationError as e:
            logger.error(f"❌ OpenAI authentication failed: {e}")
            return Outcome.failure(ErrorKind.AUTH, str(e))
        except Exception as e:
            logger.error(f"❌ Error generating response: {e}")
            return Outcome.failure(ErrorKind.TRANSPORT, str(e))

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            return Outcome.failure(ErrorKind.PARSE, "Empty completion")

        return Outcome.success(content.strip())

    def test_connection(self) -> Outcome:
        """Send a tiny prompt to check the key and model."""
        result = self.generate_response(
            [{"role": "user", "content": 'Say "Hello"'}],
            max_tokens=10
        )
        if result.ok:
            return Outcome.success("OpenAI connected successfully")
        return result
