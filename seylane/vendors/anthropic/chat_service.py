"""
vendors/anthropic/chat_service.py
===================================
Claude-backed ChatService with the same generate_response() contract as
vendors/openai/chat_service.py, so the factory can switch providers
without touching the bot services.

Message conversion:
  Callers pass OpenAI-style messages (system role inside the list).
  Claude wants the system prompt as a top-level parameter and a strictly
  alternating user/assistant list that starts with a user turn, so
  _split_messages() lifts leading system text out, merges consecutive
  same-role turns and drops a leading assistant turn.

Failures come back as Outcome values, never as exceptions.
"""

# Python Packages
from dataclasses import replace
from typing import List, Dict, Optional
import anthropic

# Client
from .anthropic_client import AnthropicClient, AnthropicConfig

# Utils
from ...util.outcome import Outcome, ErrorKind
from ...util.logger import get_logger


logger = get_logger(__name__)





class ChatService:
    """
    Anthropic Claude implementation of ChatService.
    Drop-in replacement for vendors/openai/chat_service.py.
    """

    provider = "anthropic"

    def __init__(self, config: Optional[AnthropicConfig] = None):
        self.anthropic_client = AnthropicClient(config)
        self.config           = self.anthropic_client.config
        self.default_model    = self.config.model


    def reconfigure(self, **changes) -> "ChatService":
        return ChatService(replace(self.config, **changes))


    def generate_response(
        self,
        messages: List[Dict[str, str]],
        model: str = None,
        temperature: float = 0.2,
        max_tokens: int = 1024
    ) -> Outcome:
        """
        Generate a response using the Anthropic Claude API.

        Accepts messages in the standard format used across the codebase:
            [{"role": "system", "content": "..."}, {"role": "user", "content": "..."}, ...]

        Args:
            messages:    List of message dicts with 'role' and 'content'.
            model:       Claude model string. Defaults to the configured model.
            temperature: Sampling temperature (0.0 – 1.0).
            max_tokens:  Maximum tokens in response.

        Returns:
            Outcome with the response text, or a failure tagged
            not_configured / auth / transport / parse.
        """

        if not self.anthropic_client.is_configured:
            return Outcome.failure(ErrorKind.NOT_CONFIGURED, "ANTHROPIC_API_KEY is not set")

        system_prompt, conversation = self._split_messages(messages)

        kwargs = dict(
            model       = model or self.default_model,
            max_tokens  = max_tokens,
            temperature = min(temperature, 1.0),
            messages    = conversation,
        )

        # Only pass system when present
        if system_prompt:
            kwargs["system"] = system_prompt

        try:
            response = self.anthropic_client.get_client().messages.create(**kwargs)

        except anthropic.AuthenticationError as e:
            logger.error(f"❌ Anthropic authentication failed: {e}")
            return Outcome.failure(ErrorKind.AUTH, str(e))

        except Exception as e:
            logger.error(f"❌ Anthropic error generating response: {e}")
            return Outcome.failure(ErrorKind.TRANSPORT, str(e))

        text = "".join(
            block.text for block in response.content
            if getattr(block, "type", "text") == "text"
        )
        if not text.strip():
            return Outcome.failure(ErrorKind.PARSE, "Empty completion")

        return Outcome.success(text.strip())



    def test_connection(self) -> Outcome:
        result = self.generate_response(
            [{"role": "user", "content": 'Say "Hello"'}],
            max_tokens = 10
        )
        if result.ok:
            return Outcome.success("Anthropic connected successfully")
        return result



    # ── Private ────────────────────────────────────────────────────────────────
    def _split_messages(self, messages: List[Dict[str, str]]):
        """
        Split OpenAI-style messages into Anthropic format.

        Returns:
            (system_prompt: str, conversation: List[Dict])

        Rules:
          - "system" messages before the first turn become the top-level system prompt.
          - All "user" and "assistant" messages form the conversation array.
          - Later system messages are prepended to the next user message.
          - Consecutive turns with the same role are merged; Anthropic requires
            strict user/assistant alternation starting with a user turn.
        """
        system_parts   = []
        conversation   = []
        pending_system = []

        for msg in messages:
            role    = msg.get("role", "user")
            content = msg.get("content", "")

            if role == "system":
                if not conversation:
                    system_parts.append(content)
                else:
                    pending_system.append(content)

            elif role in ("user", "assistant"):
                if pending_system and role == "user":
                    content = "\n\n".join(pending_system) + "\n\n" + content
                    pending_system = []

                if conversation and conversation[-1]["role"] == role:
                    conversation[-1]["content"] += "\n\n" + content
                elif not conversation and role == "assistant":
                    continue
                else:
                    conversation.append({"role": role, "content": content})

        system_prompt = "\n\n".join(system_parts)
        return system_prompt, conversation
