"""
Service: MessagingGateway
==========================
Everything the bot does on the Instagram channel.

Inbound
  verify_handshake()      GET /webhook subscription handshake
  parse_inbound_event()   first text message out of the webhook envelope

Outbound (all best-effort; return bool, never raise)
  deliver()                        one text message
  deliver_with_typing_indicator()  typing_on → pause → send → typing_off
  deliver_product_digest()         intro line + one message per product (capped)

Profile lookups are best-effort too: a failure means an unnamed conversation.
"""

# Python Packages
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import time

# Constants
from ...base import constants

# Config
from ..config import bot_config, prompts

# Utils
from ...util.logger import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class InboundEvent:
    """ Normalized inbound text message... """

    sender_id: str
    text: str
    mid: Optional[str] = None


class MessagingGateway:

    def __init__(self, graph_client, typing_delay_ms: int = constants.TYPING_DELAY_MS):
        self.graph_client    = graph_client
        self.typing_delay_ms = typing_delay_ms


    # ── Inbound ────────────────────────────────────────────────────────────────
    def verify_handshake(self, mode: str, token: str, challenge: str) -> Optional[str]:
        """
        Returns:
            *challenge* unchanged when mode is "subscribe" and *token* equals
            the configured verify token, else None.
        """
        verify_token = self.graph_client.config.verify_token

        if mode == "subscribe" and verify_token and token == verify_token:
            logger.info("✅ Webhook verified")
            return challenge

        logger.warning("❌ Webhook verification failed")
        return None


    @staticmethod
    def parse_inbound_event(payload: Any) -> Optional[InboundEvent]:
        """
        Extract the first messaging entry of an Instagram webhook payload.

        Returns None (silently ignored upstream) for non-Instagram objects,
        empty envelopes, read receipts, attachment-only messages and echoes
        of messages the page itself sent.
        """
        if not isinstance(payload, dict) or payload.get("object") != "instagram":
            return None

        entries = payload.get("entry")
        if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
            return None

        messaging = entries[0].get("messaging")
        if not isinstance(messaging, list) or not messaging or not isinstance(messaging[0], dict):
            return None

        event   = messaging[0]
        message = event.get("message")
        sender  = event.get("sender")
        if not isinstance(message, dict) or not isinstance(sender, dict):
            return None

        if message.get("is_echo"):
            return None

        text      = message.get("text")
        sender_id = sender.get("id")
        if not isinstance(text, str) or not text.strip() or not sender_id:
            return None

        return InboundEvent(sender_id = str(sender_id), text = text, mid = message.get("mid"))


    # ── Outbound ───────────────────────────────────────────────────────────────
    def deliver(self, recipient_id: str, text: str) -> bool:
        result = self.graph_client.send_text(recipient_id, text)

        if not result.ok:
            logger.error(f"❌ Error sending message ({result.error_kind}): {result.details}")
            return False

        logger.info(f"✅ Message sent to {recipient_id}")
        return True


    def typing_on(self, recipient_id: str) -> bool:
        return self._sender_action(recipient_id, "typing_on")


    def typing_off(self, recipient_id: str) -> bool:
        return self._sender_action(recipient_id, "typing_off")


    def pause(self, delay_ms: int) -> None:
        """ Simulated human response latency... """

        if delay_ms and delay_ms > 0:
            time.sleep(delay_ms / 1000.0)


    def deliver_with_typing_indicator(
        self,
        recipient_id: str,
        text: str,
        pacing_delay_ms: Optional[int] = None
    ) -> bool:
        """
        typing_on → pause → send → typing_off.

        Each step is independent; the return value is the send result only.
        """
        self.typing_on(recipient_id)
        self.pause(self.typing_delay_ms if pacing_delay_ms is None else pacing_delay_ms)

        sent = self.deliver(recipient_id, text)

        self.typing_off(recipient_id)
        return sent


    def deliver_product_digest(
        self,
        recipient_id: str,
        products: List[Dict[str, Any]],
        cap: int = bot_config.PRODUCT_DIGEST_CAP,
        intro_text: str = ""
    ) -> bool:
        """
        Send *intro_text* (when given), then one message per product for the
        first *cap* products.

        Returns:
            True when every attempted send succeeded.
        """
        results = []

        if intro_text:
            results.append(self.deliver(recipient_id, intro_text))

        for product in products[:cap]:
            line = prompts.PRODUCT_DIGEST_LINE.format(
                name      = product.get("name", ""),
                price     = product.get("price", ""),
                permalink = product.get("permalink", "")
            )
            results.append(self.deliver(recipient_id, line))

        return all(results)


    # ── Profile ────────────────────────────────────────────────────────────────
    def fetch_display_name(self, user_id: str) -> Optional[str]:
        result = self.graph_client.get_user_profile(user_id)

        if not result.ok:
            logger.warning(f"Error fetching user profile ({result.error_kind}): {result.details}")
            return None

        profile = result.value or {}
        return profile.get("username") or profile.get("name")


    def test_connection(self):
        return self.graph_client.test_connection()


    # ── Private ────────────────────────────────────────────────────────────────
    def _sender_action(self, recipient_id: str, action: str) -> bool:
        result = self.graph_client.send_sender_action(recipient_id, action)

        if not result.ok:
            logger.warning(f"Error sending {action} ({result.error_kind}): {result.details}")
            return False

        return True
