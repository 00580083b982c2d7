"""
Service: MessagePipeline
=========================
One customer turn, from stored user message to stored assistant reply.

    received
      → intent_classified
      → searching_catalog          (product_search + requiresCatalogLookup only)
      → response_generated
      → delivering
      → persisted

Any exception after `received` jumps to error_fallback: a fixed apology is
delivered best-effort and stored as the assistant message (no intent).
Every turn therefore stores exactly one assistant message.

Intake (get-or-create conversation + storing the user message) happens
before process_message() and is exposed here as intake() so the Celery task
and the tests share one code path.
"""

# Python Packages
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Config
from ..config import bot_config

# Services
from .intent_classifier import IntentClassifier, IntentAnalysis
from .catalog_search_service import CatalogSearchService
from .response_generator import ResponseGenerator
from .messaging_gateway import MessagingGateway
from .conversation_service import ConversationService

# Vendors
from ...vendors import ChatService
from ...vendors.woocommerce import WooCommerceClient
from ...vendors.instagram import InstagramGraphClient

# Utils
from ...util.logger import get_logger


logger = get_logger(__name__)


class PipelineState(str, Enum):
    RECEIVED           = "received"
    INTENT_CLASSIFIED  = "intent_classified"
    SEARCHING_CATALOG  = "searching_catalog"
    RESPONSE_GENERATED = "response_generated"
    DELIVERING         = "delivering"
    PERSISTED          = "persisted"
    ERROR_FALLBACK     = "error_fallback"


@dataclass
class TurnResult:
    """ What happened in one turn. Returned for logging and tests... """

    state: PipelineState
    intent: Optional[str] = None
    reply_text: str = ""
    product_count: int = 0
    delivered: bool = False


class MessagePipeline:

    def __init__(
        self,
        classifier: IntentClassifier,
        catalog: CatalogSearchService,
        generator: ResponseGenerator,
        gateway: MessagingGateway,
        conversation_service: Optional[ConversationService] = None,
        attachment_mode: str = "message_id",
        product_typing_delay_ms: int = 1500,
        digest_mode: str = "sequential"
    ):
        self.classifier              = classifier
        self.catalog                 = catalog
        self.generator               = generator
        self.gateway                 = gateway
        self.conversation_service    = conversation_service or ConversationService()
        self.attachment_mode         = attachment_mode
        self.product_typing_delay_ms = product_typing_delay_ms
        self.digest_mode             = digest_mode


    @classmethod
    def from_runtime_config(cls, runtime, conversation_service: Optional[ConversationService] = None) -> "MessagePipeline":
        """ Wire every collaborator from one RuntimeConfig snapshot... """

        chat_service = ChatService(
            provider         = runtime.ai_provider,
            openai_config    = runtime.openai,
            anthropic_config = runtime.anthropic
        )

        return cls(
            classifier              = IntentClassifier(chat_service),
            catalog                 = CatalogSearchService(WooCommerceClient(runtime.woocommerce)),
            generator               = ResponseGenerator(chat_service),
            gateway                 = MessagingGateway(
                InstagramGraphClient(runtime.instagram),
                typing_delay_ms = runtime.typing_delay_ms
            ),
            conversation_service    = conversation_service,
            attachment_mode         = runtime.intent_attachment_mode,
            product_typing_delay_ms = runtime.product_typing_delay_ms,
            digest_mode             = runtime.product_digest_mode
        )


    # ── Intake ─────────────────────────────────────────────────────────────────
    def intake(self, sender_id: str, text: str) -> Tuple[object, object]:
        """
        Get or create the sender's conversation and store the user message.

        Returns:
            (conversation, user_message)

        Raises:
            Exception: DB errors. Without a stored user message there is no
            turn to process.
        """
        conversation, is_new = self.conversation_service.get_or_create_conversation(
            sender_id,
            display_name_resolver = self.gateway.fetch_display_name
        )

        if not is_new:
            self.conversation_service.touch_conversation(conversation.conversation_id)

        user_message = self.conversation_service.insert_message(
            conversation_id = conversation.conversation_id,
            role            = "user",
            content         = text
        )

        logger.info(f"📩 Message from {sender_id} stored (conversation_id={conversation.conversation_id})")
        return conversation, user_message


    # ── Turn ───────────────────────────────────────────────────────────────────
    def process_message(
        self,
        conversation_id: int,
        sender_id: str,
        text: str,
        user_message_id: Optional[int] = None
    ) -> TurnResult:
        """
        Run one turn for an already stored user message.

        Args:
            conversation_id: Conversation the message belongs to.
            sender_id:       Instagram user to reply to.
            text:            The user message text.
            user_message_id: Id from intake; used to attach the intent in
                             message_id mode and to keep the message out
                             of its own history.
        """
        state = PipelineState.RECEIVED

        try:
            messages = self.conversation_service.get_recent_messages(
                conversation_id,
                limit              = bot_config.PIPELINE_HISTORY_LIMIT,
                exclude_message_id = user_message_id
            )
            history = self.conversation_service.to_history(messages)

            analysis = self.classifier.classify(text, history)
            state = PipelineState.INTENT_CLASSIFIED

            self._attach_intent(conversation_id, text, user_message_id, analysis)

            if analysis.is_product_search:
                state = PipelineState.SEARCHING_CATALOG
                result = self._product_turn(sender_id, text, analysis)
            else:
                result = self._reply_turn(sender_id, text, history, analysis)

            self.conversation_service.insert_message(
                conversation_id = conversation_id,
                role            = "assistant",
                content         = result.reply_text,
                intent          = analysis.intent,
                params          = analysis.parameters
            )
            result.state = PipelineState.PERSISTED

            logger.info(f"✅ Turn complete for {sender_id} (intent={analysis.intent}, delivered={result.delivered})")
            return result

        except Exception as exc:
            logger.exception(f"❌ Error processing message in state '{state.value}': {exc}")
            return self._fallback(conversation_id, sender_id)


    # ── Branches ───────────────────────────────────────────────────────────────
    def _reply_turn(self, sender_id: str, text: str, history, analysis: IntentAnalysis) -> TurnResult:
        reply = self.generator.generate_reply(text, history, analysis.intent)

        delivered = self.gateway.deliver_with_typing_indicator(sender_id, reply)

        return TurnResult(
            state      = PipelineState.DELIVERING,
            intent     = analysis.intent,
            reply_text = reply,
            delivered  = delivered
        )


    def _product_turn(self, sender_id: str, text: str, analysis: IntentAnalysis) -> TurnResult:
        if self.catalog.is_ready():
            products = self.catalog.search_products(analysis)
        else:
            logger.warning("⚠️  Catalog not configured, skipping product search")
            products = []

        summary = self.generator.generate_product_reply(products, text)
        shown   = products[:bot_config.PRODUCT_DIGEST_CAP]

        self.gateway.typing_on(sender_id)
        self.gateway.pause(self.product_typing_delay_ms)

        if self.digest_mode == "batched":
            delivered = self.gateway.deliver(sender_id, summary)
            if shown:
                listing   = CatalogSearchService.format_products_for_message(shown)
                delivered = self.gateway.deliver(sender_id, listing) and delivered
        else:
            delivered = self.gateway.deliver_product_digest(
                sender_id,
                shown,
                cap        = bot_config.PRODUCT_DIGEST_CAP,
                intro_text = summary
            )

        self.gateway.typing_off(sender_id)

        logger.info(f"📦 Sent {len(shown)} of {len(products)} products to {sender_id}")
        return TurnResult(
            state         = PipelineState.DELIVERING,
            intent        = analysis.intent,
            reply_text    = summary,
            product_count = len(products),
            delivered     = delivered
        )


    # ── Intent attachment ──────────────────────────────────────────────────────
    def _attach_intent(
        self,
        conversation_id: int,
        text: str,
        user_message_id: Optional[int],
        analysis: IntentAnalysis
    ) -> None:
        """
        message_id:    update the row intake created.
        content_match: newest user message with identical text among the
                       last few stored messages.
        """
        message_id = user_message_id

        if self.attachment_mode == "content_match" or message_id is None:
            match = self.conversation_service.find_recent_user_message(conversation_id, text)
            message_id = match.message_id if match else None

        if message_id is None:
            logger.warning(f"⚠️  No stored user message to tag with intent (conversation_id={conversation_id})")
            return

        self.conversation_service.update_message_intent(message_id, analysis.intent, analysis.parameters)


    # ── Fallback ───────────────────────────────────────────────────────────────
    def _fallback(self, conversation_id: int, sender_id: str) -> TurnResult:
        apology = bot_config.PIPELINE_ERROR_APOLOGY

        delivered = False
        try:
            delivered = self.gateway.deliver(sender_id, apology)
        except Exception as exc:
            logger.error(f"Error sending apology to {sender_id}: {exc}")

        try:
            self.conversation_service.insert_message(
                conversation_id = conversation_id,
                role            = "assistant",
                content         = apology
            )
        except Exception as exc:
            logger.error(f"Error storing apology (conversation_id={conversation_id}): {exc}")

        return TurnResult(
            state      = PipelineState.ERROR_FALLBACK,
            reply_text = apology,
            delivered  = delivered
        )
