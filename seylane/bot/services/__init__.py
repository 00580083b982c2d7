"""
Bot Services Package

Exports all service classes used by the webhook task and controllers.

Service responsibilities:
  MessagePipeline       — one customer turn: classify → search → reply → deliver → persist
  IntentClassifier      — LLM intent + parameter extraction
  CatalogSearchService  — WooCommerce query construction and post-filtering
  ResponseGenerator     — conversational and product-summary replies
  MessagingGateway      — Instagram handshake, inbound parsing, outbound delivery
  ConversationService   — conversation and message persistence
  SettingsService       — settings store over environment defaults
"""

from .intent_classifier import IntentClassifier, IntentAnalysis
from .catalog_search_service import CatalogSearchService
from .response_generator import ResponseGenerator
from .messaging_gateway import MessagingGateway, InboundEvent
from .conversation_service import ConversationService
from .settings_service import SettingsService, RuntimeConfig
from .message_pipeline import MessagePipeline, PipelineState, TurnResult

__all__ = [
    "IntentClassifier",
    "IntentAnalysis",
    "CatalogSearchService",
    "ResponseGenerator",
    "MessagingGateway",
    "InboundEvent",
    "ConversationService",
    "SettingsService",
    "RuntimeConfig",
    "MessagePipeline",
    "PipelineState",
    "TurnResult",
]
