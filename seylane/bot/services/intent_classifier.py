"""
Service: IntentClassifier
==========================
Turns one customer message (plus recent history) into an IntentAnalysis.

The LLM is asked for a single JSON object:
    {"intent", "confidence", "parameters", "requiresCatalogLookup"}

Fail-soft: a failed LLM call or an answer that does not match the expected
shape yields DEFAULT intent (unknown, low confidence, no catalog lookup).
One attempt per turn, no retry. Confidence is the model's own self-report,
clamped to [0, 1] (0.5 when omitted), and never gates behaviour.
"""

# Python Packages
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# Config
from ..config import prompts, llm_config, bot_config, intents

# Utils
from ...util.json_utils import safe_json_loads
from ...util.logger import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class IntentAnalysis:
    """ Classifier result for one turn. Never cached across turns... """

    intent: str
    confidence: float
    parameters: Optional[Dict[str, Any]] = None
    requires_catalog_lookup: bool = False

    @property
    def is_product_search(self) -> bool:
        return self.requires_catalog_lookup and self.intent == intents.PRODUCT_SEARCH

    def param(self, key: str, default: Any = None) -> Any:
        return (self.parameters or {}).get(key, default)


def default_intent() -> IntentAnalysis:
    return IntentAnalysis(
        intent = intents.UNKNOWN,
        confidence = bot_config.DEFAULT_INTENT_CONFIDENCE,
        parameters = None,
        requires_catalog_lookup = False
    )


def build_history_turns(history: Optional[List[Dict]], window: int) -> List[Dict[str, str]]:
    """
    Keep the newest *window* user/assistant turns as LLM chat messages.
    *history* is ordered oldest → newest.
    """
    turns = []
    for msg in (history or [])[-window:]:
        role, content = msg.get("role"), msg.get("content")
        if role in ("user", "assistant") and content:
            turns.append({"role": role, "content": content})
    return turns


class IntentClassifier:
    """
    LLM-backed intent classifier. Stateless apart from the chat service.
    """

    def __init__(self, chat_service):
        self.chat_service = chat_service


    def classify(self, message: str, history: Optional[List[Dict]] = None) -> IntentAnalysis:
        """
        Classify *message*.

        Args:
            message: Current customer message text.
            history: Prior turns, oldest first ({"role", "content"} dicts).
                     Only the last LLM_CONTEXT_WINDOW are sent.

        Returns:
            IntentAnalysis; default_intent() on any failure.
        """
        logger.info("🤖 Analyzing intent...")

        messages = [{"role": "system", "content": prompts.INTENT_SYSTEM_PROMPT}]
        messages.extend(build_history_turns(history, bot_config.LLM_CONTEXT_WINDOW))
        messages.append({
            "role":    "user",
            "content": prompts.INTENT_USER_TEMPLATE.format(message = message)
        })

        result = self.chat_service.generate_response(
            messages    = messages,
            temperature = llm_config.LLM_INTENT_TEMPERATURE,
            max_tokens  = llm_config.LLM_INTENT_MAX_TOKENS
        )

        if not result.ok:
            logger.warning(f"⚠️  Intent analysis failed ({result.error_kind}): {result.details}")
            return default_intent()

        analysis = self.parse(result.value)
        if analysis is None:
            logger.warning("⚠️  Intent analysis returned an unexpected shape; using default intent")
            return default_intent()

        logger.info(f"💭 Intent detected: {analysis.intent} (confidence: {analysis.confidence})")
        return analysis


    def parse(self, content: str) -> Optional[IntentAnalysis]:
        """
        Parse the model reply into an IntentAnalysis.

        Returns None when the reply is not a JSON object, the intent is not
        in the vocabulary, confidence is present but not a number, or
        parameters is not an object. A missing confidence takes
        DEFAULT_INTENT_CONFIDENCE. The legacy "requiresWooCommerce" flag is
        accepted as an alias of "requiresCatalogLookup".
        """
        data = safe_json_loads(content)
        if data is None:
            return None

        intent = data.get("intent")
        if intent not in intents.INTENTS:
            return None

        confidence = data.get("confidence", bot_config.DEFAULT_INTENT_CONFIDENCE)
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            return None

        raw_parameters = data.get("parameters")
        if raw_parameters is not None and not isinstance(raw_parameters, dict):
            return None

        requires_lookup = data.get("requiresCatalogLookup", data.get("requiresWooCommerce", False))

        return IntentAnalysis(
            intent = intent,
            confidence = min(max(float(confidence), 0.0), 1.0),
            parameters = self._normalize_parameters(raw_parameters),
            requires_catalog_lookup = requires_lookup is True
        )


    # ── Private ────────────────────────────────────────────────────────────────
    def _normalize_parameters(self, raw: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """ Keep known keys with usable values; None if nothing is left... """

        if not raw:
            return None

        parameters = {}
        for key in intents.PARAMETER_KEYS:
            value = raw.get(key)

            if key in ("minPrice", "maxPrice"):
                value = self._to_number(value)
            elif key == "keywords":
                value = self._to_keywords(value)
            elif isinstance(value, str):
                value = value.strip() or None
            else:
                value = None

            if value is not None:
                parameters[key] = value

        return parameters or None


    @staticmethod
    def _to_number(value):
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            try:
                return float(value.replace("$", "").strip())
            except ValueError:
                return None
        return None


    @staticmethod
    def _to_keywords(value):
        if isinstance(value, str):
            value = value.split()
        if not isinstance(value, list):
            return None

        keywords = [str(word).strip() for word in value if str(word).strip()]
        return keywords or None
