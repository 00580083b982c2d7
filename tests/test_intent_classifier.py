"""Intent classifier tests."""

from seylane.bot.config import bot_config, llm_config
from seylane.bot.services.intent_classifier import IntentClassifier, build_history_turns, default_intent
from seylane.util.outcome import Outcome, ErrorKind

from fakes import FakeChatService, intent_reply


class TestClassify:
    """IntentClassifier.classify behaviour."""

    def test_greeting(self):
        """Test a well-formed greeting reply is parsed."""
        classifier = IntentClassifier(FakeChatService(intent_reply("greeting", 0.98)))

        analysis = classifier.classify("hi")

        assert analysis.intent == "greeting"
        assert analysis.confidence == 0.98
        assert analysis.parameters is None
        assert analysis.requires_catalog_lookup is False
        assert analysis.is_product_search is False

    def test_product_search_parameters(self):
        """Test product parameters are kept and normalized."""
        chat = FakeChatService(intent_reply(
            "product_search",
            parameters={"color": " red ", "productType": "dress", "maxPrice": "$50", "keywords": "red dress"},
            requires_lookup=True,
        ))

        analysis = IntentClassifier(chat).classify("red dress under $50")

        assert analysis.is_product_search
        assert analysis.parameters == {
            "color": "red",
            "productType": "dress",
            "maxPrice": 50.0,
            "keywords": ["red", "dress"],
        }

    def test_llm_failure_returns_default(self):
        """Test a failed LLM call falls back to the default intent."""
        chat = FakeChatService(Outcome.failure(ErrorKind.TRANSPORT, "timeout"))

        analysis = IntentClassifier(chat).classify("anything")

        assert analysis == default_intent()
        assert analysis.intent == "unknown"
        assert analysis.confidence == bot_config.DEFAULT_INTENT_CONFIDENCE
        assert analysis.requires_catalog_lookup is False

    def test_non_json_returns_default(self):
        """Test prose instead of JSON falls back to the default intent."""
        chat = FakeChatService(Outcome.success("I think the customer wants a dress."))

        assert IntentClassifier(chat).classify("dress?") == default_intent()

    def test_uses_low_temperature(self):
        """Test the intent call uses the intent temperature and token cap."""
        chat = FakeChatService(intent_reply("help"))

        IntentClassifier(chat).classify("help me")

        call = chat.calls[0]
        assert call["temperature"] == llm_config.LLM_INTENT_TEMPERATURE
        assert call["max_tokens"] == llm_config.LLM_INTENT_MAX_TOKENS
        assert call["messages"][0]["role"] == "system"
        assert "help me" in call["messages"][-1]["content"]

    def test_history_trimmed_to_context_window(self):
        """Test only the newest turns of history reach the model."""
        history = [
            {"role": "user" if i % 2 == 0 else "assistant", "content": f"turn {i}"}
            for i in range(10)
        ]
        chat = FakeChatService(intent_reply("general_question"))

        IntentClassifier(chat).classify("and shipping?", history)

        sent = chat.calls[0]["messages"][1:-1]
        assert [m["content"] for m in sent] == [f"turn {i}" for i in range(5, 10)]


class TestParse:
    """IntentClassifier.parse shape checks."""

    def setup_method(self):
        self.classifier = IntentClassifier(FakeChatService())

    def test_fenced_json(self):
        """Test JSON wrapped in a code fence is accepted."""
        content = '```json\n{"intent": "goodbye", "confidence": 0.7}\n```'

        analysis = self.classifier.parse(content)

        assert analysis.intent == "goodbye"
        assert analysis.confidence == 0.7

    def test_unknown_intent_rejected(self):
        """Test an intent outside the vocabulary is rejected."""
        assert self.classifier.parse('{"intent": "refund", "confidence": 0.9}') is None

    def test_non_numeric_confidence_rejected(self):
        """Test a string or boolean confidence is rejected."""
        assert self.classifier.parse('{"intent": "help", "confidence": "high"}') is None
        assert self.classifier.parse('{"intent": "help", "confidence": true}') is None

    def test_missing_confidence_defaults(self):
        """Test a reply without confidence keeps its intent at the default confidence."""
        analysis = self.classifier.parse(
            '{"intent": "product_search", "parameters": {"productType": "dress"}, "requiresCatalogLookup": true}'
        )

        assert analysis.intent == "product_search"
        assert analysis.confidence == bot_config.DEFAULT_INTENT_CONFIDENCE
        assert analysis.parameters == {"productType": "dress"}
        assert analysis.is_product_search

    def test_confidence_clamped(self):
        """Test confidence is clamped into [0, 1]."""
        assert self.classifier.parse('{"intent": "help", "confidence": 7}').confidence == 1.0
        assert self.classifier.parse('{"intent": "help", "confidence": -2}').confidence == 0.0

    def test_parameters_must_be_object(self):
        """Test a non-object parameters field is rejected."""
        assert self.classifier.parse('{"intent": "help", "confidence": 0.5, "parameters": ["x"]}') is None

    def test_legacy_lookup_flag(self):
        """Test requiresWooCommerce is read as the catalog lookup flag."""
        analysis = self.classifier.parse(
            '{"intent": "product_search", "confidence": 0.8, "requiresWooCommerce": true}'
        )

        assert analysis.requires_catalog_lookup is True

    def test_lookup_flag_must_be_true(self):
        """Test a truthy string does not enable catalog lookup."""
        analysis = self.classifier.parse(
            '{"intent": "product_search", "confidence": 0.8, "requiresCatalogLookup": "yes"}'
        )

        assert analysis.requires_catalog_lookup is False
        assert analysis.is_product_search is False

    def test_unknown_parameter_keys_dropped(self):
        """Test unknown parameter keys and empty values are dropped."""
        analysis = self.classifier.parse(
            '{"intent": "product_search", "confidence": 0.8, '
            '"parameters": {"mood": "happy", "color": "", "brand": "Zara"}}'
        )

        assert analysis.parameters == {"brand": "Zara"}


class TestHistoryTurns:
    """build_history_turns filtering."""

    def test_skips_empty_and_foreign_roles(self):
        """Test system rows and empty content are skipped."""
        history = [
            {"role": "system", "content": "x"},
            {"role": "user", "content": ""},
            {"role": "assistant", "content": "hello"},
        ]

        assert build_history_turns(history, 5) == [{"role": "assistant", "content": "hello"}]

    def test_none_history(self):
        """Test None history yields no turns."""
        assert build_history_turns(None, 5) == []
