"""Response generator tests."""

from seylane.bot.config import bot_config, llm_config
from seylane.bot.services.response_generator import ResponseGenerator
from seylane.util.outcome import Outcome, ErrorKind

from fakes import FakeChatService, sample_product


class TestGenerateReply:
    """Conversational replies."""

    def test_returns_model_text(self):
        """Test the model text is returned as the reply."""
        chat = FakeChatService(Outcome.success("Hi there! How can I help?"))

        reply = ResponseGenerator(chat).generate_reply("hi", [], "greeting")

        assert reply == "Hi there! How can I help?"
        call = chat.calls[0]
        assert call["temperature"] == llm_config.LLM_REPLY_TEMPERATURE
        assert call["max_tokens"] == llm_config.LLM_REPLY_MAX_TOKENS
        assert "greeting" in call["messages"][0]["content"]
        assert call["messages"][-1] == {"role": "user", "content": "hi"}

    def test_history_included(self):
        """Test recent turns are passed between system prompt and message."""
        chat = FakeChatService(Outcome.success("Sure."))
        history = [
            {"role": "user", "content": "do you ship?"},
            {"role": "assistant", "content": "Yes, worldwide."},
        ]

        ResponseGenerator(chat).generate_reply("how long?", history)

        assert chat.calls[0]["messages"][1:3] == history

    def test_failure_returns_apology(self):
        """Test a failed call yields the fixed apology."""
        chat = FakeChatService(Outcome.failure(ErrorKind.NOT_CONFIGURED, "no key"))

        assert ResponseGenerator(chat).generate_reply("hi") == bot_config.GENERATION_APOLOGY


class TestGenerateProductReply:
    """Product summary replies."""

    def test_empty_products_skip_model(self):
        """Test no model call is made when nothing was found."""
        chat = FakeChatService(Outcome.success("unused"))

        reply = ResponseGenerator(chat).generate_product_reply([], "purple boots")

        assert chat.calls == []
        assert "purple boots" in reply

    def test_summary_prompt_mentions_count_and_names(self):
        """Test the prompt carries the query, count and product names."""
        chat = FakeChatService(Outcome.success("Found 2 lovely red dresses for you!"))
        products = [sample_product(1, "Red Dress"), sample_product(2, "Scarlet Dress")]

        reply = ResponseGenerator(chat).generate_product_reply(products, "red dress under $50")

        assert reply == "Found 2 lovely red dresses for you!"
        system, user = chat.calls[0]["messages"]
        assert "red dress under $50" in system["content"]
        assert "2" in system["content"]
        assert "Red Dress" in user["content"] and "Scarlet Dress" in user["content"]
        assert chat.calls[0]["temperature"] == llm_config.LLM_PRODUCT_TEMPERATURE

    def test_non_string_names_tolerated(self):
        """Test product names that are not strings still build a prompt."""
        chat = FakeChatService(Outcome.success("Here you go!"))
        products = [{"id": 1, "name": 42}, {"id": 2, "name": None}, sample_product(3, "Red Dress")]

        assert ResponseGenerator(chat).generate_product_reply(products, "dress") == "Here you go!"
        assert "42, , Red Dress" in chat.calls[0]["messages"][1]["content"]

    def test_failure_returns_apology(self):
        """Test a failed summary call yields the fixed apology."""
        chat = FakeChatService(Outcome.failure(ErrorKind.TRANSPORT, "boom"))

        reply = ResponseGenerator(chat).generate_product_reply([sample_product(1, "Red Dress")], "dress")

        assert reply == bot_config.GENERATION_APOLOGY
