"""Conversation persistence tests."""

from seylane.config.database import db
from seylane.models import Conversation, Message


class TestConversations:
    """Conversation creation and lookup."""

    def test_get_or_create_is_idempotent(self, conversation_service):
        """Test the second call returns the same conversation."""
        first, created = conversation_service.get_or_create_conversation("u1")
        second, created_again = conversation_service.get_or_create_conversation("u1")

        assert created is True
        assert created_again is False
        assert first.conversation_id == second.conversation_id
        assert Conversation.query.count() == 1

    def test_display_name_resolved_for_new_user_only(self, conversation_service):
        """Test the resolver runs once, for the new conversation."""
        calls = []

        def resolver(user_id):
            calls.append(user_id)
            return "jane_doe"

        conversation, _ = conversation_service.get_or_create_conversation("u1", resolver)
        conversation_service.get_or_create_conversation("u1", resolver)

        assert conversation.instagram_username == "jane_doe"
        assert calls == ["u1"]

    def test_concurrent_create_reuses_existing_row(self, conversation_service):
        """Test a row created by another worker mid-call is returned instead of raising."""

        def resolver(user_id):
            db.session.add(Conversation(instagram_user_id=user_id, instagram_username="first_writer", status="active"))
            db.session.commit()
            return "second_writer"

        conversation, created = conversation_service.get_or_create_conversation("u1", resolver)

        assert created is False
        assert conversation.instagram_username == "first_writer"
        assert Conversation.query.count() == 1

    def test_list_conversations(self, conversation_service):
        """Test listing returns the page and the total count."""
        for user_id in ("a", "b", "c"):
            conversation_service.get_or_create_conversation(user_id)

        page, total = conversation_service.list_conversations(limit=2, offset=0)

        assert total == 3
        assert len(page) == 2

    def test_get_missing_conversation(self, conversation_service):
        """Test a missing id returns None."""
        assert conversation_service.get_conversation(999) is None


class TestMessages:
    """Message persistence and history."""

    def _conversation(self, conversation_service):
        conversation, _ = conversation_service.get_or_create_conversation("u1")
        return conversation.conversation_id

    def test_recent_messages_are_newest_in_order(self, conversation_service):
        """Test the newest N messages come back oldest first."""
        conversation_id = self._conversation(conversation_service)
        for i in range(12):
            conversation_service.insert_message(conversation_id, "user" if i % 2 == 0 else "assistant", f"m{i}")

        messages = conversation_service.get_recent_messages(conversation_id, limit=10)

        assert [m.content for m in messages] == [f"m{i}" for i in range(2, 12)]

    def test_exclude_current_message(self, conversation_service):
        """Test the current user message can be left out of history."""
        conversation_id = self._conversation(conversation_service)
        conversation_service.insert_message(conversation_id, "user", "earlier")
        current = conversation_service.insert_message(conversation_id, "user", "now")

        messages = conversation_service.get_recent_messages(conversation_id, exclude_message_id=current.message_id)

        assert [m.content for m in messages] == ["earlier"]

    def test_update_message_intent(self, conversation_service):
        """Test intent and parameters are attached in place."""
        conversation_id = self._conversation(conversation_service)
        message = conversation_service.insert_message(conversation_id, "user", "red dress")

        updated = conversation_service.update_message_intent(
            message.message_id, "product_search", {"color": "red"}
        )

        stored = db.session.get(Message, message.message_id)
        assert updated is True
        assert stored.intent == "product_search"
        assert stored.intent_data == {"color": "red"}

    def test_update_missing_message(self, conversation_service):
        """Test updating an unknown id reports False."""
        assert conversation_service.update_message_intent(12345, "greeting", None) is False

    def test_find_recent_user_message(self, conversation_service):
        """Test the newest matching user message is found by content."""
        conversation_id = self._conversation(conversation_service)
        older = conversation_service.insert_message(conversation_id, "user", "hi")
        conversation_service.insert_message(conversation_id, "assistant", "hi")
        newer = conversation_service.insert_message(conversation_id, "user", "hi")

        match = conversation_service.find_recent_user_message(conversation_id, "hi")

        assert match.message_id == newer.message_id
        assert match.message_id != older.message_id

    def test_find_recent_user_message_window(self, conversation_service):
        """Test messages outside the window are not matched."""
        conversation_id = self._conversation(conversation_service)
        conversation_service.insert_message(conversation_id, "user", "old question")
        for i in range(5):
            conversation_service.insert_message(conversation_id, "assistant", f"reply {i}")

        assert conversation_service.find_recent_user_message(conversation_id, "old question") is None

    def test_to_history(self, conversation_service):
        """Test rows become role/content dicts."""
        conversation_id = self._conversation(conversation_service)
        conversation_service.insert_message(conversation_id, "user", "hi")

        history = conversation_service.to_history(conversation_service.get_recent_messages(conversation_id))

        assert history == [{"role": "user", "content": "hi"}]
