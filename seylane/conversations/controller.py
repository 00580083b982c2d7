"""
Conversation Controller
Read-only access to stored conversations for the dashboard.
"""

# Services
from ..bot.services.conversation_service import ConversationService

# Errors & Exceptions
from ..util import messages
from ..util.exceptions import NotFoundException





class ConversationController:

    def __init__(self):
        """ Initialize services... """

        self.conversation_service = ConversationService()



    def list_conversations(self, limit: int, offset: int) -> dict:
        """
        Conversations ordered by latest activity.

        Returns:
            {"conversations": [...], "total": int, "limit": int, "offset": int}
            Each conversation carries its message_count.
        """

        conversations, total = self.conversation_service.list_conversations(limit, offset)
        counts = self.conversation_service.count_messages([c.conversation_id for c in conversations])

        return {
            "conversations": [
                {**conversation.to_dict(), "message_count": counts[conversation.conversation_id]}
                for conversation in conversations
            ],
            "total": total,
            "limit": limit,
            "offset": offset
        }



    def get_conversation(self, conversation_id: int) -> dict:
        """
        One conversation with all of its messages, oldest first.

        Raises:
            NotFoundException: no such conversation.
        """

        conversation = self.conversation_service.get_conversation(conversation_id)
        if conversation is None:
            raise NotFoundException(messages.ERROR["CONVERSATION_NOT_FOUND"])

        result = conversation.to_dict()
        result["messages"] = [message.to_dict() for message in conversation.messages]
        return result
