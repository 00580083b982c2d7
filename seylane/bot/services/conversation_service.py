"""
Service: ConversationService

Creates, reads, and updates conversations and their messages.

Data tables:
  conversations → one row per Instagram user
  messages      → one row per message turn

Design:
  - get_or_create_conversation() is idempotent: safe to call on every event.
    A concurrent insert for the same user resolves to the existing row.
  - Writes roll back on failure so a failed write never poisons the
    SQLAlchemy session for the caller's next query.
  - insert_message() re-raises after rollback: the pipeline must know when a
    reply was not stored. Reads and the intent update are fail-soft.
  - History is returned oldest first so the LLM reads it in order.

Known race: two events for the same user processed at the same time can
interleave touch_conversation() (last write wins) and, with content-match
intent attachment, tag the wrong user message. Turns are not serialized.
"""

# Python Packages
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

# Database
from ...config.database import db

# Models
from ...models.conversation import Conversation
from ...models.message import Message

# Config
from ..config import bot_config

# Utils
from ...util.logger import get_logger


logger = get_logger(__name__)


class ConversationService:
    """
    Persistence store used by the webhook intake and the message pipeline.
    """

    # ── Conversations ──────────────────────────────────────────────────────────

    def get_or_create_conversation(
        self,
        instagram_user_id: str,
        display_name_resolver: Optional[Callable[[str], Optional[str]]] = None
    ) -> Tuple[Conversation, bool]:
        """
        Return (conversation, is_new) for an Instagram user id.

        Args:
            instagram_user_id:     Sender id from the webhook.
            display_name_resolver: Called only for new users to fetch a
                                   display name; None result is fine.

        Raises:
            Exception: Propagated if the DB commit fails (caller handles).
        """
        conversation = Conversation.query.filter_by(instagram_user_id=instagram_user_id).first()
        if conversation:
            return conversation, False

        username = display_name_resolver(instagram_user_id) if display_name_resolver else None

        conversation = Conversation(
            instagram_user_id  = instagram_user_id,
            instagram_username = username,
            status             = "active",
            last_message_at    = datetime.now(timezone.utc)
        )

        try:
            db.session.add(conversation)
            db.session.commit()

        except IntegrityError:
            # Another worker created the row first
            db.session.rollback()
            existing = Conversation.query.filter_by(instagram_user_id=instagram_user_id).first()
            if existing is None:
                raise
            logger.info(f"🔁 Conversation for user {instagram_user_id} created concurrently, reusing it")
            return existing, False

        except Exception:
            db.session.rollback()
            raise

        logger.info(f"✨ Created new conversation for user {instagram_user_id}")
        return conversation, True


    def touch_conversation(self, conversation_id: int) -> None:
        """ Bump last_message_at. Fail-soft... """

        try:
            Conversation.query.filter_by(conversation_id=conversation_id).update(
                {"last_message_at": datetime.now(timezone.utc)}
            )
            db.session.commit()

        except Exception as exc:
            db.session.rollback()
            logger.warning(f"⚠️  touch_conversation failed (conversation_id={conversation_id}): {exc}")


    def get_conversation(self, conversation_id: int) -> Optional[Conversation]:
        return db.session.get(Conversation, conversation_id)


    def list_conversations(self, limit: int, offset: int = 0) -> Tuple[List[Conversation], int]:
        """ Most recently active first, plus the total count... """

        query = Conversation.query.order_by(Conversation.last_message_at.desc(), Conversation.conversation_id.desc())
        return query.offset(offset).limit(limit).all(), Conversation.query.count()


    def count_messages(self, conversation_ids: List[int]) -> Dict[int, int]:
        """ Message count per conversation id; ids without messages map to 0... """

        counts = dict.fromkeys(conversation_ids, 0)
        if not conversation_ids:
            return counts

        rows = (
            db.session.query(Message.conversation_id, func.count(Message.message_id))
            .filter(Message.conversation_id.in_(conversation_ids))
            .group_by(Message.conversation_id)
            .all()
        )
        counts.update({conversation_id: count for conversation_id, count in rows})
        return counts

    # ── Message Persistence ────────────────────────────────────────────────────

    def insert_message(
        self,
        conversation_id: int,
        role: str,
        content: str,
        intent: Optional[str] = None,
        params: Optional[Dict] = None
    ) -> Message:
        """
        Append a message to a conversation.

        Raises:
            Exception: DB error, after rolling back the session.
        """
        message = Message(
            conversation_id = conversation_id,
            role            = role,
            content         = content,
            intent          = intent,
            intent_data     = params
        )

        try:
            db.session.add(message)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

        return message


    def update_message_intent(self, message_id: int, intent: str, params: Optional[Dict]) -> bool:
        """
        Attach the classified intent to an already stored message.

        Returns:
            True if a row was updated. False when missing or on DB error.
        """
        try:
            updated = Message.query.filter_by(message_id=message_id).update(
                {"intent": intent, "intent_data": params}
            )
            db.session.commit()
            return updated > 0

        except Exception as exc:
            db.session.rollback()
            logger.warning(f"⚠️  Error updating message intent (message_id={message_id}): {exc}")
            return False


    def find_recent_user_message(
        self,
        conversation_id: int,
        content: str,
        window: int = bot_config.INTENT_MATCH_WINDOW
    ) -> Optional[Message]:
        """
        Most recent user message with exactly *content* among the last
        *window* messages of the conversation. Content-match join kept for
        compatibility with the message_id-less attachment mode.
        """
        recent = (
            Message.query
            .filter_by(conversation_id=conversation_id)
            .order_by(Message.created_at.desc(), Message.message_id.desc())
            .limit(window)
            .all()
        )

        return next(
            (msg for msg in recent if msg.role == "user" and msg.content == content),
            None
        )

    # ── History Retrieval ──────────────────────────────────────────────────────

    def get_recent_messages(
        self,
        conversation_id: int,
        limit: int = bot_config.PIPELINE_HISTORY_LIMIT,
        exclude_message_id: Optional[int] = None
    ) -> List[Message]:
        """
        Return the *limit* most recent messages in chronological order.

        Args:
            conversation_id:    Conversation PK.
            limit:              Max messages to return.
            exclude_message_id: Leave this message out (the current turn).

        Returns:
            Messages oldest first. Empty list on DB error.
        """
        try:
            query = Message.query.filter_by(conversation_id=conversation_id)
            if exclude_message_id is not None:
                query = query.filter(Message.message_id != exclude_message_id)

            messages = (
                query
                .order_by(Message.created_at.desc(), Message.message_id.desc())
                .limit(limit)
                .all()
            )
            return list(reversed(messages))

        except Exception as exc:
            db.session.rollback()
            logger.warning(f"⚠️  Error fetching conversation history (conversation_id={conversation_id}): {exc}")
            return []


    @staticmethod
    def to_history(messages: List[Message]) -> List[Dict[str, str]]:
        """ Message rows → [{"role", "content"}] for the LLM services... """

        return [{"role": msg.role, "content": msg.content} for msg in messages]
