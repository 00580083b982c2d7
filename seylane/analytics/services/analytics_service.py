"""
Analytics Service

Handles:
    - Overview counters (conversations, messages, active users, product searches)
    - Daily message volume
    - Intent distribution
    - Recent message log joined with the sender
"""

# Python Packages
from datetime import datetime, timedelta, timezone
from typing import List, Optional

# SQLAlchemy
from sqlalchemy import func

# Database
from ...config.database import db

# Models
from ...models.conversation import Conversation
from ...models.message import Message

# Config
from ...bot.config import bot_config, intents





class AnalyticsService:

    def overview(self, now: Optional[datetime] = None) -> dict:
        """
        Headline counters for the dashboard.

        Returns:
            {
                "total_conversations":  int,
                "total_messages":       int,
                "active_conversations": int,   # activity in the last 24h
                "product_searches":     int    # messages tagged product_search
            }
        """

        now = now or datetime.now(timezone.utc)
        active_since = now - timedelta(hours = bot_config.ANALYTICS_ACTIVE_WINDOW_HOURS)

        return {
            "total_conversations":  Conversation.query.count(),
            "total_messages":       Message.query.count(),
            "active_conversations": Conversation.query.filter(
                Conversation.last_message_at >= active_since
            ).count(),
            "product_searches":     Message.query.filter(
                Message.intent == intents.PRODUCT_SEARCH
            ).count(),
        }


    def messages_over_time(self, days: int, now: Optional[datetime] = None) -> List[dict]:
        """
        Message count per calendar day for the last *days* days, oldest first.
        Days without messages are not listed.
        """

        now = now or datetime.now(timezone.utc)
        since = now - timedelta(days = days)

        day = func.date(Message.created_at)
        rows = (
            db.session.query(day.label("date"), func.count(Message.message_id).label("count"))
            .filter(Message.created_at >= since)
            .group_by(day)
            .order_by(day)
            .all()
        )

        # sqlite returns text, postgres returns a date
        return [{"date": str(row.date), "count": row.count} for row in rows]


    def intent_distribution(self) -> List[dict]:
        """ Tagged messages per intent, most frequent first... """

        count = func.count(Message.message_id)
        rows = (
            db.session.query(Message.intent, count.label("count"))
            .filter(Message.intent.isnot(None))
            .group_by(Message.intent)
            .order_by(count.desc(), Message.intent)
            .all()
        )

        return [{"intent": row.intent, "count": row.count} for row in rows]


    def recent_logs(self, limit: int) -> List[dict]:
        """ Newest messages first, each with its sender's Instagram identity... """

        rows = (
            db.session.query(Message, Conversation.instagram_user_id, Conversation.instagram_username)
            .join(Conversation, Message.conversation_id == Conversation.conversation_id)
            .order_by(Message.created_at.desc(), Message.message_id.desc())
            .limit(limit)
            .all()
        )

        logs = []
        for message, instagram_user_id, instagram_username in rows:
            entry = message.to_dict()
            entry["instagram_user_id"] = instagram_user_id
            entry["instagram_username"] = instagram_username
            logs.append(entry)

        return logs
