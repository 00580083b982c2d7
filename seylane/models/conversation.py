"""
Model: Conversation
Table: conversations

One row per Instagram user talking to the bot. Created on the first
inbound message from a new user id; last_message_at is bumped on every
later inbound message. The pipeline never deletes conversations.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db


CONVERSATION_STATUSES = ("active", "archived", "blocked")


class Conversation(db.Model):
    """A DM thread between one Instagram user and the bot."""

    __tablename__ = "conversations"

    conversation_id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    instagram_user_id = db.Column(
        db.String(255),
        nullable=False,
        index=True,
        unique=True,
        doc="Instagram-scoped sender id from the webhook payload."
    )

    instagram_username = db.Column(
        db.String(255),
        nullable=True,
        doc="Display name resolved from the Graph API profile, when available."
    )

    status = db.Column(
        db.String(20),
        nullable=False,
        index=True,
        default="active",
        server_default="active",
        doc="One of: active, archived, blocked."
    )

    last_message_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=func.now()
    )

    created_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=func.now()
    )

    messages = db.relationship(
        "Message",
        back_populates="conversation",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Message.message_id"
    )

    def to_dict(self):
        return {
            "conversation_id":    self.conversation_id,
            "instagram_user_id":  self.instagram_user_id,
            "instagram_username": self.instagram_username,
            "status":             self.status,
            "last_message_at":    self.last_message_at.isoformat() if self.last_message_at else None,
            "created_at":         self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Conversation {self.instagram_user_id}>"
