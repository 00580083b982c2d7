"""
Model: Message
Table: messages

An individual turn in a conversation. Role is 'user' (Instagram customer)
or 'assistant' (bot).

intent / intent_data hold the classifier result:
  intent      — one of the closed intent vocabulary (bot/config/intents.py)
  intent_data — extracted parameters, e.g.
                {"productType": "dress", "color": "red", "maxPrice": 50}

The user message is written first without an intent and updated in place
once the classifier has run.
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db





class Message(db.Model):
    """ One message (user or assistant turn) in a conversation... """

    # Table Name
    __tablename__ = "messages"

    message_id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    conversation_id = db.Column(
        db.Integer,
        db.ForeignKey("conversations.conversation_id", ondelete = "CASCADE"),
        nullable = False,
        index = True
    )

    role = db.Column(
        db.String(20),
        nullable = False,
        doc = "'user' or 'assistant'."
    )

    content = db.Column(db.Text, nullable = False)

    intent = db.Column(
        db.String(50),
        nullable = True,
        index = True,
        doc = "Classified intent tag. Empty on error-fallback replies."
    )

    intent_data = db.Column(
        db.JSON,
        nullable = True,
        doc = "Structured intent parameters. See module docstring."
    )

    created_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        index = True,
        server_default = func.now()
    )

    # Relationship
    conversation = db.relationship("Conversation", back_populates = "messages")

    def to_dict(self):
        return {
            "message_id":      self.message_id,
            "conversation_id": self.conversation_id,
            "role":            self.role,
            "content":         self.content,
            "intent":          self.intent,
            "intent_data":     self.intent_data,
            "created_at":      self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<Message {self.message_id} role={self.role}>"
