"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.

Import order matters: models with foreign keys must be imported after
the models they reference.
"""

from .conversation import Conversation
from .message import Message
from .setting import Setting

__all__ = [
    "Conversation",
    "Message",
    "Setting",
]
