"""
Model: Setting
Table: settings

Key/value bot configuration written from the admin API and read by the
pipeline on every turn. A row overrides the environment default of the
same key (see bot/services/settings_service.py).
"""

# Python Packages
from sqlalchemy import func

# Database
from ..config.database import db


class Setting(db.Model):

    __tablename__ = "settings"

    setting_id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    key = db.Column(db.String(100), nullable=False, unique=True, index=True)

    value = db.Column(db.Text, nullable=False)

    description = db.Column(db.Text, nullable=True)

    updated_at = db.Column(
        db.DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now()
    )

    def __repr__(self):
        return f"<Setting {self.key}>"
