"""
Conversation validation for the history endpoints.
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages

# Config
from ...bot.config import bot_config





class ConversationValidation:

    @staticmethod
    def validate_pagination(limit, offset):
        """
        Returns:
            (limit, offset) as ints
        """

        try:
            limit  = int(limit) if limit is not None else bot_config.CONVERSATIONS_DEFAULT_LIMIT
            offset = int(offset) if offset is not None else 0
        except (TypeError, ValueError):
            raise ValidationException(
                error_code = "INVALID_PAGINATION",
                message = messages.ERROR["INVALID_PAGINATION"]
            )

        if limit < 1 or limit > bot_config.CONVERSATIONS_MAX_LIMIT or offset < 0:
            raise ValidationException(
                error_code = "INVALID_PAGINATION",
                message = messages.ERROR["INVALID_PAGINATION"]
            )

        return limit, offset
