"""
Analytics validation for the analytics and log endpoints.
"""

# Exceptions
from ...util.exceptions import ValidationException

# Messages
from ...util import messages

# Config
from ...bot.config import bot_config





class AnalyticsValidation:

    @staticmethod
    def validate_days(days) -> int:
        try:
            days = int(days) if days is not None else bot_config.ANALYTICS_DEFAULT_DAYS
        except (TypeError, ValueError):
            raise ValidationException(
                error_code = "INVALID_DAYS",
                message = messages.ERROR["INVALID_DAYS"]
            )

        if days < 1 or days > bot_config.ANALYTICS_MAX_DAYS:
            raise ValidationException(
                error_code = "INVALID_DAYS",
                message = messages.ERROR["INVALID_DAYS"]
            )

        return days


    @staticmethod
    def validate_log_limit(limit) -> int:
        try:
            limit = int(limit) if limit is not None else bot_config.LOGS_DEFAULT_LIMIT
        except (TypeError, ValueError):
            raise ValidationException(
                error_code = "INVALID_LOG_LIMIT",
                message = messages.ERROR["INVALID_LOG_LIMIT"]
            )

        if limit < 1 or limit > bot_config.LOGS_MAX_LIMIT:
            raise ValidationException(
                error_code = "INVALID_LOG_LIMIT",
                message = messages.ERROR["INVALID_LOG_LIMIT"]
            )

        return limit
