"""
Webhook validation for all webhook endpoints.
"""

# Exceptions
from ...util.exceptions import AppException

# Messages
from ...util import messages





class WebhookValidation:

    @staticmethod
    def validate_handshake(mode, token):
        if not mode or not token:
            raise AppException(
                error_code = "WEBHOOK_PARAMS_MISSING",
                message = messages.ERROR["WEBHOOK_PARAMS_MISSING"]
            )


    @staticmethod
    def validate_test_message(data) -> str:
        """ Returns the recipient id; "recipientId" is accepted as an alias... """

        if not isinstance(data, dict):
            raise AppException(
                error_code = "INVALID_REQUEST",
                message = messages.ERROR["INVALID_REQUEST"]
            )

        recipient_id = data.get("recipient_id", data.get("recipientId"))
        message      = data.get("message")

        if not recipient_id or not message:
            raise AppException(
                error_code = "MISSING_FIELDS",
                message = messages.ERROR["TEST_MESSAGE_FIELDS"]
            )

        if not isinstance(recipient_id, (str, int)) or not isinstance(message, str) or not message.strip():
            raise AppException(
                error_code = "MISSING_FIELDS",
                message = messages.ERROR["TEST_MESSAGE_FIELDS"]
            )

        return str(recipient_id)
