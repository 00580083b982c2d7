"""
Webhook Handler
Instagram webhook endpoints.
"""

# Python Packages
from flask import request, make_response
from flask_restx import Namespace, Resource

# Validations
from .validations.webhook_validation import WebhookValidation

# Controller
from .controller import WebhookController

# Exceptions & messages
from ..util.exceptions import AppException, InternalServerException

# Utils
from ..util.logger import get_logger

# Namespace
webhook_namespace = Namespace("webhook", description="Instagram webhook and delivery test")

logger = get_logger(__name__)





# ── GET / POST /webhook ───────────────────────────────────────────────────────
@webhook_namespace.route("")
class Webhook(Resource):
    """ Meta subscription handshake and event delivery... """

    def get(self):
        """
        Verify the webhook subscription.

        Query:
            hub.mode=subscribe&hub.verify_token=<token>&hub.challenge=<text>

        Responds with the challenge as plain text.
        """

        try:
            mode      = request.args.get("hub.mode")
            token     = request.args.get("hub.verify_token")
            challenge = request.args.get("hub.challenge")

            WebhookValidation.validate_handshake(mode, token)

            result = WebhookController().verify(mode, token, challenge)

            response = make_response(result, 200)
            response.mimetype = "text/plain"
            return response

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    def post(self):
        """
        Receive webhook events.

        Always answers 200 {"status": "received"}. Text messages are queued
        for processing; everything else is dropped.
        """

        try:
            payload = request.get_json(silent = True)
            WebhookController().receive(payload)

        except Exception as error:
            logger.exception(f"❌ Webhook error: {error}")

        return {"status": "received"}, 200



# ── POST /webhook/test ────────────────────────────────────────────────────────
@webhook_namespace.route("/test")
class WebhookTestMessage(Resource):
    """ Send a message directly, without the pipeline... """

    def post(self):
        """
        Send a test message.

        Request:
        {
            "recipient_id": "1784...",
            "message":      "Hello from the bot"
        }
        """

        try:
            data = request.get_json(silent = True)

            recipient_id = WebhookValidation.validate_test_message(data)

            result = WebhookController().send_test_message(
                recipient_id = recipient_id,
                message = data["message"]
            )

            return {"status": "success", "data": result}, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
