"""
Webhook Controller
Orchestrates between the webhook handler and the service layer.
"""

# Python Packages
from typing import Optional

# Services
from .services.settings_service import SettingsService
from .services.messaging_gateway import MessagingGateway

# Tasks
from .tasks.message_tasks import process_inbound_message

# Vendors
from ..vendors.instagram import InstagramGraphClient

# Errors & Exceptions
from ..util import messages
from ..util.exceptions import ForbiddenException, ServiceException

# Utils
from ..util.logger import get_logger


logger = get_logger(__name__)





class WebhookController:

    def __init__(self):
        """ Build the gateway from current settings... """

        runtime = SettingsService().load_runtime_config()

        self.gateway = MessagingGateway(
            InstagramGraphClient(runtime.instagram),
            typing_delay_ms = runtime.typing_delay_ms
        )



    def verify(self, mode: str, token: str, challenge: Optional[str]) -> str:
        """
        Answer the subscription handshake.

        Raises:
            ForbiddenException: mode/token do not match.
        """

        result = self.gateway.verify_handshake(mode, token, challenge or "")
        if result is None:
            raise ForbiddenException(messages.ERROR["WEBHOOK_VERIFY_FAILED"])

        return result



    def receive(self, payload) -> bool:
        """
        Queue the text message carried by *payload*, if any.

        Returns:
            True when a turn was queued. Never raises: the webhook always
            answers 200 so Meta does not redeliver.
        """

        event = self.gateway.parse_inbound_event(payload)
        if event is None:
            logger.debug("Webhook event ignored (no text message)")
            return False

        try:
            process_inbound_message.delay(event.sender_id, event.text)
        except Exception as e:
            logger.exception(f"❌ Error queueing message from {event.sender_id}: {e}")
            return False

        logger.info(f"📨 Queued message from {event.sender_id}")
        return True



    def send_test_message(self, recipient_id: str, message: str) -> dict:
        """
        Send an ad-hoc message, bypassing the pipeline.

        Raises:
            ServiceException: Graph API send failed.
        """

        if not self.gateway.deliver(recipient_id, message):
            raise ServiceException(
                error_code = "SEND_FAILED",
                message = messages.ERROR["TEST_MESSAGE_FAILED"]
            )

        return {"recipient_id": recipient_id, "message": messages.SUCCESS["TEST_MESSAGE_SENT"]}
