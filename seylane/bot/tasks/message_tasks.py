"""
Message Background Tasks
"""

# Python Packages
from celery import shared_task

# Services only (NO controller import)
from ..services.settings_service import SettingsService
from ..services.message_pipeline import MessagePipeline

# Utils
from ...util.logger import get_logger


logger = get_logger(__name__)





@shared_task(ignore_result = True)
def process_inbound_message(sender_id: str, text: str) -> str:
    """
    Background task for one inbound Instagram text message.

    Settings are read fresh for every turn. Not retried: a retry would
    store the user message twice.
    """

    try:
        # Step 1: Snapshot settings and wire the pipeline
        runtime  = SettingsService().load_runtime_config()
        pipeline = MessagePipeline.from_runtime_config(runtime)

        # Step 2: Conversation + user message
        conversation, user_message = pipeline.intake(sender_id, text)

    except Exception as e:
        logger.exception(f"❌ Error storing inbound message from {sender_id}: {e}")
        raise

    # Step 3: Classify, search, reply, deliver, persist
    result = pipeline.process_message(
        conversation_id = conversation.conversation_id,
        sender_id       = sender_id,
        text            = text,
        user_message_id = user_message.message_id
    )

    return result.state.value
