"""Pytest fixtures: Flask app on in-memory SQLite, eager Celery, vendor fakes."""

from unittest.mock import patch

import pytest

from seylane.app import create_app
from seylane.config.database import db
from seylane.bot.services.catalog_search_service import CatalogSearchService
from seylane.bot.services.conversation_service import ConversationService
from seylane.bot.services.intent_classifier import IntentClassifier
from seylane.bot.services.message_pipeline import MessagePipeline
from seylane.bot.services.messaging_gateway import MessagingGateway
from seylane.bot.services.response_generator import ResponseGenerator

from fakes import FakeCatalogClient, FakeChatService, FakeGraphClient


TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "CELERY": {
        "broker_url": "memory://",
        "result_backend": "cache+memory://",
        "task_always_eager": True,
        "task_ignore_result": True,
    },
}


@pytest.fixture
def app():
    """Fresh application and schema for each test."""
    app = create_app(TEST_CONFIG)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def no_sleep():
    """Typing-indicator pauses return immediately."""
    with patch("seylane.bot.services.messaging_gateway.time.sleep") as sleep:
        yield sleep


@pytest.fixture
def conversation_service(app):
    return ConversationService()


@pytest.fixture
def graph_client():
    return FakeGraphClient()


@pytest.fixture
def gateway(graph_client):
    return MessagingGateway(graph_client, typing_delay_ms=1000)


@pytest.fixture
def make_pipeline(conversation_service, gateway):
    """Build a MessagePipeline around fakes.

    ``chat`` is shared by the classifier and the generator, the way
    MessagePipeline.from_runtime_config wires one ChatService into both.
    """

    def _make(chat=None, catalog_client=None, attachment_mode="message_id", digest_mode="sequential"):
        chat = chat or FakeChatService()
        catalog_client = catalog_client or FakeCatalogClient()
        return MessagePipeline(
            classifier=IntentClassifier(chat),
            catalog=CatalogSearchService(catalog_client),
            generator=ResponseGenerator(chat),
            gateway=gateway,
            conversation_service=conversation_service,
            attachment_mode=attachment_mode,
            product_typing_delay_ms=1500,
            digest_mode=digest_mode,
        )

    return _make
