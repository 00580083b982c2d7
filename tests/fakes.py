"""In-memory stand-ins for the vendor clients."""

import json
from types import SimpleNamespace

from seylane.util.outcome import Outcome, ErrorKind


def intent_reply(intent, confidence=0.9, parameters=None, requires_lookup=False):
    """Model reply text for the intent classifier."""
    return Outcome.success(json.dumps({
        "intent": intent,
        "confidence": confidence,
        "parameters": parameters,
        "requiresCatalogLookup": requires_lookup,
    }))


class FakeChatService:
    """Returns queued Outcomes (or raises queued exceptions) in order."""

    provider = "fake"
    default_model = "fake-model"

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def generate_response(self, messages, model=None, temperature=0.7, max_tokens=1000):
        self.calls.append({
            "messages": messages,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if not self.replies:
            return Outcome.failure(ErrorKind.TRANSPORT, "no reply queued")

        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeCatalogClient:
    """WooCommerce client double recording every product query."""

    def __init__(self, products=None, outcome=None, configured=True):
        self.outcome = outcome or Outcome.success(list(products or []))
        self.is_configured = configured
        self.queries = []

    def query_products(self, filter_spec):
        self.queries.append(filter_spec)
        return self.outcome

    def get_product(self, product_id):
        return Outcome.failure(ErrorKind.TRANSPORT, "not used")

    def get_categories(self):
        return Outcome.success([])


class FakeGraphClient:
    """Instagram client double; every call is appended to ``events``."""

    def __init__(self, verify_token="verify-me", send_ok=True, profile=None):
        self.config = SimpleNamespace(verify_token=verify_token, access_token="token")
        self.send_ok = send_ok
        self.profile = profile if profile is not None else {"username": "jane_doe"}
        self.events = []

    def send_text(self, recipient_id, text):
        self.events.append(("text", recipient_id, text))
        if self.send_ok:
            return Outcome.success({"message_id": "m_1"})
        return Outcome.failure(ErrorKind.TRANSPORT, "send failed")

    def send_sender_action(self, recipient_id, action):
        self.events.append((action, recipient_id))
        return Outcome.success({})

    def get_user_profile(self, user_id):
        return Outcome.success(self.profile)

    def get_me(self):
        return Outcome.success({"id": "1", "name": "Seylane"})

    def test_connection(self):
        return Outcome.success("Connected successfully to account: Seylane")

    @property
    def texts(self):
        return [event[2] for event in self.events if event[0] == "text"]


def sample_product(product_id, name, price="45.00", color=None, size=None, **extra):
    attributes = []
    if color:
        attributes.append({"name": "Color", "options": [color] if isinstance(color, str) else color})
    if size:
        attributes.append({"name": "Size", "options": [size] if isinstance(size, str) else size})

    product = {
        "id": product_id,
        "name": name,
        "price": price,
        "permalink": f"https://shop.example.com/product/{product_id}",
        "attributes": attributes,
    }
    product.update(extra)
    return product
