"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from linehook import create_app  # noqa: E402
from linehook.config.settings import TestingConfig  # noqa: E402
from linehook.infrastructure.repositories.memory_message_store import InMemoryMessageStore  # noqa: E402
from linehook.utils.signature import SignatureVerifier  # noqa: E402


def make_event(message, source=None, reply_token="rt1", timestamp=123456789):
    """Build a message event as LINE sends it."""
    return {
        "type": "message",
        "timestamp": timestamp,
        "replyToken": reply_token,
        "source": source or {"type": "user", "userId": "u1"},
        "message": message,
    }


def make_body(*events, destination="d1"):
    """Serialize an envelope exactly as it goes on the wire."""
    return json.dumps({"destination": destination, "events": list(events)}).encode("utf-8")


def sign(body, secret=TestingConfig.LINE_CHANNEL_SECRET):
    return SignatureVerifier.sign(body, secret)


@pytest.fixture
def message_store():
    return InMemoryMessageStore()


@pytest.fixture
def app(message_store):
    app = create_app(TestingConfig, message_store=message_store)
    yield app
    app.config["service_container"].shutdown()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def post_webhook(client):
    """POST a body to the webhook, signed with the testing secret by default."""

    def _post(body, signature=None):
        headers = {"Content-Type": "application/json"}
        headers["X-Line-Signature"] = sign(body) if signature is None else signature
        return client.post("/webhook", data=body, headers=headers)

    return _post
