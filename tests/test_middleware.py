"""
Middleware Tests

Rate limiting with the limiter enabled, and Sentry initialization.
"""

from unittest.mock import patch

import pytest

from linehook import create_app
from linehook.config.settings import TestingConfig
from linehook.infrastructure.repositories.memory_message_store import InMemoryMessageStore
from tests.conftest import make_body, make_event, sign


class RateLimitedConfig(TestingConfig):
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URL = "memory://"


class UnreachableLimiterConfig(TestingConfig):
    RATELIMIT_ENABLED = True
    RATELIMIT_STORAGE_URL = "redis://127.0.0.1:1/0"


class SentryConfig(TestingConfig):
    SENTRY_DSN = "https://public@sentry.example.com/1"


@pytest.fixture
def build_app():
    created = []

    def _build(config_class):
        store = InMemoryMessageStore()
        app = create_app(config_class, message_store=store)
        created.append(app)
        return app, store

    yield _build
    for app in created:
        app.config["service_container"].shutdown()


def _post(client, message_id, user_id="u1"):
    body = make_body(make_event(
        {"id": message_id, "type": "text", "text": "hello"},
        source={"type": "user", "userId": user_id},
    ))
    return client.post("/webhook", data=body, headers={"X-Line-Signature": sign(body)})


class TestRateLimiter:
    """The webhook is never throttled; other routes are."""

    def test_webhook_exceeding_default_limit_is_acknowledged(self, build_app):
        app, store = build_app(RateLimitedConfig)
        client = app.test_client()

        statuses = [_post(client, f"m{i}", user_id=f"u{i}").status_code for i in range(120)]

        assert statuses == [200] * 120
        assert len(store) == 120

    def test_operational_routes_are_limited(self, build_app):
        app, _ = build_app(RateLimitedConfig)
        client = app.test_client()

        statuses = [client.get("/health").status_code for _ in range(101)]

        assert statuses[:100] == [200] * 100
        assert statuses[100] == 429

    def test_unreachable_limiter_storage_does_not_fail_webhook(self, build_app):
        app, store = build_app(UnreachableLimiterConfig)

        response = _post(app.test_client(), "m1")

        assert response.status_code == 200
        assert response.get_data(as_text=True) == "Ok"
        assert store.get("m1")["text"] == "hello"

    def test_limiter_stored_on_app(self, build_app):
        app, _ = build_app(RateLimitedConfig)
        assert app.config["limiter"] is not None


class TestSentry:
    """Sentry is only initialized when a DSN is configured."""

    def test_initialized_with_dsn(self, build_app):
        with patch("sentry_sdk.init") as mock_init:
            build_app(SentryConfig)

        mock_init.assert_called_once()
        assert mock_init.call_args.kwargs["dsn"] == SentryConfig.SENTRY_DSN

    def test_not_initialized_without_dsn(self, build_app):
        with patch("sentry_sdk.init") as mock_init:
            build_app(TestingConfig)

        mock_init.assert_not_called()
