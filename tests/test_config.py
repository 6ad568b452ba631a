"""
Configuration Tests

Startup refuses to serve with a missing secret or store configuration.
"""

import pytest

from linehook import create_app
from linehook.config.settings import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
)
from linehook.infrastructure.factories.store_factory import StoreFactory
from linehook.infrastructure.repositories.memory_message_store import InMemoryMessageStore


class TestValidate:
    """Test Config.validate."""

    def test_testing_config_is_valid(self):
        TestingConfig.validate()

    def test_missing_secret(self):
        class NoSecretConfig(TestingConfig):
            LINE_CHANNEL_SECRET = None

        with pytest.raises(ValueError, match="LINE_CHANNEL_SECRET"):
            NoSecretConfig.validate()

    def test_firestore_requires_project(self):
        class FirestoreConfig(TestingConfig):
            MESSAGE_STORE_TYPE = "firestore"
            GCP_PROJECT = None

        with pytest.raises(ValueError, match="GCP_PROJECT"):
            FirestoreConfig.validate()

    def test_memory_store_needs_no_project(self):
        class MemoryConfig(TestingConfig):
            GCP_PROJECT = None

        MemoryConfig.validate()


class TestGetConfig:
    """Test environment-based config selection."""

    @pytest.mark.parametrize("env,expected", [
        ("development", DevelopmentConfig),
        ("production", ProductionConfig),
        ("testing", TestingConfig),
        ("PRODUCTION", ProductionConfig),
        ("staging", DevelopmentConfig),
    ])
    def test_selects_by_flask_env(self, monkeypatch, env, expected):
        monkeypatch.setenv("FLASK_ENV", env)
        assert get_config() is expected


class TestStartup:
    """create_app raises instead of serving a broken webhook."""

    def test_missing_secret_is_fatal(self):
        class NoSecretConfig(TestingConfig):
            LINE_CHANNEL_SECRET = ""

        with pytest.raises(ValueError):
            create_app(NoSecretConfig, message_store=InMemoryMessageStore())

    def test_unsupported_store_is_fatal(self):
        class UnknownStoreConfig(TestingConfig):
            MESSAGE_STORE_TYPE = "cassandra"

        with pytest.raises(ValueError, match="Unsupported message store type"):
            create_app(UnknownStoreConfig)

    def test_configured_memory_store(self):
        app = create_app(TestingConfig)
        container = app.config["service_container"]

        assert isinstance(container.get_message_store(), InMemoryMessageStore)
        container.shutdown()


class TestStoreFactory:
    """Test backend selection."""

    def test_memory(self):
        assert isinstance(StoreFactory.create_message_store(TestingConfig), InMemoryMessageStore)

    def test_firestore_without_project(self):
        class FirestoreConfig(TestingConfig):
            MESSAGE_STORE_TYPE = "firestore"
            GCP_PROJECT = None

        with pytest.raises(ValueError, match="GCP_PROJECT"):
            StoreFactory.create_message_store(FirestoreConfig)

    def test_redis_with_bad_scheme(self):
        class RedisConfig(TestingConfig):
            MESSAGE_STORE_TYPE = "redis"
            REDIS_URL = "http://localhost:6379"

        with pytest.raises(ValueError, match="Invalid Redis URL scheme"):
            StoreFactory.create_message_store(RedisConfig)
