"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # LINE Messaging API Configuration
    LINE_CHANNEL_SECRET: Optional[str] = os.getenv("LINE_CHANNEL_SECRET")
    SIGNATURE_HEADER: str = os.getenv("SIGNATURE_HEADER", "X-Line-Signature")

    # Message store Configuration
    MESSAGE_STORE_TYPE: str = os.getenv("MESSAGE_STORE_TYPE", "firestore")
    MESSAGES_COLLECTION: str = os.getenv("MESSAGES_COLLECTION", "Messages")
    GCP_PROJECT: Optional[str] = os.getenv("GCP_PROJECT")

    # Redis Configuration (redis message store)
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    # Fan-out of per-event writes
    PERSIST_MAX_WORKERS: int = int(os.getenv("PERSIST_MAX_WORKERS", "8"))

    # Rate Limiting
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "redis://localhost:6379/2")
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Application
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        required_vars = [
            ("LINE_CHANNEL_SECRET", cls.LINE_CHANNEL_SECRET),
        ]

        # Firestore client needs a project to bind to
        if cls.MESSAGE_STORE_TYPE.lower() == "firestore":
            required_vars.append(("GCP_PROJECT", cls.GCP_PROJECT))

        missing = [name for name, value in required_vars if not value]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    LINE_CHANNEL_SECRET = "testing-channel-secret"
    MESSAGE_STORE_TYPE = "memory"
    PERSIST_MAX_WORKERS = 4
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False
    SENTRY_DSN = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
