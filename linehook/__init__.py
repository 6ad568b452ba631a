"""Flask application factory with dependency injection."""
import logging
import sys
from typing import Optional

from flask import Flask

from linehook.config.settings import Config, get_config
from linehook.domain.interfaces.message_store import IMessageStore
from linehook.infrastructure.service_container import ServiceContainer
from linehook.middleware.error_handler import init_error_handlers
from linehook.middleware.monitoring import register_metrics_middleware
from linehook.middleware.rate_limiter import create_rate_limiter
from linehook.views import health_blueprint, webhook_blueprint


def create_app(config_class: Optional[type[Config]] = None,
               message_store: Optional[IMessageStore] = None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Configuration problems and an unreachable message store are fatal:
    the factory raises instead of serving a webhook that cannot persist.

    Args:
        config_class: Optional configuration class (for testing)
        message_store: Optional message store overriding the configured backend

    Returns:
        Configured Flask application
    """
    _logger = logging.getLogger(__name__)

    config = config_class or get_config()

    # Configure logging FIRST (needed for all subsequent operations)
    _configure_logging(config)

    try:
        app = Flask(__name__)
        app.config.from_object(config)

        config.validate()

        app.register_blueprint(webhook_blueprint)
        app.register_blueprint(health_blueprint)

        _initialize_middleware(app)
        _initialize_services(app, config, message_store)

        _logger.info(f"App routes registered: {[str(rule) for rule in app.url_map.iter_rules()]}")
    except Exception as e:
        _logger.critical(f"Failed to create Flask application: {e}", exc_info=True)
        raise

    _logger.info("=== Flask app factory completed successfully ===")
    return app


def _configure_logging(config: type[Config]) -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True
    )


def _initialize_middleware(app: Flask) -> None:
    """
    Initialize middleware (rate limiting, monitoring, error handling).

    Args:
        app: Flask application instance
    """
    app.config['limiter'] = create_rate_limiter(app, exempt=[webhook_blueprint])
    register_metrics_middleware(app)
    init_error_handlers(app)


def _initialize_services(app: Flask, config: type[Config],
                         message_store: Optional[IMessageStore]) -> None:
    """
    Build the service container and its services eagerly.

    Args:
        app: Flask application instance
        config: Configuration class
        message_store: Optional injected message store
    """
    container = ServiceContainer(config, message_store=message_store)

    # Created once here and shared read-only by every request thread
    container.get_signature_verifier()
    container.get_persist_events_use_case()

    app.config['service_container'] = container
    logging.getLogger(__name__).info(
        f"Services initialized with {type(container.get_message_store()).__name__}"
    )
