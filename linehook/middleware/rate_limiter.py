"""Rate limiting middleware using Flask-Limiter."""
import logging
from typing import Iterable

from flask import Blueprint
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


DEFAULT_LIMITS = ["1000 per hour", "100 per minute"]


def create_rate_limiter(app, exempt: Iterable[Blueprint] = ()) -> Limiter:
    """
    Create and configure Flask-Limiter instance.

    Exempt blueprints never consult the limiter storage, so an unreachable
    limiter backend cannot fail their requests. Errors from the storage on
    the remaining routes are logged and the request is let through.

    Args:
        app: Flask application instance
        exempt: Blueprints excluded from the default limits

    Returns:
        Configured Limiter instance
    """
    try:
        if not app.config.get("RATELIMIT_ENABLED", True):
            # No-op limiter if rate limiting is disabled
            limiter = Limiter(
                key_func=get_remote_address,
                app=app,
                default_limits=[],
                storage_uri="memory://"
            )
        else:
            storage_uri = app.config["RATELIMIT_STORAGE_URL"]
            limiter = Limiter(
                key_func=get_remote_address,
                app=app,
                default_limits=DEFAULT_LIMITS,
                storage_uri=storage_uri,
                strategy="fixed-window",
                headers_enabled=True,
                swallow_errors=True,
                in_memory_fallback_enabled=True,
            )
    except Exception as e:
        logging.warning(f"Failed to initialize rate limiter: {e}, using memory storage")
        limiter = Limiter(
            key_func=get_remote_address,
            app=app,
            default_limits=DEFAULT_LIMITS,
            storage_uri="memory://"
        )

    for blueprint in exempt:
        limiter.exempt(blueprint)
        logging.info(f"Rate limiting disabled for blueprint {blueprint.name}")

    return limiter
