"""Monitoring and metrics middleware using Prometheus."""
import logging
import time
from functools import wraps
from typing import Callable
from flask import request
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

from linehook.config.settings import Config

logger = logging.getLogger(__name__)

# Prometheus metrics
messages_dispatched_total = Counter(
    'line_messages_dispatched_total',
    'Total number of webhook message events dispatched',
    ['status', 'message_type']
)

webhook_requests_total = Counter(
    'line_webhook_requests_total',
    'Total number of webhook requests',
    ['method', 'endpoint', 'status']
)

webhook_request_duration = Histogram(
    'line_webhook_request_duration_seconds',
    'Time spent processing webhook requests',
    ['endpoint'],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0]
)


def register_metrics_middleware(app) -> None:
    """
    Register Prometheus metrics endpoint.

    Args:
        app: Flask application instance
    """
    if not app.config.get("ENABLE_METRICS", Config.ENABLE_METRICS):
        return

    @app.route('/metrics')
    def metrics():
        """Prometheus metrics endpoint."""
        return generate_latest(), 200, {'Content-Type': CONTENT_TYPE_LATEST}

    logger.info("Prometheus metrics enabled at /metrics")


def track_webhook_request(endpoint: str):
    """
    Decorator to track webhook request metrics.

    Args:
        endpoint: Endpoint name for metrics
    """
    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def wrapper(*args, **kwargs):
            start_time = time.time()

            try:
                response = f(*args, **kwargs)
            except Exception:
                webhook_requests_total.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=500
                ).inc()
                raise

            status_code = response[1] if isinstance(response, tuple) else 200
            webhook_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code
            ).inc()
            webhook_request_duration.labels(endpoint=endpoint).observe(
                time.time() - start_time
            )
            return response

        return wrapper
    return decorator


def track_dispatch_result(result) -> None:
    """
    Track per-event outcome metrics.

    Args:
        result: DispatchResult of one webhook request
    """
    try:
        for outcome in result.outcomes:
            messages_dispatched_total.labels(
                status=outcome.status,
                message_type=outcome.message_type or "none"
            ).inc()
    except Exception as e:
        # Don't fail if metrics tracking fails
        logger.debug(f"Failed to track dispatch metrics: {e}")
