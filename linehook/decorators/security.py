"""Security decorators for webhook endpoints."""
import logging
from functools import wraps
from typing import Callable

from flask import current_app, request


_logger = logging.getLogger(__name__)


def signature_required(f: Callable) -> Callable:
    """
    Reject requests whose body does not match the signature header.

    The raw body is verified before any parsing; a missing or invalid
    signature answers 403 and the view never runs.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        header = current_app.config.get("SIGNATURE_HEADER", "X-Line-Signature")
        signature = request.headers.get(header, "")
        body = request.get_data(cache=True)

        container = current_app.config["service_container"]
        if not container.get_signature_verifier().verify(body, signature):
            _logger.info("Signature is NOT Verified")
            return "", 403

        return f(*args, **kwargs)

    return decorated_function
