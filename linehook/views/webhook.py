"""Webhook handler for LINE Messaging API callbacks."""
import logging
from typing import Tuple

from flask import Blueprint, current_app, request

from linehook.decorators.security import signature_required
from linehook.domain.exceptions import WebhookDecodeError
from linehook.middleware.monitoring import track_dispatch_result, track_webhook_request
from linehook.utils.webhook_parser import WebhookParser


webhook_blueprint = Blueprint("webhook", __name__)
_logger = logging.getLogger(__name__)

ACKNOWLEDGEMENT = "Ok"


def handle_events() -> Tuple[str, int]:
    """
    Decode a verified callback and persist its message events.

    Every event is written before the response is sent. Duplicate writes
    (redeliveries) count as success; any other failed write answers 500
    naming the failed message IDs.

    Returns:
        Tuple of (plain-text body, status_code)
    """
    try:
        envelope = WebhookParser.parse(request.get_data(cache=True))
    except WebhookDecodeError as e:
        _logger.error(f"JSON parse ERROR: {e}")
        return "", 500

    container = current_app.config["service_container"]
    result = container.get_persist_events_use_case().execute(envelope)
    track_dispatch_result(result)

    if not result.success:
        failed_ids = ", ".join(o.message_id or "<no id>" for o in result.failed)
        _logger.error(f"Failed to persist {len(result.failed)} message(s): {failed_ids}")
        return f"Failed: {failed_ids}", 500

    return ACKNOWLEDGEMENT, 200


@webhook_blueprint.route("/webhook", methods=["POST"])
@track_webhook_request("webhook")
@signature_required
def webhook_post():
    """
    Handle incoming webhook events (POST request).

    Protected with signature verification to ensure requests come from LINE.
    """
    _logger.info(f"Content-Type: {request.headers.get('Content-Type')}")
    return handle_events()
