"""Utilities for decoding LINE webhook payloads."""
import json
from typing import Any, Dict, Tuple, Type, Union

from linehook.domain.entities.event import ContentProvider, Envelope, Event, Message, Source
from linehook.domain.exceptions import WebhookDecodeError


class WebhookParser:
    """Utility class for decoding webhook bodies into envelopes.

    Keys are matched exactly (case-sensitive). Missing keys and JSON nulls
    decode to zero values; unknown keys are ignored; a known key holding the
    wrong JSON type is a decode error.
    """

    @staticmethod
    def parse(body: Union[bytes, str]) -> Envelope:
        """
        Decode a webhook body.

        Args:
            body: Raw request body (already signature-verified)

        Returns:
            Envelope with its events in wire order

        Raises:
            WebhookDecodeError: If the body is not a well-typed envelope
        """
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise WebhookDecodeError(f"Invalid JSON: {e}") from e

        root = WebhookParser._as_object(data, "body")
        events = WebhookParser._field(root, "events", list, [], "body")

        return Envelope(
            destination=WebhookParser._field(root, "destination", str, "", "body"),
            events=[
                WebhookParser._parse_event(item, f"events[{index}]")
                for index, item in enumerate(events)
            ],
        )

    @staticmethod
    def _parse_event(data: Any, path: str) -> Event:
        event = WebhookParser._as_object(data, path)
        return Event(
            type=WebhookParser._field(event, "type", str, "", path),
            timestamp=WebhookParser._field(event, "timestamp", int, 0, path),
            reply_token=WebhookParser._field(event, "replyToken", str, "", path),
            source=WebhookParser._parse_source(
                WebhookParser._field(event, "source", dict, {}, path), f"{path}.source"
            ),
            message=WebhookParser._parse_message(
                WebhookParser._field(event, "message", dict, {}, path), f"{path}.message"
            ),
        )

    @staticmethod
    def _parse_source(source: Dict[str, Any], path: str) -> Source:
        return Source(
            type=WebhookParser._field(source, "type", str, "", path),
            user_id=WebhookParser._field(source, "userId", str, "", path),
            group_id=WebhookParser._field(source, "groupId", str, "", path),
            room_id=WebhookParser._field(source, "roomId", str, "", path),
        )

    @staticmethod
    def _parse_message(message: Dict[str, Any], path: str) -> Message:
        provider = WebhookParser._field(message, "contentProvider", dict, {}, path)
        provider_path = f"{path}.contentProvider"
        return Message(
            id=WebhookParser._field(message, "id", str, "", path),
            type=WebhookParser._field(message, "type", str, "", path),
            text=WebhookParser._field(message, "text", str, "", path),
            package_id=WebhookParser._field(message, "packageId", str, "", path),
            sticker_id=WebhookParser._field(message, "stickerId", str, "", path),
            file_name=WebhookParser._field(message, "fileName", str, "", path),
            file_size=WebhookParser._field(message, "fileSize", int, 0, path),
            title=WebhookParser._field(message, "title", str, "", path),
            address=WebhookParser._field(message, "address", str, "", path),
            latitude=WebhookParser._field(message, "latitude", float, 0.0, path),
            longitude=WebhookParser._field(message, "longitude", float, 0.0, path),
            duration=WebhookParser._field(message, "duration", int, 0, path),
            content_provider=ContentProvider(
                type=WebhookParser._field(provider, "type", str, "", provider_path),
                original_content_url=WebhookParser._field(
                    provider, "originalContentUrl", str, "", provider_path
                ),
                preview_image_url=WebhookParser._field(
                    provider, "previewImageUrl", str, "", provider_path
                ),
            ),
        )

    @staticmethod
    def _as_object(value: Any, path: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise WebhookDecodeError(f"{path}: expected object, got {type(value).__name__}")
        return value

    @staticmethod
    def _field(data: Dict[str, Any], key: str, expected: Type, default: Any, path: str) -> Any:
        """
        Read one typed field.

        Args:
            data: JSON object
            key: Wire key (case-sensitive)
            expected: Python type the JSON value must decode to
            default: Zero value for a missing or null key
            path: Location of ``data`` in the body, for error messages

        Returns:
            The field value, or ``default``

        Raises:
            WebhookDecodeError: If the value has the wrong JSON type
        """
        value = data.get(key)
        if value is None:
            return default

        # bool is an int subclass, JSON true/false never decode as numbers
        if isinstance(value, bool) and expected is not bool:
            raise WebhookDecodeError(f"{path}.{key}: expected {expected.__name__}, got bool")

        allowed: Tuple[Type, ...] = (int, float) if expected is float else (expected,)
        if not isinstance(value, allowed):
            raise WebhookDecodeError(
                f"{path}.{key}: expected {expected.__name__}, got {type(value).__name__}"
            )

        return float(value) if expected is float else value
