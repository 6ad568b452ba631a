"""Record mapper (Registry Pattern).

Projects a webhook event into the persistence record for its message type.
Each message type has exactly one mapping function; adding a type to
MessageType without registering a mapper fails when the mapper is built.
"""
import logging
from typing import Callable, Dict, Optional

from linehook.domain.entities.event import Event, MessageType
from linehook.domain.entities.record import (
    FileRecord,
    ImageRecord,
    LocationRecord,
    MediaRecord,
    MessageRecord,
    StickerRecord,
    TextRecord,
)


logger = logging.getLogger(__name__)

RecordBuilder = Callable[[Event], MessageRecord]


def _common(event: Event) -> Dict[str, object]:
    """Envelope-level fields every record carries."""
    return {
        "timestamp": event.timestamp,
        "reply_token": event.reply_token,
        "source_type": event.source.type,
        "user_id": event.source.user_id,
        "group_id": event.source.group_id,
        "room_id": event.source.room_id,
        "type": event.message.type,
    }


def map_text(event: Event) -> TextRecord:
    return TextRecord(**_common(event), text=event.message.text)


def map_image(event: Event) -> ImageRecord:
    provider = event.message.content_provider
    return ImageRecord(
        **_common(event),
        content_type=provider.type,
        original_content_url=provider.original_content_url,
        preview_image_url=provider.preview_image_url,
    )


def map_media(event: Event) -> MediaRecord:
    """Video and audio: same content-provider fields as an image, plus duration."""
    provider = event.message.content_provider
    return MediaRecord(
        **_common(event),
        content_type=provider.type,
        original_content_url=provider.original_content_url,
        preview_image_url=provider.preview_image_url,
        duration=event.message.duration,
    )


def map_file(event: Event) -> FileRecord:
    return FileRecord(
        **_common(event),
        file_name=event.message.file_name,
        file_size=event.message.file_size,
    )


def map_location(event: Event) -> LocationRecord:
    return LocationRecord(
        **_common(event),
        title=event.message.title,
        address=event.message.address,
        latitude=event.message.latitude,
        longitude=event.message.longitude,
    )


def map_sticker(event: Event) -> StickerRecord:
    return StickerRecord(
        **_common(event),
        package_id=event.message.package_id,
        sticker_id=event.message.sticker_id,
    )


DEFAULT_BUILDERS: Dict[MessageType, RecordBuilder] = {
    MessageType.TEXT: map_text,
    MessageType.IMAGE: map_image,
    MessageType.VIDEO: map_media,
    MessageType.AUDIO: map_media,
    MessageType.FILE: map_file,
    MessageType.LOCATION: map_location,
    MessageType.STICKER: map_sticker,
}


class RecordMapper:
    """
    Maps events to persistence records.

    Pure: no I/O, safe to share between threads.
    """

    def __init__(self, builders: Optional[Dict[MessageType, RecordBuilder]] = None):
        """
        Initialize the mapper.

        Args:
            builders: Mapping function per message type (defaults to DEFAULT_BUILDERS)

        Raises:
            ValueError: If a message type has no mapping function
        """
        self._builders = dict(builders if builders is not None else DEFAULT_BUILDERS)

        missing = [t.value for t in MessageType if t not in self._builders]
        if missing:
            raise ValueError(f"No record mapping for message types: {', '.join(missing)}")

    def map(self, event: Event) -> Optional[MessageRecord]:
        """
        Build the record for an event.

        Args:
            event: Decoded webhook event

        Returns:
            The populated record, or None when the message type has no record shape
        """
        message_type = event.message.message_type
        if message_type is None:
            logger.info(
                f"Skipping event type={event.type!r} with unhandled message type "
                f"{event.message.type!r}"
            )
            return None

        return self._builders[message_type](event)
