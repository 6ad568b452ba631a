"""Persistence record entities.

One record shape per message variant. Every shape carries the common
envelope fields (timestamp, reply token, source); the variant adds its own
content fields. Document field names live in the ``document`` metadata key.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict


def _doc(name: str, default: Any):
    return field(default=default, metadata={"document": name})


@dataclass
class MessageRecord:
    """Fields shared by every persisted message document."""

    timestamp: int = _doc("timestamp", 0)
    reply_token: str = _doc("replyToken", "")
    source_type: str = _doc("sourceType", "")
    user_id: str = _doc("userID", "")
    group_id: str = _doc("groupID", "")
    room_id: str = _doc("roomID", "")
    type: str = _doc("type", "")

    def to_document(self) -> Dict[str, Any]:
        """
        Render the record as a store document.

        Returns:
            Dictionary keyed by document field name
        """
        return {f.metadata["document"]: getattr(self, f.name) for f in fields(self)}


@dataclass
class TextRecord(MessageRecord):
    text: str = _doc("text", "")


@dataclass
class ImageRecord(MessageRecord):
    content_type: str = _doc("contentType", "")
    original_content_url: str = _doc("originalContentURL", "")
    preview_image_url: str = _doc("previewImageURL", "")


@dataclass
class MediaRecord(ImageRecord):
    """Video and audio messages: the image shape plus playback duration."""

    duration: int = _doc("duration", 0)


@dataclass
class FileRecord(MessageRecord):
    file_name: str = _doc("fileName", "")
    file_size: int = _doc("fileSize", 0)


@dataclass
class LocationRecord(MessageRecord):
    title: str = _doc("title", "")
    address: str = _doc("address", "")
    latitude: float = _doc("latitude", 0.0)
    longitude: float = _doc("longitude", 0.0)


@dataclass
class StickerRecord(MessageRecord):
    package_id: str = _doc("packageID", "")
    sticker_id: str = _doc("stickerID", "")
