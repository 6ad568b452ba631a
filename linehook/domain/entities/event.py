"""Webhook event domain entities.

Decoded from the request body for the duration of one request and discarded
once the events are dispatched. Fields the platform omits stay at their zero
value ("", 0, 0.0) instead of None.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class MessageType(str, Enum):
    """Message payload variants that map to a persistence record."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"
    LOCATION = "location"
    STICKER = "sticker"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["MessageType"]:
        """Resolve a wire type tag, or None for tags with no record shape."""
        try:
            return cls(tag)
        except ValueError:
            return None


@dataclass
class ContentProvider:
    """Where the binary content of an image/video/audio message lives."""

    type: str = ""
    original_content_url: str = ""
    preview_image_url: str = ""


@dataclass
class Source:
    """Origin of an event: a user, a group or a room."""

    type: str = ""
    user_id: str = ""
    group_id: str = ""
    room_id: str = ""


@dataclass
class Message:
    """Message payload of an event.

    The ``type`` tag decides which of the optional fields are meaningful.
    ``id`` is assigned by the platform and used as the persistence key.
    """

    id: str = ""
    type: str = ""
    text: str = ""
    package_id: str = ""
    sticker_id: str = ""
    file_name: str = ""
    file_size: int = 0
    title: str = ""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    duration: int = 0
    content_provider: ContentProvider = field(default_factory=ContentProvider)

    @property
    def message_type(self) -> Optional[MessageType]:
        return MessageType.from_tag(self.type)


@dataclass
class Event:
    """One inbound occurrence delivered by the platform."""

    type: str = ""
    timestamp: int = 0  # epoch milliseconds
    reply_token: str = ""
    source: Source = field(default_factory=Source)
    message: Message = field(default_factory=Message)


@dataclass
class Envelope:
    """Top-level webhook body: the destination bot and its events, in order."""

    destination: str = ""
    events: List[Event] = field(default_factory=list)
