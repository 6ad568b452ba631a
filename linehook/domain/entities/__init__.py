"""Domain entities - core business objects."""
from linehook.domain.entities.event import (
    ContentProvider,
    Envelope,
    Event,
    Message,
    MessageType,
    Source,
)
from linehook.domain.entities.record import (
    FileRecord,
    ImageRecord,
    LocationRecord,
    MediaRecord,
    MessageRecord,
    StickerRecord,
    TextRecord,
)

__all__ = [
    "ContentProvider",
    "Envelope",
    "Event",
    "Message",
    "MessageType",
    "Source",
    "MessageRecord",
    "TextRecord",
    "ImageRecord",
    "MediaRecord",
    "FileRecord",
    "LocationRecord",
    "StickerRecord",
]
