"""
Record Mapping Tests

Each message type maps to exactly one record shape.
"""

import pytest

from linehook.application.services.record_mapper import DEFAULT_BUILDERS, RecordMapper
from linehook.domain.entities.event import ContentProvider, Event, Message, MessageType, Source
from linehook.domain.entities.record import (
    FileRecord,
    ImageRecord,
    LocationRecord,
    MediaRecord,
    StickerRecord,
    TextRecord,
)


COMMON = {
    "timestamp": 123456789,
    "replyToken": "rt1",
    "sourceType": "group",
    "userID": "u1",
    "groupID": "g1",
    "roomID": "",
}

PROVIDER = ContentProvider(
    type="external",
    original_content_url="https://example.com/o",
    preview_image_url="https://example.com/p",
)


def _event(**message_fields):
    """An event carrying every message field, so leaks would show up."""
    fields = {
        "id": "m1",
        "text": "hello",
        "package_id": "p1",
        "sticker_id": "s1",
        "file_name": "a.pdf",
        "file_size": 2048,
        "title": "Tower",
        "address": "Tokyo",
        "latitude": 35.6586,
        "longitude": 139.7454,
        "duration": 60000,
        "content_provider": PROVIDER,
    }
    fields.update(message_fields)
    return Event(
        type="message",
        timestamp=123456789,
        reply_token="rt1",
        source=Source(type="group", user_id="u1", group_id="g1"),
        message=Message(**fields),
    )


@pytest.fixture
def mapper():
    return RecordMapper()


class TestRecordShapes:
    """Exactly the fields defined for each type are populated."""

    def test_text(self, mapper):
        record = mapper.map(_event(type="text"))

        assert isinstance(record, TextRecord)
        assert record.to_document() == {**COMMON, "type": "text", "text": "hello"}

    def test_image(self, mapper):
        record = mapper.map(_event(type="image"))

        assert type(record) is ImageRecord
        assert record.to_document() == {
            **COMMON,
            "type": "image",
            "contentType": "external",
            "originalContentURL": "https://example.com/o",
            "previewImageURL": "https://example.com/p",
        }

    @pytest.mark.parametrize("message_type", ["video", "audio"])
    def test_video_and_audio_share_media_shape(self, mapper, message_type):
        record = mapper.map(_event(type=message_type))

        assert isinstance(record, MediaRecord)
        assert record.to_document() == {
            **COMMON,
            "type": message_type,
            "contentType": "external",
            "originalContentURL": "https://example.com/o",
            "previewImageURL": "https://example.com/p",
            "duration": 60000,
        }

    def test_file(self, mapper):
        record = mapper.map(_event(type="file"))

        assert isinstance(record, FileRecord)
        assert record.to_document() == {**COMMON, "type": "file", "fileName": "a.pdf", "fileSize": 2048}

    def test_location(self, mapper):
        record = mapper.map(_event(type="location"))

        assert isinstance(record, LocationRecord)
        assert record.to_document() == {
            **COMMON,
            "type": "location",
            "title": "Tower",
            "address": "Tokyo",
            "latitude": 35.6586,
            "longitude": 139.7454,
        }

    def test_sticker_only_carries_package_and_sticker(self, mapper):
        event = Event(
            type="message",
            timestamp=123456789,
            reply_token="rt1",
            source=Source(type="user", user_id="u1"),
            message=Message(id="m1", type="sticker", package_id="p1", sticker_id="s1"),
        )

        document = mapper.map(event).to_document()

        assert document == {
            "timestamp": 123456789,
            "replyToken": "rt1",
            "sourceType": "user",
            "userID": "u1",
            "groupID": "",
            "roomID": "",
            "type": "sticker",
            "packageID": "p1",
            "stickerID": "s1",
        }
        for absent in ("text", "fileName", "fileSize", "title", "address", "latitude", "longitude"):
            assert absent not in document

    def test_zero_valued_fields_are_kept(self, mapper):
        """An empty text message still writes every TextRecord field."""
        record = mapper.map(Event(message=Message(id="m1", type="text")))

        assert record.to_document() == {
            "timestamp": 0,
            "replyToken": "",
            "sourceType": "",
            "userID": "",
            "groupID": "",
            "roomID": "",
            "type": "text",
            "text": "",
        }


class TestDispatchTable:
    """Unknown types are skipped; every known type has a mapping."""

    @pytest.mark.parametrize("message_type", ["imagemap", "", "Text", "template"])
    def test_unknown_type_returns_none(self, mapper, message_type):
        assert mapper.map(_event(type=message_type)) is None

    def test_default_builders_cover_every_type(self):
        assert set(DEFAULT_BUILDERS) == set(MessageType)

    def test_missing_builder_rejected_at_construction(self):
        builders = dict(DEFAULT_BUILDERS)
        del builders[MessageType.STICKER]

        with pytest.raises(ValueError, match="sticker"):
            RecordMapper(builders)

    def test_custom_builder_is_used(self):
        builders = dict(DEFAULT_BUILDERS)
        builders[MessageType.TEXT] = lambda event: TextRecord(type="text", text=event.message.text.upper())

        record = RecordMapper(builders).map(_event(type="text"))

        assert record.text == "HELLO"

    def test_record_types(self):
        assert isinstance(RecordMapper().map(_event(type="sticker")), StickerRecord)
