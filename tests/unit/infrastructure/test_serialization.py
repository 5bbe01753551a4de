"""Tests for payload serialization."""

import json

import msgpack
import pytest

from builders import SharedItemBuilder, encode_items, encode_strings, json_blob, msgpack_blob
from share_intake.domain.enums import SharedMediaType
from share_intake.domain.exceptions import PayloadDecodeError
from share_intake.domain.models import SharedItem
from share_intake.infrastructure.serialization import PayloadDecoder, is_msgpack


@pytest.fixture
def decoder():
    return PayloadDecoder()


class TestIsMsgpack:
    """Test cases for MessagePack detection."""

    def test_detects_arrays_and_maps(self):
        """Test that array and map headers are recognized."""
        assert is_msgpack(msgpack.packb([1, 2]))
        assert is_msgpack(msgpack.packb({"a": 1}))
        assert is_msgpack(msgpack.packb(list(range(20))))

    def test_json_is_not_msgpack(self):
        """Test that JSON documents are not mistaken for MessagePack."""
        assert not is_msgpack(b'[{"path": "/a"}]')
        assert not is_msgpack(b"")


class TestDecode:
    """Test cases for PayloadDecoder.decode."""

    def test_preserves_order(self, decoder):
        """Test that items come back in stored order."""
        blob = json_blob(
            SharedItemBuilder().with_name("a").build(),
            SharedItemBuilder().with_name("b").as_file().build(),
            SharedItemBuilder().with_name("c").as_video().with_duration(1.0).build(),
        )

        items = decoder.decode(blob)

        assert [i.display_name for i in items] == ["a", "b", "c"]
        assert [i.kind for i in items] == [
            SharedMediaType.IMAGE,
            SharedMediaType.FILE,
            SharedMediaType.VIDEO,
        ]

    def test_msgpack_blob(self, decoder):
        """Test that MessagePack arrays decode."""
        items = decoder.decode(msgpack_blob(SharedItemBuilder().as_video().build()))

        assert items[0].is_video

    def test_empty_reference_is_kept_for_resolution(self, decoder):
        """Test that an empty reference does not fail the whole blob."""
        items = decoder.decode(
            json_blob(
                SharedItemBuilder().with_path("").build(),
                SharedItemBuilder().with_name("good").build(),
            )
        )

        assert items[0].path == ""
        assert items[1].display_name == "good"

    def test_empty_array(self, decoder):
        """Test that an empty array decodes to no items."""
        assert decoder.decode(b"[]") == []

    @pytest.mark.parametrize(
        "blob",
        [
            b"",
            b"   ",
            b"not json",
            b"\xff\xfe",
            b'{"path": "/a"}',
            b'"text"',
            b'[{"realname": "no path", "type": 0}]',
            b'[{"path": "/a", "type": "video"}]',
            b"[1, 2]",
        ],
    )
    def test_invalid_payloads(self, decoder, blob):
        """Test that malformed payloads raise PayloadDecodeError."""
        with pytest.raises(PayloadDecodeError):
            decoder.decode(blob)

    def test_truncated_msgpack(self, decoder):
        """Test that truncated MessagePack raises PayloadDecodeError."""
        blob = msgpack_blob(SharedItemBuilder().build())[:-3]

        with pytest.raises(PayloadDecodeError):
            decoder.decode(blob)


class TestDecodeStrings:
    """Test cases for PayloadDecoder.decode_strings."""

    def test_json_and_msgpack(self, decoder):
        """Test both encodings of a string sequence."""
        assert decoder.decode_strings(b'["a", "b"]') == ["a", "b"]
        assert decoder.decode_strings(encode_strings(["a"], use_msgpack=True)) == ["a"]

    @pytest.mark.parametrize("blob", [b"", b"nope", b'{"a": "b"}', b'["a", 1]'])
    def test_not_a_string_sequence(self, decoder, blob):
        """Test that other values give None."""
        assert decoder.decode_strings(blob) is None


class TestEncode:
    """Test cases for encoding."""

    def test_encode_none(self):
        """Test that absent stays absent."""
        assert PayloadDecoder.encode(None) is None

    def test_encode_uses_wire_names_and_omits_absent_fields(self):
        """Test the delivered JSON shape."""
        items = (
            SharedItem(path="/a.jpg", display_name="a.jpg", kind=SharedMediaType.IMAGE),
            SharedItem(
                path="/b.mov",
                thumbnail_path="/b.jpg",
                duration_millis=12.5,
                display_name="b.mov",
                kind=SharedMediaType.VIDEO,
            ),
        )

        decoded = json.loads(PayloadDecoder.encode(items))

        assert decoded == [
            {"path": "/a.jpg", "realname": "a.jpg", "type": 0},
            {
                "path": "/b.mov",
                "thumbnail": "/b.jpg",
                "duration": 12.5,
                "realname": "b.mov",
                "type": 1,
            },
        ]

    def test_encode_items_decodes_back(self, decoder):
        """Test that producer-format blobs are readable by the decoder."""
        item = SharedItem(path="/a.pdf", display_name="a.pdf", kind=SharedMediaType.FILE)

        assert decoder.decode(encode_items([item])) == [item]
        assert decoder.decode(encode_items([item], use_msgpack=True)) == [item]
