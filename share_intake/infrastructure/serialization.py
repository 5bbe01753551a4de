"""Serialization of shared item payloads in JSON and MessagePack."""

import json
from typing import Any

import msgpack
from pydantic import TypeAdapter, ValidationError

from ..domain.exceptions import PayloadDecodeError
from ..domain.models import SharedItem

_ITEMS_ADAPTER = TypeAdapter(list[SharedItem])


def is_msgpack(data: bytes) -> bool:
    """Check if data looks like a MessagePack array or map.

    Share payloads are always top-level arrays, so only array and map
    headers are considered; a JSON document starts with printable ASCII.
    """
    if not data:
        return False

    # 0x80-0x8f: fixmap
    # 0x90-0x9f: fixarray
    # 0xdc-0xdd: array16/array32
    # 0xde-0xdf: map16/map32
    first_byte = data[0]
    return 0x80 <= first_byte <= 0x9F or 0xDC <= first_byte <= 0xDF


def _unpack(data: bytes) -> Any:
    if is_msgpack(data):
        return msgpack.unpackb(data, raw=False)
    text = data.decode("utf-8")
    if not text or text.isspace():
        raise ValueError("Empty or whitespace-only JSON data")
    return json.loads(text)


class PayloadDecoder:
    """Decoder for blobs read from the handoff store.

    Blobs hold an array of shared item objects, written as JSON by the
    share producer; MessagePack arrays are accepted as well.
    """

    def decode(self, blob: bytes) -> list[SharedItem]:
        """Decode a blob into shared items, preserving order.

        Args:
            blob: Raw bytes from the handoff store

        Returns:
            The decoded items

        Raises:
            PayloadDecodeError: If the blob is not an array of valid items
        """
        if not blob:
            raise PayloadDecodeError("Empty payload received")
        try:
            raw = _unpack(blob)
        except (TypeError, ValueError, msgpack.UnpackException) as e:
            raise PayloadDecodeError(f"Invalid payload format: {e}") from e

        if not isinstance(raw, list):
            raise PayloadDecodeError(f"Payload must be an array, got {type(raw).__name__}")
        try:
            return _ITEMS_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise PayloadDecodeError(f"Payload items failed validation: {e}") from e

    def decode_strings(self, blob: bytes) -> list[str] | None:
        """Decode a blob holding a sequence of strings.

        Returns:
            The strings, or None when the blob is not a string array
        """
        if not blob:
            return None
        try:
            raw = _unpack(blob)
        except (TypeError, ValueError, msgpack.UnpackException):
            return None
        if isinstance(raw, list) and all(isinstance(s, str) for s in raw):
            return raw
        return None

    @staticmethod
    def encode(items: tuple[SharedItem, ...] | list[SharedItem] | None) -> str | None:
        """Encode items as the JSON array delivered to subscribers.

        Absent optional fields are omitted; None stays None.
        """
        if items is None:
            return None
        return _ITEMS_ADAPTER.dump_json(list(items), by_alias=True, exclude_none=True).decode()

