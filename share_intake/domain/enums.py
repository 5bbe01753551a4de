"""Domain enums for type safety and consistency.

This module centralizes the enumeration types used across the package,
preventing string literal errors when classifying URLs and routing feeds.
"""

from enum import Enum, IntEnum


class SharedMediaType(IntEnum):
    """Kind of a shared item.

    Encoded as an integer on the wire, matching the writer's format.
    """

    IMAGE = 0
    VIDEO = 1
    FILE = 2


class ContentClass(str, Enum):
    """Content class carried in the fragment of a share URL.

    Decided once when the URL is parsed; every later step branches on
    this value instead of re-reading the fragment.
    """

    MEDIA = "media"  # Video-aware media set
    FILE = "file"  # Generic file set, no thumbnail or duration
    TEXT = "text"  # Sequence of strings joined into one value
    UNCLASSIFIED = "unclassified"  # The URL itself is the shared text


class ChannelKey(str, Enum):
    """Keys of the two notification feeds."""

    MEDIA = "media"
    TEXT = "text"

    @classmethod
    def parse(cls, argument: object) -> "ChannelKey | None":
        """Return the key named by ``argument`` or None if it names no feed."""
        if isinstance(argument, cls):
            return argument
        if isinstance(argument, str):
            try:
                return cls(argument)
            except ValueError:
                return None
        return None


class QueryMethod(str, Enum):
    """Method names understood by the query surface."""

    GET_INITIAL_MEDIA = "getInitialMedia"
    GET_INITIAL_TEXT = "getInitialText"
    RESET = "reset"
