"""Domain value objects for share URLs.

A share URL carries its content class in the fragment and the handoff
store lookup key in the host, e.g. ``ShareMedia-com.example://dataUrl=ShareKey#media``.
"""

import re
from typing import Any
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, ConfigDict, Field

from .enums import ContentClass

_PORT_SUFFIX = re.compile(r":\d*$")


class ShareUrl(BaseModel):
    """Value object representing a classified share URL.

    The content class is decided once here; callers branch on
    ``content_class`` rather than inspecting the fragment themselves.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    raw: str = Field(..., description="The URL exactly as received")
    content_class: ContentClass = Field(..., description="Class decided from the fragment")
    lookup_key: str | None = Field(
        default=None, description="Handoff store key taken from the host segment"
    )

    @classmethod
    def parse(cls, url: str) -> "ShareUrl":
        """Classify a URL and extract its lookup key.

        Args:
            url: The URL string delivered by the host

        Returns:
            The classified ShareUrl. Unknown or missing fragments, and URLs
            that cannot be split, give ``ContentClass.UNCLASSIFIED``.
        """
        try:
            parts = urlsplit(url)
        except ValueError:
            # Malformed bracketed host
            return cls(raw=url, content_class=ContentClass.UNCLASSIFIED)
        content_class = _classify_fragment(parts.fragment)

        lookup_key = None
        if content_class is not ContentClass.UNCLASSIFIED:
            host = extract_host(parts.netloc)
            if host is not None:
                lookup_key = host.split("=")[-1]

        return cls(raw=url, content_class=content_class, lookup_key=lookup_key)

    @property
    def is_item_set(self) -> bool:
        """Whether the URL names a media or file set."""
        return self.content_class in (ContentClass.MEDIA, ContentClass.FILE)

    def __str__(self) -> str:
        """String representation returns the raw URL."""
        return self.raw

    def __eq__(self, other: Any) -> bool:
        """Equality comparison."""
        if isinstance(other, ShareUrl):
            return self.raw == other.raw
        if isinstance(other, str):
            return self.raw == other
        return False

    def __hash__(self) -> int:
        """Make hashable for use in sets and dicts."""
        return hash(self.raw)


def _classify_fragment(fragment: str) -> ContentClass:
    for content_class in (ContentClass.MEDIA, ContentClass.FILE, ContentClass.TEXT):
        if fragment == content_class.value:
            return content_class
    return ContentClass.UNCLASSIFIED


def extract_host(netloc: str) -> str | None:
    """Return the host of a network location, case preserved.

    User info and port are removed and percent escapes decoded. An empty
    host gives None.
    """
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        host = host[1 : host.find("]")] if "]" in host else host[1:]
    else:
        host = _PORT_SUFFIX.sub("", host)
    host = unquote(host)
    return host or None
