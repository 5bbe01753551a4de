"""Domain models using Pydantic for validation."""

import threading
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import SharedMediaType

# Wire names of the video-only fields, with their attribute aliases
_VIDEO_ONLY_FIELDS = ("thumbnail", "thumbnail_path", "duration", "duration_millis")


class SharedItem(BaseModel):
    """One unit of shared content.

    Field aliases follow the encoding used by the share writer
    (``path``, ``thumbnail``, ``duration``, ``realname``, ``type``).
    Thumbnail and duration only survive construction for video items.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=False,
        json_schema_extra={
            "example": {
                "path": "/private/var/mobile/Containers/Shared/clip.mov",
                "thumbnail": "/private/var/mobile/Containers/Shared/clip.jpg",
                "duration": 4200.0,
                "realname": "clip.mov",
                "type": 1,
            }
        },
    )

    path: str = Field(
        ..., description="Content reference as stored, absolute file path once resolved"
    )
    thumbnail_path: str | None = Field(
        default=None, alias="thumbnail", description="Video thumbnail path"
    )
    duration_millis: float | None = Field(
        default=None, alias="duration", description="Video duration in milliseconds"
    )
    display_name: str = Field(default="", alias="realname", description="Human-readable name")
    kind: SharedMediaType = Field(..., alias="type", description="Item kind")

    @model_validator(mode="before")
    @classmethod
    def drop_video_fields_for_other_kinds(cls, data: Any) -> Any:
        """Clear thumbnail and duration unless the item is a video."""
        if not isinstance(data, dict):
            return data
        raw_kind = data.get("type", data.get("kind"))
        try:
            kind = SharedMediaType(raw_kind)
        except (TypeError, ValueError):
            # Left for field validation to report
            return data
        if kind is SharedMediaType.VIDEO:
            return data
        return {k: v for k, v in data.items() if k not in _VIDEO_ONLY_FIELDS}

    @property
    def is_video(self) -> bool:
        """Whether this item is a video."""
        return self.kind is SharedMediaType.VIDEO

    def with_paths(self, path: str, thumbnail_path: str | None = None) -> "SharedItem":
        """Return a copy pointing at resolved paths."""
        return self.model_copy(
            update={
                "path": path,
                "thumbnail_path": thumbnail_path if self.is_video else None,
            }
        )

    def as_file(self, path: str) -> "SharedItem":
        """Return a copy for a generic file share, without video fields."""
        return self.model_copy(
            update={"path": path, "thumbnail_path": None, "duration_millis": None}
        )


class ShareStateSnapshot(BaseModel):
    """Immutable copy of the retained share state."""

    model_config = ConfigDict(frozen=True)

    initial_media: tuple[SharedItem, ...] | None = None
    latest_media: tuple[SharedItem, ...] | None = None
    initial_text: str | None = None
    latest_text: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether every retained field is absent."""
        return (
            self.initial_media is None
            and self.latest_media is None
            and self.initial_text is None
            and self.latest_text is None
        )


class ShareState:
    """Process-wide retained share state.

    Constructed once per runtime and handed to the intake controller,
    which is its only writer. Every access goes through one re-entrant
    lock so that reset is atomic with respect to concurrent queries.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._initial_media: tuple[SharedItem, ...] | None = None
        self._latest_media: tuple[SharedItem, ...] | None = None
        self._initial_text: str | None = None
        self._latest_text: str | None = None

    @property
    def initial_media(self) -> tuple[SharedItem, ...] | None:
        with self._lock:
            return self._initial_media

    @property
    def latest_media(self) -> tuple[SharedItem, ...] | None:
        with self._lock:
            return self._latest_media

    @property
    def initial_text(self) -> str | None:
        with self._lock:
            return self._initial_text

    @property
    def latest_text(self) -> str | None:
        with self._lock:
            return self._latest_text

    def record_media(self, items: list[SharedItem], initial: bool) -> tuple[SharedItem, ...]:
        """Store a media result as latest, and as initial when flagged."""
        value = tuple(items)
        with self._lock:
            self._latest_media = value
            if initial:
                self._initial_media = value
        return value

    def record_text(self, text: str, initial: bool) -> str:
        """Store a text result as latest, and as initial when flagged."""
        with self._lock:
            self._latest_text = text
            if initial:
                self._initial_text = text
        return text

    def clear_latest(self) -> None:
        """Drop the latest values, keeping the initial capture."""
        with self._lock:
            self._latest_media = None
            self._latest_text = None

    def reset(self) -> None:
        """Drop every retained value."""
        with self._lock:
            self._initial_media = None
            self._latest_media = None
            self._initial_text = None
            self._latest_text = None

    def snapshot(self) -> ShareStateSnapshot:
        """Return a consistent copy of all four fields."""
        with self._lock:
            return ShareStateSnapshot(
                initial_media=self._initial_media,
                latest_media=self._latest_media,
                initial_text=self._initial_text,
                latest_text=self._latest_text,
            )


class AssetHandle(BaseModel):
    """An asset found in the asset library."""

    model_config = ConfigDict(frozen=True, strict=True)

    local_identifier: str = Field(..., min_length=1, description="Asset library identifier")


class ContentEditingInput(BaseModel):
    """Backing file information returned by the asset library."""

    model_config = ConfigDict(frozen=True)

    full_size_image_path: str | None = Field(
        default=None, description="Path of the full-resolution backing file"
    )
    orientation: int = Field(default=0, description="EXIF orientation of the backing file")


class UserActivity(BaseModel):
    """A continued user activity, such as a universal link."""

    model_config = ConfigDict(frozen=True)

    activity_type: str = Field(default="browsing-web", description="Activity type")
    webpage_url: str | None = Field(default=None, description="Web page URL of the activity")


class LaunchOptions(BaseModel):
    """Options the process was launched with."""

    model_config = ConfigDict(frozen=True)

    url: str | None = Field(default=None, description="URL the process was opened with")
    user_activities: dict[str, UserActivity] = Field(
        default_factory=dict, description="User activities keyed by activity identifier"
    )
