"""Domain layer - Share items, retained state and URL classification."""

from .enums import ChannelKey, ContentClass, QueryMethod, SharedMediaType
from .exceptions import (
    ConfigurationError,
    HandoffStoreError,
    HandoffStoreNotConnectedError,
    MethodNotImplementedError,
    PayloadDecodeError,
    ShareIntakeError,
    UnrecognizedChannelArgumentError,
)
from .models import (
    AssetHandle,
    ContentEditingInput,
    LaunchOptions,
    SharedItem,
    ShareState,
    ShareStateSnapshot,
    UserActivity,
)
from .types import ContentEditingCompletion, DeliverCallback
from .value_objects import ShareUrl

__all__ = [
    "AssetHandle",
    # Enums
    "ChannelKey",
    # Exceptions
    "ConfigurationError",
    "ContentClass",
    "ContentEditingCompletion",
    "ContentEditingInput",
    # Types
    "DeliverCallback",
    "HandoffStoreError",
    "HandoffStoreNotConnectedError",
    # Models
    "LaunchOptions",
    "MethodNotImplementedError",
    "PayloadDecodeError",
    "QueryMethod",
    "ShareIntakeError",
    "ShareState",
    "ShareStateSnapshot",
    "ShareUrl",
    "SharedItem",
    "SharedMediaType",
    "UnrecognizedChannelArgumentError",
    "UserActivity",
]
