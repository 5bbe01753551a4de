"""Type definitions and protocols for callbacks crossing layer boundaries."""

from collections.abc import Callable
from typing import Protocol

from .models import ContentEditingInput


class DeliverCallback(Protocol):
    """Protocol for feed subscribers.

    Called with the encoded latest value of the feed; media feeds deliver
    a JSON string, text feeds deliver the text itself.
    """

    def __call__(self, value: str | None) -> None:
        """Receive one update.

        Args:
            value: The encoded latest value
        """
        ...


# Type aliases for common patterns
ContentEditingCompletion = Callable[[ContentEditingInput | None], None]
"""Completion for asset lookups: receives the backing file info or None"""
