"""Notification feeds for resolved share payloads.

Each feed holds at most one subscriber. Attaching replaces the previous
subscriber, and values pushed while nobody is attached are dropped.
"""

import threading

from ..domain.enums import ChannelKey
from ..domain.exceptions import UnrecognizedChannelArgumentError
from ..domain.types import DeliverCallback


class DispatchChannel:
    """A single-subscriber feed.

    One re-entrant lock guards the current callback and every push, so a
    subscriber may detach itself from inside its callback.
    """

    def __init__(self, key: ChannelKey):
        self._key = key
        self._lock = threading.RLock()
        self._deliver: DeliverCallback | None = None

    @property
    def key(self) -> ChannelKey:
        return self._key

    @property
    def has_subscriber(self) -> bool:
        with self._lock:
            return self._deliver is not None

    def _check(self, subscriber_key: object) -> None:
        if ChannelKey.parse(subscriber_key) is not self._key:
            raise UnrecognizedChannelArgumentError(subscriber_key)

    def attach(self, subscriber_key: object, deliver: DeliverCallback) -> None:
        """Record the subscriber callback, replacing any previous one.

        Raises:
            UnrecognizedChannelArgumentError: If the key does not name this feed
        """
        self._check(subscriber_key)
        with self._lock:
            self._deliver = deliver

    def detach(self, subscriber_key: object) -> None:
        """Forget the subscriber callback.

        Raises:
            UnrecognizedChannelArgumentError: If the key does not name this feed
        """
        self._check(subscriber_key)
        with self._lock:
            self._deliver = None

    def push(self, value: str | None) -> bool:
        """Deliver a value to the current subscriber, if any.

        Returns:
            True if a subscriber received the value
        """
        with self._lock:
            if self._deliver is None:
                return False
            self._deliver(value)
            return True


class DispatchHub:
    """The media and text feeds, routed by subscriber argument."""

    def __init__(self) -> None:
        self._channels = {key: DispatchChannel(key) for key in ChannelKey}

    @property
    def media(self) -> DispatchChannel:
        return self._channels[ChannelKey.MEDIA]

    @property
    def text(self) -> DispatchChannel:
        return self._channels[ChannelKey.TEXT]

    def channel(self, argument: object) -> DispatchChannel:
        """Return the feed named by a subscriber argument.

        Raises:
            UnrecognizedChannelArgumentError: If the argument names no feed
        """
        key = ChannelKey.parse(argument)
        if key is None:
            raise UnrecognizedChannelArgumentError(argument)
        return self._channels[key]

    def attach(self, argument: object, deliver: DeliverCallback) -> None:
        """Subscribe to the feed named by ``argument``."""
        self.channel(argument).attach(argument, deliver)

    def detach(self, argument: object) -> None:
        """Unsubscribe from the feed named by ``argument``."""
        self.channel(argument).detach(argument)
