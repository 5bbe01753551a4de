"""Tests for the notification feeds."""

import pytest

from share_intake.application.dispatch import DispatchChannel, DispatchHub
from share_intake.domain.enums import ChannelKey
from share_intake.domain.exceptions import UnrecognizedChannelArgumentError


class TestDispatchChannel:
    """Test cases for DispatchChannel."""

    def test_push_without_subscriber_is_dropped(self):
        """Test that a push with nobody attached is a no-op."""
        channel = DispatchChannel(ChannelKey.MEDIA)

        assert channel.push("value") is False
        assert not channel.has_subscriber

    def test_push_delivers_to_subscriber(self):
        """Test delivery to the attached callback."""
        channel = DispatchChannel(ChannelKey.TEXT)
        received = []
        channel.attach("text", received.append)

        assert channel.push("hello") is True
        assert channel.push(None) is True
        assert received == ["hello", None]

    def test_attach_replaces_previous_subscriber(self):
        """Test that only the newest subscriber receives values."""
        channel = DispatchChannel(ChannelKey.TEXT)
        first, second = [], []
        channel.attach("text", first.append)
        channel.attach("text", second.append)

        channel.push("hello")

        assert first == []
        assert second == ["hello"]

    def test_values_before_attach_are_not_replayed(self):
        """Test that a late subscriber gets nothing pushed earlier."""
        channel = DispatchChannel(ChannelKey.MEDIA)
        channel.push("early")
        received = []

        channel.attach(ChannelKey.MEDIA, received.append)

        assert received == []

    def test_detach_stops_delivery(self):
        """Test that a detached subscriber receives nothing."""
        channel = DispatchChannel(ChannelKey.MEDIA)
        received = []
        channel.attach("media", received.append)

        channel.detach("media")

        assert channel.push("value") is False
        assert received == []

    @pytest.mark.parametrize("argument", ["text", "photos", None, 1])
    def test_attach_with_foreign_key_is_rejected(self, argument):
        """Test that a channel only accepts its own key."""
        channel = DispatchChannel(ChannelKey.MEDIA)

        with pytest.raises(UnrecognizedChannelArgumentError) as exc_info:
            channel.attach(argument, lambda value: None)

        assert exc_info.value.code == "NO_SUCH_ARGUMENT"
        assert not channel.has_subscriber

    def test_detach_with_foreign_key_is_rejected(self):
        """Test that detach validates the key too."""
        channel = DispatchChannel(ChannelKey.TEXT)

        with pytest.raises(UnrecognizedChannelArgumentError):
            channel.detach("media")

    def test_subscriber_may_detach_inside_callback(self):
        """Test re-entrant detach from the delivering callback."""
        channel = DispatchChannel(ChannelKey.TEXT)
        received = []

        def deliver(value):
            received.append(value)
            channel.detach("text")

        channel.attach("text", deliver)

        assert channel.push("once") is True
        assert channel.push("twice") is False
        assert received == ["once"]


class TestDispatchHub:
    """Test cases for DispatchHub."""

    def test_routes_by_argument(self):
        """Test that arguments select the matching feed."""
        hub = DispatchHub()

        assert hub.channel("media") is hub.media
        assert hub.channel("text") is hub.text
        assert hub.channel(ChannelKey.TEXT) is hub.text

    @pytest.mark.parametrize("argument", ["Media", "photos", "", None, 0])
    def test_unknown_argument_is_rejected(self, argument):
        """Test that arguments naming no feed are rejected."""
        hub = DispatchHub()

        with pytest.raises(UnrecognizedChannelArgumentError) as exc_info:
            hub.attach(argument, lambda value: None)

        assert exc_info.value.argument == argument

    def test_feeds_are_independent(self):
        """Test that media and text subscribers do not see each other's values."""
        hub = DispatchHub()
        media, text = [], []
        hub.attach("media", media.append)
        hub.attach("text", text.append)

        hub.media.push("[]")
        hub.text.push("hello")

        assert media == ["[]"]
        assert text == ["hello"]

    def test_detach_through_hub(self):
        """Test unsubscribing by argument."""
        hub = DispatchHub()
        hub.attach("text", lambda value: None)

        hub.detach("text")

        assert not hub.text.has_subscriber
