"""
Tests for EventChannel.
"""


class TestEventChannel:
    """Tests for subscriber handling."""

    def test_publish_in_subscription_order(self, mock_pygame_module):
        """Subscribers are called in order with the published arguments."""
        from gridsnake.core.events import EventChannel

        channel = EventChannel("test")
        calls = []
        channel.subscribe(lambda value: calls.append(("a", value)))
        channel.subscribe(lambda value: calls.append(("b", value)))

        channel.publish(7)

        assert calls == [("a", 7), ("b", 7)]

    def test_subscribe_as_decorator(self, mock_pygame_module):
        """subscribe() returns the callback."""
        from gridsnake.core.events import EventChannel

        channel = EventChannel()
        calls = []

        @channel.subscribe
        def on_event():
            calls.append(1)

        channel.publish()

        assert calls == [1]
        assert on_event is not None

    def test_unsubscribe(self, mock_pygame_module):
        """Removed subscribers stop receiving events; unknown ones are ignored."""
        from gridsnake.core.events import EventChannel

        channel = EventChannel()
        calls = []
        callback = channel.subscribe(lambda: calls.append(1))

        channel.unsubscribe(callback)
        channel.unsubscribe(lambda: None)
        channel.publish()

        assert calls == []
        assert len(channel) == 0

    def test_unsubscribe_during_publish(self, mock_pygame_module):
        """A subscriber may remove itself while being notified."""
        from gridsnake.core.events import EventChannel

        channel = EventChannel()
        calls = []

        def once():
            calls.append("once")
            channel.unsubscribe(once)

        channel.subscribe(once)
        channel.subscribe(lambda: calls.append("always"))

        channel.publish()
        channel.publish()

        assert calls == ["once", "always", "always"]

    def test_clear(self, mock_pygame_module):
        """clear() drops every subscriber."""
        from gridsnake.core.events import EventChannel

        channel = EventChannel()
        channel.subscribe(lambda: None)
        channel.subscribe(lambda: None)

        channel.clear()

        assert len(channel) == 0
