"""Tests for the Subscriber facade."""

from unittest.mock import Mock

from hubabuba import Config, Subscriber, SubscriptionItem
from hubabuba.handlers.callback import CallbackHandler


class TestConstruction:
    def test_options_build_config(self) -> None:
        verification = Mock(return_value=False)
        push = Subscriber(
            url="http://www.myhost.com/hubabuba",
            verification=verification,
            defaults={"leaseSeconds": 10000},
        )

        assert push.config.url == "http://www.myhost.com/hubabuba"
        assert push.config.lease_seconds == 10000
        assert push.verify({"id": "1"}) is False
        verification.assert_called_once_with({"id": "1"})

    def test_explicit_config(self) -> None:
        config = Config(url="http://a.example/cb", sync_requests=True)
        assert Subscriber(config=config).config is config

    def test_handler(self) -> None:
        push = Subscriber()
        assert isinstance(push.handler(), CallbackHandler)
        assert push.handler() is push.handler()

    def test_instances_do_not_share_listeners(self) -> None:
        first, second = Subscriber(), Subscriber()
        first.on("error", Mock())
        assert second.events.has_listeners("error") is False


class TestListenerRegistration:
    def test_on_chains(self) -> None:
        push = Subscriber()
        result = push.on("error", Mock()).on("denied", Mock())
        assert result is push
        assert push.events.listener_count("denied") == 1

    def test_on_as_decorator(self) -> None:
        push = Subscriber()

        @push.on("notification")
        def handle(notification):
            return notification

        assert handle("x") == "x"
        assert push.events.listener_count("notification") == 1

    def test_off(self) -> None:
        push = Subscriber()
        listener = Mock()
        push.on("denied", listener)
        assert push.off("denied", listener) is True
        assert push.events.has_listeners("denied") is False


class TestSubscriptionItem:
    def test_from_dict_accepts_camel_case_lease(self) -> None:
        item = SubscriptionItem.from_dict(
            {"id": "1", "hub": "http://h", "topic": "http://t", "leaseSeconds": 604800}
        )
        assert item == SubscriptionItem(
            id="1", hub="http://h", topic="http://t", lease_seconds=604800
        )

    def test_missing_fields(self) -> None:
        assert SubscriptionItem(id="1", hub="").missing_fields() == ["hub", "topic"]
