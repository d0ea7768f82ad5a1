"""Unit tests for src/services/relay.py"""

from unittest.mock import Mock

from src.services.relay import InMemoryRelay


def test_tokens_are_recorded_without_peer() -> None:
    relay = InMemoryRelay()
    relay.send_token("e2e4")
    assert relay.sent == ["e2e4"]


def test_tokens_are_delivered_to_peer() -> None:
    deliver = Mock()
    relay = InMemoryRelay()
    relay.connect(deliver)
    relay.send_token("e2e4")
    relay.send_token("e7e5")
    assert [call.args[0] for call in deliver.call_args_list] == ["e2e4", "e7e5"]
